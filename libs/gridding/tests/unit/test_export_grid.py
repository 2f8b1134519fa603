"""ExportGridCommand 單元測試"""

import shutil
import tempfile
from pathlib import Path

import pandas as pd
import pytest

from libs.gridding.src.adapters.driven.csv.grid_csv_export_adapter import (
    GridCsvExportAdapter,
)
from libs.gridding.src.adapters.driven.memory.grid_export_fake_adapter import (
    GridExportFakeAdapter,
)
from libs.gridding.src.adapters.driven.memory.grid_settings_fake_adapter import (
    GridSettingsFakeAdapter,
)
from libs.gridding.src.application.commands.export_grid import ExportGridCommand


class TestExportGridCommand:
    """網格表匯出指令測試"""

    @pytest.fixture
    def fake_storage(self):
        return GridSettingsFakeAdapter()

    @pytest.fixture
    def fake_exporter(self):
        return GridExportFakeAdapter()

    @pytest.fixture
    def command(self, fake_storage, fake_exporter):
        return ExportGridCommand(settings_storage=fake_storage, exporter=fake_exporter)

    def test_exports_current_schedule(self, fake_storage, fake_exporter, command):
        fake_storage.set_settings(grid_count=4)

        result = command.execute(path="out/grid.csv")

        assert result["status"] == "success"
        assert result["count"] == 5
        assert result["path"] == "out/grid.csv"
        assert len(fake_exporter.exports["out/grid.csv"]) == 5

    def test_skips_invalid_settings(self, fake_storage, fake_exporter, command):
        """空網格不寫檔"""
        fake_storage.set_settings(buy_grid_percent=0)

        result = command.execute(path="out/grid.csv")

        assert result["status"] == "skipped"
        assert fake_exporter.exports == {}


class TestGridCsvExportAdapter:
    """pandas CSV 匯出器測試"""

    @pytest.fixture
    def temp_dir(self):
        temp = tempfile.mkdtemp()
        yield temp
        shutil.rmtree(temp, ignore_errors=True)

    def test_writes_csv(self, temp_dir) -> None:
        storage = GridSettingsFakeAdapter()
        storage.set_settings(grid_count=2)
        command = ExportGridCommand(
            settings_storage=storage, exporter=GridCsvExportAdapter()
        )
        path = Path(temp_dir) / "nested" / "grid.csv"

        result = command.execute(path=str(path))

        assert result["status"] == "success"
        df = pd.read_csv(path)
        assert list(df["index"]) == [0, 1, 2]
        assert df.columns[0] == "index"
        assert df["total_investment"].iloc[-1] == pytest.approx(3000)
        assert "is_warning" in df.columns
