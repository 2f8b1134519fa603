"""Planning CLI Controller Tests

使用暫存目錄作為 local storage，走完整 DI 組合
"""

import shutil
import tempfile
from pathlib import Path

import pytest

from apps.planning.src.adapters.driving.cli.planning_controller import (
    PlanningController,
)
from apps.planning.src.adapters.driving.cli.prediction_controller import (
    PredictionController,
)
from apps.planning.src.lifespan import shutdown, startup
from libs.predicting.src.ports.list_predictions_port import ListPredictionsPort
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.shared.src.clients.local_storage.local_storage_client import (
    LocalStorageClient,
)
from libs.shared.src.constants.local_storage_settings import GRID_SETTINGS_KEY


class TestPlanningController:
    """CLI 指令測試"""

    @pytest.fixture
    def temp_dir(self):
        temp = tempfile.mkdtemp()
        yield temp
        shutil.rmtree(temp, ignore_errors=True)

    @pytest.fixture
    def injector(self, temp_dir):
        injector = startup(data_dir=temp_dir)
        yield injector
        shutdown()

    @pytest.fixture
    def cli(self, injector):
        return PlanningController(injector)

    def _predictions(self, injector):
        return injector.get(ListPredictionsPort).execute()

    def test_shared_local_storage(self, injector, temp_dir) -> None:
        """兩個 libs 使用同一個 LocalStorageClient"""
        client = injector.get(LocalStorageClient)

        assert client.base_dir == Path(temp_dir)
        assert injector.get(PredictionRepositoryPort) is injector.get(
            PredictionRepositoryPort
        )

    def test_grid_show_defaults(self, cli, capsys) -> None:
        cli.grid.show()

        out = capsys.readouterr().out
        assert "所需總資金: 11000.00" in out

    def test_grid_set_then_show(self, cli, capsys) -> None:
        cli.grid.set(initial_price=10, buy_grid_percent=10, grid_count=2)
        cli.grid.show()

        out = capsys.readouterr().out
        assert "所需總資金: 3000.00" in out

    def test_grid_set_unknown_field(self, cli, capsys) -> None:
        cli.grid.set(price=1)

        assert "Unknown grid input 'price'" in capsys.readouterr().out

    def test_grid_set_invalid_value(self, cli, temp_dir, capsys) -> None:
        """Non-numeric values are reported and the stored settings stay untouched"""
        cli.grid.set(initial_price="abc")

        assert "Invalid value 'abc' for grid input 'initial_price'" in capsys.readouterr().out
        assert not (Path(temp_dir) / f"{GRID_SETTINGS_KEY}.json").exists()

    def test_grid_show_invalid(self, cli, capsys) -> None:
        cli.grid.set(grid_count=0)
        cli.grid.show()

        assert "無網格可顯示" in capsys.readouterr().out

    def test_grid_settings_persisted(self, cli, temp_dir, capsys) -> None:
        cli.grid.set(initial_price=42)
        cli.grid.reset()

        stored = LocalStorageClient(base_dir=temp_dir).get_item("wangge-grid-settings")
        assert stored["initial_price"] == 10.0

    def test_grid_export(self, cli, temp_dir, capsys) -> None:
        path = Path(temp_dir) / "grid.csv"

        cli.grid.export(path=str(path))

        assert path.exists()
        assert "已匯出 11 格" in capsys.readouterr().out

    def test_save_with_results(self, cli, injector, capsys) -> None:
        cli.prediction.save("Plan A", stock_code=2330, with_results=True)

        [prediction] = self._predictions(injector)
        assert prediction["name"] == "Plan A"
        assert prediction["parameters"]["stock_code"] == "2330"
        assert prediction["results"]["total_required_capital"] == 11000

    def test_save_without_results(self, cli, injector) -> None:
        cli.prediction.save("Plan A")

        [prediction] = self._predictions(injector)
        assert "results" not in prediction
        assert "stock_code" not in prediction["parameters"]

    def test_copy_rename_refresh(self, cli, injector, capsys) -> None:
        cli.prediction.save("Plan A")
        original_id = self._predictions(injector)[0]["id"]

        cli.prediction.copy(original_id)
        cli.prediction.rename(original_id, "Plan Z")
        cli.prediction.refresh(original_id)

        names = [p["name"] for p in self._predictions(injector)]
        assert names == ["Plan A (副本)", "Plan Z"]
        assert self._predictions(injector)[1]["results"]["grid_data"]

    def test_missing_id_messages(self, cli, capsys) -> None:
        cli.prediction.show("missing")
        cli.prediction.copy("missing")
        cli.prediction.rename("missing", "x")
        cli.prediction.refresh("missing")
        cli.prediction.delete("missing", yes=True)

        assert capsys.readouterr().out.count("找不到預測 missing") == 5

    def test_stats(self, cli, capsys) -> None:
        cli.prediction.save("a")
        cli.prediction.save("b")
        capsys.readouterr()

        cli.prediction.stats()

        assert "預測總數: 2  近 7 日新增: 2" in capsys.readouterr().out

    def test_delete_asks_for_confirmation(self, injector, capsys) -> None:
        """未加 --yes 時須確認"""
        answers = iter(["n", "y"])
        controller = PredictionController(injector, prompt=lambda _: next(answers))
        controller.save("Plan A")
        prediction_id = self._predictions(injector)[0]["id"]

        controller.delete(prediction_id)
        assert len(self._predictions(injector)) == 1
        assert "已取消" in capsys.readouterr().out

        controller.delete(prediction_id)
        assert self._predictions(injector) == []

    def test_delete_yes_skips_prompt(self, injector) -> None:
        def fail(_):
            raise AssertionError("prompted")

        controller = PredictionController(injector, prompt=fail)
        controller.save("Plan A")

        controller.delete(self._predictions(injector)[0]["id"], yes=True)

        assert self._predictions(injector) == []

    def test_list_and_show(self, cli, capsys) -> None:
        cli.prediction.list()
        assert "尚無預測" in capsys.readouterr().out

        cli.prediction.save("Plan A", description="測試說明", with_results=True)
        cli.prediction.list()
        out = capsys.readouterr().out
        assert "Plan A" in out
