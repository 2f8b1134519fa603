"""Grid CSV Export Adapter: pandas 寫出網格表"""

from pathlib import Path

import pandas as pd

from libs.gridding.src.ports.grid_export_port import GridExportPort
from libs.shared.src.dtos.grid.grid_step_dto import GridStepDTO

# CSV 欄位順序
COLUMNS = [
    "index",
    "buy_price",
    "buy_amount",
    "sell_price",
    "sell_amount",
    "total_investment",
    "total_shares",
    "average_cost",
    "floating_pl",
    "floating_pl_percent",
    "price_drop_percent",
    "is_warning",
]


class GridCsvExportAdapter(GridExportPort):
    """網格表 CSV 匯出器"""

    def __init__(self, float_format: str = "%.4f") -> None:
        self._float_format = float_format

    def export(self, steps: list[GridStepDTO], path: str) -> str:
        """匯出網格表

        Args:
            steps: 網格步驟
            path: 輸出 CSV 路徑，目錄不存在時自動建立

        Returns:
            str: 實際寫入的路徑
        """
        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        df = pd.DataFrame(steps, columns=COLUMNS)
        df.to_csv(file_path, index=False, float_format=self._float_format)
        return str(file_path)
