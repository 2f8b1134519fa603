"""Grid Export Port: Driven Port for writing a schedule to a file"""

from typing import Protocol

from libs.shared.src.dtos.grid.grid_step_dto import GridStepDTO


class GridExportPort(Protocol):
    """網格表匯出埠"""

    def export(self, steps: list[GridStepDTO], path: str) -> str:
        """匯出網格表

        Args:
            steps: 網格步驟
            path: 輸出檔案路徑

        Returns:
            str: 實際寫入的路徑
        """
        ...
