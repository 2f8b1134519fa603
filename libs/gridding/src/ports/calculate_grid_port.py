"""計算網格 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.grid.grid_result_dto import GridResultDTO


class CalculateGridPort(Protocol):
    """依目前參數計算網格

    CLI Entry: wangge grid show
    """

    def execute(self) -> GridResultDTO:
        """
        計算網格表

        Returns:
            GridResultDTO: 包含 total_required_capital, grid_data
        """
        ...
