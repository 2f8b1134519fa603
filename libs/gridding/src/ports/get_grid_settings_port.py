"""取得計算器參數 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO


class GetGridSettingsPort(Protocol):
    """取得計算器參數

    CLI Entry: wangge grid settings
    """

    def execute(self) -> GridSettingsDTO:
        """讀取目前七個輸入值"""
        ...
