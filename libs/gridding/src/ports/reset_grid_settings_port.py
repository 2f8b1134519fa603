"""
ResetGridSettingsPort - Driving Port

實作者: ResetGridSettingsCommand
"""

from typing import Protocol

from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO


class ResetGridSettingsPort(Protocol):
    """Driving Port for ResetGridSettingsCommand

    CLI Entry: wangge grid reset
    """

    def execute(self) -> GridSettingsDTO:
        """還原預設參數"""
        ...
