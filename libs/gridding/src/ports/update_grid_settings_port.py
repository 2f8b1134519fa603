"""
UpdateGridSettingsPort - Driving Port

實作者: UpdateGridSettingsCommand
"""

from typing import Protocol

from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO


class UpdateGridSettingsPort(Protocol):
    """Driving Port for UpdateGridSettingsCommand

    CLI Entry: wangge grid set
    """

    def execute(self, **fields: float) -> GridSettingsDTO:
        """更新部分參數並儲存"""
        ...
