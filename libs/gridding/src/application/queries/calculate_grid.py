"""計算網格 Query

實作 CalculateGridPort Driving Port
每次呼叫都依目前儲存的參數重新計算
"""

import logging

from injector import inject

from libs.gridding.src.domain.services.grid_calculator import calculate_grid
from libs.gridding.src.ports.calculate_grid_port import CalculateGridPort
from libs.gridding.src.ports.grid_settings_storage_port import GridSettingsStoragePort
from libs.shared.src.dtos.grid.grid_result_dto import GridResultDTO


class CalculateGridQuery(CalculateGridPort):
    """依目前參數計算網格表"""

    @inject
    def __init__(self, settings_storage: GridSettingsStoragePort) -> None:
        """初始化 Query

        Args:
            settings_storage: 計算器參數儲存 (由 DI 注入)
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings_storage = settings_storage

    def execute(self) -> GridResultDTO:
        """計算網格表"""
        settings = self._settings_storage.load()
        result = calculate_grid(settings)

        if not result["grid_data"]:
            self._logger.debug(f"Invalid grid input, empty schedule: {settings}")
        else:
            self._logger.debug(
                f"Calculated {len(result['grid_data'])} steps, "
                f"capital {result['total_required_capital']:.2f}"
            )
        return result
