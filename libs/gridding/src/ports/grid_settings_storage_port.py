"""Grid Settings Storage Port: Driven Port for calculator inputs"""

from typing import Protocol, runtime_checkable

from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO


@runtime_checkable
class GridSettingsStoragePort(Protocol):
    """計算器參數儲存埠

    七個輸入值存成單一筆資料
    """

    def load(self) -> GridSettingsDTO:
        """讀取參數

        Returns:
            GridSettingsDTO: 已儲存的參數，未儲存時回傳預設值
        """
        ...

    def save(self, settings: GridSettingsDTO) -> None:
        """儲存參數 (整筆覆蓋)

        Args:
            settings: 七個計算器輸入值
        """
        ...
