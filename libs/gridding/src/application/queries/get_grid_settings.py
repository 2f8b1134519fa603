"""取得計算器參數 Query"""

from injector import inject

from libs.gridding.src.ports.get_grid_settings_port import GetGridSettingsPort
from libs.gridding.src.ports.grid_settings_storage_port import GridSettingsStoragePort
from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO


class GetGridSettingsQuery(GetGridSettingsPort):
    """取得目前的七個輸入值"""

    @inject
    def __init__(self, settings_storage: GridSettingsStoragePort) -> None:
        self._settings_storage = settings_storage

    def execute(self) -> GridSettingsDTO:
        return self._settings_storage.load()
