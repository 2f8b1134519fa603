"""Grid Settings Local Storage Adapter"""

import logging

from libs.gridding.src.ports.grid_settings_storage_port import GridSettingsStoragePort
from libs.shared.src.clients.local_storage.local_storage_client import (
    LocalStorageClient,
)
from libs.shared.src.constants.grid_defaults import default_grid_settings
from libs.shared.src.constants.local_storage_settings import GRID_SETTINGS_KEY
from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO


class GridSettingsLocalStorageAdapter(GridSettingsStoragePort):
    """計算器參數 Local Storage Adapter

    儲存格式: {base_dir}/wangge-grid-settings.json
    """

    def __init__(self, client: LocalStorageClient, key: str = GRID_SETTINGS_KEY) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._client = client
        self._key = key

    def load(self) -> GridSettingsDTO:
        """讀取參數，缺少的欄位以預設值補齊"""
        settings = default_grid_settings()
        stored = self._client.get_item(self._key)
        if stored is None:
            return settings

        if not isinstance(stored, dict):
            self._logger.warning(f"Ignoring malformed {self._key}: {stored!r}")
            return settings

        for field in settings:
            if stored.get(field) is not None:
                settings[field] = stored[field]
        return settings

    def save(self, settings: GridSettingsDTO) -> None:
        """儲存參數"""
        self._client.set_item(self._key, dict(settings))
