"""Reset Grid Settings Command"""

import logging

from injector import inject

from libs.gridding.src.ports.grid_settings_storage_port import GridSettingsStoragePort
from libs.gridding.src.ports.reset_grid_settings_port import ResetGridSettingsPort
from libs.shared.src.constants.grid_defaults import default_grid_settings
from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO


class ResetGridSettingsCommand(ResetGridSettingsPort):
    """Restore all seven inputs to their defaults"""

    @inject
    def __init__(self, settings_storage: GridSettingsStoragePort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings_storage = settings_storage

    def execute(self) -> GridSettingsDTO:
        settings = default_grid_settings()
        self._settings_storage.save(settings)
        self._logger.info("Grid settings reset to defaults")
        return settings
