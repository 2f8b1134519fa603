"""計算器參數 Fake Adapter"""

from libs.gridding.src.ports.grid_settings_storage_port import GridSettingsStoragePort
from libs.shared.src.constants.grid_defaults import default_grid_settings
from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO


class GridSettingsFakeAdapter(GridSettingsStoragePort):
    """計算器參數 Fake 實作"""

    def __init__(self) -> None:
        self._settings: GridSettingsDTO = default_grid_settings()
        self.save_count = 0

    def load(self) -> GridSettingsDTO:
        return dict(self._settings)  # type: ignore[return-value]

    def save(self, settings: GridSettingsDTO) -> None:
        self._settings = dict(settings)  # type: ignore[assignment]
        self.save_count += 1

    # Setters for testing
    def set_settings(self, **fields: float) -> None:
        self._settings.update(fields)  # type: ignore[typeddict-item]
