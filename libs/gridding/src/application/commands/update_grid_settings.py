"""Update Grid Settings Command"""

import logging

from injector import inject

from libs.gridding.src.ports.grid_settings_storage_port import GridSettingsStoragePort
from libs.gridding.src.ports.update_grid_settings_port import UpdateGridSettingsPort
from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO
from libs.shared.src.errors.invalid_grid_input_error import InvalidGridInputError
from libs.shared.src.errors.unknown_grid_input_error import UnknownGridInputError

# 欄位 → 型別 (fire 會把 "10" 轉成 int，"1.5" 轉成 float)
FIELD_TYPES: dict[str, type] = {
    "initial_price": float,
    "buy_grid_percent": float,
    "sell_grid_percent": float,
    "buy_amount": float,
    "sell_amount": float,
    "grid_count": int,
    "max_investment": float,
}


class UpdateGridSettingsCommand(UpdateGridSettingsPort):
    """Update some of the calculator inputs

    Unknown field names and unconvertible values are rejected before
    anything is written.
    """

    @inject
    def __init__(self, settings_storage: GridSettingsStoragePort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings_storage = settings_storage

    def execute(self, **fields: float) -> GridSettingsDTO:
        """Set the given inputs and persist

        Args:
            **fields: any subset of the seven calculator inputs

        Returns:
            GridSettingsDTO: settings after the update

        Raises:
            UnknownGridInputError: a field is not a calculator input
            InvalidGridInputError: a value cannot be converted to the field's type
        """
        allowed = list(FIELD_TYPES)
        for field in fields:
            if field not in FIELD_TYPES:
                raise UnknownGridInputError(field, allowed)

        converted: dict[str, float] = {}
        for field, value in fields.items():
            try:
                converted[field] = FIELD_TYPES[field](value)
            except (TypeError, ValueError) as e:
                raise InvalidGridInputError(field, value) from e

        settings = self._settings_storage.load()
        settings.update(converted)  # type: ignore[typeddict-item]

        self._settings_storage.save(settings)
        self._logger.info(f"Grid settings updated: {sorted(fields)}")
        return settings
