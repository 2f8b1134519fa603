"""Export Grid Command

Writes the schedule for the current inputs to a CSV file.
"""

import logging
from datetime import datetime

from injector import inject

from libs.gridding.src.domain.services.grid_calculator import calculate_grid
from libs.gridding.src.ports.export_grid_port import ExportGridPort
from libs.gridding.src.ports.grid_export_port import GridExportPort
from libs.gridding.src.ports.grid_settings_storage_port import GridSettingsStoragePort
from libs.shared.src.dtos.command_result_dto import CommandResultDTO


class ExportGridCommand(ExportGridPort):
    """匯出目前網格表"""

    @inject
    def __init__(
        self,
        settings_storage: GridSettingsStoragePort,
        exporter: GridExportPort,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings_storage = settings_storage
        self._exporter = exporter

    def execute(self, path: str) -> CommandResultDTO:
        """Export the schedule

        Args:
            path: CSV output path

        Returns:
            CommandResultDTO: status "skipped" when the inputs give no schedule
        """
        timestamp = datetime.now().isoformat()
        result = calculate_grid(self._settings_storage.load())
        steps = result["grid_data"]

        if not steps:
            self._logger.warning("Nothing to export, grid inputs are invalid")
            return {
                "status": "skipped",
                "message": "Grid inputs produce an empty schedule",
                "count": 0,
                "timestamp": timestamp,
            }

        written = self._exporter.export(steps, path)
        self._logger.info(f"Exported {len(steps)} grid steps to {written}")
        return {
            "status": "success",
            "count": len(steps),
            "path": written,
            "timestamp": timestamp,
        }
