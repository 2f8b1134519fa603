"""
ExportGridPort - Driving Port

實作者: ExportGridCommand
"""

from typing import Protocol

from libs.shared.src.dtos.command_result_dto import CommandResultDTO


class ExportGridPort(Protocol):
    """Driving Port for ExportGridCommand

    CLI Entry: wangge grid export
    """

    def execute(self, path: str) -> CommandResultDTO:
        """將目前網格表匯出為 CSV"""
        ...
