"""Command Result DTO"""

from typing import TypedDict


class CommandResultDTO(TypedDict, total=False):
    """Result of a command that writes a file

    All fields are optional
    """

    status: str  # success, skipped
    message: str
    count: int  # Rows written
    path: str
    timestamp: str
