"""Grid Result DTO"""

from typing import TypedDict

from libs.shared.src.dtos.grid.grid_step_dto import GridStepDTO


class GridResultDTO(TypedDict):
    """Grid calculation result

    Corresponds to CalculateGridPort.execute() return value
    """

    total_required_capital: float
    """Total investment of the final step (0 when empty)"""

    grid_data: list[GridStepDTO]
    """Ordered grid schedule"""
