"""Grid Prediction DTO"""

from typing import NotRequired, TypedDict

from libs.shared.src.dtos.grid.grid_parameters_dto import GridParametersDTO
from libs.shared.src.dtos.grid.grid_result_dto import GridResultDTO


class GridPredictionDTO(TypedDict):
    """A named, persisted snapshot of calculator parameters"""

    id: str  # uuid4, immutable
    name: str
    description: NotRequired[str | None]
    parameters: GridParametersDTO
    results: NotRequired[GridResultDTO | None]  # Cached results, refreshed explicitly
    created_at: str  # ISO-8601 UTC, immutable
    updated_at: str  # ISO-8601 UTC, refreshed on every mutation
