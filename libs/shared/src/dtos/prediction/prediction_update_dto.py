"""Prediction Update DTO"""

from typing import TypedDict

from libs.shared.src.dtos.grid.grid_parameters_dto import GridParametersDTO
from libs.shared.src.dtos.grid.grid_result_dto import GridResultDTO


class PredictionUpdateDTO(TypedDict, total=False):
    """Partial update of a prediction

    Omitted (or None) fields keep their stored value.
    id and created_at are not updatable.
    """

    name: str | None
    description: str | None
    parameters: GridParametersDTO | None
    results: GridResultDTO | None
