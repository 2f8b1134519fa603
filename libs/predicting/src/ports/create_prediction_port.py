"""建立預測 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.grid.grid_parameters_dto import GridParametersDTO
from libs.shared.src.dtos.grid.grid_result_dto import GridResultDTO
from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class CreatePredictionPort(Protocol):
    """建立預測

    CLI Entry: wangge prediction save
    """

    def execute(
        self,
        name: str,
        parameters: GridParametersDTO,
        description: str | None = None,
        results: GridResultDTO | None = None,
    ) -> GridPredictionDTO:
        """儲存目前參數為新預測"""
        ...
