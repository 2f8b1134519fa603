"""取得預測 Query"""

from injector import inject

from libs.predicting.src.ports.get_prediction_port import GetPredictionPort
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class GetPredictionQuery(GetPredictionPort):
    """依 ID 取得預測"""

    @inject
    def __init__(self, repository: PredictionRepositoryPort) -> None:
        self._repository = repository

    def execute(self, prediction_id: str) -> GridPredictionDTO | None:
        return self._repository.find_by_id(prediction_id)
