"""列出預測 Query"""

from injector import inject

from libs.predicting.src.ports.list_predictions_port import ListPredictionsPort
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class ListPredictionsQuery(ListPredictionsPort):
    @inject
    def __init__(self, repository: PredictionRepositoryPort) -> None:
        self._repository = repository

    def execute(self) -> list[GridPredictionDTO]:
        return self._repository.find_all()
