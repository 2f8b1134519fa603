"""刪除預測 Command"""

import logging

from injector import inject

from libs.predicting.src.ports.delete_prediction_port import DeletePredictionPort
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)


class DeletePredictionCommand(DeletePredictionPort):
    """刪除預測"""

    @inject
    def __init__(self, repository: PredictionRepositoryPort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._repository = repository

    def execute(self, prediction_id: str) -> bool:
        if not self._repository.remove(prediction_id):
            self._logger.warning(f"Prediction {prediction_id} not found")
            return False

        self._logger.info(f"Deleted prediction {prediction_id}")
        return True
