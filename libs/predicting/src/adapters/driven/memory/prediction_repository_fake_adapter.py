"""預測資料庫 Fake Adapter"""

import copy

from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class PredictionRepositoryFakeAdapter(PredictionRepositoryPort):
    """預測資料庫 Fake Adapter

    實作 PredictionRepositoryPort 介面，資料只存在記憶體
    """

    def __init__(self) -> None:
        self._predictions: list[GridPredictionDTO] = []
        self.save_count = 0

    def set_predictions(self, predictions: list[GridPredictionDTO]) -> None:
        """設定預測清單 (測試用)"""
        self._predictions = copy.deepcopy(predictions)

    def find_all(self) -> list[GridPredictionDTO]:
        return copy.deepcopy(self._predictions)

    def find_by_id(self, prediction_id: str) -> GridPredictionDTO | None:
        for prediction in self._predictions:
            if prediction["id"] == prediction_id:
                return copy.deepcopy(prediction)
        return None

    def add_first(self, prediction: GridPredictionDTO) -> None:
        self._predictions.insert(0, copy.deepcopy(prediction))
        self.save_count += 1

    def replace(self, prediction: GridPredictionDTO) -> bool:
        for i, existing in enumerate(self._predictions):
            if existing["id"] == prediction["id"]:
                self._predictions[i] = copy.deepcopy(prediction)
                self.save_count += 1
                return True
        return False

    def remove(self, prediction_id: str) -> bool:
        for i, existing in enumerate(self._predictions):
            if existing["id"] == prediction_id:
                del self._predictions[i]
                self.save_count += 1
                return True
        return False
