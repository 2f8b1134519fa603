"""預測資料庫 Local Storage Adapter"""

import copy
import logging

from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.shared.src.clients.local_storage.local_storage_client import (
    LocalStorageClient,
)
from libs.shared.src.constants.local_storage_settings import PREDICTIONS_KEY
from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO

# 讀取時必須存在的欄位，缺一即略過該筆
REQUIRED_FIELDS = ("created_at", "updated_at", "parameters")


class PredictionLocalStorageAdapter(PredictionRepositoryPort):
    """預測資料庫 Local Storage Adapter

    使用 {base_dir}/wangge-predictions.json 作為資料來源
    建構時載入一次，之後每次異動整筆寫回
    """

    def __init__(self, client: LocalStorageClient, key: str = PREDICTIONS_KEY) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._client = client
        self._key = key
        self._predictions: list[GridPredictionDTO] = self._load()

    def _load(self) -> list[GridPredictionDTO]:
        """讀取資料，不存在或格式錯誤時回傳空清單，欄位不全的紀錄略過"""
        data = self._client.get_item(self._key, [])
        if not isinstance(data, list):
            self._logger.warning(f"Ignoring malformed {self._key}, expected a list")
            return []

        predictions = []
        for item in data:
            if not isinstance(item, dict) or not item.get("id"):
                self._logger.warning(f"Skipping record without id in {self._key}")
                continue
            missing = [f for f in REQUIRED_FIELDS if not item.get(f)]
            if missing:
                self._logger.warning(
                    f"Skipping prediction {item['id']}: missing {', '.join(missing)}"
                )
                continue
            predictions.append(item)
        return predictions

    def _save(self) -> None:
        """整筆寫回"""
        self._client.set_item(self._key, self._predictions)

    def _index_of(self, prediction_id: str) -> int:
        for i, prediction in enumerate(self._predictions):
            if prediction["id"] == prediction_id:
                return i
        return -1

    def find_all(self) -> list[GridPredictionDTO]:
        """取得全部預測"""
        return copy.deepcopy(self._predictions)

    def find_by_id(self, prediction_id: str) -> GridPredictionDTO | None:
        """取得特定預測"""
        index = self._index_of(prediction_id)
        if index == -1:
            return None
        return copy.deepcopy(self._predictions[index])

    def add_first(self, prediction: GridPredictionDTO) -> None:
        """新增到最前面"""
        self._predictions.insert(0, copy.deepcopy(prediction))
        self._save()

    def replace(self, prediction: GridPredictionDTO) -> bool:
        """取代既有預測"""
        index = self._index_of(prediction["id"])
        if index == -1:
            return False
        self._predictions[index] = copy.deepcopy(prediction)
        self._save()
        return True

    def remove(self, prediction_id: str) -> bool:
        """刪除預測"""
        index = self._index_of(prediction_id)
        if index == -1:
            return False
        del self._predictions[index]
        self._save()
        return True
