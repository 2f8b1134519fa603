"""取得預測 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class GetPredictionPort(Protocol):
    """取得預測

    CLI Entry: wangge prediction show
    """

    def execute(self, prediction_id: str) -> GridPredictionDTO | None:
        """依 ID 取得預測，找不到回傳 None"""
        ...
