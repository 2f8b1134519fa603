"""
DuplicatePredictionPort - Driving Port

實作者: DuplicatePredictionCommand
"""

from typing import Protocol

from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class DuplicatePredictionPort(Protocol):
    """Driving Port for DuplicatePredictionCommand

    CLI Entry: wangge prediction copy
    """

    def execute(self, prediction_id: str) -> GridPredictionDTO | None:
        """複製預測，找不到 ID 回傳 None"""
        ...
