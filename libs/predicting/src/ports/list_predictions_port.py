"""列出預測 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class ListPredictionsPort(Protocol):
    """列出所有預測

    CLI Entry: wangge prediction list
    """

    def execute(self) -> list[GridPredictionDTO]:
        """新的在前"""
        ...
