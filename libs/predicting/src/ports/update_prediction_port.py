"""
UpdatePredictionPort - Driving Port

實作者: UpdatePredictionCommand
"""

from typing import Protocol

from libs.shared.src.dtos.prediction.prediction_update_dto import PredictionUpdateDTO


class UpdatePredictionPort(Protocol):
    """Driving Port for UpdatePredictionCommand

    CLI Entry: wangge prediction rename
    """

    def execute(self, prediction_id: str, updates: PredictionUpdateDTO) -> bool:
        """部分更新，找不到 ID 回傳 False"""
        ...
