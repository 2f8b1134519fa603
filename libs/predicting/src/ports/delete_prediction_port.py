"""
DeletePredictionPort - Driving Port

實作者: DeletePredictionCommand
"""

from typing import Protocol


class DeletePredictionPort(Protocol):
    """Driving Port for DeletePredictionCommand

    CLI Entry: wangge prediction delete
    """

    def execute(self, prediction_id: str) -> bool:
        """刪除預測，找不到 ID 回傳 False"""
        ...
