"""
RefreshPredictionResultsPort - Driving Port

實作者: RefreshPredictionResultsCommand
"""

from typing import Protocol


class RefreshPredictionResultsPort(Protocol):
    """Driving Port for RefreshPredictionResultsCommand

    CLI Entry: wangge prediction refresh
    """

    def execute(self, prediction_id: str) -> bool:
        """依已存參數重算快取結果，找不到 ID 回傳 False"""
        ...
