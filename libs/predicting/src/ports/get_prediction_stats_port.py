"""預測統計 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.prediction.prediction_stats_dto import PredictionStatsDTO


class GetPredictionStatsPort(Protocol):
    """預測統計

    CLI Entry: wangge prediction stats
    """

    def execute(self) -> PredictionStatsDTO:
        """
        計算統計

        Returns:
            PredictionStatsDTO: total, recent (近 7 日建立)
        """
        ...
