"""預測統計 Query

實作 GetPredictionStatsPort Driving Port
每次呼叫都重新計算，不做快取
"""

from collections.abc import Callable
from datetime import datetime

from injector import inject

from libs.predicting.src.domain.services.prediction_factory import (
    count_recent_predictions,
    utc_now,
)
from libs.predicting.src.ports.get_prediction_stats_port import (
    GetPredictionStatsPort,
)
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.shared.src.dtos.prediction.prediction_stats_dto import PredictionStatsDTO


class GetPredictionStatsQuery(GetPredictionStatsPort):
    """預測統計"""

    @inject
    def __init__(
        self,
        repository: PredictionRepositoryPort,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def execute(self) -> PredictionStatsDTO:
        predictions = self._repository.find_all()
        return {
            "total": len(predictions),
            "recent": count_recent_predictions(predictions, now=self._clock()),
        }
