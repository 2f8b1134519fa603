"""Refresh Prediction Results Command

Recomputes the cached grid results of a saved prediction from its own
parameters. This is the only place cached results follow parameter changes.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from injector import inject

from libs.gridding.src.domain.services.grid_calculator import calculate_grid
from libs.predicting.src.domain.services.prediction_factory import (
    merge_prediction_update,
    utc_now,
)
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.predicting.src.ports.refresh_prediction_results_port import (
    RefreshPredictionResultsPort,
)


class RefreshPredictionResultsCommand(RefreshPredictionResultsPort):
    """依已存參數重算快取結果"""

    @inject
    def __init__(
        self,
        repository: PredictionRepositoryPort,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._repository = repository
        self._clock = clock

    def execute(self, prediction_id: str) -> bool:
        existing = self._repository.find_by_id(prediction_id)
        if existing is None:
            self._logger.warning(f"Prediction {prediction_id} not found")
            return False

        results = calculate_grid(existing["parameters"])
        updated = merge_prediction_update(
            existing, {"results": results}, now=self._clock()
        )
        self._repository.replace(updated)
        self._logger.info(
            f"Refreshed results of {prediction_id}: "
            f"{len(results['grid_data'])} steps, "
            f"capital {results['total_required_capital']:.2f}"
        )
        return True
