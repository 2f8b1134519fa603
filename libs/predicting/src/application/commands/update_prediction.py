"""更新預測 Command"""

import logging
from collections.abc import Callable
from datetime import datetime

from injector import inject

from libs.predicting.src.domain.services.prediction_factory import (
    merge_prediction_update,
    utc_now,
)
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.predicting.src.ports.update_prediction_port import UpdatePredictionPort
from libs.shared.src.dtos.prediction.prediction_update_dto import PredictionUpdateDTO


class UpdatePredictionCommand(UpdatePredictionPort):
    """部分更新預測

    cached results are left untouched unless supplied, see
    RefreshPredictionResultsCommand for recomputing them
    """

    @inject
    def __init__(
        self,
        repository: PredictionRepositoryPort,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._repository = repository
        self._clock = clock

    def execute(self, prediction_id: str, updates: PredictionUpdateDTO) -> bool:
        existing = self._repository.find_by_id(prediction_id)
        if existing is None:
            self._logger.warning(f"Prediction {prediction_id} not found")
            return False

        updated = merge_prediction_update(existing, updates, now=self._clock())
        self._repository.replace(updated)
        self._logger.info(f"Updated prediction {prediction_id}")
        return True
