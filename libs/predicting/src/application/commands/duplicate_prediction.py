"""複製預測 Command"""

import logging
from collections.abc import Callable
from datetime import datetime

from injector import inject

from libs.predicting.src.domain.services.prediction_factory import (
    copy_prediction,
    utc_now,
)
from libs.predicting.src.ports.duplicate_prediction_port import (
    DuplicatePredictionPort,
)
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class DuplicatePredictionCommand(DuplicatePredictionPort):
    """Duplicate a prediction

    The copy gets a new id, fresh timestamps and the " (副本)" name suffix,
    and is placed at the top of the list.
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

    def execute(self, prediction_id: str) -> GridPredictionDTO | None:
        original = self._repository.find_by_id(prediction_id)
        if original is None:
            self._logger.warning(f"Prediction {prediction_id} not found")
            return None

        duplicate = copy_prediction(original, now=self._clock())
        self._repository.add_first(duplicate)
        self._logger.info(f"Duplicated prediction {prediction_id} → {duplicate['id']}")
        return duplicate
