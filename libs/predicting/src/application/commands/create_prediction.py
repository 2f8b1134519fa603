"""建立預測 Command"""

import logging
from collections.abc import Callable
from datetime import datetime

from injector import inject

from libs.predicting.src.domain.services.prediction_factory import (
    build_prediction,
    utc_now,
)
from libs.predicting.src.ports.create_prediction_port import CreatePredictionPort
from libs.predicting.src.ports.prediction_repository_port import (
    PredictionRepositoryPort,
)
from libs.shared.src.dtos.grid.grid_parameters_dto import GridParametersDTO
from libs.shared.src.dtos.grid.grid_result_dto import GridResultDTO
from libs.shared.src.dtos.prediction.grid_prediction_dto import GridPredictionDTO


class CreatePredictionCommand(CreatePredictionPort):
    """建立新預測並放在清單最前面"""

    @inject
    def __init__(
        self,
        repository: PredictionRepositoryPort,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """初始化 Command

        Args:
            repository: 預測資料庫 (由 DI 注入)
            clock: 目前時間來源
        """
        self._logger = logging.getLogger(self.__class__.__name__)
        self._repository = repository
        self._clock = clock

    def execute(
        self,
        name: str,
        parameters: GridParametersDTO,
        description: str | None = None,
        results: GridResultDTO | None = None,
    ) -> GridPredictionDTO:
        """建立預測

        Args:
            name: 名稱
            parameters: 計算器參數
            description: 說明
            results: 快取的計算結果

        Returns:
            GridPredictionDTO: 新建立的預測
        """
        prediction = build_prediction(
            name=name,
            parameters=parameters,
            now=self._clock(),
            description=description,
            results=results,
        )
        self._repository.add_first(prediction)
        self._logger.info(f"Created prediction {prediction['id']} ({name})")
        return prediction
