"""Planning CLI Controller

Root command group: `wangge grid ...` and `wangge prediction ...`
"""

from injector import Injector

from apps.planning.src.adapters.driving.cli.grid_controller import GridController
from apps.planning.src.adapters.driving.cli.prediction_controller import (
    PredictionController,
)


class PlanningController:
    """網格規劃 CLI"""

    def __init__(self, injector: Injector) -> None:
        self.grid = GridController(injector)
        self.prediction = PredictionController(injector)
