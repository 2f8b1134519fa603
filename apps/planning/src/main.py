"""Planning CLI 入口

遵循 P&A 架構：CLI → Driving Adapter → Application Service
"""

import fire

from apps.planning.src.lifespan import startup, shutdown, get_injector
from apps.planning.src.adapters.driving.cli.planning_controller import (
    PlanningController,
)


def main() -> None:
    startup()
    try:
        controller = PlanningController(get_injector())
        fire.Fire(controller)
    finally:
        shutdown()


if __name__ == "__main__":
    main()
