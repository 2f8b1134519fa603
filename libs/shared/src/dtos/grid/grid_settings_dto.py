"""Grid Settings DTO"""

from typing import TypedDict


class GridSettingsDTO(TypedDict):
    """The seven calculator inputs

    Persisted as a single local storage entry
    """

    initial_price: float
    buy_grid_percent: float
    sell_grid_percent: float
    buy_amount: float
    sell_amount: float
    grid_count: int
    max_investment: float
