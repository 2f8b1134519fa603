"""Grid Parameters DTO"""

from typing import NotRequired, TypedDict


class GridParametersDTO(TypedDict):
    """Calculator parameter snapshot embedded in a prediction"""

    stock_code: NotRequired[str]
    """Optional stock label"""

    initial_price: float
    """Initial Price"""

    buy_grid_percent: float
    """Buy grid spacing (%)"""

    sell_grid_percent: float
    """Sell markup above each buy (%)"""

    buy_amount: float
    """Capital invested per grid"""

    sell_amount: float
    """Capital sold per grid"""

    grid_count: int
    """Number of grid levels below the initial price"""

    max_investment: float
    """Investment ceiling, 0 disables the warning"""
