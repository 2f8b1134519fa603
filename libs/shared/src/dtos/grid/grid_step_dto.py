"""Grid Step DTO"""

from typing import TypedDict


class GridStepDTO(TypedDict):
    """One row of the grid schedule

    Corresponds to calculate_grid_steps() output
    """

    index: int  # 0-based position in the schedule
    buy_price: float  # Buy price at this grid level
    buy_amount: float  # Amount invested at this level
    sell_price: float  # Sell target for this level
    sell_amount: float  # Amount sold when the target is hit
    total_investment: float  # Cumulative invested capital
    total_shares: float  # Cumulative shares held
    average_cost: float  # total_investment / total_shares
    floating_pl: float  # Unrealized P/L at buy_price
    floating_pl_percent: float  # floating_pl / total_investment * 100
    price_drop_percent: float  # Deviation from the initial price (%)
    is_warning: bool  # Cumulative investment exceeds max_investment
