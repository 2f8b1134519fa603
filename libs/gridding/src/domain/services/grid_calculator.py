"""Grid Calculator

Buy a fixed amount at every grid level below the initial price and track the
cumulative position. Each level sits buy_grid_percent below the previous one:

    price_0 = initial_price
    price_i = price_{i-1} × (1 - buy_grid_percent / 100)
"""

from collections.abc import Mapping

from libs.shared.src.dtos.grid.grid_result_dto import GridResultDTO
from libs.shared.src.dtos.grid.grid_step_dto import GridStepDTO


def is_valid_grid_input(
    initial_price: float,
    buy_grid_percent: float,
    buy_amount: float,
    grid_count: int,
) -> bool:
    """
    Check whether the inputs can produce a schedule

    buy_amount <= 0 would leave total_shares at zero (average_cost undefined),
    buy_grid_percent >= 100 drives every price after step 0 to zero or below.
    Long schedules can also underflow the last price to 0.0, the same
    recurrence as calculate_grid_steps is replayed to catch that.

    Returns:
        bool: False means the schedule is empty
    """
    if initial_price <= 0 or buy_grid_percent <= 0 or grid_count <= 0:
        return False
    if buy_amount <= 0 or buy_grid_percent >= 100:
        return False

    drop_factor = 1 - buy_grid_percent / 100
    last_price = initial_price
    for _ in range(int(grid_count)):
        last_price = last_price * drop_factor
    return last_price > 0


def calculate_grid_steps(
    initial_price: float,
    buy_grid_percent: float,
    sell_grid_percent: float,
    buy_amount: float,
    sell_amount: float,
    grid_count: int,
    max_investment: float,
) -> list[GridStepDTO]:
    """
    Calculate the grid schedule

    Args:
        initial_price: Price of the first buy
        buy_grid_percent: Drop between consecutive buys (%)
        sell_grid_percent: Sell markup above each buy (%)
        buy_amount: Capital invested per grid
        sell_amount: Capital sold per grid (reported as-is)
        grid_count: Number of levels below the initial price
        max_investment: Investment ceiling, <= 0 disables the warning

    Returns:
        list[GridStepDTO]: grid_count + 1 steps, or [] for invalid input
    """
    if not is_valid_grid_input(initial_price, buy_grid_percent, buy_amount, grid_count):
        return []

    drop_factor = 1 - buy_grid_percent / 100
    markup_factor = 1 + sell_grid_percent / 100

    steps: list[GridStepDTO] = []
    total_investment = 0.0
    total_shares = 0.0
    price = initial_price

    for i in range(int(grid_count) + 1):
        if i > 0:
            price = price * drop_factor

        total_investment += buy_amount
        total_shares += buy_amount / price
        average_cost = total_investment / total_shares

        # Holdings valued at the price just bought
        market_value = total_shares * price
        floating_pl = market_value - total_investment

        steps.append(
            {
                "index": i,
                "buy_price": price,
                "buy_amount": buy_amount,
                "sell_price": price * markup_factor,
                "sell_amount": sell_amount,
                "total_investment": total_investment,
                "total_shares": total_shares,
                "average_cost": average_cost,
                "floating_pl": floating_pl,
                "floating_pl_percent": floating_pl / total_investment * 100,
                "price_drop_percent": (price - initial_price) / initial_price * 100,
                "is_warning": max_investment > 0 and total_investment > max_investment,
            }
        )

    return steps


def calculate_total_required_capital(steps: list[GridStepDTO]) -> float:
    """Capital needed to fill every grid, 0 for an empty schedule"""
    if not steps:
        return 0.0
    return steps[-1]["total_investment"]


def calculate_grid(inputs: Mapping) -> GridResultDTO:
    """
    Calculate the schedule from a settings or parameters mapping

    Args:
        inputs: GridSettingsDTO or GridParametersDTO (stock_code is ignored)

    Returns:
        GridResultDTO: total_required_capital and grid_data
    """
    steps = calculate_grid_steps(
        initial_price=inputs["initial_price"],
        buy_grid_percent=inputs["buy_grid_percent"],
        sell_grid_percent=inputs["sell_grid_percent"],
        buy_amount=inputs["buy_amount"],
        sell_amount=inputs["sell_amount"],
        grid_count=inputs["grid_count"],
        max_investment=inputs["max_investment"],
    )
    return {
        "total_required_capital": calculate_total_required_capital(steps),
        "grid_data": steps,
    }
