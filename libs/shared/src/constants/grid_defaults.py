"""Grid Calculator Defaults

Values restored by ResetGridSettingsCommand and used when nothing is stored yet.
"""

from libs.shared.src.dtos.grid.grid_settings_dto import GridSettingsDTO

DEFAULT_INITIAL_PRICE = 10.0
DEFAULT_BUY_GRID_PERCENT = 1.0  # 1% below the previous buy
DEFAULT_SELL_GRID_PERCENT = 1.0  # 1% above each buy
DEFAULT_BUY_AMOUNT = 1000
DEFAULT_SELL_AMOUNT = 1000
DEFAULT_GRID_COUNT = 10
DEFAULT_MAX_INVESTMENT = 10000


def default_grid_settings() -> GridSettingsDTO:
    """Fresh copy of the default calculator inputs"""
    return {
        "initial_price": DEFAULT_INITIAL_PRICE,
        "buy_grid_percent": DEFAULT_BUY_GRID_PERCENT,
        "sell_grid_percent": DEFAULT_SELL_GRID_PERCENT,
        "buy_amount": DEFAULT_BUY_AMOUNT,
        "sell_amount": DEFAULT_SELL_AMOUNT,
        "grid_count": DEFAULT_GRID_COUNT,
        "max_investment": DEFAULT_MAX_INVESTMENT,
    }
