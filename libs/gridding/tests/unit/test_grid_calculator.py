"""網格計算器單元測試"""

import pytest

from libs.gridding.src.domain.services.grid_calculator import (
    calculate_grid,
    calculate_grid_steps,
    calculate_total_required_capital,
    is_valid_grid_input,
)
from libs.shared.src.constants.grid_defaults import default_grid_settings


def _steps(**overrides):
    params = {
        "initial_price": 10.0,
        "buy_grid_percent": 10.0,
        "sell_grid_percent": 5.0,
        "buy_amount": 1000,
        "sell_amount": 1000,
        "grid_count": 2,
        "max_investment": 2000,
    }
    params.update(overrides)
    return calculate_grid_steps(**params)


class TestCalculateGridSteps:
    """測試網格步驟計算"""

    def test_step_count_is_grid_count_plus_one(self) -> None:
        """步驟數應為 grid_count + 1，索引依序遞增"""
        steps = _steps(grid_count=7)

        assert len(steps) == 8
        assert [s["index"] for s in steps] == list(range(8))

    def test_worked_example(self) -> None:
        """10 元起跌 10%：10 → 9 → 8.1"""
        steps = _steps()

        assert steps[0]["buy_price"] == pytest.approx(10.0)
        assert steps[1]["buy_price"] == pytest.approx(9.0)
        assert steps[2]["buy_price"] == pytest.approx(8.1)
        assert [s["total_investment"] for s in steps] == [1000, 2000, 3000]

    def test_warning_only_above_ceiling(self) -> None:
        """投入剛好等於上限不警示，超過才警示"""
        steps = _steps()

        assert [s["is_warning"] for s in steps] == [False, False, True]

    def test_no_warning_when_ceiling_disabled(self) -> None:
        """max_investment <= 0 時永不警示"""
        for ceiling in (0, -1):
            steps = _steps(max_investment=ceiling, grid_count=20)
            assert not any(s["is_warning"] for s in steps)

    def test_total_investment_grows_by_buy_amount(self) -> None:
        """第 i 步累計投入 = (i + 1) × buy_amount"""
        steps = _steps(buy_amount=250, grid_count=10)

        for step in steps:
            assert step["total_investment"] == (step["index"] + 1) * 250

    def test_total_shares_strictly_increasing(self) -> None:
        """持股數嚴格遞增，平均成本 = 投入 / 股數"""
        steps = _steps(grid_count=15, buy_grid_percent=3.0)

        for prev, curr in zip(steps, steps[1:]):
            assert curr["total_shares"] > prev["total_shares"]
        for step in steps:
            assert step["average_cost"] == step["total_investment"] / step["total_shares"]

    def test_sell_price_marks_up_buy_price(self) -> None:
        """賣出價 = 買入價 × (1 + sell%)"""
        steps = _steps()

        assert steps[0]["sell_price"] == pytest.approx(10.5)
        assert steps[1]["sell_price"] == pytest.approx(9.45)

    def test_floating_pl(self) -> None:
        """浮動損益以當下買入價計算市值"""
        steps = _steps()

        assert steps[0]["floating_pl"] == pytest.approx(0.0)
        assert steps[1]["floating_pl"] == pytest.approx(-100.0)
        assert steps[1]["floating_pl_percent"] == pytest.approx(-5.0)
        assert steps[2]["floating_pl"] == pytest.approx(-290.0)

    def test_price_drop_percent(self) -> None:
        """價格跌幅相對於初始價"""
        steps = _steps()

        assert steps[0]["price_drop_percent"] == pytest.approx(0.0)
        assert steps[1]["price_drop_percent"] == pytest.approx(-10.0)
        assert steps[2]["price_drop_percent"] == pytest.approx(-19.0)

    def test_sell_amount_is_reported_as_is(self) -> None:
        steps = _steps(sell_amount=777)

        assert all(s["sell_amount"] == 777 for s in steps)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"initial_price": 0},
            {"initial_price": -5},
            {"buy_grid_percent": 0},
            {"buy_grid_percent": -1},
            {"grid_count": 0},
            {"buy_amount": 0},
            {"buy_grid_percent": 100},
            {"buy_grid_percent": 50, "grid_count": 1100},
            {"buy_grid_percent": 99.9, "grid_count": 200},
        ],
    )
    def test_invalid_input_returns_empty(self, overrides) -> None:
        """無效輸入回傳空陣列，不拋例外"""
        assert _steps(**overrides) == []


class TestTotalRequiredCapital:
    """測試所需總資金"""

    def test_last_step_investment(self) -> None:
        steps = _steps(grid_count=4)

        assert calculate_total_required_capital(steps) == 5000

    def test_empty_schedule(self) -> None:
        assert calculate_total_required_capital([]) == 0


class TestCalculateGrid:
    """測試 settings → result 組合"""

    def test_default_settings(self) -> None:
        """預設參數：11 格，每格 1000"""
        result = calculate_grid(default_grid_settings())

        assert len(result["grid_data"]) == 11
        assert result["total_required_capital"] == 11000
        assert result["grid_data"][-1]["is_warning"] is True

    def test_accepts_parameters_with_stock_code(self) -> None:
        params = dict(default_grid_settings(), stock_code="2330")

        result = calculate_grid(params)

        assert len(result["grid_data"]) == 11

    def test_invalid_settings(self) -> None:
        settings = dict(default_grid_settings(), grid_count=0)

        result = calculate_grid(settings)

        assert result == {"total_required_capital": 0.0, "grid_data": []}


class TestIsValidGridInput:
    def test_valid(self) -> None:
        assert is_valid_grid_input(10.0, 1.0, 1000, 10)

    def test_percent_below_hundred(self) -> None:
        assert is_valid_grid_input(10.0, 99.9, 1000, 10)
        assert not is_valid_grid_input(10.0, 100.0, 1000, 10)

    def test_last_price_underflow_rejected(self) -> None:
        """最後一格價格下溢為 0 時視為無效"""
        assert is_valid_grid_input(10.0, 50.0, 1000, 100)
        assert not is_valid_grid_input(10.0, 50.0, 1000, 1100)
