import math

import pytest

from profitscope.schemas.plan import ProfitPlanInput
from profitscope.services.plan import compute_profit_plan


def test_required_sales_and_achievement():
    r = compute_profit_plan(
        ProfitPlanInput(
            desired_profit=200,
            fixed_cost_forecast=300,
            target_marginal_profit_rate=50,
            current_sales=800,
        )
    )
    assert r.required_sales == pytest.approx(1000.0)
    assert r.achievement_rate == pytest.approx(0.8)


def test_zero_target_rate_is_uncalculable():
    r = compute_profit_plan(ProfitPlanInput(desired_profit=100, fixed_cost_forecast=50))
    assert r.required_sales == math.inf
    assert r.achievement_rate == 0


def test_nothing_to_cover_is_uncalculable():
    r = compute_profit_plan(ProfitPlanInput(target_marginal_profit_rate=40))
    assert r.required_sales == 0
    assert r.achievement_rate == math.inf
