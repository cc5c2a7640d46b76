"""
Unit tests for the metrics engine (profitscope/services/metrics.py).
"""

import math

import pytest

from profitscope.schemas.metrics import MetricsInput
from profitscope.schemas.products import SimulationRowIn
from profitscope.services.metrics import (
    aggregate_simulation,
    break_even_status,
    build_metrics_response,
    compare_rates,
    compute_metrics,
    compute_product_margin,
    make_simulation_row,
    profit_sign,
)


def test_reference_scenario():
    r = compute_metrics(MetricsInput(sales=1000, variable_cost=400, fixed_cost=300))
    assert r.marginal_profit == 600
    assert r.marginal_profit_rate == pytest.approx(60.0)
    assert r.break_even_point == pytest.approx(500.0)
    assert r.break_even_point_ratio == pytest.approx(50.0)
    assert r.operating_profit == 300
    assert r.operating_profit_rate == pytest.approx(30.0)
    assert r.roi == 0.0


@pytest.mark.parametrize(
    "sales, variable_cost", [(1000, 400), (250.5, 10), (80, 120), (1, 0)]
)
def test_marginal_profit_rate_for_positive_sales(sales, variable_cost):
    r = compute_metrics(MetricsInput(sales=sales, variable_cost=variable_cost))
    assert r.marginal_profit_rate == pytest.approx(
        (sales - variable_cost) / sales * 100
    )


def test_zero_sales_is_uncalculable():
    r = compute_metrics(MetricsInput(sales=0, variable_cost=0, fixed_cost=100))
    assert r.marginal_profit_rate == 0
    assert r.break_even_point == math.inf
    assert r.break_even_point_ratio == 100
    assert r.operating_profit_rate == 0


def test_negative_sales_uses_zero_rates():
    r = compute_metrics(MetricsInput(sales=-500, variable_cost=100, fixed_cost=50))
    assert r.marginal_profit == -600
    assert r.marginal_profit_rate == 0
    assert r.operating_profit_rate == 0
    assert math.isinf(r.break_even_point)


def test_non_positive_margin_gives_infinite_break_even():
    r = compute_metrics(MetricsInput(sales=100, variable_cost=150, fixed_cost=10))
    assert r.marginal_profit_rate < 0
    assert r.break_even_point == math.inf
    assert r.break_even_point_ratio == 100


@pytest.mark.parametrize(
    "data",
    [
        MetricsInput(sales=1000, variable_cost=400, fixed_cost=300),
        MetricsInput(sales=0, variable_cost=50, fixed_cost=-20),
        MetricsInput(sales=-1, variable_cost=-1, fixed_cost=7),
    ],
)
def test_operating_profit_has_no_edge_case(data):
    r = compute_metrics(data)
    assert r.operating_profit == r.marginal_profit - data.fixed_cost


@pytest.mark.parametrize("sales", [1000, 100])
def test_roi_is_zero_without_investment(sales):
    r = compute_metrics(MetricsInput(sales=sales, variable_cost=400, fixed_cost=300))
    assert r.roi == 0


def test_roi_with_investment():
    r = compute_metrics(
        MetricsInput(sales=1000, variable_cost=400, fixed_cost=300, investment=1500)
    )
    assert r.roi == pytest.approx(20.0)


@pytest.mark.parametrize(
    "ratio, band, label",
    [
        (0, "safe", "安泰"),
        (59.99, "safe", "安泰"),
        (60, "healthy", "健全"),
        (69.9, "healthy", "健全"),
        (70, "normal", "普通"),
        (80, "caution", "要注意"),
        (89.999, "caution", "要注意"),
        (90, "danger", "危険"),
        (100, "danger", "危険"),
    ],
)
def test_break_even_status_bands(ratio, band, label):
    status = break_even_status(ratio)
    assert status.band == band
    assert status.label == label


def test_profit_sign():
    assert profit_sign(1) == "positive"
    assert profit_sign(-0.5) == "negative"
    assert profit_sign(0) == "zero"


def test_product_margin():
    m = compute_product_margin(200, 50)
    assert m.marginal_profit == 150
    assert m.marginal_profit_rate == pytest.approx(75.0)


def test_product_margin_without_price():
    m = compute_product_margin(0, 30)
    assert m.marginal_profit == -30
    assert m.marginal_profit_rate == 0


def test_simulation_row_amounts():
    row = make_simulation_row("p1", 120, 45, 10)
    assert row.sales_amount == 1200
    assert row.variable_cost_amount == 450


def test_aggregate_simulation_sums_rows():
    rows = [make_simulation_row("a", 100, 40, 10), make_simulation_row("b", 50, 30, 20)]
    summary = aggregate_simulation(rows, fixed_cost=600)
    assert summary.total_sales == 2000
    assert summary.total_variable_cost == 1000
    assert summary.metrics.marginal_profit == 1000
    assert summary.metrics.operating_profit == 400
    assert summary.metrics.break_even_point == pytest.approx(1200.0)
    assert summary.break_even_status.band == "healthy"


def test_aggregate_simulation_accepts_plain_rows():
    rows = [SimulationRowIn(price=100, variable_cost=40, quantity=3)]
    summary = aggregate_simulation(rows, fixed_cost=0)
    assert summary.total_sales == 300
    assert summary.total_variable_cost == 120


def test_aggregate_simulation_without_sales():
    summary = aggregate_simulation([make_simulation_row("a", 100, 40)], fixed_cost=500)
    assert summary.total_sales == 0
    assert math.isinf(summary.metrics.break_even_point)
    assert summary.metrics.break_even_point_ratio == 100
    assert summary.break_even_status.band == "danger"


def test_compare_rates():
    sim = make_simulation_row("p", 120, 60, 5)
    cmp = compare_rates(sim, price=100, variable_cost=60)
    assert cmp.simulated_rate == pytest.approx(50.0)
    assert cmp.original_rate == pytest.approx(40.0)
    assert cmp.rate_difference == pytest.approx(10.0)


def test_metrics_response_formatting():
    resp = build_metrics_response(
        MetricsInput(sales=1000, variable_cost=400, fixed_cost=300)
    )
    assert resp.break_even_status.band == "safe"
    assert resp.operating_profit_sign == "positive"
    assert resp.formatted["marginal_profit"] == "￥600"
    assert resp.formatted["marginal_profit_rate"] == "60.00%"
    assert resp.formatted["break_even_point"] == "￥500"


def test_metrics_response_uncalculable_break_even():
    resp = build_metrics_response(MetricsInput(fixed_cost=100))
    assert resp.formatted["break_even_point"] == "計算不可"
    assert resp.break_even_status.band == "danger"
    assert resp.operating_profit_sign == "negative"
