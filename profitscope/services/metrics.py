# profitscope/services/metrics.py
# -----------------------------------------------------------------------------
# 관리회계 지표 계산 (순수 함수)
# - 한계이익 / 손익분기점 / 영업이익 / ROI
# - 0 나눗셈은 예외 대신 정해진 값(0, +inf, 100)으로 처리
# -----------------------------------------------------------------------------
from __future__ import annotations

import math
from typing import Iterable

from profitscope.schemas.metrics import (
    BreakEvenStatus,
    MetricsInput,
    MetricsResponse,
    MetricsResult,
    MetricsTextInput,
    ProfitSign,
)
from profitscope.schemas.products import (
    ProductMargin,
    RateComparison,
    SimulationRow,
    SimulationRowIn,
    SimulationSummary,
)
from profitscope.services.numbers import format_currency, format_percentage, parse_amount

# (상한, 코드, 표시 라벨) - 상한 미만이면 해당 구간
BREAK_EVEN_BANDS = [
    (60.0, "safe", "安泰"),
    (70.0, "healthy", "健全"),
    (80.0, "normal", "普通"),
    (90.0, "caution", "要注意"),
]
DANGER = ("danger", "危険")


def _rate(numerator: float, base: float) -> float:
    return (numerator / base) * 100 if base > 0 else 0.0


def compute_metrics(data: MetricsInput) -> MetricsResult:
    marginal_profit = data.sales - data.variable_cost
    marginal_profit_rate = _rate(marginal_profit, data.sales)

    break_even_point = (
        data.fixed_cost / (marginal_profit_rate / 100)
        if marginal_profit_rate > 0
        else math.inf
    )
    if math.isinf(break_even_point):
        break_even_point_ratio = 100.0
    else:
        break_even_point_ratio = _rate(break_even_point, data.sales)

    operating_profit = marginal_profit - data.fixed_cost
    return MetricsResult(
        marginal_profit=marginal_profit,
        marginal_profit_rate=marginal_profit_rate,
        break_even_point=break_even_point,
        break_even_point_ratio=break_even_point_ratio,
        operating_profit=operating_profit,
        operating_profit_rate=_rate(operating_profit, data.sales),
        roi=_rate(operating_profit, data.investment),
    )


def break_even_status(ratio: float) -> BreakEvenStatus:
    for upper, band, label in BREAK_EVEN_BANDS:
        if ratio < upper:
            return BreakEvenStatus(band=band, label=label)
    band, label = DANGER
    return BreakEvenStatus(band=band, label=label)


def profit_sign(value: float) -> ProfitSign:
    if value > 0:
        return "positive"
    if value < 0:
        return "negative"
    return "zero"


def compute_product_margin(price: float, variable_cost: float) -> ProductMargin:
    marginal_profit = price - variable_cost
    return ProductMargin(
        marginal_profit=marginal_profit,
        marginal_profit_rate=_rate(marginal_profit, price),
    )


def make_simulation_row(
    product_id: str, price: float, variable_cost: float, quantity: float = 0.0
) -> SimulationRow:
    return SimulationRow(
        product_id=product_id,
        price=price,
        variable_cost=variable_cost,
        quantity=quantity,
        sales_amount=price * quantity,
        variable_cost_amount=variable_cost * quantity,
    )


def aggregate_simulation(
    rows: Iterable[SimulationRow | SimulationRowIn], fixed_cost: float
) -> SimulationSummary:
    """
    상품별 판매수량 합산 → 공통 고정비로 전체 지표 계산.
    SimulationRowIn(단가/수량만)도 받아서 금액을 직접 계산한다.
    """
    total_sales = 0.0
    total_variable_cost = 0.0
    for r in rows:
        if isinstance(r, SimulationRow):
            total_sales += r.sales_amount
            total_variable_cost += r.variable_cost_amount
        else:
            total_sales += r.price * r.quantity
            total_variable_cost += r.variable_cost * r.quantity

    metrics = compute_metrics(
        MetricsInput(
            sales=total_sales,
            variable_cost=total_variable_cost,
            fixed_cost=fixed_cost,
        )
    )
    return SimulationSummary(
        total_sales=total_sales,
        total_variable_cost=total_variable_cost,
        fixed_cost=fixed_cost,
        metrics=metrics,
        break_even_status=break_even_status(metrics.break_even_point_ratio),
    )


def compare_rates(
    sim: SimulationRow, price: float, variable_cost: float
) -> RateComparison:
    """시뮬레이션 단가 기준 이익률 vs 상품 원래 단가 기준 이익률"""
    simulated = compute_product_margin(sim.price, sim.variable_cost)
    original = compute_product_margin(price, variable_cost)
    return RateComparison(
        product_id=sim.product_id,
        simulated_rate=simulated.marginal_profit_rate,
        original_rate=original.marginal_profit_rate,
        rate_difference=simulated.marginal_profit_rate
        - original.marginal_profit_rate,
    )


def format_metrics(result: MetricsResult) -> dict[str, str]:
    return {
        "marginal_profit": format_currency(result.marginal_profit),
        "marginal_profit_rate": format_percentage(result.marginal_profit_rate),
        "break_even_point": format_currency(result.break_even_point),
        "break_even_point_ratio": format_percentage(result.break_even_point_ratio),
        "operating_profit": format_currency(result.operating_profit),
        "operating_profit_rate": format_percentage(result.operating_profit_rate),
        "roi": format_percentage(result.roi),
    }


def parse_metrics_input(raw: MetricsTextInput) -> MetricsInput:
    return MetricsInput(
        sales=parse_amount(raw.sales),
        variable_cost=parse_amount(raw.variable_cost),
        fixed_cost=parse_amount(raw.fixed_cost),
        investment=parse_amount(raw.investment),
    )


def build_metrics_response(data: MetricsInput) -> MetricsResponse:
    result = compute_metrics(data)
    return MetricsResponse(
        input=data,
        result=result,
        break_even_status=break_even_status(result.break_even_point_ratio),
        operating_profit_sign=profit_sign(result.operating_profit),
        formatted=format_metrics(result),
    )
