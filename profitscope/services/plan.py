# profitscope/services/plan.py
# -----------------------------------------------------------------------------
# 이익 계획
# - 목표 이익 + 고정비 예상 → 필요 매출
# - 현재 매출 기준 달성률 (1.0 == 100%)
# -----------------------------------------------------------------------------
import math

from profitscope.schemas.plan import ProfitPlanInput, ProfitPlanResult


def compute_profit_plan(plan: ProfitPlanInput) -> ProfitPlanResult:
    # 목표 이익 달성에 필요한 매출 / 현재 매출의 달성률
    target_rate = plan.target_marginal_profit_rate / 100
    required_margin = plan.desired_profit + plan.fixed_cost_forecast

    required_sales = required_margin / target_rate if target_rate > 0 else math.inf
    achievement_rate = (
        plan.current_sales * target_rate / required_margin
        if required_margin > 0
        else math.inf
    )
    return ProfitPlanResult(
        required_sales=required_sales, achievement_rate=achievement_rate
    )
