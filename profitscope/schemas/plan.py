# profitscope/schemas/plan.py
# -----------------------------------------------------------------------------
# 이익 계획(목표 매출) 스키마
# -----------------------------------------------------------------------------
from pydantic import BaseModel

from profitscope.schemas.metrics import Amount, MaybeInfinite


class ProfitPlanInput(BaseModel):
    desired_profit: Amount = 0.0
    fixed_cost_forecast: Amount = 0.0
    target_marginal_profit_rate: Amount = 0.0
    current_sales: Amount = 0.0


class ProfitPlanResult(BaseModel):
    required_sales: MaybeInfinite
    achievement_rate: MaybeInfinite  # 1.0 == 100%


class ProfitPlanPatch(BaseModel):
    desired_profit: Amount | None = None
    fixed_cost_forecast: Amount | None = None
    target_marginal_profit_rate: Amount | None = None
    current_sales: Amount | None = None
