# profitscope/schemas/workspace.py
# -----------------------------------------------------------------------------
# 공유 작업 상태 스냅샷
# - 계산 입력/결과 + 이익 계획 + 상품/시뮬레이션을 한 번에 반환
# -----------------------------------------------------------------------------
from typing import List

from pydantic import BaseModel

from profitscope.schemas.metrics import BreakEvenStatus, MetricsInput, MetricsResult
from profitscope.schemas.plan import ProfitPlanInput, ProfitPlanResult
from profitscope.schemas.products import ProductRow, RateComparison, SimulationRow


class WorkspaceSnapshot(BaseModel):
    input: MetricsInput
    result: MetricsResult
    break_even_status: BreakEvenStatus
    plan: ProfitPlanInput
    plan_result: ProfitPlanResult
    products: List[ProductRow]
    simulations: List[SimulationRow]
    comparisons: List[RateComparison]
