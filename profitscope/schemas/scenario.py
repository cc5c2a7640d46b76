# profitscope/schemas/scenario.py
# -----------------------------------------------------------------------------
# 저장 시나리오 스키마
# - 생성 후 수정 불가 (삭제만 가능)
# -----------------------------------------------------------------------------
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from profitscope.schemas.metrics import MaybeInfinite, MetricsInput, MetricsResult


class ScenarioCreate(BaseModel):
    name: str
    input: MetricsInput
    result: Optional[MetricsResult] = None  # 없으면 서버에서 계산


class ScenarioRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    sales: float
    variable_cost: float
    fixed_cost: float
    marginal_profit: float
    marginal_profit_rate: float
    break_even_point: MaybeInfinite
    operating_profit: Optional[float] = None
    operating_profit_rate: Optional[float] = None
    roi: Optional[float] = None
    investment: Optional[float] = None
    created_at: datetime
