# profitscope/schemas/metrics.py
# -----------------------------------------------------------------------------
# 관리회계 지표 입출력 스키마
# - 손익분기점은 +inf(계산 불가)일 수 있으며, JSON에서는 null로 직렬화
# -----------------------------------------------------------------------------
import math
from typing import Annotated, Dict, Literal

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer


def _finite_or_none(v: float) -> float | None:
    return v if math.isfinite(v) else None


def _none_as_inf(v):
    return math.inf if v is None else v


# 유한한 숫자만 허용 (입력 검증은 이것뿐)
Amount = Annotated[float, Field(allow_inf_nan=False)]

# +inf 허용, JSON null <-> inf
MaybeInfinite = Annotated[
    float,
    BeforeValidator(_none_as_inf),
    PlainSerializer(_finite_or_none, return_type=float | None, when_used="json"),
]

BreakEvenBand = Literal["safe", "healthy", "normal", "caution", "danger"]
ProfitSign = Literal["positive", "negative", "zero"]


class MetricsInput(BaseModel):
    sales: Amount = 0.0
    variable_cost: Amount = 0.0
    fixed_cost: Amount = 0.0
    investment: Amount = 0.0


class MetricsInputPatch(BaseModel):
    sales: Amount | None = None
    variable_cost: Amount | None = None
    fixed_cost: Amount | None = None
    investment: Amount | None = None


class MetricsResult(BaseModel):
    marginal_profit: float
    marginal_profit_rate: float
    break_even_point: MaybeInfinite
    break_even_point_ratio: float
    operating_profit: float
    operating_profit_rate: float
    roi: float


class BreakEvenStatus(BaseModel):
    band: BreakEvenBand
    label: str


class MetricsResponse(BaseModel):
    input: MetricsInput
    result: MetricsResult
    break_even_status: BreakEvenStatus
    operating_profit_sign: ProfitSign
    formatted: Dict[str, str]


class MetricsTextInput(BaseModel):
    """폼 입력 그대로(전각 숫자 허용). 파싱 실패는 0"""

    sales: str | None = None
    variable_cost: str | None = None
    fixed_cost: str | None = None
    investment: str | None = None
