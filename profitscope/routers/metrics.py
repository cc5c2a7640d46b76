# profitscope/routers/metrics.py
# -----------------------------------------------------------------------------
# /metrics       : 관리회계 지표 계산
# /metrics/text  : 폼 입력 문자열(전각 숫자 허용) 그대로 계산
# /plan          : 목표 이익 기준 필요 매출
# -----------------------------------------------------------------------------
from fastapi import APIRouter

from profitscope.schemas.metrics import MetricsInput, MetricsResponse, MetricsTextInput
from profitscope.schemas.plan import ProfitPlanInput, ProfitPlanResult
from profitscope.services.metrics import build_metrics_response, parse_metrics_input
from profitscope.services.plan import compute_profit_plan

router = APIRouter(tags=["metrics"])


@router.post("/metrics", response_model=MetricsResponse)
async def metrics(req: MetricsInput):
    return build_metrics_response(req)


@router.post("/metrics/text", response_model=MetricsResponse)
async def metrics_text(req: MetricsTextInput):
    return build_metrics_response(parse_metrics_input(req))


@router.post("/plan", response_model=ProfitPlanResult)
async def plan(req: ProfitPlanInput):
    return compute_profit_plan(req)
