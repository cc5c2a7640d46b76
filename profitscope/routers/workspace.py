# profitscope/routers/workspace.py
# -----------------------------------------------------------------------------
# 공유 작업 상태 (계산 입력 + 이익 계획 + 상품 + 시뮬레이션)
# - 저장 시나리오 → 계산 입력 불러오기
# -----------------------------------------------------------------------------
from typing import List

from fastapi import APIRouter, Depends, Response, status

from profitscope.schemas.metrics import MetricsInputPatch, MetricsResult
from profitscope.schemas.plan import ProfitPlanPatch, ProfitPlanResult
from profitscope.schemas.products import (
    ProductIn,
    ProductPatch,
    ProductRow,
    ProductsReplace,
    SimulationRow,
    SimulationSummary,
    SimulationUpdate,
)
from profitscope.schemas.workspace import WorkspaceSnapshot
from profitscope.services.scenarios import ScenarioStore, get_scenario_store
from profitscope.services.workspace import Workspace, get_workspace

router = APIRouter(prefix="/workspace", tags=["workspace"])


@router.get("", response_model=WorkspaceSnapshot)
async def snapshot(ws: Workspace = Depends(get_workspace)):
    return ws.snapshot()


@router.patch("/inputs", response_model=MetricsResult)
async def update_inputs(req: MetricsInputPatch, ws: Workspace = Depends(get_workspace)):
    return ws.update_inputs(**req.model_dump(exclude_none=True))


@router.post("/inputs/from-scenario/{scenario_id}", response_model=MetricsResult)
async def restore_inputs(
    scenario_id: str,
    ws: Workspace = Depends(get_workspace),
    store: ScenarioStore = Depends(get_scenario_store),
):
    return ws.restore(await store.get(scenario_id))


@router.patch("/plan", response_model=ProfitPlanResult)
async def update_plan(req: ProfitPlanPatch, ws: Workspace = Depends(get_workspace)):
    return ws.update_plan(**req.model_dump(exclude_none=True))


@router.post("/products", response_model=ProductRow, status_code=status.HTTP_201_CREATED)
async def add_product(req: ProductIn, ws: Workspace = Depends(get_workspace)):
    return ws.add_product(req.name, req.price, req.variable_cost)


@router.put("/products", response_model=List[ProductRow])
async def replace_products(req: ProductsReplace, ws: Workspace = Depends(get_workspace)):
    return ws.set_products(req.products)


@router.patch("/products/{product_id}", response_model=ProductRow)
async def update_product(
    product_id: str, req: ProductPatch, ws: Workspace = Depends(get_workspace)
):
    return ws.update_product(product_id, **req.model_dump(exclude_none=True))


@router.delete("/products/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_product(product_id: str, ws: Workspace = Depends(get_workspace)):
    ws.remove_product(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/products/{product_id}/simulation", response_model=SimulationRow)
async def update_simulation(
    product_id: str, req: SimulationUpdate, ws: Workspace = Depends(get_workspace)
):
    return ws.update_simulation(product_id, req.field, req.value)


@router.get("/simulation", response_model=SimulationSummary)
async def simulation_summary(ws: Workspace = Depends(get_workspace)):
    return ws.simulation_summary()
