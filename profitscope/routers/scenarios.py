# profitscope/routers/scenarios.py
# -----------------------------------------------------------------------------
# 저장 시나리오 목록/생성/삭제
# - 오류 변환은 main.py의 예외 핸들러가 담당
# -----------------------------------------------------------------------------
from typing import List

from fastapi import APIRouter, Depends, Response, status

from profitscope.schemas.scenario import ScenarioCreate, ScenarioRecord
from profitscope.services.scenarios import ScenarioStore, get_scenario_store

router = APIRouter(prefix="/scenarios", tags=["scenarios"])


@router.get("", response_model=List[ScenarioRecord])
async def list_scenarios(store: ScenarioStore = Depends(get_scenario_store)):
    return await store.list()


@router.post("", response_model=ScenarioRecord, status_code=status.HTTP_201_CREATED)
async def create_scenario(
    req: ScenarioCreate, store: ScenarioStore = Depends(get_scenario_store)
):
    return await store.create(req.name, req.input, req.result)


@router.delete("/{scenario_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_scenario(
    scenario_id: str, store: ScenarioStore = Depends(get_scenario_store)
):
    await store.delete(scenario_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
