# profitscope/services/scenarios.py
# -----------------------------------------------------------------------------
# 시나리오 저장소
# - list / get / create / delete (수정 없음)
# - get은 저장된 입력을 작업 상태로 불러올 때 사용
# - DB 오류는 TransientStoreError 하나로 변환 (재시도 없음)
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List, Optional

from fastapi import Depends
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from profitscope.core.errors import NotFoundError, TransientStoreError, ValidationError
from profitscope.db import crud
from profitscope.db.session import get_session
from profitscope.schemas.metrics import MetricsInput, MetricsResult
from profitscope.schemas.scenario import ScenarioRecord
from profitscope.services.metrics import compute_metrics

STORE_UNAVAILABLE = "시나리오 저장소에 연결할 수 없습니다"


class ScenarioStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self) -> List[ScenarioRecord]:
        try:
            rows = await crud.list_calculations(self.db)
        except SQLAlchemyError as e:
            logger.error(f"[Scenario] list 실패: {e}")
            raise TransientStoreError(STORE_UNAVAILABLE) from e
        return [ScenarioRecord.model_validate(r) for r in rows]

    async def get(self, scenario_id: str) -> ScenarioRecord:
        try:
            row = await crud.get_calculation(self.db, scenario_id)
        except SQLAlchemyError as e:
            logger.error(f"[Scenario] get 실패: {e}")
            raise TransientStoreError(STORE_UNAVAILABLE) from e

        if row is None:
            raise NotFoundError(f"시나리오를 찾을 수 없습니다: {scenario_id}")
        return ScenarioRecord.model_validate(row)

    async def create(
        self,
        name: str,
        data: MetricsInput,
        result: Optional[MetricsResult] = None,
    ) -> ScenarioRecord:
        name = (name or "").strip()
        if not name:
            raise ValidationError("시나리오 이름을 입력해 주세요")
        result = result or compute_metrics(data)

        try:
            row = await crud.insert_calculation(
                self.db,
                name=name,
                sales=data.sales,
                variable_cost=data.variable_cost,
                fixed_cost=data.fixed_cost,
                investment=data.investment,
                marginal_profit=result.marginal_profit,
                marginal_profit_rate=result.marginal_profit_rate,
                break_even_point=result.break_even_point,
                operating_profit=result.operating_profit,
                operating_profit_rate=result.operating_profit_rate,
                roi=result.roi,
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[Scenario] create 실패: {e}")
            raise TransientStoreError(STORE_UNAVAILABLE) from e

        logger.info(f"[Scenario] 저장: {row.id} ({name})")
        return ScenarioRecord.model_validate(row)

    async def delete(self, scenario_id: str) -> None:
        try:
            deleted = await crud.delete_calculation(self.db, scenario_id)
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(f"[Scenario] delete 실패: {e}")
            raise TransientStoreError(STORE_UNAVAILABLE) from e

        if not deleted:
            raise NotFoundError(f"시나리오를 찾을 수 없습니다: {scenario_id}")
        logger.info(f"[Scenario] 삭제: {scenario_id}")


def get_scenario_store(db: AsyncSession = Depends(get_session)) -> ScenarioStore:
    return ScenarioStore(db)
