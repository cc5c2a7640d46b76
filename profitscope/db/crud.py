# profitscope/db/crud.py
# -----------------------------------------------------------------------------
# calculations 테이블 읽기/쓰기 유틸
# -----------------------------------------------------------------------------
from typing import Sequence

from sqlalchemy import delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from profitscope.db.models import Calculation


async def list_calculations(db: AsyncSession) -> Sequence[Calculation]:
    """최신순"""
    stmt = select(Calculation).order_by(desc(Calculation.created_at))
    res = await db.execute(stmt)
    return res.scalars().all()


async def get_calculation(db: AsyncSession, calculation_id: str) -> Calculation | None:
    res = await db.execute(select(Calculation).where(Calculation.id == calculation_id))
    return res.scalar_one_or_none()


async def insert_calculation(db: AsyncSession, **values) -> Calculation:
    row = Calculation(**values)
    db.add(row)
    await db.commit()
    await db.refresh(row)
    return row


async def delete_calculation(db: AsyncSession, calculation_id: str) -> int:
    """삭제된 행 수 반환 (0이면 없음)"""
    res = await db.execute(delete(Calculation).where(Calculation.id == calculation_id))
    await db.commit()
    return res.rowcount
