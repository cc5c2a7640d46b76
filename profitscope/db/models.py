# profitscope/db/models.py
# -----------------------------------------------------------------------------
# ORM 모델 정의
# - Calculation: 이름 붙은 계산 시나리오 (입력 + 계산 결과 스냅샷)
# -----------------------------------------------------------------------------
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, String
from profitscope.db.session import Base


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Calculation(Base):
    __tablename__ = "calculations"

    id = Column(String(32), primary_key=True, default=_new_id)
    name = Column(String, nullable=False)

    # 입력
    sales = Column(Float, nullable=False)
    variable_cost = Column(Float, nullable=False)
    fixed_cost = Column(Float, nullable=False)
    investment = Column(Float)

    # 계산 결과 (break_even_point는 +inf 가능)
    marginal_profit = Column(Float, nullable=False)
    marginal_profit_rate = Column(Float, nullable=False)
    break_even_point = Column(Float, nullable=False)
    operating_profit = Column(Float)
    operating_profit_rate = Column(Float)
    roi = Column(Float)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
