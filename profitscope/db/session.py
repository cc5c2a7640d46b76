# profitscope/db/session.py
# -----------------------------------------------------------------------------
# SQLAlchemy Async 엔진/세션/베이스
# - FastAPI Depends(get_session)로 주입
# - SQLite면 잠금 대기 시간 지정, PostgreSQL은 URL만 교체
# -----------------------------------------------------------------------------
from collections.abc import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base

from profitscope.core.config import settings


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"timeout": settings.DB_TIMEOUT}
    return {}


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    connect_args=_connect_args(settings.DATABASE_URL),
)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)
Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """요청 스코프 세션 (시나리오 저장소 전용)"""
    async with AsyncSessionLocal() as session:
        yield session
