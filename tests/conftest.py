import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from profitscope.db.session import Base, get_session
from profitscope.main import app
from profitscope.services.workspace import Workspace, get_workspace


async def _create_tables(engine):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def session_factory(tmp_path):
    """테스트마다 새 SQLite 파일"""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool
    )
    asyncio.run(_create_tables(engine))
    yield async_sessionmaker(engine, expire_on_commit=False)
    asyncio.run(engine.dispose())


@pytest.fixture
def workspace():
    return Workspace()


@pytest.fixture
def client(session_factory, workspace):
    async def _get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_workspace] = lambda: workspace
    yield TestClient(app)
    app.dependency_overrides.clear()


class BrokenSession:
    """execute/commit 호출 시 DB 장애를 흉내"""

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    def add(self, obj):
        pass

    async def commit(self):
        raise OperationalError("COMMIT", {}, Exception("database is locked"))

    async def rollback(self):
        pass


@pytest.fixture
def broken_session():
    return BrokenSession()
