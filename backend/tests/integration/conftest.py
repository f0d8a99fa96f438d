"""Fixtures for integration tests: an in-memory aiosqlite database per test."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from leadscore.infrastructure.database import Base
from leadscore.infrastructure.database.session import build_engine, build_session_factory
from leadscore.infrastructure.database.session import get_db_session
from leadscore.main import app


@pytest_asyncio.fixture
async def session_factory():
    engine = build_engine("sqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def _override_session():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
