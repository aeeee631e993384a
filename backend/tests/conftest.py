"""
Pytest configuration for the EazyBank services.

Provides fixtures for:
- An in-memory SQLite database shared by one test
- Services wired with deterministic number generators
- An HTTP client bound to the FastAPI app with the session overridden
"""

from __future__ import annotations

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

import eazybank.models.domain  # noqa: F401
from eazybank.core.audit import FixedAuditor
from eazybank.db.base import Base
from eazybank.deps import get_session
from eazybank.main import app
from eazybank.services.accounts_service import AccountsService
from eazybank.services.cards_service import CardsService
from eazybank.services.loans_service import LoansService
from tests.helpers import SequenceNumberGenerator


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def db(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def accounts_service(db: AsyncSession) -> AccountsService:
    return AccountsService(
        db,
        auditor=FixedAuditor("ACCOUNTS_MS"),
        number_generator=SequenceNumberGenerator(
            [1234567890, 1234567891, 1234567892]
        ),
    )


@pytest.fixture
def cards_service(db: AsyncSession) -> CardsService:
    return CardsService(
        db,
        auditor=FixedAuditor("CARDS_MS"),
        number_generator=SequenceNumberGenerator([100000000001, 100000000002]),
    )


@pytest.fixture
def loans_service(db: AsyncSession) -> LoansService:
    return LoansService(
        db,
        auditor=FixedAuditor("LOANS_MS"),
        number_generator=SequenceNumberGenerator([100000000101, 100000000102]),
    )


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests run against the in-memory database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
