"""
Fixtures compartilhadas para testes.

Os testes usam SQLite em memória (aiosqlite) com foreign keys habilitadas;
cada teste recebe um banco novo.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_ON_STARTUP", "false")

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402
from sqlalchemy.pool import NullPool, StaticPool  # noqa: E402

from best_reads.db.session import (  # noqa: E402
    build_engine,
    build_session_factory,
    ensure_schema,
    get_db,
    get_engine,
)
from best_reads.main import app  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ==========================================
# Event loop configuration
# ==========================================

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


# ==========================================
# Database fixtures
# ==========================================

@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine de teste com StaticPool.

    Uma única conexão mantém o banco em memória vivo durante o teste.
    """
    engine = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await ensure_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def unreachable_engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine apontando para um diretório inexistente: toda conexão falha."""
    engine = build_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'catalog.db'}",
        poolclass=NullPool,
    )
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return build_session_factory(test_engine)


@pytest.fixture
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Sessão de banco independente para cada teste."""
    async with session_factory() as session:
        yield session


# ==========================================
# HTTP Client fixtures
# ==========================================

@pytest.fixture
async def client(test_engine, session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    Cliente HTTP assíncrono para testes.

    Substitui as dependencies get_db e get_engine para usar o engine de teste.
    """

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            finally:
                await session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_engine] = lambda: test_engine

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
