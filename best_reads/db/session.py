"""
Configuração de sessão do banco de dados com SQLAlchemy async.

Este módulo fornece o engine async, session factory e dependency
para injeção de sessão nos endpoints. Cada request recebe sua própria
AsyncSession; uma sessão nunca é compartilhada entre requests concorrentes.
"""

from typing import AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from best_reads.core.config import get_settings
from best_reads.core.exceptions import PersistenceFailure
from best_reads.core.logging import get_logger

settings = get_settings()
logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Classe base para todos os modelos SQLAlchemy."""
    pass


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite só aplica FKs (e ON DELETE CASCADE) com este pragma por conexão
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, **kwargs) -> AsyncEngine:
    """
    Cria o engine async para a URL informada.

    Bancos servidor (PostgreSQL, MySQL) usam pool com pre-ping; SQLite
    recebe o pragma de foreign keys em cada conexão.
    """
    if make_url(url).get_backend_name() == "sqlite":
        engine = create_async_engine(url, echo=False, **kwargs)
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    kwargs.setdefault("pool_size", settings.DB_POOL_SIZE)
    kwargs.setdefault("max_overflow", settings.DB_MAX_OVERFLOW)
    return create_async_engine(url, echo=False, pool_pre_ping=True, **kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Factory de sessões async para o engine informado."""
    return async_sessionmaker(
        bind=bind,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


engine = build_engine(settings.DATABASE_URL)
async_session_factory = build_session_factory(engine)


def get_engine() -> AsyncEngine:
    """Dependency que fornece o engine, para checagens fora de uma sessão."""
    return engine


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency que fornece uma sessão de banco de dados.

    Uso nos endpoints:
        @app.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...

    A sessão é automaticamente fechada após o request.
    """
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def ensure_schema(bind: AsyncEngine | None = None) -> None:
    """
    Cria as tabelas que ainda não existem (Author, Book, AuthorBook).

    Não altera tabelas existentes; não há migrations.

    Raises:
        PersistenceFailure: Banco indisponível (unavailable=True)
    """
    # Registra os models no metadata antes do create_all
    import best_reads.models  # noqa: F401

    bind = bind or engine
    try:
        async with bind.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except (OperationalError, OSError) as e:
        logger.error(f"Falha ao criar schema: {e}")
        raise PersistenceFailure(
            "Banco de dados indisponível",
            unavailable=True,
            error=str(getattr(e, "orig", None) or e),
        ) from e
    logger.info("Schema verificado: %s", ", ".join(sorted(Base.metadata.tables)))


async def check_database_connection(bind: AsyncEngine | None = None) -> tuple[bool, str | None]:
    """
    Verifica se a conexão com o banco de dados está funcionando.

    Returns:
        Tupla (sucesso, mensagem_erro)
    """
    bind = bind or engine
    try:
        async with bind.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True, None
    except Exception as e:
        return False, str(e)
