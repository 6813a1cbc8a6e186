"""
Módulo de banco de dados - conexões e sessões.

Exports:
    - Base: Classe base para modelos SQLAlchemy
    - engine: Engine async do SQLAlchemy
    - get_db: Dependency para injeção de sessão
    - get_engine: Dependency do engine (healthcheck)
    - ensure_schema: Cria as tabelas no startup
"""

from best_reads.db.session import (
    Base,
    async_session_factory,
    build_engine,
    build_session_factory,
    check_database_connection,
    engine,
    ensure_schema,
    get_db,
    get_engine,
)

__all__ = [
    "Base",
    "engine",
    "get_db",
    "get_engine",
    "async_session_factory",
    "build_engine",
    "build_session_factory",
    "check_database_connection",
    "ensure_schema",
]
