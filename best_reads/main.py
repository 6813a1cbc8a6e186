"""
Ponto de entrada da aplicação FastAPI.

Este módulo configura a aplicação FastAPI, inclui rotas, registra handlers
de erro e define o ciclo de vida (startup/shutdown).
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from best_reads.api.v1.router import api_router
from best_reads.core.config import get_settings
from best_reads.core.deps import DbEngine
from best_reads.core.exceptions import LibraryError, ValidationFailure, library_error_handler
from best_reads.core.logging import get_logger, setup_logging
from best_reads.core.validation import format_errors
from best_reads.db.seed import initialise
from best_reads.db.session import (
    async_session_factory,
    check_database_connection,
    engine,
    ensure_schema,
)
from best_reads.schemas.health import HealthResponse

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Gerencia o ciclo de vida da aplicação.

    Startup:
        - Configura logging
        - Cria as tabelas que faltarem
        - Executa o seed uma única vez (SEED_ON_STARTUP)

    Falhas do banco no startup são propagadas: a aplicação não sobe.

    Shutdown:
        - Fecha pool de conexões do banco
    """
    setup_logging()
    logger.info(f"Iniciando {settings.APP_NAME} em ambiente {settings.ENVIRONMENT}")

    try:
        await ensure_schema()
        if settings.SEED_ON_STARTUP:
            async with async_session_factory() as db:
                await initialise(db)
    except Exception:
        logger.exception("Falha ao inicializar o banco de dados")
        raise

    yield

    logger.info(f"Encerrando {settings.APP_NAME}")
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    description="API REST do catálogo de autores e livros",
    version="0.1.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    openapi_url="/openapi.json" if settings.is_development else None,
    lifespan=lifespan,
)

if settings.HTTPS_REDIRECT:
    app.add_middleware(HTTPSRedirectMiddleware)

app.add_exception_handler(LibraryError, library_error_handler)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Erros de validação do corpo/rota seguem o formato de ValidationFailure."""
    return await library_error_handler(
        request, ValidationFailure("Dados inválidos", errors=format_errors(exc))
    )


# Inclui rotas da API v1
app.include_router(api_router)


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Verifica status da aplicação",
    description="Retorna o status da aplicação e a disponibilidade do banco.",
)
async def health_check(bind: DbEngine) -> HealthResponse:
    """
    Endpoint de healthcheck para monitoramento.

    Útil para load balancers e sistemas de monitoramento.
    """
    db_ok, error = await check_database_connection(bind)
    if not db_ok:
        logger.warning(f"Healthcheck: banco indisponível: {error}")

    return HealthResponse(
        status="healthy" if db_ok else "degraded",
        app_name=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
        database="ok" if db_ok else "unavailable",
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("best_reads.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
