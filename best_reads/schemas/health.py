"""
Schemas Pydantic para o endpoint de healthcheck.
"""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """
    Resposta do endpoint de healthcheck.

    Attributes:
        status: "healthy" ou "degraded" (banco indisponível)
        app_name: Nome da aplicação
        environment: Ambiente atual (development, staging, production)
        database: "ok" ou "unavailable"
    """

    status: str
    app_name: str
    environment: str
    database: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "healthy",
                    "app_name": "Best Reads API",
                    "environment": "development",
                    "database": "ok",
                }
            ]
        }
    }
