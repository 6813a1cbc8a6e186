"""
Exceções de domínio e handler para respostas JSON.

Dois tipos de falha:
    - ValidationFailure: campo viola limite de tamanho ou obrigatoriedade,
      detectado antes de chegar ao banco.
    - PersistenceFailure: banco indisponível ou constraint violada no banco
      (ex.: FK inválida na tabela AuthorBook).

Nenhuma das duas é repetida automaticamente.
"""

from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse


class LibraryError(Exception):
    """
    Exceção base da aplicação.

    Carrega código legível por máquina e status HTTP para o handler.
    """

    def __init__(
        self,
        message: str,
        code: str = "LIBRARY_ERROR",
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Converte a exceção no corpo da resposta."""
        result: dict[str, Any] = {
            "detail": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


class ValidationFailure(LibraryError):
    """Dados inválidos rejeitados antes da persistência."""

    def __init__(self, message: str, errors: list[dict[str, str]] | None = None):
        super().__init__(
            message=message,
            code="VALIDATION_FAILURE",
            status_code=422,
            details={"errors": errors} if errors else None,
        )
        self.errors = errors or []


class PersistenceFailure(LibraryError):
    """
    Falha na camada de armazenamento.

    Use unavailable=True quando o banco não responde (503); caso contrário
    trata-se de constraint violada (409).
    """

    def __init__(self, message: str, unavailable: bool = False, error: str | None = None):
        super().__init__(
            message=message,
            code="PERSISTENCE_FAILURE",
            status_code=(
                status.HTTP_503_SERVICE_UNAVAILABLE
                if unavailable
                else status.HTTP_409_CONFLICT
            ),
            details={"error": error} if error else None,
        )
        self.unavailable = unavailable


async def library_error_handler(request: Request, exc: LibraryError) -> JSONResponse:
    """Converte LibraryError em resposta JSON estruturada."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )
