"""
Validação explícita de Author e Book antes da persistência.

Os schemas Pydantic são o objeto de constraints; estas funções os aplicam
fora do ciclo de request (seed, services) e convertem a falha em
ValidationFailure.
"""

from typing import Any, Mapping, Type, TypeVar

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from best_reads.core.exceptions import ValidationFailure
from best_reads.schemas.author import AuthorCreate
from best_reads.schemas.book import BookCreate

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def format_errors(exc: ValidationError | RequestValidationError) -> list[dict[str, str]]:
    """Converte erros do Pydantic em lista [{field, message}]."""
    return [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]


def _validate(schema: Type[SchemaType], data: Mapping[str, Any] | BaseModel, entity: str) -> SchemaType:
    if isinstance(data, BaseModel):
        data = data.model_dump()
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailure(f"Dados inválidos para {entity}", errors=format_errors(exc)) from exc


def validate_author(data: Mapping[str, Any] | BaseModel) -> AuthorCreate:
    """
    Valida dados de autor.

    Raises:
        ValidationFailure: first_name/last_name vazios ou acima de 55 caracteres
    """
    return _validate(AuthorCreate, data, "Author")


def validate_book(data: Mapping[str, Any] | BaseModel) -> BookCreate:
    """
    Valida dados de livro.

    Raises:
        ValidationFailure: title/description vazios ou acima de 55 caracteres,
            published acima de 25 caracteres
    """
    return _validate(BookCreate, data, "Book")
