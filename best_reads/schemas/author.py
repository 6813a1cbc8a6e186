"""
Schemas Pydantic para Author.

Os limites de tamanho são aplicados aqui, antes de qualquer acesso ao banco.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import Field, computed_field

from best_reads.models.author import NAME_MAX_LENGTH
from best_reads.schemas.base import BaseSchema

if TYPE_CHECKING:
    from best_reads.schemas.book import BookRead


class AuthorCreate(BaseSchema):
    """Schema para criação de autor."""
    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["George"])
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH, examples=["Orwell"])
    dob: str | None = Field(None, examples=["1903-06-25"])
    image_url: str | None = None


class AuthorUpdate(AuthorCreate):
    """
    Schema para substituição completa de autor (PUT).

    Todos os campos são reenviados; o id vem da rota e nunca muda.
    """


class AuthorRead(BaseSchema):
    """Schema para leitura de autor."""
    id: int
    first_name: str
    last_name: str
    dob: str | None
    image_url: str | None

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.last_name}, {self.first_name}"


class AuthorWithBooks(AuthorRead):
    """Autor com lista de livros (para detalhes)."""
    books: list[BookRead] = []
