"""
Schemas Pydantic para Book.
"""

from pydantic import Field

from best_reads.models.book import PUBLISHED_MAX_LENGTH, TEXT_MAX_LENGTH
from best_reads.schemas.author import AuthorRead
from best_reads.schemas.base import BaseSchema


class BookCreate(BaseSchema):
    """Schema para criação de livro."""
    title: str = Field(..., min_length=1, max_length=TEXT_MAX_LENGTH, examples=["1984"])
    description: str = Field(
        ...,
        min_length=1,
        max_length=TEXT_MAX_LENGTH,
        examples=["A dystopian novel about totalitarian surveillance."],
    )
    published: str | None = Field(None, max_length=PUBLISHED_MAX_LENGTH, examples=["1949"])
    image_url: str | None = None


class BookUpdate(BookCreate):
    """
    Schema para substituição completa de livro (PUT).

    Todos os campos são reenviados; o id vem da rota e nunca muda.
    """


class BookRead(BaseSchema):
    """Schema para leitura de livro."""
    id: int
    title: str
    description: str
    published: str | None
    image_url: str | None


class BookWithAuthors(BookRead):
    """Livro com a lista de autores."""
    authors: list[AuthorRead] = []
