"""
Schemas Pydantic da aplicação.
"""

from best_reads.schemas.base import (
    BaseSchema,
    MessageResponse,
    PaginatedResponse,
)
from best_reads.schemas.health import HealthResponse
from best_reads.schemas.author import (
    AuthorCreate,
    AuthorRead,
    AuthorUpdate,
    AuthorWithBooks,
)
from best_reads.schemas.book import (
    BookCreate,
    BookRead,
    BookUpdate,
    BookWithAuthors,
)

# Resolve a forward reference de AuthorWithBooks -> BookRead
AuthorWithBooks.model_rebuild(_types_namespace={"BookRead": BookRead})

__all__ = [
    # Base
    "BaseSchema",
    "MessageResponse",
    "PaginatedResponse",
    # Health
    "HealthResponse",
    # Author
    "AuthorCreate",
    "AuthorRead",
    "AuthorUpdate",
    "AuthorWithBooks",
    # Book
    "BookCreate",
    "BookRead",
    "BookUpdate",
    "BookWithAuthors",
]
