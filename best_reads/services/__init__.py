"""
Módulo de serviços - lógica de negócio.
"""

from best_reads.services.author import AuthorService
from best_reads.services.book import BookService

__all__ = [
    "AuthorService",
    "BookService",
]
