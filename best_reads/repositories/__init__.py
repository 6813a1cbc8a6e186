"""
Módulo de repositórios - acesso a dados.
"""

from best_reads.repositories.base import BaseRepository
from best_reads.repositories.author import AuthorRepository
from best_reads.repositories.book import BookRepository

__all__ = [
    "BaseRepository",
    "AuthorRepository",
    "BookRepository",
]
