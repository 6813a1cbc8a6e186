"""
Models SQLAlchemy da aplicação.

Importar todos os models aqui para que o create_all enxergue as tabelas.
"""

from best_reads.models.association import author_book
from best_reads.models.author import Author
from best_reads.models.book import Book

__all__ = [
    "author_book",
    "Author",
    "Book",
]
