"""
Tabela de associação many-to-many entre Author e Book.
"""

from sqlalchemy import Column, ForeignKey, Integer, Table

from best_reads.db.session import Base

# Chave composta (AuthorId, BookId); remover qualquer um dos lados
# remove a linha de associação.
author_book = Table(
    "AuthorBook",
    Base.metadata,
    Column(
        "AuthorId",
        Integer,
        ForeignKey("Author.Id", ondelete="CASCADE"),
        primary_key=True,
        nullable=False,
    ),
    Column(
        "BookId",
        Integer,
        ForeignKey("Book.Id", ondelete="CASCADE"),
        primary_key=True,
        nullable=False,
        index=True,
    ),
)
