"""
Service para lógica de negócio de Book e dos vínculos com autores.
"""

from typing import Any, Mapping

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from best_reads.core.logging import get_logger
from best_reads.core.validation import validate_book
from best_reads.models.book import Book
from best_reads.repositories.author import AuthorRepository
from best_reads.repositories.book import BookRepository
from best_reads.schemas.book import BookCreate, BookUpdate

logger = get_logger(__name__)


class BookService:
    """Service para operações de Book."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = BookRepository(db)
        self.author_repo = AuthorRepository(db)

    # ==========================================
    # Book operations
    # ==========================================

    async def get_by_id(self, book_id: int) -> Book:
        """
        Busca livro por ID.

        Raises:
            HTTPException 404: Livro não encontrado
        """
        book = await self.repo.get_by_id(book_id)
        if not book:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Livro não encontrado",
            )
        return book

    async def get_with_authors(self, book_id: int) -> Book:
        """
        Busca livro com seus autores.

        Raises:
            HTTPException 404: Livro não encontrado
        """
        book = await self.repo.get_with_authors(book_id)
        if not book:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Livro não encontrado",
            )
        return book

    async def create(self, data: BookCreate | Mapping[str, Any]) -> Book:
        """
        Cria novo livro.

        Raises:
            ValidationFailure: Título ou descrição vazios ou acima do limite
        """
        valid = validate_book(data)
        book = await self.repo.create(**valid.model_dump())
        logger.info(f"Livro criado: {book.title} (ID: {book.id})")
        return book

    async def replace(self, book_id: int, data: BookUpdate | Mapping[str, Any]) -> Book:
        """
        Substitui todos os campos do livro.

        Raises:
            ValidationFailure: Dados inválidos
            HTTPException 404: Livro não encontrado
        """
        valid = validate_book(data)
        book = await self.get_by_id(book_id)
        return await self.repo.replace(book, **valid.model_dump())

    async def delete(self, book_id: int) -> None:
        """
        Remove livro. As linhas de AuthorBook são removidas em cascata.

        Raises:
            HTTPException 404: Livro não encontrado
        """
        book = await self.get_with_authors(book_id)
        await self.repo.delete(book)
        logger.info(f"Livro removido: ID {book_id}")

    async def list_paginated(
        self,
        page: int = 1,
        page_size: int = 20,
        title: str | None = None,
    ) -> tuple[list[Book], int]:
        """Lista livros com paginação e filtro por título."""
        return await self.repo.get_all_paginated(page, page_size, title)

    # ==========================================
    # AuthorBook operations
    # ==========================================

    async def add_author(self, book_id: int, author_id: int) -> Book:
        """
        Vincula autor ao livro. Idempotente.

        Raises:
            HTTPException 404: Livro ou autor não encontrado
        """
        await self.get_by_id(book_id)
        if not await self.author_repo.get_by_id(author_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Autor não encontrado",
            )

        if await self.repo.add_author(book_id, author_id):
            logger.info(f"Autor {author_id} vinculado ao livro {book_id}")
        return await self.get_with_authors(book_id)

    async def remove_author(self, book_id: int, author_id: int) -> Book:
        """
        Remove o vínculo entre autor e livro.

        Raises:
            HTTPException 404: Livro não encontrado ou vínculo inexistente
        """
        await self.get_by_id(book_id)
        if not await self.repo.remove_author(book_id, author_id):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Autor não vinculado a este livro",
            )
        return await self.get_with_authors(book_id)
