"""
Service para lógica de negócio de Author.
"""

from typing import Any, Mapping

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from best_reads.core.logging import get_logger
from best_reads.core.validation import validate_author
from best_reads.models.author import Author
from best_reads.models.book import Book
from best_reads.repositories.author import AuthorRepository
from best_reads.repositories.book import BookRepository
from best_reads.schemas.author import AuthorCreate, AuthorUpdate

logger = get_logger(__name__)


class AuthorService:
    """Service para operações de Author."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.repo = AuthorRepository(db)
        self.book_repo = BookRepository(db)

    async def get_by_id(self, author_id: int) -> Author:
        """
        Busca autor por ID.

        Raises:
            HTTPException 404: Autor não encontrado
        """
        author = await self.repo.get_by_id(author_id)
        if not author:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Autor não encontrado",
            )
        return author

    async def get_with_books(self, author_id: int) -> Author:
        """
        Busca autor com seus livros.

        Raises:
            HTTPException 404: Autor não encontrado
        """
        author = await self.repo.get_with_books(author_id)
        if not author:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Autor não encontrado",
            )
        return author

    async def list_books(self, author_id: int) -> list[Book]:
        """
        Lista livros do autor.

        Raises:
            HTTPException 404: Autor não encontrado
        """
        await self.get_by_id(author_id)
        return await self.book_repo.get_by_author(author_id)

    async def create(self, data: AuthorCreate | Mapping[str, Any]) -> Author:
        """
        Cria novo autor.

        Raises:
            ValidationFailure: Nome ou sobrenome vazio ou acima do limite
        """
        valid = validate_author(data)
        author = await self.repo.create(**valid.model_dump())
        logger.info(f"Autor criado: {author.full_name} (ID: {author.id})")
        return author

    async def replace(self, author_id: int, data: AuthorUpdate | Mapping[str, Any]) -> Author:
        """
        Substitui todos os campos do autor.

        Raises:
            ValidationFailure: Dados inválidos
            HTTPException 404: Autor não encontrado
        """
        valid = validate_author(data)
        author = await self.get_by_id(author_id)
        return await self.repo.replace(author, **valid.model_dump())

    async def delete(self, author_id: int) -> None:
        """
        Remove autor. As linhas de AuthorBook são removidas em cascata.

        Raises:
            HTTPException 404: Autor não encontrado
        """
        # Coleção recarregada para o ORM remover exatamente as linhas atuais
        author = await self.get_with_books(author_id)
        await self.repo.delete(author)
        logger.info(f"Autor removido: ID {author_id}")

    async def list_paginated(
        self,
        page: int = 1,
        page_size: int = 20,
        search: str | None = None,
    ) -> tuple[list[Author], int]:
        """Lista autores com paginação e filtro."""
        return await self.repo.get_all_paginated(page, page_size, search)
