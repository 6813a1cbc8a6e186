"""
Repository para operações de Author no banco de dados.
"""

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from best_reads.models.author import Author
from best_reads.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """Repository para operações CRUD de Author."""

    def __init__(self, db: AsyncSession):
        super().__init__(Author, db)

    @staticmethod
    def _name_filter(name: str):
        # % e _ digitados na busca são literais
        return or_(
            Author.first_name.icontains(name, autoescape=True),
            Author.last_name.icontains(name, autoescape=True),
        )

    async def search_by_name(self, name: str) -> list[Author]:
        """Busca autores por nome ou sobrenome (parcial, case insensitive)."""
        result = await self.db.execute(
            select(Author)
            .where(self._name_filter(name))
            .order_by(Author.last_name, Author.first_name)
        )
        return list(result.scalars().all())

    async def get_with_books(self, author_id: int) -> Author | None:
        """Busca autor com seus livros carregados."""
        result = await self.db.execute(
            select(Author)
            .where(Author.id == author_id)
            .options(selectinload(Author.books))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_all_paginated(
        self,
        page: int = 1,
        page_size: int = 20,
        search: str | None = None,
    ) -> tuple[list[Author], int]:
        """
        Lista autores com paginação e filtro opcional.

        Args:
            page: Número da página
            page_size: Tamanho da página
            search: Termo de busca no nome ou sobrenome

        Returns:
            Tupla (lista de autores, total)
        """
        skip = (page - 1) * page_size

        query = select(Author)
        if search:
            query = query.where(self._name_filter(search))

        count_result = await self.db.execute(
            select(func.count()).select_from(query.subquery())
        )
        total = count_result.scalar_one()

        result = await self.db.execute(
            query
            .offset(skip)
            .limit(page_size)
            .order_by(Author.last_name, Author.first_name, Author.id)
        )
        authors = list(result.scalars().all())

        return authors, total
