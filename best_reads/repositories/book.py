"""
Repository para operações de Book e da associação AuthorBook.
"""

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from best_reads.models.association import author_book
from best_reads.models.book import Book
from best_reads.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository para operações CRUD de Book."""

    def __init__(self, db: AsyncSession):
        super().__init__(Book, db)

    async def get_with_authors(self, book_id: int) -> Book | None:
        """Busca livro com seus autores carregados."""
        result = await self.db.execute(
            select(Book)
            .where(Book.id == book_id)
            .options(selectinload(Book.authors))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_author(self, author_id: int) -> list[Book]:
        """Lista livros de um autor."""
        result = await self.db.execute(
            select(Book)
            .join(author_book, author_book.c.BookId == Book.id)
            .where(author_book.c.AuthorId == author_id)
            .order_by(Book.title)
        )
        return list(result.scalars().all())

    async def get_all_paginated(
        self,
        page: int = 1,
        page_size: int = 20,
        title: str | None = None,
    ) -> tuple[list[Book], int]:
        """
        Lista livros com paginação e filtro opcional por título.

        Returns:
            Tupla (lista de livros, total)
        """
        skip = (page - 1) * page_size

        query = select(Book)
        if title:
            query = query.where(Book.title.icontains(title, autoescape=True))

        count_result = await self.db.execute(
            select(func.count()).select_from(query.subquery())
        )
        total = count_result.scalar_one()

        result = await self.db.execute(
            query
            .offset(skip)
            .limit(page_size)
            .order_by(Book.title, Book.id)
        )
        return list(result.scalars().all()), total

    # ==========================================
    # AuthorBook
    # ==========================================

    async def has_author(self, book_id: int, author_id: int) -> bool:
        """Verifica se existe a linha (AuthorId, BookId)."""
        result = await self.db.execute(
            select(author_book.c.BookId).where(
                author_book.c.BookId == book_id,
                author_book.c.AuthorId == author_id,
            )
        )
        return result.first() is not None

    async def add_author(self, book_id: int, author_id: int) -> bool:
        """
        Vincula autor ao livro.

        Returns:
            True se a linha foi criada, False se já existia

        Raises:
            PersistenceFailure: author_id ou book_id inexistente (FK)
        """
        if await self.has_author(book_id, author_id):
            return False

        async with self.translate_errors():
            await self.db.execute(
                insert(author_book).values(AuthorId=author_id, BookId=book_id)
            )
            await self.db.commit()
        return True

    async def remove_author(self, book_id: int, author_id: int) -> bool:
        """
        Remove o vínculo entre autor e livro.

        Returns:
            True se alguma linha foi removida
        """
        async with self.translate_errors():
            result = await self.db.execute(
                delete(author_book).where(
                    author_book.c.BookId == book_id,
                    author_book.c.AuthorId == author_id,
                )
            )
            await self.db.commit()
        return result.rowcount > 0

    async def count_links(
        self,
        author_id: int | None = None,
        book_id: int | None = None,
    ) -> int:
        """Conta linhas de AuthorBook, opcionalmente filtradas."""
        query = select(func.count()).select_from(author_book)
        if author_id is not None:
            query = query.where(author_book.c.AuthorId == author_id)
        if book_id is not None:
            query = query.where(author_book.c.BookId == book_id)
        result = await self.db.execute(query)
        return result.scalar_one()
