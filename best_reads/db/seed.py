"""
Seed dos dados iniciais do catálogo.

Uso:
    python -m best_reads.db.seed

Também é executado pelo lifespan da aplicação (SEED_ON_STARTUP), uma única
vez, antes de aceitar requests. Se já existe algum Author, não faz nada;
se o Book 1 já existe, ele é mantido como está.
"""

import asyncio

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from best_reads.core.logging import get_logger, setup_logging
from best_reads.core.validation import validate_author, validate_book
from best_reads.db.session import async_session_factory, engine, ensure_schema
from best_reads.models.author import Author
from best_reads.models.book import Book
from best_reads.repositories.author import AuthorRepository

logger = get_logger(__name__)

SEED_AUTHOR_ID = 1
SEED_AUTHOR = {
    "first_name": "George",
    "last_name": "Orwell",
    "dob": "1950-06-25",
}

SEED_BOOK_ID = 1
SEED_BOOK = {
    "title": "1984",
    "description": "A dystopian novel about totalitarian surveillance.",
    "published": "1949",
}


async def _sync_identity_sequences(db: AsyncSession) -> None:
    # IDs explícitos não avançam a sequence do PostgreSQL
    if db.bind is None or db.bind.dialect.name != "postgresql":
        return
    for table in (Author.__tablename__, Book.__tablename__):
        await db.execute(
            text(
                f"SELECT setval(pg_get_serial_sequence('\"{table}\"', 'Id'), "
                f"(SELECT MAX(\"Id\") FROM \"{table}\"))"
            )
        )


async def initialise(db: AsyncSession) -> bool:
    """
    Popula o banco vazio com George Orwell e "1984", já vinculados.

    Args:
        db: Sessão do banco; o chamador controla o ciclo de vida

    Returns:
        True se o autor de seed foi criado, False se o banco já tinha autores.
        O livro 1 só é criado (e vinculado) quando ainda não existe.

    Raises:
        ValidationFailure: Dados de seed inválidos
        PersistenceFailure: Banco indisponível ou constraint violada
    """
    repo = AuthorRepository(db)

    async with repo.translate_errors():
        if await repo.exists():
            logger.info("Seed ignorado: banco já possui autores")
            return False

        author = Author(id=SEED_AUTHOR_ID, **validate_author(SEED_AUTHOR).model_dump())
        db.add(author)

        # O livro pode ter sobrevivido à remoção dos autores
        book = await db.get(Book, SEED_BOOK_ID)
        if book is None:
            book = Book(id=SEED_BOOK_ID, **validate_book(SEED_BOOK).model_dump())
            book.authors.append(author)
            db.add(book)
        else:
            logger.info(f"Livro de seed já existe (ID: {book.id}), mantido sem alterações")

        await db.flush()
        await _sync_identity_sequences(db)
        await db.commit()

    logger.info(f"Seed criado: {author.full_name} (ID: {author.id}), {book.title} (ID: {book.id})")
    return True


async def main() -> None:
    """Cria o schema e executa o seed."""
    setup_logging()
    logger.info("Executando seeds...")
    await ensure_schema()
    async with async_session_factory() as db:
        await initialise(db)
    await engine.dispose()
    logger.info("Seeds concluídos!")


if __name__ == "__main__":
    asyncio.run(main())
