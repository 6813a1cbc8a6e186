"""
Model de livro.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from best_reads.db.session import Base
from best_reads.models.association import author_book

if TYPE_CHECKING:
    from best_reads.models.author import Author

TEXT_MAX_LENGTH = 55
PUBLISHED_MAX_LENGTH = 25


class Book(Base):
    """
    Livro do catálogo.

    Attributes:
        id: Identidade gerada pelo banco, imutável
        title: Título (obrigatório, até 55 caracteres)
        description: Descrição (obrigatória, até 55 caracteres)
        published: Ano de publicação em texto (até 25 caracteres)
        image_url: URL da capa (coluna ImageURL)
        authors: Autores do livro via AuthorBook
    """
    __tablename__ = "Book"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column("Title", String(TEXT_MAX_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column("Description", String(TEXT_MAX_LENGTH), nullable=False)
    published: Mapped[Optional[str]] = mapped_column(
        "Published", String(PUBLISHED_MAX_LENGTH), nullable=True
    )
    image_url: Mapped[Optional[str]] = mapped_column("ImageURL", String, nullable=True)

    # Relationships
    authors: Mapped[List["Author"]] = relationship(
        "Author",
        secondary=author_book,
        back_populates="books",
        lazy="selectin",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Book {self.title}>"
