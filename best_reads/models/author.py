"""
Model de autor de livros.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from best_reads.db.session import Base
from best_reads.models.association import author_book

if TYPE_CHECKING:
    from best_reads.models.book import Book

NAME_MAX_LENGTH = 55


class Author(Base):
    """
    Autor de livros.

    Os nomes de colunas seguem o schema original (FirstName, LastName...).

    Attributes:
        id: Identidade gerada pelo banco, imutável
        first_name: Primeiro nome (obrigatório, até 55 caracteres)
        last_name: Sobrenome (obrigatório, até 55 caracteres)
        dob: Data de nascimento em texto livre (yyyy-MM-dd)
        image_url: URL da foto (opcional)
        books: Livros do autor via AuthorBook
    """
    __tablename__ = "Author"

    id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column("FirstName", String(NAME_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column("LastName", String(NAME_MAX_LENGTH), nullable=False)
    dob: Mapped[Optional[str]] = mapped_column("DOB", String, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column("ImageUrl", String, nullable=True)

    # Relationships
    books: Mapped[List["Book"]] = relationship(
        "Book",
        secondary=author_book,
        back_populates="authors",
        lazy="selectin",
        passive_deletes=True,
    )

    @property
    def full_name(self) -> str:
        """Nome no formato "Sobrenome, Nome". Calculado, não persistido."""
        return f"{self.last_name}, {self.first_name}"

    def __repr__(self) -> str:
        return f"<Author {self.full_name}>"
