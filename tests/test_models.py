"""
Testes do mapeamento dos models (tabelas, colunas e associação).
"""

from best_reads.db.session import Base
from best_reads.models import Author, Book, author_book


def test_full_name_is_last_name_comma_first_name():
    author = Author(first_name="George", last_name="Orwell")
    assert author.full_name == "Orwell, George"


def test_full_name_is_not_a_column():
    assert "full_name" not in Author.__table__.c
    assert "FullName" not in Author.__table__.c


def test_table_names_are_explicit():
    assert Author.__tablename__ == "Author"
    assert Book.__tablename__ == "Book"
    assert {"Author", "Book", "AuthorBook"} <= set(Base.metadata.tables)


def test_author_columns_keep_original_names():
    columns = Author.__table__.c
    assert set(columns.keys()) == {"Id", "FirstName", "LastName", "DOB", "ImageUrl"}
    assert columns["FirstName"].type.length == 55
    assert columns["LastName"].type.length == 55
    assert columns["FirstName"].nullable is False
    assert columns["DOB"].nullable is True


def test_book_columns_keep_original_names():
    columns = Book.__table__.c
    assert set(columns.keys()) == {"Id", "Title", "Description", "Published", "ImageURL"}
    assert columns["Title"].type.length == 55
    assert columns["Description"].type.length == 55
    assert columns["Published"].type.length == 25
    assert columns["Description"].nullable is False


def test_association_is_keyed_by_author_and_book():
    assert author_book.name == "AuthorBook"
    assert [c.name for c in author_book.primary_key.columns] == ["AuthorId", "BookId"]
    assert all(not c.nullable for c in author_book.c)


def test_association_foreign_keys_cascade_on_delete():
    targets = {
        fk.parent.name: (fk.column.table.name, fk.ondelete)
        for fk in author_book.foreign_keys
    }
    assert targets == {
        "AuthorId": ("Author", "CASCADE"),
        "BookId": ("Book", "CASCADE"),
    }
