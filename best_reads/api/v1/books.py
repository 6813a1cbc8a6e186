"""
Endpoints de Livros.

Contratos:
    - POST /books: Cria livro
    - GET /books: Lista livros paginado com filtro por título
    - GET /books/{id}: Detalhes do livro com autores
    - PUT /books/{id}: Substitui dados do livro
    - DELETE /books/{id}: Remove livro (vínculos removidos em cascata)
    - PUT /books/{id}/authors/{author_id}: Vincula autor
    - DELETE /books/{id}/authors/{author_id}: Desvincula autor

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 404: Livro ou autor não encontrado
    - 409: Constraint violada no banco
    - 422: Erro de validação
"""

from fastapi import APIRouter, Query, status

from best_reads.core.deps import DbSession
from best_reads.schemas.base import MessageResponse, PaginatedResponse
from best_reads.schemas.book import BookCreate, BookRead, BookUpdate, BookWithAuthors
from best_reads.services.book import BookService

router = APIRouter(prefix="/books", tags=["Books"])


# ==========================================
# Endpoints de Book
# ==========================================

@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    summary="Criar livro",
)
async def create_book(
    data: BookCreate,
    db: DbSession,
) -> BookRead:
    """Cria novo livro. Autores são vinculados depois, via /books/{id}/authors."""
    service = BookService(db)
    book = await service.create(data)
    return BookRead.model_validate(book)


@router.get(
    "",
    response_model=PaginatedResponse[BookRead],
    summary="Listar livros",
)
async def list_books(
    db: DbSession,
    page: int = Query(1, ge=1, description="Número da página"),
    page_size: int = Query(20, ge=1, le=100, description="Itens por página"),
    title: str | None = Query(None, description="Filtrar por título"),
) -> PaginatedResponse[BookRead]:
    service = BookService(db)
    books, total = await service.list_paginated(page, page_size, title)

    return PaginatedResponse.create(
        items=[BookRead.model_validate(b) for b in books],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get(
    "/{book_id}",
    response_model=BookWithAuthors,
    summary="Detalhes do livro",
)
async def get_book(
    book_id: int,
    db: DbSession,
) -> BookWithAuthors:
    """
    Retorna o livro com seus autores.

    Raises:
        404: Livro não encontrado
    """
    service = BookService(db)
    book = await service.get_with_authors(book_id)
    return BookWithAuthors.model_validate(book)


@router.put(
    "/{book_id}",
    response_model=BookRead,
    summary="Substituir livro",
    description="Substitui todos os campos do livro. O id não muda.",
)
async def replace_book(
    book_id: int,
    data: BookUpdate,
    db: DbSession,
) -> BookRead:
    service = BookService(db)
    book = await service.replace(book_id, data)
    return BookRead.model_validate(book)


@router.delete(
    "/{book_id}",
    response_model=MessageResponse,
    summary="Remover livro",
)
async def delete_book(
    book_id: int,
    db: DbSession,
) -> MessageResponse:
    """
    Remove livro do catálogo. Os autores permanecem.

    Raises:
        404: Livro não encontrado
    """
    service = BookService(db)
    await service.delete(book_id)
    return MessageResponse(message="Livro removido com sucesso")


# ==========================================
# Endpoints de AuthorBook
# ==========================================

@router.put(
    "/{book_id}/authors/{author_id}",
    response_model=BookWithAuthors,
    summary="Vincular autor",
    description="Vincula um autor ao livro. Repetir a chamada não duplica o vínculo.",
)
async def add_book_author(
    book_id: int,
    author_id: int,
    db: DbSession,
) -> BookWithAuthors:
    """
    Raises:
        404: Livro ou autor não encontrado
    """
    service = BookService(db)
    book = await service.add_author(book_id, author_id)
    return BookWithAuthors.model_validate(book)


@router.delete(
    "/{book_id}/authors/{author_id}",
    response_model=BookWithAuthors,
    summary="Desvincular autor",
)
async def remove_book_author(
    book_id: int,
    author_id: int,
    db: DbSession,
) -> BookWithAuthors:
    """
    Raises:
        404: Livro não encontrado ou autor não vinculado
    """
    service = BookService(db)
    book = await service.remove_author(book_id, author_id)
    return BookWithAuthors.model_validate(book)
