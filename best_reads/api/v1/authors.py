"""
Endpoints de Autores.

Contratos:
    - POST /authors: Cria autor
    - GET /authors: Lista autores paginado
    - GET /authors/{id}: Busca autor por ID, com livros
    - GET /authors/{id}/books: Lista livros do autor
    - PUT /authors/{id}: Substitui dados do autor
    - DELETE /authors/{id}: Remove autor (vínculos removidos em cascata)

Status codes:
    - 200: Sucesso
    - 201: Criado com sucesso
    - 404: Autor não encontrado
    - 409: Constraint violada no banco
    - 422: Erro de validação
"""

from fastapi import APIRouter, Query, status

from best_reads.core.deps import DbSession
from best_reads.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate, AuthorWithBooks
from best_reads.schemas.base import MessageResponse, PaginatedResponse
from best_reads.schemas.book import BookRead
from best_reads.services.author import AuthorService

router = APIRouter(prefix="/authors", tags=["Authors"])


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    summary="Criar autor",
)
async def create_author(
    data: AuthorCreate,
    db: DbSession,
) -> AuthorRead:
    """Cria novo autor. O id é gerado pelo banco."""
    service = AuthorService(db)
    author = await service.create(data)
    return AuthorRead.model_validate(author)


@router.get(
    "",
    response_model=PaginatedResponse[AuthorRead],
    summary="Listar autores",
    description="Lista autores com paginação e filtro opcional por nome.",
)
async def list_authors(
    db: DbSession,
    page: int = Query(1, ge=1, description="Número da página"),
    page_size: int = Query(20, ge=1, le=100, description="Itens por página"),
    search: str | None = Query(None, description="Filtrar por nome ou sobrenome"),
) -> PaginatedResponse[AuthorRead]:
    """
    Lista autores ordenados por sobrenome.

    Parâmetros de query:
        - page: Número da página (começa em 1)
        - page_size: Quantidade de itens por página (max 100)
        - search: Filtro parcial por nome ou sobrenome (case insensitive)
    """
    service = AuthorService(db)
    authors, total = await service.list_paginated(page, page_size, search)

    return PaginatedResponse.create(
        items=[AuthorRead.model_validate(a) for a in authors],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get(
    "/{author_id}",
    response_model=AuthorWithBooks,
    summary="Buscar autor",
)
async def get_author(
    author_id: int,
    db: DbSession,
) -> AuthorWithBooks:
    """
    Retorna dados de um autor com seus livros.

    Raises:
        404: Autor não encontrado
    """
    service = AuthorService(db)
    author = await service.get_with_books(author_id)
    return AuthorWithBooks.model_validate(author)


@router.get(
    "/{author_id}/books",
    response_model=list[BookRead],
    summary="Livros do autor",
)
async def list_author_books(
    author_id: int,
    db: DbSession,
) -> list[BookRead]:
    service = AuthorService(db)
    books = await service.list_books(author_id)
    return [BookRead.model_validate(b) for b in books]


@router.put(
    "/{author_id}",
    response_model=AuthorRead,
    summary="Substituir autor",
    description="Substitui todos os campos do autor. O id não muda.",
)
async def replace_author(
    author_id: int,
    data: AuthorUpdate,
    db: DbSession,
) -> AuthorRead:
    """
    Raises:
        404: Autor não encontrado
    """
    service = AuthorService(db)
    author = await service.replace(author_id, data)
    return AuthorRead.model_validate(author)


@router.delete(
    "/{author_id}",
    response_model=MessageResponse,
    summary="Remover autor",
)
async def delete_author(
    author_id: int,
    db: DbSession,
) -> MessageResponse:
    """
    Remove autor do catálogo.

    Os vínculos com livros (AuthorBook) são removidos junto; os livros ficam.

    Raises:
        404: Autor não encontrado
    """
    service = AuthorService(db)
    await service.delete(author_id)
    return MessageResponse(message="Autor removido com sucesso")
