"""
Repository base com operações CRUD genéricas.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from best_reads.core.exceptions import PersistenceFailure
from best_reads.core.logging import get_logger
from best_reads.db.session import Base

ModelType = TypeVar("ModelType", bound=Base)

logger = get_logger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Repository base com operações CRUD.

    Fornece métodos genéricos para:
    - get_by_id: Buscar por ID
    - get_all: Listar todos (paginado)
    - create: Criar registro
    - replace: Substituir todos os campos de um registro
    - delete: Remover registro
    - count / exists: Contar registros
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        self.model = model
        self.db = db

    @asynccontextmanager
    async def translate_errors(self) -> AsyncIterator[None]:
        """
        Converte erros do banco em PersistenceFailure, com rollback.

        Raises:
            PersistenceFailure: constraint violada (409) ou banco indisponível (503)
        """
        try:
            yield
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Constraint violada em {self.model.__name__}: {e.orig}")
            raise PersistenceFailure(
                "Operação viola uma constraint do banco",
                error=str(e.orig),
            ) from e
        except OperationalError as e:
            await self.db.rollback()
            logger.error(f"Banco indisponível: {e.orig}")
            raise PersistenceFailure(
                "Banco de dados indisponível",
                unavailable=True,
                error=str(e.orig),
            ) from e

    async def commit(self) -> None:
        """Confirma a transação (ver translate_errors)."""
        async with self.translate_errors():
            await self.db.commit()

    async def get_by_id(self, id: int) -> ModelType | None:
        """Busca registro por ID."""
        result = await self.db.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def get_all(
        self,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ModelType]:
        """Lista registros com paginação."""
        result = await self.db.execute(
            select(self.model)
            .offset(skip)
            .limit(limit)
            .order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def create(self, **kwargs: Any) -> ModelType:
        """Cria novo registro."""
        instance = self.model(**kwargs)
        self.db.add(instance)
        await self.commit()
        await self.db.refresh(instance)
        return instance

    async def replace(
        self,
        instance: ModelType,
        **kwargs: Any,
    ) -> ModelType:
        """
        Substitui os campos do registro.

        Diferente de um PATCH, valores None são gravados. O id nunca muda.
        """
        kwargs.pop("id", None)
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await self.commit()
        await self.db.refresh(instance)
        return instance

    async def delete(self, instance: ModelType) -> None:
        """Remove registro."""
        await self.db.delete(instance)
        await self.commit()

    async def count(self) -> int:
        """Conta total de registros."""
        result = await self.db.execute(
            select(func.count(self.model.id))
        )
        return result.scalar_one()

    async def exists(self) -> bool:
        """Verifica se há pelo menos um registro."""
        result = await self.db.execute(
            select(self.model.id).limit(1)
        )
        return result.first() is not None
