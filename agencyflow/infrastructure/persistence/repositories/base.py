"""Base repository: generic tenant-scoped lookups and inserts for ORM models."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agencyflow.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_model_by_id, get_scoped and add.

    Subclasses map ORM rows to application DTOs; ORM instances never leave
    the repository layer.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_model_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_scoped(self, tenant_id: str, entity_id: str) -> ModelType | None:
        """Return a record by primary key only when it belongs to tenant_id."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).where(
                model.id == entity_id, model.tenant_id == tenant_id
            )
        )
        return result.scalar_one_or_none()

    async def add(self, obj: ModelType) -> ModelType:
        """Persist a new record and reload server defaults."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
