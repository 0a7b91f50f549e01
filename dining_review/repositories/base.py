"""
Base repository with the CRUD operations shared by every entity.

Repositories never commit: the caller owns the transaction boundary, so a
multi-step operation (approve a review, then re-aggregate its restaurant)
lands in a single commit.
"""

from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from dining_review.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Persistence operations for one ORM model over an AsyncSession."""

    model: Type[ModelType]

    def __init__(self, db: AsyncSession):
        self.db = db

    async def save(self, entity: ModelType) -> ModelType:
        """Add or update an entity and flush so its identity is assigned."""
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def find_by_id(self, entity_id: int) -> Optional[ModelType]:
        """Return the entity with this primary key, or None."""
        return await self.db.get(self.model, entity_id)

    async def find_all(self) -> list[ModelType]:
        """Return every entity in storage (id) order."""
        result = await self.db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())
