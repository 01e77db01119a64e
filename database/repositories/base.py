"""
Base repository with common CRUD operations.

Provides a generic base class for keyed record stores so every table gets
the same lookup / save / delete contract.
"""
from typing import TypeVar, Generic, Optional, List, Type
from abc import ABC

from sqlalchemy import select, delete, func
from sqlalchemy.ext.asyncio import AsyncSession

from database.base import Base

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(ABC, Generic[ModelType]):
    """
    Abstract base repository with common CRUD operations.

    Provides:
    - find_all: Get all entities
    - find_by_id: Get single entity by ID
    - save: Insert a new entity or update an existing one
    - delete_by_id: Delete entity by ID
    - exists_by_id: Check if entity exists by ID
    - count: Count all entities

    Changes are flushed but never committed; the caller owns the
    transaction.

    Usage:
        class ExpenseRepository(BaseRepository[Expense]):
            model_class = Expense
    """

    model_class: Type[ModelType]

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def find_all(self) -> List[ModelType]:
        """
        Get all entities.

        No ordering is guaranteed by the contract; rows come back by
        ascending primary key.

        Returns:
            List of entities
        """
        result = await self.session.execute(
            select(self.model_class).order_by(self.model_class.id)
        )
        return list(result.scalars().all())

    async def find_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by its primary key ID.

        Args:
            entity_id: Primary key ID

        Returns:
            Entity or None if not found
        """
        result = await self.session.execute(
            select(self.model_class).where(self.model_class.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def save(self, entity: ModelType) -> ModelType:
        """
        Persist entity.

        An entity without an ID is inserted and gets a new one assigned.
        An entity with an ID replaces the stored row with that ID.

        Args:
            entity: Entity to persist

        Returns:
            The persisted entity with its ID populated
        """
        if entity.id is None:
            self.session.add(entity)
        else:
            entity = await self.session.merge(entity)
        await self.session.flush()
        return entity

    async def delete_by_id(self, entity_id: int) -> None:
        """
        Delete entity by ID.

        Missing IDs are ignored.

        Args:
            entity_id: Primary key ID
        """
        await self.session.execute(
            delete(self.model_class).where(self.model_class.id == entity_id)
        )
        await self.session.flush()

    async def exists_by_id(self, entity_id: int) -> bool:
        """
        Check if entity exists by ID.

        Args:
            entity_id: Primary key ID

        Returns:
            True if exists, False otherwise
        """
        result = await self.session.execute(
            select(func.count(self.model_class.id)).where(
                self.model_class.id == entity_id
            )
        )
        return (result.scalar() or 0) > 0

    async def count(self) -> int:
        """
        Count all entities.

        Returns:
            Total count of entities
        """
        result = await self.session.execute(
            select(func.count(self.model_class.id))
        )
        return result.scalar() or 0
