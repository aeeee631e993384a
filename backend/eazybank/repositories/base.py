from datetime import datetime, timezone
from typing import Any, Generic, Optional, Type, TypeVar

from sqlalchemy import delete, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from eazybank.core.audit import Auditor
from eazybank.db.base import Base

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Writes go through ``create`` and ``save`` so the audit columns are
    stamped with the current time and the auditor's actor name. Nothing is
    committed here; the caller owns the transaction.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession, auditor: Auditor):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class
            db: Async database session
            auditor: Provider of the actor name for audit columns
        """
        self.model = model
        self.db = db
        self.auditor = auditor
        self._pk = inspect(model).primary_key[0]

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new entity.

        Args:
            **kwargs: Field values for the new entity

        Returns:
            The created entity with generated identifier populated
        """
        instance = self.model(
            **kwargs,
            created_at=datetime.now(timezone.utc),
            created_by=self.auditor.current_auditor(),
        )
        self.db.add(instance)
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def save(self, instance: ModelType) -> ModelType:
        """
        Persist changes made to a loaded entity.

        Args:
            instance: Entity previously loaded through this session

        Returns:
            The refreshed entity
        """
        instance.updated_at = datetime.now(timezone.utc)
        instance.updated_by = self.auditor.current_auditor()
        await self.db.flush()
        await self.db.refresh(instance)
        return instance

    async def get_by_id(self, id: Any) -> Optional[ModelType]:
        """
        Retrieve an entity by its primary key.

        Args:
            id: The primary key value

        Returns:
            The entity if found, None otherwise
        """
        stmt = select(self.model).where(self._pk == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, id: Any) -> bool:
        """
        Delete an entity by primary key.

        Args:
            id: The primary key value

        Returns:
            True if entity was deleted, False if not found
        """
        stmt = delete(self.model).where(self._pk == id)
        result = await self.db.execute(stmt)
        await self.db.flush()
        return result.rowcount > 0

    async def find_one_by(self, **filters: Any) -> Optional[ModelType]:
        """
        Find a single entity matching the given filters.

        Args:
            **filters: Field equality filters

        Returns:
            The matching entity, or None if not found
        """
        stmt = select(self.model).filter_by(**filters)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def exists_by(self, **filters: Any) -> bool:
        """
        Check if any entity matches the given filters.

        Args:
            **filters: Field equality filters

        Returns:
            True if at least one entity matches, False otherwise
        """
        stmt = select(self.model).filter_by(**filters).limit(1)
        result = await self.db.execute(stmt)
        return result.scalars().first() is not None
