"""
Generic async repository.

AsyncRepository[ModelT] is the storage-agnostic CRUD contract used by the
service layer. SQLAlchemyRepository implements it once for any declarative
model with a single integer primary key.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gigapi.core.database import retry_policy as default_retry_policy
from gigapi.core.exceptions import NotFoundError, ValidationError
from gigapi.core.retry import RetryPolicy

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
T = TypeVar("T")

# Identities are issued from a 32-bit INTEGER identity column starting at 1
MIN_IDENTITY = 1
MAX_IDENTITY = 2**31 - 1


class AsyncRepository(ABC, Generic[ModelT]):
    """Abstract CRUD interface for one entity type."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> ModelT:
        """Return the entity with the given id. Raises NotFoundError if absent."""

    @abstractmethod
    async def list_all(self) -> List[ModelT]:
        """Return every entity in stored (primary key) order."""

    @abstractmethod
    async def list_paged(self, page: int, page_size: int) -> List[ModelT]:
        """Return page `page` (1-based) of at most `page_size` entities."""

    @abstractmethod
    async def add(self, entity: ModelT) -> ModelT:
        """Persist a new entity and return it with its id populated."""

    @abstractmethod
    async def update(self, entity: ModelT) -> ModelT:
        """Replace the stored entity that has the same id."""

    @abstractmethod
    async def delete(self, entity_id: int) -> None:
        """Remove the entity with the given id. Raises NotFoundError if absent."""


def validate_paging(page: Any, page_size: Any) -> None:
    """
    Reject paging parameters that are not positive integers.

    Raises:
        ValidationError: If page or page_size is not an int >= 1
    """
    for label, value in (("page", page), ("page_size", page_size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"{label} must be an integer, got {value!r}")
        if value < 1:
            raise ValidationError(f"{label} must be >= 1, got {value}")


class SQLAlchemyRepository(AsyncRepository[ModelT]):
    """
    AsyncRepository backed by an SQLAlchemy AsyncSession.

    Every mutating call commits its own unit of work. Every call runs through
    the connection retry policy; a failed attempt rolls the session back
    before the next one.

    Subclasses set `model` to the declarative class they manage.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession, retry_policy: Optional[RetryPolicy] = None):
        self.session = session
        self.retry_policy = retry_policy or default_retry_policy
        mapper = inspect(self.model)
        self._pk_column = mapper.primary_key[0]
        self._pk_attr = mapper.get_property_by_column(self._pk_column).key
        # (attribute name, column) for every non-identity column
        self._value_attrs = [
            (prop.key, prop.columns[0])
            for prop in mapper.column_attrs
            if prop.columns[0] is not self._pk_column
        ]

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    async def _run(self, operation: Callable[[], Awaitable[T]]) -> T:
        return await self.retry_policy.execute(operation, on_retry=self._rollback)

    async def _rollback(self, attempt: int, error: BaseException) -> None:
        await self.session.rollback()

    def _identity_of(self, entity: ModelT) -> Any:
        return getattr(entity, self._pk_attr)

    def _check_required(self, entity: ModelT) -> None:
        missing = [
            attr for attr, column in self._value_attrs
            if not column.nullable and getattr(entity, attr) is None
        ]
        if missing:
            raise ValidationError(
                f"{self.entity_name} is missing required field(s): {', '.join(missing)}"
            )

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationError(f"{self.entity_name} violates a database constraint: {e.orig}") from e

    async def _fetch(self, entity_id: int) -> ModelT:
        if not MIN_IDENTITY <= entity_id <= MAX_IDENTITY:
            # Never issued; the driver would reject it before the query runs
            raise NotFoundError(self.entity_name, entity_id)
        entity = await self.session.get(self.model, entity_id)
        if entity is None:
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    async def get_by_id(self, entity_id: int) -> ModelT:
        return await self._run(lambda: self._fetch(entity_id))

    async def list_all(self) -> List[ModelT]:
        async def operation():
            result = await self.session.execute(
                select(self.model).order_by(self._pk_column)
            )
            return list(result.scalars().all())

        return await self._run(operation)

    async def list_paged(self, page: int, page_size: int) -> List[ModelT]:
        validate_paging(page, page_size)

        async def operation():
            result = await self.session.execute(
                select(self.model)
                .order_by(self._pk_column)
                .offset((page - 1) * page_size)
                .limit(page_size)
            )
            return list(result.scalars().all())

        return await self._run(operation)

    async def add(self, entity: ModelT) -> ModelT:
        if self._identity_of(entity) is not None:
            raise ValidationError(f"{self.entity_name} id is assigned by the database and must not be set")
        self._check_required(entity)

        async def operation():
            self.session.add(entity)
            await self._commit()
            await self.session.refresh(entity)
            return entity

        created = await self._run(operation)
        logger.debug(f"Inserted {self.entity_name} {self._identity_of(created)}")
        return created

    async def update(self, entity: ModelT) -> ModelT:
        entity_id = self._identity_of(entity)
        if entity_id is None:
            raise ValidationError(f"{self.entity_name} id is required for an update")
        self._check_required(entity)

        async def operation():
            stored = await self._fetch(entity_id)
            if stored is not entity:
                for attr, _ in self._value_attrs:
                    setattr(stored, attr, getattr(entity, attr))
            await self._commit()
            await self.session.refresh(stored)
            return stored

        return await self._run(operation)

    async def delete(self, entity_id: int) -> None:
        async def operation():
            stored = await self._fetch(entity_id)
            await self.session.delete(stored)
            await self._commit()

        await self._run(operation)
        logger.debug(f"Deleted {self.entity_name} {entity_id}")
