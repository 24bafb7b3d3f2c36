"""Lifecycle operations shared by the account and tournament services.

Services sit between a transport layer and the repositories: they turn a
None lookup or a soft-deleted row into NotFoundError and run the best-effort
uniqueness pre-checks.  Repositories are passed in explicitly; nothing here
holds state beyond those references.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Generic, Protocol, TypeVar
from uuid import UUID

from arena_api.domain.errors import NotFoundError
from arena_api.domain.models.pagination import ListQuery

logger = logging.getLogger(__name__)


class Record(Protocol):
    id: int
    is_deleted: bool


T = TypeVar("T", bound=Record)


class PasswordHasher(Protocol):
    """Hashing is supplied by the caller (bcrypt, argon2, ...)."""

    def hash(self, password: str) -> str: ...

    def verify(self, password: str, hashed: str) -> bool: ...


class LifecycleRepository(Protocol[T]):
    async def find_by_id(self, id: int) -> T | None: ...

    async def find_by_external_id(self, external_id: UUID) -> T | None: ...

    async def soft_delete(self, id: int) -> bool: ...

    async def restore(self, id: int) -> bool: ...

    async def delete(self, id: int) -> bool: ...

    async def bulk_delete(self, ids: Sequence[int]) -> bool: ...


class LifecycleService(Generic[T]):
    """get / soft-delete / restore / permanent-delete / bulk-delete."""

    entity_name = "record"

    def __init__(self, repository: LifecycleRepository[T], max_page_size: int = 100) -> None:
        self._repository = repository
        self._max_page_size = max_page_size

    def _clamp(self, query: ListQuery) -> ListQuery:
        if query.limit > self._max_page_size:
            return query.model_copy(update={"limit": self._max_page_size})
        return query

    async def get(self, id: int) -> T:
        entity = await self._repository.find_by_id(id)
        if entity is None or entity.is_deleted:
            raise NotFoundError(self.entity_name, id)
        return entity

    async def get_by_external_id(self, external_id: UUID) -> T:
        entity = await self._repository.find_by_external_id(external_id)
        if entity is None or entity.is_deleted:
            raise NotFoundError(self.entity_name, external_id)
        return entity

    async def soft_delete(self, external_id: UUID) -> None:
        entity = await self.get_by_external_id(external_id)
        await self._repository.soft_delete(entity.id)
        logger.info("soft-deleted %s %s", self.entity_name, external_id)

    async def restore(self, external_id: UUID) -> T:
        entity = await self._repository.find_by_external_id(external_id)
        if entity is None:
            raise NotFoundError(self.entity_name, external_id)
        await self._repository.restore(entity.id)
        restored = await self._repository.find_by_id(entity.id)
        if restored is None:
            raise NotFoundError(self.entity_name, external_id)
        logger.info("restored %s %s", self.entity_name, external_id)
        return restored

    async def permanent_delete(self, external_id: UUID) -> None:
        """Remove the row for good; soft-deleted rows can be purged too."""
        entity = await self._repository.find_by_external_id(external_id)
        if entity is None:
            raise NotFoundError(self.entity_name, external_id)
        await self._repository.delete(entity.id)
        logger.info("permanently deleted %s %s", self.entity_name, external_id)

    async def bulk_delete(self, ids: Sequence[int]) -> bool:
        """Hard-delete by internal id.  True if at least one row was removed."""
        if not ids:
            raise ValueError("ids must not be empty")
        removed = await self._repository.bulk_delete(ids)
        logger.info("bulk-deleted %s ids=%s removed=%s", self.entity_name, list(ids), removed)
        return removed
