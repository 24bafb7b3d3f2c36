"""Generic repository base interface.

Repository[T] is the root abstraction for every data-access interface in the
domain layer.  Concrete implementations live in
arena_api/infrastructure/persistence/ and are wired at the application
boundary via dependency injection.

Design notes:
  - All methods are async to accommodate async database drivers (asyncpg / SQLAlchemy async).
  - T is the domain model type (never an ORM row or DTO).
  - id is the internal integer primary key; external identifiers are looked
    up through the specialised interfaces.
  - A predicate is a mapping of field name to value; entries are exact
    matches ANDed together.
  - Soft-deleted rows (is_deleted = true) are hidden from find_all, exists,
    count and paginated searches unless the predicate names is_deleted or
    include_deleted=True is passed.  find_by_id and find_one are point
    lookups and return soft-deleted rows; the caller decides what a deleted
    row means.
  - Lookups return None rather than raising.  Store errors propagate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Generic, TypeVar

from arena_api.domain.models.pagination import Page, PaginationOptions

T = TypeVar("T")

Predicate = Mapping[str, Any]
Fields = Mapping[str, Any]


class Repository(ABC, Generic[T]):
    """Abstract CRUD, soft-delete, bulk and paginated-search interface."""

    @abstractmethod
    async def find_by_id(self, id: int) -> T | None:
        """Return the entity with the given primary key, or None."""

    @abstractmethod
    async def find_one(self, predicate: Predicate) -> T | None:
        """Return the first entity matching the predicate, or None."""

    @abstractmethod
    async def find_all(
        self, predicate: Predicate | None = None, *, include_deleted: bool = False
    ) -> list[T]:
        """Return every entity matching the predicate."""

    @abstractmethod
    async def create(self, fields: Fields) -> T:
        """Persist a new entity and return it with store-assigned fields populated."""

    @abstractmethod
    async def update(self, id: int, fields: Fields) -> T | None:
        """Apply the given fields only; return the updated entity, or None if absent."""

    @abstractmethod
    async def delete(self, id: int) -> bool:
        """Permanently remove the entity.  True if a row was removed."""

    @abstractmethod
    async def soft_delete(self, id: int) -> bool:
        """Set is_deleted and deleted_at in one write.  True if a row was affected."""

    @abstractmethod
    async def restore(self, id: int) -> bool:
        """Clear is_deleted and deleted_at in one write.  True if a row was affected."""

    @abstractmethod
    async def exists(self, predicate: Predicate, *, include_deleted: bool = False) -> bool:
        """True if at least one entity matches the predicate."""

    @abstractmethod
    async def count(
        self, predicate: Predicate | None = None, *, include_deleted: bool = False
    ) -> int:
        """Number of entities matching the predicate."""

    @abstractmethod
    async def bulk_create(self, items: Sequence[Fields]) -> list[T]:
        """Persist several new entities and return them in input order."""

    @abstractmethod
    async def bulk_update(self, ids: Sequence[int], fields: Fields) -> bool:
        """Apply the same fields to every listed id.  True if any row was affected."""

    @abstractmethod
    async def bulk_delete(self, ids: Sequence[int]) -> bool:
        """Permanently remove every listed id.  True if any row was removed."""

    @abstractmethod
    async def find_all_with_pagination(
        self,
        options: PaginationOptions | None = None,
        base_filter: Predicate | None = None,
    ) -> Page[T]:
        """Return one page of entities matching base_filter and the search text."""
