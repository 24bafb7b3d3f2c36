"""Generic SQLAlchemy implementation of Repository[T].

One SqlRepository serves any table: everything entity-specific is carried by
an EntityConfig value (ORM class, row mapper, display name).  It can be used
as-is; the entity repositories extend it only with extra lookups.

Semantics shared by every entity:
  - Predicates are exact-match field→value mappings ANDed together; a None
    value matches NULL.
  - Soft-delete state lives in the entity's own is_deleted / deleted_at
    columns, always written together in one UPDATE.
  - Tables with an is_deleted column hide soft-deleted rows from find_all,
    exists, count and find_all_with_pagination unless the predicate names
    is_deleted or include_deleted=True.
  - Unknown field names and writes to id / external_id / created_at raise
    ValueError before any SQL is issued.
  - Nothing is caught: IntegrityError, OperationalError and friends reach
    the caller untranslated.
  - No multi-statement transactions are opened here; the session's
    transaction belongs to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy import String, cast, delete, func, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from arena_api.domain.models.enums import SortOrder
from arena_api.domain.models.pagination import ListQuery, Page, PaginationMeta, PaginationOptions
from arena_api.domain.repositories.base import Fields, Predicate, Repository

logger = logging.getLogger(__name__)

T = TypeVar("T")

_IMMUTABLE_FIELDS = frozenset({"id", "external_id", "created_at"})
_LIKE_ESCAPE = "\\"


def escape_like(text: str) -> str:
    """Escape LIKE wildcards so the text matches literally."""
    return (
        text.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", _LIKE_ESCAPE + "%")
        .replace("_", _LIKE_ESCAPE + "_")
    )


@dataclass(frozen=True)
class EntityConfig(Generic[T]):
    """What SqlRepository needs to know about one entity type."""

    name: str
    model: type
    to_domain: Callable[[Any], T]

    @property
    def columns(self) -> frozenset[str]:
        return frozenset(self.model.__table__.c.keys())

    @property
    def soft_deletable(self) -> bool:
        return "is_deleted" in self.model.__table__.c


def listing_filter(query: ListQuery) -> dict[str, Any]:
    """Fold a ListQuery's status / is_active filters into a live-rows-only filter."""
    base_filter: dict[str, Any] = {"is_deleted": False}
    if query.status:
        base_filter["status"] = query.status
    if query.is_active is not None:
        base_filter["is_active"] = query.is_active
    return base_filter


def listing_options(query: ListQuery, search_fields: Sequence[str]) -> PaginationOptions:
    return PaginationOptions(
        page=query.page,
        limit=query.limit,
        search=query.search or "",
        search_fields=list(search_fields),
        sort_by="created_at",
        sort_order=SortOrder.DESC,
    )


class SqlRepository(Repository[T]):
    def __init__(self, session: AsyncSession, config: EntityConfig[T]) -> None:
        self._session = session
        self._config = config
        self._model = config.model

    # ------------------------------------------------------------------ #
    # Statement building                                                  #
    # ------------------------------------------------------------------ #

    def _column(self, name: str) -> Any:
        if name not in self._config.columns:
            raise ValueError(f"{self._config.name} has no field {name!r}")
        return getattr(self._model, name)

    def _conditions(self, predicate: Predicate | None, include_deleted: bool) -> list[Any]:
        predicate = predicate or {}
        conditions = [self._column(name) == value for name, value in predicate.items()]
        if (
            self._config.soft_deletable
            and not include_deleted
            and "is_deleted" not in predicate
        ):
            conditions.append(self._model.is_deleted.is_(False))
        return conditions

    def _values(self, fields: Fields) -> dict[str, Any]:
        values: dict[str, Any] = {}
        for name, value in fields.items():
            if name in _IMMUTABLE_FIELDS:
                raise ValueError(f"{self._config.name}.{name} is assigned by the store")
            self._column(name)
            values[name] = value.value if isinstance(value, Enum) else value
        return values

    def _search_clause(self, field: str, search: str) -> Any:
        column = self._column(field)
        if not isinstance(self._model.__table__.c[field].type, String):
            column = cast(column, String)
        return column.ilike(f"%{escape_like(search)}%", escape=_LIKE_ESCAPE)

    def _select(self) -> Any:
        # populate_existing: rows already in the identity map are refreshed
        # after Core-style UPDATEs issued through the same session.
        return select(self._model).execution_options(populate_existing=True)

    def _require_soft_delete(self) -> None:
        if not self._config.soft_deletable:
            raise ValueError(f"{self._config.name} does not support soft delete")

    def _to_domain_list(self, rows: Any) -> list[T]:
        return [self._config.to_domain(row) for row in rows]

    async def _value_exists(self, field: str, value: Any, exclude_id: int | None) -> bool:
        """Uniqueness pre-check.  Counts soft-deleted rows, as the unique constraint does."""
        stmt = select(func.count()).select_from(self._model).where(self._column(field) == value)
        if exclude_id is not None:
            stmt = stmt.where(self._model.id != exclude_id)
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    # ------------------------------------------------------------------ #
    # Reads                                                               #
    # ------------------------------------------------------------------ #

    async def find_by_id(self, id: int) -> T | None:
        result = await self._session.execute(self._select().where(self._model.id == id))
        row = result.scalar_one_or_none()
        return self._config.to_domain(row) if row else None

    async def find_one(self, predicate: Predicate) -> T | None:
        stmt = self._select().where(*self._conditions(predicate, include_deleted=True)).limit(1)
        result = await self._session.execute(stmt)
        row = result.scalars().first()
        return self._config.to_domain(row) if row else None

    async def find_all(
        self, predicate: Predicate | None = None, *, include_deleted: bool = False
    ) -> list[T]:
        stmt = self._select().where(*self._conditions(predicate, include_deleted))
        result = await self._session.execute(stmt)
        return self._to_domain_list(result.scalars())

    async def exists(self, predicate: Predicate, *, include_deleted: bool = False) -> bool:
        return await self.count(predicate, include_deleted=include_deleted) > 0

    async def count(
        self, predicate: Predicate | None = None, *, include_deleted: bool = False
    ) -> int:
        stmt = (
            select(func.count())
            .select_from(self._model)
            .where(*self._conditions(predicate, include_deleted))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def find_all_with_pagination(
        self,
        options: PaginationOptions | None = None,
        base_filter: Predicate | None = None,
    ) -> Page[T]:
        options = options or PaginationOptions()
        conditions = self._conditions(base_filter, include_deleted=False)
        if options.search and options.search_fields:
            conditions.append(
                or_(*(self._search_clause(f, options.search) for f in options.search_fields))
            )
        sort_column = self._column(options.sort_by)
        order = sort_column.asc() if options.sort_order == SortOrder.ASC else sort_column.desc()

        count_stmt = select(func.count()).select_from(self._model).where(*conditions)
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            self._select()
            .where(*conditions)
            .order_by(order)
            .offset(options.skip)
            .limit(options.limit)
        )
        result = await self._session.execute(stmt)
        data = self._to_domain_list(result.scalars())
        logger.debug(
            "paginated %s page=%d limit=%d total=%d", self._config.name, options.page, options.limit, total
        )
        return Page(data=data, pagination=PaginationMeta.compute(total, options.page, options.limit))

    # ------------------------------------------------------------------ #
    # Writes                                                              #
    # ------------------------------------------------------------------ #

    async def create(self, fields: Fields) -> T:
        row = self._model(**self._values(fields))
        self._session.add(row)
        await self._session.flush()
        await self._session.refresh(row)
        logger.debug("created %s id=%s", self._config.name, row.id)
        return self._config.to_domain(row)

    async def update(self, id: int, fields: Fields) -> T | None:
        values = self._values(fields)
        if values:
            stmt = update(self._model).where(self._model.id == id).values(**values)
            result = await self._session.execute(stmt)
            logger.debug("updated %s id=%s rows=%d", self._config.name, id, result.rowcount)
        return await self.find_by_id(id)

    async def delete(self, id: int) -> bool:
        result = await self._session.execute(delete(self._model).where(self._model.id == id))
        logger.debug("deleted %s id=%s rows=%d", self._config.name, id, result.rowcount)
        return result.rowcount > 0

    async def soft_delete(self, id: int) -> bool:
        return await self._set_deleted(id, True)

    async def restore(self, id: int) -> bool:
        return await self._set_deleted(id, False)

    async def _set_deleted(self, id: int, deleted: bool) -> bool:
        self._require_soft_delete()
        stmt = (
            update(self._model)
            .where(self._model.id == id)
            .values(
                is_deleted=deleted,
                deleted_at=datetime.now(timezone.utc) if deleted else None,
            )
        )
        result = await self._session.execute(stmt)
        logger.debug(
            "%s %s id=%s rows=%d",
            "soft-deleted" if deleted else "restored",
            self._config.name,
            id,
            result.rowcount,
        )
        return result.rowcount > 0

    async def bulk_create(self, items: Sequence[Fields]) -> list[T]:
        rows = [self._model(**self._values(fields)) for fields in items]
        if not rows:
            return []
        self._session.add_all(rows)
        await self._session.flush()
        for row in rows:
            await self._session.refresh(row)
        logger.debug("bulk-created %d %s rows", len(rows), self._config.name)
        return self._to_domain_list(rows)

    async def bulk_update(self, ids: Sequence[int], fields: Fields) -> bool:
        values = self._values(fields)
        if not ids or not values:
            return False
        stmt = update(self._model).where(self._model.id.in_(list(ids))).values(**values)
        result = await self._session.execute(stmt)
        logger.debug("bulk-updated %s rows=%d", self._config.name, result.rowcount)
        return result.rowcount > 0

    async def bulk_delete(self, ids: Sequence[int]) -> bool:
        if not ids:
            return False
        stmt = delete(self._model).where(self._model.id.in_(list(ids)))
        result = await self._session.execute(stmt)
        logger.debug("bulk-deleted %s rows=%d", self._config.name, result.rowcount)
        return result.rowcount > 0
