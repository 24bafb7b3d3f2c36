"""Pagination and list-query models shared by every repository."""

from __future__ import annotations

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .enums import SortOrder

T = TypeVar("T")


class PaginationOptions(BaseModel):
    """Options for a paginated, searchable listing.

    page is 1-indexed.  search is matched case-insensitively as a substring
    against every name in search_fields (OR); when either is empty no search
    condition is applied.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    search: str = ""
    search_fields: list[str] = Field(default_factory=list)
    sort_by: str = "created_at"
    sort_order: SortOrder = SortOrder.DESC

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def compute(cls, total: int, page: int, limit: int) -> PaginationMeta:
        total_pages = math.ceil(total / limit)
        return cls(
            total=total,
            page=page,
            limit=limit,
            total_pages=total_pages,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class Page(BaseModel, Generic[T]):
    """One page of results plus its pagination metadata."""

    model_config = ConfigDict(frozen=True)

    data: list[T]
    pagination: PaginationMeta


class ListQuery(BaseModel):
    """Entity-level listing parameters as received from a caller.

    status and is_active are optional exact-match filters; None means the
    filter is not applied.
    """

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)
    search: str | None = None
    status: str | None = None
    is_active: bool | None = None
