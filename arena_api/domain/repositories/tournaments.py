"""Tournament repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from arena_api.domain.models.enums import TournamentStatus
from arena_api.domain.models.pagination import ListQuery, Page
from arena_api.domain.models.tournaments import Tournament

from .base import Repository


class TournamentRepository(Repository[Tournament]):
    """Read/write interface for Tournament entities."""

    @abstractmethod
    async def find_by_external_id(self, external_id: UUID) -> Tournament | None: ...

    @abstractmethod
    async def find_all_active(self) -> list[Tournament]: ...

    @abstractmethod
    async def title_exists(self, title: str, exclude_id: int | None = None) -> bool:
        """True if another tournament (deleted or not) already uses the title."""

    @abstractmethod
    async def change_status(self, id: int, status: TournamentStatus) -> Tournament | None: ...

    @abstractmethod
    async def get_tournaments_with_pagination(self, query: ListQuery) -> Page[Tournament]:
        """Search every descriptive, prize, capacity, schedule and rules field."""
