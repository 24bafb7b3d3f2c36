"""Tournament use cases."""

from __future__ import annotations

import logging
from uuid import UUID

from arena_api.domain.errors import ConflictError, NotFoundError
from arena_api.domain.models.enums import TournamentStatus
from arena_api.domain.models.pagination import ListQuery, Page
from arena_api.domain.models.tournaments import Tournament, TournamentCreate, TournamentUpdate
from arena_api.domain.repositories.tournaments import TournamentRepository

from .base import LifecycleService

logger = logging.getLogger(__name__)


class TournamentService(LifecycleService[Tournament]):
    entity_name = "tournament"

    def __init__(self, tournaments: TournamentRepository, max_page_size: int = 100) -> None:
        super().__init__(tournaments, max_page_size)
        self._tournaments = tournaments

    async def list(self, query: ListQuery) -> Page[Tournament]:
        return await self._tournaments.get_tournaments_with_pagination(self._clamp(query))

    async def create(self, data: TournamentCreate) -> Tournament:
        if await self._tournaments.title_exists(data.title):
            logger.warning("rejected tournament create: title %r taken", data.title)
            raise ConflictError(self.entity_name, "title")
        tournament = await self._tournaments.create(data.model_dump(exclude_none=True))
        logger.info("created tournament %s", tournament.external_id)
        return tournament

    async def update(self, external_id: UUID, data: TournamentUpdate) -> Tournament:
        tournament = await self.get_by_external_id(external_id)
        fields = data.model_dump(exclude_unset=True)
        title = fields.get("title")
        if title and title != tournament.title:
            if await self._tournaments.title_exists(title, tournament.id):
                logger.warning("rejected tournament update: title %r taken", title)
                raise ConflictError(self.entity_name, "title")
        updated = await self._tournaments.update(tournament.id, fields)
        if updated is None:
            raise NotFoundError(self.entity_name, external_id)
        return updated

    async def change_status(self, external_id: UUID, status: TournamentStatus) -> Tournament:
        tournament = await self.get_by_external_id(external_id)
        updated = await self._tournaments.change_status(tournament.id, status)
        if updated is None:
            raise NotFoundError(self.entity_name, external_id)
        logger.info("tournament %s status -> %s", external_id, status.value)
        return updated
