"""SQLAlchemy implementation of TournamentRepository."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from arena_api.domain.models.enums import TournamentStatus
from arena_api.domain.models.pagination import ListQuery, Page
from arena_api.domain.models.tournaments import Tournament as DomainTournament
from arena_api.domain.repositories.tournaments import TournamentRepository
from arena_api.infrastructure.persistence.models.tournaments import Tournament as OrmTournament

from .generic import EntityConfig, SqlRepository, listing_filter, listing_options

# Integer and JSON columns are cast to text for the substring match.
TOURNAMENT_SEARCH_FIELDS = [
    "title",
    "tagline",
    "description",
    "type",
    "entry_fee",
    "prizepool",
    "first_prize",
    "second_prize",
    "third_prize",
    "max_participants",
    "min_participants",
    "max_teams",
    "min_teams",
    "tournament_start_date",
    "tournament_end_date",
    "registration_start_date",
    "registration_end_date",
    "rules",
]


class SqlTournamentRepository(SqlRepository[DomainTournament], TournamentRepository):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, EntityConfig("tournament", OrmTournament, self._to_domain))

    @staticmethod
    def _to_domain(row: OrmTournament) -> DomainTournament:
        return DomainTournament(
            id=row.id,
            external_id=row.external_id,
            title=row.title,
            tagline=row.tagline,
            description=row.description,
            type=row.type,
            entry_fee=row.entry_fee,
            prizepool=row.prizepool,
            first_prize=row.first_prize,
            second_prize=row.second_prize,
            third_prize=row.third_prize,
            max_participants=row.max_participants,
            min_participants=row.min_participants,
            max_teams=row.max_teams,
            min_teams=row.min_teams,
            tournament_start_date=row.tournament_start_date,
            tournament_end_date=row.tournament_end_date,
            registration_start_date=row.registration_start_date,
            registration_end_date=row.registration_end_date,
            rules=row.rules,
            status=TournamentStatus(row.status),
            is_active=row.is_active,
            is_deleted=row.is_deleted,
            deleted_at=row.deleted_at,
            created_by=row.created_by,
            updated_by=row.updated_by,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    async def find_by_external_id(self, external_id: UUID) -> DomainTournament | None:
        return await self.find_one({"external_id": external_id})

    async def find_all_active(self) -> list[DomainTournament]:
        return await self.find_all({"is_active": True, "is_deleted": False})

    async def title_exists(self, title: str, exclude_id: int | None = None) -> bool:
        return await self._value_exists("title", title, exclude_id)

    async def change_status(
        self, id: int, status: TournamentStatus
    ) -> DomainTournament | None:
        return await self.update(id, {"status": status})

    async def get_tournaments_with_pagination(
        self, query: ListQuery
    ) -> Page[DomainTournament]:
        return await self.find_all_with_pagination(
            listing_options(query, TOURNAMENT_SEARCH_FIELDS), listing_filter(query)
        )
