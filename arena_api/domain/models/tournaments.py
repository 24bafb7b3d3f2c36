"""Tournament domain models."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .enums import TournamentStatus


class Tournament(BaseModel):
    """A tournament listing.

    Prize and fee amounts and the schedule dates are free-form strings as
    entered by staff; rules is an arbitrary JSON document.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    external_id: UUID
    title: str | None = None
    tagline: str | None = None
    description: str | None = None
    type: str | None = None
    entry_fee: str | None = None
    prizepool: str | None = None
    first_prize: str | None = None
    second_prize: str | None = None
    third_prize: str | None = None
    max_participants: int | None = None
    min_participants: int | None = None
    max_teams: int | None = None
    min_teams: int | None = None
    tournament_start_date: str | None = None
    tournament_end_date: str | None = None
    registration_start_date: str | None = None
    registration_end_date: str | None = None
    rules: Any = None
    status: TournamentStatus = TournamentStatus.UPCOMING
    is_active: bool = True
    is_deleted: bool = False
    deleted_at: datetime | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TournamentCreate(BaseModel):
    title: str = Field(min_length=1)
    tagline: str | None = None
    description: str | None = None
    type: str | None = None
    entry_fee: str | None = None
    prizepool: str | None = None
    first_prize: str | None = None
    second_prize: str | None = None
    third_prize: str | None = None
    max_participants: int | None = None
    min_participants: int | None = None
    max_teams: int | None = None
    min_teams: int | None = None
    tournament_start_date: str | None = None
    tournament_end_date: str | None = None
    registration_start_date: str | None = None
    registration_end_date: str | None = None
    rules: dict[str, Any] | list[Any] | None = None
    status: TournamentStatus | None = None
    is_active: bool | None = None
    created_by: str | None = None


class TournamentUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1)
    tagline: str | None = None
    description: str | None = None
    type: str | None = None
    entry_fee: str | None = None
    prizepool: str | None = None
    first_prize: str | None = None
    second_prize: str | None = None
    third_prize: str | None = None
    max_participants: int | None = None
    min_participants: int | None = None
    max_teams: int | None = None
    min_teams: int | None = None
    tournament_start_date: str | None = None
    tournament_end_date: str | None = None
    registration_start_date: str | None = None
    registration_end_date: str | None = None
    rules: dict[str, Any] | list[Any] | None = None
    status: TournamentStatus | None = None
    is_active: bool | None = None
    updated_by: str | None = None
