"""Tournament ORM model."""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import JSON, Integer, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from arena_api.infrastructure.database import Base

from .common import SoftDeleteAuditMixin


class Tournament(SoftDeleteAuditMixin, Base):
    """Tournament listing.

    Fee, prize and schedule values are stored as entered (free text).
    rules is JSONB on PostgreSQL, plain JSON elsewhere.
    status: UPCOMING / LIVE / CLOSED / REMOVED
    """

    __tablename__ = "tournaments"
    __table_args__ = (UniqueConstraint("title", name="uq_tournaments_title"),)

    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tagline: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    entry_fee: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    prizepool: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    first_prize: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    second_prize: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    third_prize: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    max_participants: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    min_participants: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    max_teams: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    min_teams: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    tournament_start_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    tournament_end_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    registration_start_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    registration_end_date: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    rules: Mapped[Optional[Any]] = mapped_column(
        JSON().with_variant(JSONB(), "postgresql"), nullable=True
    )
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default="UPCOMING", server_default="UPCOMING"
    )
