"""Login session ORM models: sessions, employee_sessions.

The owner columns hold the owning account's external id as text, with no
foreign key.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from arena_api.infrastructure.database import Base

from .common import IdentityMixin


class Session(IdentityMixin, Base):
    __tablename__ = "sessions"
    __table_args__ = (Index("ix_sessions_token", "token"),)

    user_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    device_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    ip_address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    device_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)


class EmployeeSession(IdentityMixin, Base):
    __tablename__ = "employee_sessions"
    __table_args__ = (Index("ix_employee_sessions_token", "token"),)

    employee_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    device_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    ip_address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    device_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    expires_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
