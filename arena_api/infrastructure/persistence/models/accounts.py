"""Account ORM models: users, employees."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from arena_api.infrastructure.database import Base

from .common import SoftDeleteAuditMixin


class User(SoftDeleteAuditMixin, Base):
    """Player account.

    email, whatsapp_number and upi_id carry unique constraints; the
    application's *_exists pre-checks are advisory only.
    status: ACTIVE / INACTIVE / SUSPENDED / BAN
    """

    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("email", name="uq_users_email"),
        UniqueConstraint("whatsapp_number", name="uq_users_whatsapp_number"),
        UniqueConstraint("upi_id", name="uq_users_upi_id"),
    )

    first_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    whatsapp_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # hash only
    reset_password_token: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_login_ip: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_login_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    upi_id: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    profile_picture: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    avatar: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    country_code: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    role: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default="ACTIVE", server_default="ACTIVE"
    )
    is_verified: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class Employee(SoftDeleteAuditMixin, Base):
    """Back-office staff account.

    role: ADMIN / MANAGER / STAFF
    status: ACTIVE / INACTIVE / SUSPENDED / BAN
    """

    __tablename__ = "employees"
    __table_args__ = (
        UniqueConstraint("email", name="uq_employees_email"),
        UniqueConstraint("whatsapp_number", name="uq_employees_whatsapp_number"),
    )

    first_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    whatsapp_number: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)  # hash only
    profile_picture: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    role: Mapped[str] = mapped_column(Text, nullable=False, default="STAFF", server_default="STAFF")
    status: Mapped[str] = mapped_column(
        Text, nullable=False, default="ACTIVE", server_default="ACTIVE"
    )
    last_login_ip: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    last_login_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
