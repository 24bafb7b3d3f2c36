"""Login session domain models.

A session ties an issued token to the account that owns it and the device it
was issued to.  owner_id is the owning account's external_id.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class Session(BaseModel):
    """A player (user) login session."""

    model_config = ConfigDict(frozen=True)

    id: int
    external_id: UUID
    owner_id: str | None = None
    token: str | None = None
    device_id: str | None = None
    ip_address: str | None = None
    device_type: str | None = None
    expires_at: datetime | None = None


class EmployeeSession(BaseModel):
    """A back-office (employee) login session."""

    model_config = ConfigDict(frozen=True)

    id: int
    external_id: UUID
    owner_id: str | None = None
    token: str | None = None
    device_id: str | None = None
    ip_address: str | None = None
    device_type: str | None = None
    expires_at: datetime | None = None
