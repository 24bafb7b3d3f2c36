"""User and employee domain models.

These are pure domain objects with no ORM or persistence concerns.  Read models
never carry password material; the *Credentials models exist only for the
login path.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from .enums import EmployeeRole, EmployeeStatus, UserStatus


class User(BaseModel):
    """A player account.

    id is the internal primary key used for joins; external_id is the
    identifier handed to API consumers.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    external_id: UUID
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    whatsapp_number: str | None = None
    upi_id: str | None = None
    profile_picture: str | None = None
    avatar: str | None = None
    country_code: str | None = None
    role: str | None = None
    status: UserStatus = UserStatus.ACTIVE
    is_verified: bool | None = None
    last_login_ip: str | None = None
    last_login_at: datetime | None = None
    is_active: bool = True
    is_deleted: bool = False
    deleted_at: datetime | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    external_id: UUID
    email: str | None
    password: str | None
    status: UserStatus
    is_active: bool
    is_deleted: bool


class UserCreate(BaseModel):
    """Fields accepted when creating a user.

    password is plaintext here; the service hashes it before it is stored.
    """

    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr
    whatsapp_number: str | None = None
    password: str | None = Field(default=None, min_length=6)
    upi_id: str | None = None
    profile_picture: str | None = None
    avatar: str | None = None
    country_code: str | None = None
    role: str | None = None
    status: UserStatus | None = None
    is_verified: bool | None = None
    created_by: str | None = None


class UserUpdate(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    whatsapp_number: str | None = None
    password: str | None = Field(default=None, min_length=6)
    upi_id: str | None = None
    profile_picture: str | None = None
    avatar: str | None = None
    country_code: str | None = None
    role: str | None = None
    status: UserStatus | None = None
    is_verified: bool | None = None
    is_active: bool | None = None
    updated_by: str | None = None


class Employee(BaseModel):
    """A back-office staff account."""

    model_config = ConfigDict(frozen=True)

    id: int
    external_id: UUID
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    whatsapp_number: str | None = None
    profile_picture: str | None = None
    role: EmployeeRole = EmployeeRole.STAFF
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    last_login_ip: str | None = None
    last_login_at: datetime | None = None
    is_active: bool = True
    is_deleted: bool = False
    deleted_at: datetime | None = None
    created_by: str | None = None
    updated_by: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class EmployeeCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    external_id: UUID
    email: str | None
    password: str | None
    role: EmployeeRole
    status: EmployeeStatus
    is_active: bool
    is_deleted: bool


class EmployeeCreate(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr
    whatsapp_number: str | None = None
    password: str | None = Field(default=None, min_length=6)
    profile_picture: str | None = None
    role: EmployeeRole | None = None
    status: EmployeeStatus | None = None
    created_by: str | None = None


class EmployeeUpdate(BaseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: EmailStr | None = None
    whatsapp_number: str | None = None
    password: str | None = Field(default=None, min_length=6)
    profile_picture: str | None = None
    role: EmployeeRole | None = None
    status: EmployeeStatus | None = None
    is_active: bool | None = None
    updated_by: str | None = None
