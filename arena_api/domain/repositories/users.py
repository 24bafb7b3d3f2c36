"""User repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from arena_api.domain.models.accounts import User, UserCredentials
from arena_api.domain.models.enums import UserStatus
from arena_api.domain.models.pagination import ListQuery, Page

from .base import Repository


class UserRepository(Repository[User]):
    """Read/write interface for User entities.

    find_by_email_with_password serves a player login that the caller
    implements; no service here logs users in.

    The *_exists checks count soft-deleted rows too, since the store's unique
    constraints do.  exclude_id leaves the caller's own row out of the count
    so an update can keep its current value.
    """

    @abstractmethod
    async def find_by_external_id(self, external_id: UUID) -> User | None:
        """Return the user with the given external id, or None."""

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Return the user with the given email, or None."""

    @abstractmethod
    async def find_by_email_with_password(self, email: str) -> UserCredentials | None:
        """Return the login view (including the password hash) for an email."""

    @abstractmethod
    async def find_all_active(self) -> list[User]:
        """Every user that is active and not soft-deleted."""

    @abstractmethod
    async def email_exists(self, email: str, exclude_id: int | None = None) -> bool: ...

    @abstractmethod
    async def whatsapp_number_exists(
        self, whatsapp_number: str, exclude_id: int | None = None
    ) -> bool: ...

    @abstractmethod
    async def upi_id_exists(self, upi_id: str, exclude_id: int | None = None) -> bool: ...

    @abstractmethod
    async def external_id_exists(
        self, external_id: UUID, exclude_id: int | None = None
    ) -> bool: ...

    @abstractmethod
    async def update_last_login(self, id: int, ip_address: str | None) -> None:
        """Record the time and source address of a successful login."""

    @abstractmethod
    async def change_status(self, id: int, status: UserStatus) -> User | None: ...

    @abstractmethod
    async def get_users_with_pagination(self, query: ListQuery) -> Page[User]:
        """Search first name, last name, email, whatsapp number and UPI id."""
