"""Login session repository interfaces."""

from __future__ import annotations

from abc import abstractmethod
from typing import TypeVar

from arena_api.domain.models.sessions import EmployeeSession, Session

from .base import Repository

S = TypeVar("S", Session, EmployeeSession)


class LoginSessionRepository(Repository[S]):
    """Lookups shared by player and employee session stores.

    owner_id is the owning account's external id as a string.
    """

    @abstractmethod
    async def find_by_token(self, token: str) -> S | None: ...

    @abstractmethod
    async def find_by_device_id(self, device_id: str) -> S | None: ...

    @abstractmethod
    async def find_by_ip_address(self, ip_address: str) -> S | None: ...

    @abstractmethod
    async def find_by_device_type(self, device_type: str) -> S | None: ...

    @abstractmethod
    async def find_by_owner(self, owner_id: str) -> S | None: ...

    @abstractmethod
    async def delete_by_owner(self, owner_id: str) -> bool:
        """Permanently remove every session of the owner.  True if any was removed."""


class SessionRepository(LoginSessionRepository[Session]):
    """Player sessions."""


class EmployeeSessionRepository(LoginSessionRepository[EmployeeSession]):
    """Employee sessions."""
