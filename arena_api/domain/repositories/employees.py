"""Employee repository interface."""

from __future__ import annotations

from abc import abstractmethod
from uuid import UUID

from arena_api.domain.models.accounts import Employee, EmployeeCredentials
from arena_api.domain.models.enums import EmployeeStatus
from arena_api.domain.models.pagination import ListQuery, Page

from .base import Repository


class EmployeeRepository(Repository[Employee]):
    """Read/write interface for Employee entities.

    Uniqueness checks follow the same rules as UserRepository.
    """

    @abstractmethod
    async def find_by_external_id(self, external_id: UUID) -> Employee | None: ...

    @abstractmethod
    async def find_by_email(self, email: str) -> Employee | None: ...

    @abstractmethod
    async def find_by_email_with_password(self, email: str) -> EmployeeCredentials | None:
        """Return the login view (including the password hash) for an email."""

    @abstractmethod
    async def find_all_active(self) -> list[Employee]: ...

    @abstractmethod
    async def email_exists(self, email: str, exclude_id: int | None = None) -> bool: ...

    @abstractmethod
    async def whatsapp_number_exists(
        self, whatsapp_number: str, exclude_id: int | None = None
    ) -> bool: ...

    @abstractmethod
    async def update_last_login(self, id: int, ip_address: str | None) -> None: ...

    @abstractmethod
    async def change_status(self, id: int, status: EmployeeStatus) -> Employee | None: ...

    @abstractmethod
    async def get_employees_with_pagination(self, query: ListQuery) -> Page[Employee]:
        """Search first name, last name, email, whatsapp number and role."""
