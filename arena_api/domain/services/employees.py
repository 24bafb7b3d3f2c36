"""Employee (back-office account) use cases, including credential login.

Token issuance is left to the caller: login() only verifies credentials and
records the login; register_session() stores whatever token the caller
issued.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import EmailStr, TypeAdapter, ValidationError

from arena_api.domain.errors import ConflictError, InvalidCredentialsError, NotFoundError
from arena_api.domain.models.accounts import Employee, EmployeeCreate, EmployeeUpdate
from arena_api.domain.models.enums import EmployeeStatus
from arena_api.domain.models.pagination import ListQuery, Page
from arena_api.domain.models.sessions import EmployeeSession
from arena_api.domain.repositories.employees import EmployeeRepository
from arena_api.domain.repositories.sessions import EmployeeSessionRepository

from .base import LifecycleService, PasswordHasher

logger = logging.getLogger(__name__)

# Stored emails went through EmailStr, which lowercases the domain part.
_EMAIL = TypeAdapter(EmailStr)


class EmployeeService(LifecycleService[Employee]):
    entity_name = "employee"

    def __init__(
        self,
        employees: EmployeeRepository,
        sessions: EmployeeSessionRepository,
        password_hasher: PasswordHasher,
        max_page_size: int = 100,
    ) -> None:
        super().__init__(employees, max_page_size)
        self._employees = employees
        self._sessions = sessions
        self._hasher = password_hasher

    async def _check_unique(
        self, fields: dict[str, Any], current: Employee | None = None
    ) -> None:
        exclude_id = current.id if current else None
        checks = (
            ("email", self._employees.email_exists),
            ("whatsapp_number", self._employees.whatsapp_number_exists),
        )
        for field, exists in checks:
            value = fields.get(field)
            if not value or (current is not None and value == getattr(current, field)):
                continue
            if await exists(value, exclude_id):
                logger.warning("rejected employee write: %s already in use", field)
                raise ConflictError(self.entity_name, field)

    def _hash_password(self, fields: dict[str, Any]) -> dict[str, Any]:
        if fields.get("password"):
            fields["password"] = self._hasher.hash(fields["password"])
        return fields

    async def list(self, query: ListQuery) -> Page[Employee]:
        return await self._employees.get_employees_with_pagination(self._clamp(query))

    async def create(self, data: EmployeeCreate) -> Employee:
        fields = data.model_dump(exclude_none=True)
        await self._check_unique(fields)
        employee = await self._employees.create(self._hash_password(fields))
        logger.info("created employee %s", employee.external_id)
        return employee

    async def update(self, external_id: UUID, data: EmployeeUpdate) -> Employee:
        employee = await self.get_by_external_id(external_id)
        fields = data.model_dump(exclude_unset=True)
        await self._check_unique(fields, current=employee)
        updated = await self._employees.update(employee.id, self._hash_password(fields))
        if updated is None:
            raise NotFoundError(self.entity_name, external_id)
        return updated

    async def change_status(self, external_id: UUID, status: EmployeeStatus) -> Employee:
        employee = await self.get_by_external_id(external_id)
        updated = await self._employees.change_status(employee.id, status)
        if updated is None:
            raise NotFoundError(self.entity_name, external_id)
        logger.info("employee %s status -> %s", external_id, status.value)
        return updated

    async def login(
        self, email: str, password: str, *, ip_address: str | None = None
    ) -> Employee:
        """Verify credentials and record the login.

        Unknown email, wrong password and an account without a password all
        raise the same InvalidCredentialsError.  Deleted, disabled and
        non-ACTIVE accounts are refused even with the right password.  The
        email is normalised the way EmployeeCreate stored it; a malformed
        email is just another invalid credential.
        """
        try:
            email = _EMAIL.validate_python(email)
        except ValidationError:
            logger.warning("failed employee login from %s", ip_address)
            raise InvalidCredentialsError() from None
        credentials = await self._employees.find_by_email_with_password(email)
        if (
            credentials is None
            or not credentials.password
            or not self._hasher.verify(password, credentials.password)
        ):
            logger.warning("failed employee login from %s", ip_address)
            raise InvalidCredentialsError()
        if (
            credentials.is_deleted
            or not credentials.is_active
            or credentials.status != EmployeeStatus.ACTIVE
        ):
            logger.warning("refused login for inactive employee %s", credentials.external_id)
            raise InvalidCredentialsError("Employee account is not active")

        await self._employees.update_last_login(credentials.id, ip_address)
        employee = await self._employees.find_by_id(credentials.id)
        if employee is None:
            raise NotFoundError(self.entity_name, credentials.external_id)
        logger.info("employee %s logged in", employee.external_id)
        return employee

    async def register_session(
        self,
        employee: Employee,
        token: str,
        *,
        device_id: str | None = None,
        ip_address: str | None = None,
        device_type: str | None = None,
        expires_at: datetime | None = None,
    ) -> EmployeeSession:
        """Store a freshly issued token.  An employee keeps one session at a time."""
        owner_id = str(employee.external_id)
        await self._sessions.delete_by_owner(owner_id)
        return await self._sessions.create(
            {
                "employee_id": owner_id,
                "token": token,
                "device_id": device_id,
                "ip_address": ip_address,
                "device_type": device_type,
                "expires_at": expires_at,
            }
        )

    async def logout(self, token: str) -> bool:
        """Drop the session holding the token.  False if there was none."""
        session = await self._sessions.find_by_token(token)
        if session is None:
            return False
        removed = await self._sessions.delete(session.id)
        logger.info("employee %s logged out", session.owner_id)
        return removed
