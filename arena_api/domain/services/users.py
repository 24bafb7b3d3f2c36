"""User (player account) use cases."""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from arena_api.domain.errors import ConflictError, NotFoundError
from arena_api.domain.models.accounts import User, UserCreate, UserUpdate
from arena_api.domain.models.enums import UserStatus
from arena_api.domain.models.pagination import ListQuery, Page
from arena_api.domain.repositories.users import UserRepository

from .base import LifecycleService, PasswordHasher

logger = logging.getLogger(__name__)


class UserService(LifecycleService[User]):
    entity_name = "user"

    def __init__(
        self,
        users: UserRepository,
        password_hasher: PasswordHasher,
        max_page_size: int = 100,
    ) -> None:
        super().__init__(users, max_page_size)
        self._users = users
        self._hasher = password_hasher

    async def _check_unique(self, fields: dict[str, Any], current: User | None = None) -> None:
        exclude_id = current.id if current else None
        checks = (
            ("email", self._users.email_exists),
            ("whatsapp_number", self._users.whatsapp_number_exists),
            ("upi_id", self._users.upi_id_exists),
        )
        for field, exists in checks:
            value = fields.get(field)
            if not value or (current is not None and value == getattr(current, field)):
                continue
            if await exists(value, exclude_id):
                logger.warning("rejected user write: %s already in use", field)
                raise ConflictError(self.entity_name, field)

    def _hash_password(self, fields: dict[str, Any]) -> dict[str, Any]:
        if fields.get("password"):
            fields["password"] = self._hasher.hash(fields["password"])
        return fields

    async def list(self, query: ListQuery) -> Page[User]:
        return await self._users.get_users_with_pagination(self._clamp(query))

    async def create(self, data: UserCreate) -> User:
        fields = data.model_dump(exclude_none=True)
        await self._check_unique(fields)
        user = await self._users.create(self._hash_password(fields))
        logger.info("created user %s", user.external_id)
        return user

    async def update(self, external_id: UUID, data: UserUpdate) -> User:
        user = await self.get_by_external_id(external_id)
        fields = data.model_dump(exclude_unset=True)
        await self._check_unique(fields, current=user)
        updated = await self._users.update(user.id, self._hash_password(fields))
        if updated is None:
            raise NotFoundError(self.entity_name, external_id)
        return updated

    async def change_status(self, external_id: UUID, status: UserStatus) -> User:
        user = await self.get_by_external_id(external_id)
        updated = await self._users.change_status(user.id, status)
        if updated is None:
            raise NotFoundError(self.entity_name, external_id)
        logger.info("user %s status -> %s", external_id, status.value)
        return updated
