"""SQLAlchemy implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from arena_api.domain.models.accounts import User as DomainUser
from arena_api.domain.models.accounts import UserCredentials
from arena_api.domain.models.enums import UserStatus
from arena_api.domain.models.pagination import ListQuery, Page
from arena_api.domain.repositories.users import UserRepository
from arena_api.infrastructure.persistence.models.accounts import User as OrmUser

from .generic import EntityConfig, SqlRepository, listing_filter, listing_options

USER_SEARCH_FIELDS = ["first_name", "last_name", "email", "whatsapp_number", "upi_id"]


class SqlUserRepository(SqlRepository[DomainUser], UserRepository):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, EntityConfig("user", OrmUser, self._to_domain))

    @staticmethod
    def _to_domain(row: OrmUser) -> DomainUser:
        return DomainUser(
            id=row.id,
            external_id=row.external_id,
            first_name=row.first_name,
            last_name=row.last_name,
            email=row.email,
            whatsapp_number=row.whatsapp_number,
            upi_id=row.upi_id,
            profile_picture=row.profile_picture,
            avatar=row.avatar,
            country_code=row.country_code,
            role=row.role,
            status=UserStatus(row.status),
            is_verified=row.is_verified,
            last_login_ip=row.last_login_ip,
            last_login_at=row.last_login_at,
            is_active=row.is_active,
            is_deleted=row.is_deleted,
            deleted_at=row.deleted_at,
            created_by=row.created_by,
            updated_by=row.updated_by,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    async def find_by_external_id(self, external_id: UUID) -> DomainUser | None:
        return await self.find_one({"external_id": external_id})

    async def find_by_email(self, email: str) -> DomainUser | None:
        return await self.find_one({"email": email})

    async def find_by_email_with_password(self, email: str) -> UserCredentials | None:
        stmt = select(OrmUser).where(OrmUser.email == email)
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return UserCredentials(
            id=row.id,
            external_id=row.external_id,
            email=row.email,
            password=row.password,
            status=UserStatus(row.status),
            is_active=row.is_active,
            is_deleted=row.is_deleted,
        )

    async def find_all_active(self) -> list[DomainUser]:
        return await self.find_all({"is_active": True, "is_deleted": False})

    async def email_exists(self, email: str, exclude_id: int | None = None) -> bool:
        return await self._value_exists("email", email, exclude_id)

    async def whatsapp_number_exists(
        self, whatsapp_number: str, exclude_id: int | None = None
    ) -> bool:
        return await self._value_exists("whatsapp_number", whatsapp_number, exclude_id)

    async def upi_id_exists(self, upi_id: str, exclude_id: int | None = None) -> bool:
        return await self._value_exists("upi_id", upi_id, exclude_id)

    async def external_id_exists(
        self, external_id: UUID, exclude_id: int | None = None
    ) -> bool:
        return await self._value_exists("external_id", external_id, exclude_id)

    async def update_last_login(self, id: int, ip_address: str | None) -> None:
        await self.update(
            id, {"last_login_ip": ip_address, "last_login_at": datetime.now(timezone.utc)}
        )

    async def change_status(self, id: int, status: UserStatus) -> DomainUser | None:
        return await self.update(id, {"status": status})

    async def get_users_with_pagination(self, query: ListQuery) -> Page[DomainUser]:
        return await self.find_all_with_pagination(
            listing_options(query, USER_SEARCH_FIELDS), listing_filter(query)
        )
