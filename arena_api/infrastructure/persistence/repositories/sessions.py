"""SQLAlchemy implementations of the login session repositories.

Both tables share one shape and differ only in the name of the owner column,
so a single class is configured with the ORM model and that column name.
"""

from __future__ import annotations

from typing import Any, Callable

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from arena_api.domain.models.sessions import EmployeeSession as DomainEmployeeSession
from arena_api.domain.models.sessions import Session as DomainSession
from arena_api.domain.repositories.sessions import (
    EmployeeSessionRepository,
    S,
    SessionRepository,
)
from arena_api.infrastructure.persistence.models.sessions import (
    EmployeeSession as OrmEmployeeSession,
)
from arena_api.infrastructure.persistence.models.sessions import Session as OrmSession

from .generic import EntityConfig, SqlRepository


def _mapper(domain_cls: type[S], owner_column: str) -> Callable[[Any], S]:
    def to_domain(row: Any) -> S:
        return domain_cls(
            id=row.id,
            external_id=row.external_id,
            owner_id=getattr(row, owner_column),
            token=row.token,
            device_id=row.device_id,
            ip_address=row.ip_address,
            device_type=row.device_type,
            expires_at=row.expires_at,
        )

    return to_domain


class _SqlLoginSessionRepository(SqlRepository[S]):
    owner_column: str

    async def find_by_token(self, token: str) -> S | None:
        return await self.find_one({"token": token})

    async def find_by_device_id(self, device_id: str) -> S | None:
        return await self.find_one({"device_id": device_id})

    async def find_by_ip_address(self, ip_address: str) -> S | None:
        return await self.find_one({"ip_address": ip_address})

    async def find_by_device_type(self, device_type: str) -> S | None:
        return await self.find_one({"device_type": device_type})

    async def find_by_owner(self, owner_id: str) -> S | None:
        return await self.find_one({self.owner_column: owner_id})

    async def delete_by_owner(self, owner_id: str) -> bool:
        stmt = delete(self._model).where(self._column(self.owner_column) == owner_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0


class SqlSessionRepository(_SqlLoginSessionRepository[DomainSession], SessionRepository):
    owner_column = "user_id"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session,
            EntityConfig("session", OrmSession, _mapper(DomainSession, self.owner_column)),
        )


class SqlEmployeeSessionRepository(
    _SqlLoginSessionRepository[DomainEmployeeSession], EmployeeSessionRepository
):
    owner_column = "employee_id"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(
            session,
            EntityConfig(
                "employee_session",
                OrmEmployeeSession,
                _mapper(DomainEmployeeSession, self.owner_column),
            ),
        )
