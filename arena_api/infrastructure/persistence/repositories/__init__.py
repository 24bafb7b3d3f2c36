"""Concrete SQLAlchemy repository implementations.

Exports the generic SqlRepository, every entity repository and the
get_repositories() factory for wiring at the application boundary.
"""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from .employees import SqlEmployeeRepository
from .generic import EntityConfig, SqlRepository
from .sessions import SqlEmployeeSessionRepository, SqlSessionRepository
from .tournaments import SqlTournamentRepository
from .users import SqlUserRepository


@dataclass
class Repositories:
    """All repository instances bound to a single AsyncSession."""

    users: SqlUserRepository
    employees: SqlEmployeeRepository
    tournaments: SqlTournamentRepository
    sessions: SqlSessionRepository
    employee_sessions: SqlEmployeeSessionRepository


def get_repositories(session: AsyncSession) -> Repositories:
    """Construct all repositories bound to the given session.

    Intended for use as a request-scoped dependency:

        async def handler(session: AsyncSession = Depends(get_session)) -> ...:
            repos = get_repositories(session)
            user = await repos.users.find_by_external_id(user_id)
    """
    return Repositories(
        users=SqlUserRepository(session),
        employees=SqlEmployeeRepository(session),
        tournaments=SqlTournamentRepository(session),
        sessions=SqlSessionRepository(session),
        employee_sessions=SqlEmployeeSessionRepository(session),
    )


__all__ = [
    "EntityConfig",
    "SqlRepository",
    "SqlUserRepository",
    "SqlEmployeeRepository",
    "SqlTournamentRepository",
    "SqlSessionRepository",
    "SqlEmployeeSessionRepository",
    "Repositories",
    "get_repositories",
]
