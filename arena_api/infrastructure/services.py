"""Service wiring for the application boundary."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from arena_api.domain.services import (
    EmployeeService,
    PasswordHasher,
    TournamentService,
    UserService,
)
from arena_api.infrastructure.database import settings
from arena_api.infrastructure.persistence.repositories import get_repositories


@dataclass
class Services:
    """All services bound to the repositories of a single AsyncSession."""

    users: UserService
    employees: EmployeeService
    tournaments: TournamentService


def get_services(
    session: AsyncSession,
    password_hasher: PasswordHasher,
    max_page_size: int | None = None,
) -> Services:
    """Construct every service on top of get_repositories(session).

    max_page_size defaults to the MAX_PAGE_SIZE setting.
    """
    repos = get_repositories(session)
    limit = settings.max_page_size if max_page_size is None else max_page_size
    return Services(
        users=UserService(repos.users, password_hasher, limit),
        employees=EmployeeService(repos.employees, repos.employee_sessions, password_hasher, limit),
        tournaments=TournamentService(repos.tournaments, limit),
    )
