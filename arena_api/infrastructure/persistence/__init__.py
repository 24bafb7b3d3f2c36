"""Persistence package.

Importing this package registers every ORM mapper with Base.metadata
(required for Alembic autogenerate and SQLAlchemy mapper configuration)
and exports all repository implementations and the DI factory.
"""

from arena_api.infrastructure.persistence.models import *  # noqa: F401, F403
from arena_api.infrastructure.persistence.models import __all__ as _orm_all
from arena_api.infrastructure.persistence.repositories import (
    EntityConfig,
    Repositories,
    SqlEmployeeRepository,
    SqlEmployeeSessionRepository,
    SqlRepository,
    SqlSessionRepository,
    SqlTournamentRepository,
    SqlUserRepository,
    get_repositories,
)

__all__ = _orm_all + [
    "EntityConfig",
    "Repositories",
    "SqlRepository",
    "SqlUserRepository",
    "SqlEmployeeRepository",
    "SqlTournamentRepository",
    "SqlSessionRepository",
    "SqlEmployeeSessionRepository",
    "get_repositories",
]
