"""ORM model registry: imports every table module so each mapper class is
registered with Base.metadata before Alembic or SQLAlchemy runs.
"""

from arena_api.infrastructure.persistence.models.accounts import Employee, User
from arena_api.infrastructure.persistence.models.tournaments import Tournament
from arena_api.infrastructure.persistence.models.sessions import EmployeeSession, Session

__all__ = [
    # Accounts
    "User",
    "Employee",
    # Tournaments
    "Tournament",
    # Sessions
    "Session",
    "EmployeeSession",
]
