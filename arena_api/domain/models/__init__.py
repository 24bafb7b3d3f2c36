"""Domain model package.

All domain objects are pure Python / Pydantic models with no ORM or
infrastructure dependencies.  Import from this package to avoid coupling
application code to individual module paths.
"""

from .accounts import (
    Employee,
    EmployeeCreate,
    EmployeeCredentials,
    EmployeeUpdate,
    User,
    UserCreate,
    UserCredentials,
    UserUpdate,
)
from .enums import (
    EmployeeRole,
    EmployeeStatus,
    SortOrder,
    TournamentStatus,
    UserStatus,
)
from .pagination import ListQuery, Page, PaginationMeta, PaginationOptions
from .sessions import EmployeeSession, Session
from .tournaments import Tournament, TournamentCreate, TournamentUpdate

__all__ = [
    # Enums
    "EmployeeRole",
    "EmployeeStatus",
    "SortOrder",
    "TournamentStatus",
    "UserStatus",
    # Accounts
    "User",
    "UserCreate",
    "UserCredentials",
    "UserUpdate",
    "Employee",
    "EmployeeCreate",
    "EmployeeCredentials",
    "EmployeeUpdate",
    # Tournaments
    "Tournament",
    "TournamentCreate",
    "TournamentUpdate",
    # Sessions
    "Session",
    "EmployeeSession",
    # Pagination
    "ListQuery",
    "Page",
    "PaginationMeta",
    "PaginationOptions",
]
