"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in arena_api/infrastructure/persistence/ and
are wired at the application boundary via dependency injection.

Import from this package rather than individual modules to avoid coupling
services to specific repository module paths.
"""

from .base import Fields, Predicate, Repository
from .employees import EmployeeRepository
from .sessions import EmployeeSessionRepository, LoginSessionRepository, SessionRepository
from .tournaments import TournamentRepository
from .users import UserRepository

__all__ = [
    "Fields",
    "Predicate",
    "Repository",
    "UserRepository",
    "EmployeeRepository",
    "TournamentRepository",
    "LoginSessionRepository",
    "SessionRepository",
    "EmployeeSessionRepository",
]
