"""Domain services.

Transport-free use cases built on the repository interfaces.  Each service
receives its repositories through its constructor.
"""

from .base import LifecycleService, PasswordHasher
from .employees import EmployeeService
from .tournaments import TournamentService
from .users import UserService

__all__ = [
    "LifecycleService",
    "PasswordHasher",
    "UserService",
    "EmployeeService",
    "TournamentService",
]
