"""Domain enumerations.

All string-valued enums use the str mixin so they serialize cleanly to JSON
and compare equal to the plain strings stored in the database.
"""

from enum import Enum


class UserStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    BAN = "BAN"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    BAN = "BAN"


class EmployeeRole(str, Enum):
    ADMIN = "ADMIN"
    MANAGER = "MANAGER"
    STAFF = "STAFF"


class TournamentStatus(str, Enum):
    UPCOMING = "UPCOMING"
    LIVE = "LIVE"
    CLOSED = "CLOSED"
    REMOVED = "REMOVED"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"
