"""Domain error taxonomy.

Repositories never raise these: a missing row is reported as None and store
failures (constraint violations, lost connections) propagate as the
exceptions the driver produced.  Services raise NotFoundError and
ConflictError.  StoreErrorKind names the store-side failures a caller may
need to tell apart; see infrastructure.persistence.errors for the mapping.
"""

from __future__ import annotations

from enum import Enum


class ArenaError(Exception):
    """Base class for errors raised by the domain services."""


class NotFoundError(ArenaError):
    def __init__(self, entity: str, key: object) -> None:
        super().__init__(f"{entity} {key} not found")
        self.entity = entity
        self.key = key


class ConflictError(ArenaError):
    """A best-effort uniqueness pre-check found an existing value.

    The store's unique constraint remains authoritative; a concurrent writer
    can still win the race and surface as an IntegrityError instead.
    """

    def __init__(self, entity: str, field: str) -> None:
        super().__init__(f"{entity} {field} already exists")
        self.entity = entity
        self.field = field


class InvalidCredentialsError(ArenaError):
    def __init__(self, message: str = "Invalid email or password") -> None:
        super().__init__(message)


class StoreErrorKind(str, Enum):
    UNIQUE_VIOLATION = "UNIQUE_VIOLATION"
    FOREIGN_KEY_VIOLATION = "FOREIGN_KEY_VIOLATION"
    NOT_NULL_VIOLATION = "NOT_NULL_VIOLATION"
    INVALID_INPUT = "INVALID_INPUT"
    CONNECTIVITY = "CONNECTIVITY"
    DATABASE_ERROR = "DATABASE_ERROR"
