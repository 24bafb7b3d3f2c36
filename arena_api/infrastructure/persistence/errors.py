"""Classification of store exceptions for callers that translate them.

Repositories let every store failure propagate untranslated.  A caller that
needs a user-facing form (an HTTP status, a JSON error body) inspects the
exception here; nothing is swallowed or rewrapped.
"""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError, DisconnectionError, InterfaceError

from arena_api.domain.errors import StoreErrorKind

# PostgreSQL SQLSTATE codes
_SQLSTATE_KINDS = {
    "23505": StoreErrorKind.UNIQUE_VIOLATION,
    "23503": StoreErrorKind.FOREIGN_KEY_VIOLATION,
    "23502": StoreErrorKind.NOT_NULL_VIOLATION,
    "22P02": StoreErrorKind.INVALID_INPUT,
}


def _sqlstate(exc: DBAPIError) -> str | None:
    # asyncpg's adapted errors and psycopg both expose sqlstate; psycopg2 uses pgcode
    for attr in ("sqlstate", "pgcode"):
        code = getattr(exc.orig, attr, None)
        if isinstance(code, str):
            return code
    return None


def classify_store_error(exc: BaseException) -> StoreErrorKind:
    """Map a store exception onto StoreErrorKind."""
    if isinstance(exc, (DisconnectionError, InterfaceError, ConnectionError)):
        return StoreErrorKind.CONNECTIVITY
    if isinstance(exc, DBAPIError):
        if exc.connection_invalidated:
            return StoreErrorKind.CONNECTIVITY
        code = _sqlstate(exc)
        if code is not None:
            return _SQLSTATE_KINDS.get(code, StoreErrorKind.DATABASE_ERROR)
    return StoreErrorKind.DATABASE_ERROR
