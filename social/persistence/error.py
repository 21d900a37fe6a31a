"""Helpers for classifying database errors."""

from sqlalchemy.exc import IntegrityError

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def unique_violation_constraint(error: IntegrityError) -> str | None:
    """Name of the violated unique constraint, or None for other errors.

    asyncpg's exception is chained behind SQLAlchemy's DBAPI adapter, so the
    SQLSTATE and constraint name are looked up on both.
    """
    orig = error.orig
    cause = getattr(orig, "__cause__", None)

    sqlstate = getattr(orig, "sqlstate", None) or getattr(cause, "sqlstate", None)
    if sqlstate != UNIQUE_VIOLATION:
        return None

    return getattr(cause, "constraint_name", None) or str(orig)
