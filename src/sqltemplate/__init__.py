"""
sqltemplate public package initialization.

Dialects normalize identifier quoting and row-locking clauses so template
rendering never branches on the target database.
"""

from .dialects import (  # noqa: F401
    POSTGRESQL,
    Dialect,
    DialectCapabilities,
    DialectError,
    LockStrength,
    LockWait,
    PostgresDialect,
    UnknownDialectError,
    UnsupportedIdentifierError,
    UnsupportedLockingError,
    dialect_for_dsn,
    get_dialect,
)

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "DialectError",
    "LockStrength",
    "LockWait",
    "PostgresDialect",
    "POSTGRESQL",
    "UnknownDialectError",
    "UnsupportedIdentifierError",
    "UnsupportedLockingError",
    "dialect_for_dsn",
    "get_dialect",
]
