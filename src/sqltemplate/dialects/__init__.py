"""
Dialect strategy registry.
"""

from .base import Dialect, DialectCapabilities, RowLockingClause, StandardIdent
from .errors import (
    DialectError,
    UnknownDialectError,
    UnsupportedIdentifierError,
    UnsupportedLockingError,
)
from .locking import LockStrength, LockWait
from .postgres import POSTGRESQL, PostgresDialect
from .registry import available_dialects, dialect_for_dsn, get_dialect, register_dialect

__all__ = [
    "Dialect",
    "DialectCapabilities",
    "StandardIdent",
    "RowLockingClause",
    "LockStrength",
    "LockWait",
    "PostgresDialect",
    "POSTGRESQL",
    "DialectError",
    "UnsupportedIdentifierError",
    "UnsupportedLockingError",
    "UnknownDialectError",
    "get_dialect",
    "dialect_for_dsn",
    "register_dialect",
    "available_dialects",
]
