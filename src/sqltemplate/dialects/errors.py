"""
Error hierarchy raised by dialect operations.
"""

from __future__ import annotations


class DialectError(ValueError):
    """Base error for dialect failures."""


class UnsupportedIdentifierError(DialectError):
    """Raised when an identifier cannot be represented by the backend, even quoted."""

    def __init__(self, dialect: str, identifier: str, message: str) -> None:
        self.dialect = dialect
        self.identifier = identifier
        super().__init__(message)


class UnsupportedLockingError(DialectError):
    """Raised when the backend cannot express the requested row-locking clause."""

    def __init__(self, dialect: str, reason: str) -> None:
        self.dialect = dialect
        self.reason = reason
        super().__init__(f"{dialect}: {reason}")


class UnknownDialectError(DialectError, LookupError):
    """Raised when no dialect is registered under the requested name."""
