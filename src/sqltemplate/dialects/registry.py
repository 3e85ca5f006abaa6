"""
Process-wide registry of dialect singletons.
"""

from __future__ import annotations

from threading import RLock
from typing import Dict

from ..config.dsns import parse_dsn
from ..utils import get_logger
from .base import Dialect
from .errors import DialectError, UnknownDialectError
from .postgres import POSTGRESQL

logger = get_logger("dialects.registry")

_lock = RLock()
_dialects: Dict[str, Dialect] = {}


def _normalize(name: str) -> str:
    return name.strip().lower()


def register_dialect(dialect: Dialect, *aliases: str) -> None:
    """
    Register ``dialect`` under its name and any extra aliases.

    Registering the same instance twice is a no-op; claiming a name already
    bound to another dialect raises :class:`DialectError`.
    """

    names = [dialect.name, *aliases]
    with _lock:
        for key in (_normalize(name) for name in names):
            existing = _dialects.get(key)
            if existing is not None and existing is not dialect:
                raise DialectError(f"Dialect name '{key}' is already registered to {existing.name}")
        for key in (_normalize(name) for name in names):
            _dialects[key] = dialect
    logger.debug("Registered dialect %s (aliases: %s)", dialect.name, ", ".join(aliases) or "-")


def get_dialect(name: str) -> Dialect:
    with _lock:
        dialect = _dialects.get(_normalize(name))
    if dialect is None:
        raise UnknownDialectError(f"Unknown dialect '{name}'")
    return dialect


def dialect_for_dsn(dsn: str) -> Dialect:
    try:
        config = parse_dsn(dsn)
    except ValueError as exc:
        raise DialectError(str(exc)) from exc
    try:
        dialect = get_dialect(config.backend)
    except UnknownDialectError as exc:
        raise UnknownDialectError(f"No dialect for DSN '{config.redacted}'") from exc
    logger.debug("Resolved dialect %s for %s", dialect.name, config.redacted)
    return dialect


def available_dialects() -> list[str]:
    with _lock:
        return sorted({dialect.name for dialect in _dialects.values()})


register_dialect(POSTGRESQL, "postgres", "pgsql", "pgx")
