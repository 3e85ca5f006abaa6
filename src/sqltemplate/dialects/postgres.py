"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from ..utils import get_logger
from .base import Dialect, DialectCapabilities, RowLockingClause, StandardIdent
from .errors import UnsupportedIdentifierError
from .locking import ALL_LOCK_STRENGTHS, ALL_LOCK_WAITS, LockStrength, LockWait

logger = get_logger("dialects.postgres")


class PostgresDialect:
    """
    PostgreSQL dialect using numbered ``$n`` placeholders.

    Identifiers follow the ANSI quoting rule except that the character with
    code zero is rejected: it cannot appear in a PostgreSQL identifier at all.
    See https://www.postgresql.org/docs/current/sql-syntax-lexical.html
    """

    __slots__ = ()

    name: Final[str] = "postgresql"
    capabilities: Final[DialectCapabilities] = DialectCapabilities(
        supports_lock_all_tables=True,
        lock_strengths=ALL_LOCK_STRENGTHS,
        lock_wait_policies=ALL_LOCK_WAITS,
    )
    _quoter: Final[StandardIdent] = StandardIdent()
    _locking: Final[RowLockingClause] = RowLockingClause.from_capabilities(capabilities)

    def ident(self, identifier: str) -> str:
        if "\x00" in identifier:
            logger.debug("Rejected identifier containing NUL", extra={"dialect": self.name})
            raise UnsupportedIdentifierError(
                self.name,
                identifier,
                "identifiers in PostgreSQL cannot contain the character with code zero",
            )
        return self._quoter.ident(identifier)

    def select_for(
        self,
        *tables: str,
        strength: LockStrength = LockStrength.UPDATE,
        wait: LockWait = LockWait.BLOCK,
    ) -> str:
        return self._locking.render(self.name, self.ident, tables, strength=strength, wait=wait)

    def arg_placeholder(self, position: int) -> str:
        if position < 1:
            raise ValueError(f"Argument positions start at 1, got {position}")
        return f"${position}"

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


POSTGRESQL: Final[Dialect] = PostgresDialect()


def get_postgres_dialect() -> Dialect:
    return POSTGRESQL
