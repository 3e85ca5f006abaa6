"""
Dialect strategy interfaces and the baseline building blocks dialects compose.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from .errors import UnsupportedLockingError
from .locking import ANSI_LOCK_STRENGTHS, ALL_LOCK_WAITS, LockStrength, LockWait


@dataclass(frozen=True)
class DialectCapabilities:
    """
    Feature flags describing backend capabilities.
    """

    supports_lock_all_tables: bool = False
    lock_strengths: frozenset[LockStrength] = ANSI_LOCK_STRENGTHS
    lock_wait_policies: frozenset[LockWait] = ALL_LOCK_WAITS


class Dialect(Protocol):
    """
    Strategy interface consumed by SQL template rendering.
    """

    @property
    def name(self) -> str: ...

    @property
    def capabilities(self) -> DialectCapabilities: ...

    def ident(self, identifier: str) -> str: ...

    def select_for(
        self,
        *tables: str,
        strength: LockStrength = LockStrength.UPDATE,
        wait: LockWait = LockWait.BLOCK,
    ) -> str: ...

    def arg_placeholder(self, position: int) -> str: ...

    def limit_clause(self, limit: int | None, offset: int | None) -> str: ...


class StandardIdent:
    """
    ANSI identifier quoting: wrap in double quotes and double any embedded
    double quote. Accepts every input, including the empty string.
    """

    __slots__ = ()

    def ident(self, identifier: str) -> str:
        escaped = identifier.replace('"', '""')
        return f'"{escaped}"'


@dataclass(frozen=True)
class RowLockingClause:
    """
    Renders ``FOR <strength> [OF <tables>] [NOWAIT | SKIP LOCKED]``.

    ``supports_all`` states whether the backend accepts a bare clause that
    locks every table referenced by the query. Table names are quoted with
    the caller's ``quote`` function so escaping stays with the dialect.
    """

    supports_all: bool
    strengths: frozenset[LockStrength] = ANSI_LOCK_STRENGTHS
    wait_policies: frozenset[LockWait] = ALL_LOCK_WAITS

    @classmethod
    def from_capabilities(cls, capabilities: DialectCapabilities) -> RowLockingClause:
        return cls(
            supports_all=capabilities.supports_lock_all_tables,
            strengths=capabilities.lock_strengths,
            wait_policies=capabilities.lock_wait_policies,
        )

    def render(
        self,
        dialect: str,
        quote: Callable[[str], str],
        tables: Sequence[str],
        *,
        strength: LockStrength = LockStrength.UPDATE,
        wait: LockWait = LockWait.BLOCK,
    ) -> str:
        try:
            strength = LockStrength(strength.strip().upper())
            wait = LockWait(wait.strip().upper())
        except (AttributeError, ValueError) as exc:
            raise UnsupportedLockingError(dialect, str(exc)) from exc
        if strength not in self.strengths:
            raise UnsupportedLockingError(dialect, f"lock strength {strength.value!r} is not supported")
        if wait not in self.wait_policies:
            raise UnsupportedLockingError(dialect, f"lock wait policy {wait.value!r} is not supported")

        parts = ["FOR", strength.value]
        if tables:
            parts.append("OF")
            parts.append(", ".join(quote(table) for table in tables))
        elif not self.supports_all:
            raise UnsupportedLockingError(
                dialect, "locking all referenced tables requires explicit table names"
            )
        if wait is not LockWait.BLOCK:
            parts.append(wait.value)
        return " ".join(parts)
