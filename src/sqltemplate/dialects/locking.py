"""
Row-locking vocabulary shared by every dialect.
"""

from __future__ import annotations

from enum import Enum


class LockStrength(str, Enum):
    UPDATE = "UPDATE"
    NO_KEY_UPDATE = "NO KEY UPDATE"
    SHARE = "SHARE"
    KEY_SHARE = "KEY SHARE"


class LockWait(str, Enum):
    """
    What a locking read does when a target row is already locked.
    """

    BLOCK = ""
    NOWAIT = "NOWAIT"
    SKIP_LOCKED = "SKIP LOCKED"


ANSI_LOCK_STRENGTHS: frozenset[LockStrength] = frozenset({LockStrength.UPDATE, LockStrength.SHARE})
ALL_LOCK_STRENGTHS: frozenset[LockStrength] = frozenset(LockStrength)
ALL_LOCK_WAITS: frozenset[LockWait] = frozenset(LockWait)
