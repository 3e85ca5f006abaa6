"""Backend selection from connection strings."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import SplitResult, urlsplit


@dataclass(frozen=True)
class DSNConfig:
    """
    The parts of a DSN a dialect lookup needs: its scheme and a form safe to log.
    """

    scheme: str
    redacted: str

    @property
    def backend(self) -> str:
        """
        Scheme without a ``+driver`` suffix: ``postgresql+psycopg`` gives ``postgresql``.
        """

        return self.scheme.split("+", 1)[0]


def _mask_password(parts: SplitResult) -> str:
    userinfo, at, hostport = parts.netloc.rpartition("@")
    if not at:
        return parts.geturl()
    user, colon, _ = userinfo.partition(":")
    masked = f"{user}:***" if colon else user
    return parts._replace(netloc=f"{masked}@{hostport}").geturl()


def parse_dsn(dsn: str) -> DSNConfig:
    """
    Split ``dsn`` into its scheme and a credential-free rendering.

    Raises ``ValueError`` for a missing scheme or a port that is not a number;
    the message only ever carries the redacted DSN.
    """

    parts = urlsplit(dsn.strip())
    redacted = _mask_password(parts)
    if not parts.scheme:
        raise ValueError(f"DSN '{redacted}' is missing a scheme")
    try:
        parts.port
    except ValueError as exc:
        raise ValueError(f"DSN '{redacted}' has an invalid port") from exc
    return DSNConfig(scheme=parts.scheme, redacted=redacted)
