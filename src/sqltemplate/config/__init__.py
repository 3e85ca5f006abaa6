"""
Configuration helpers for selecting a dialect.
"""

from .dsns import DSNConfig, parse_dsn

__all__ = ["DSNConfig", "parse_dsn"]
