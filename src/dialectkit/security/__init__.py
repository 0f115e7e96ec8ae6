"""
Security helpers for handling connection strings.
"""

from .dsns import DSNConfig, dsn_from_env, parse_dsn

__all__ = ["DSNConfig", "dsn_from_env", "parse_dsn"]
