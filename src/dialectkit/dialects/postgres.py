"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from .ansi import AnsiDialect
from .base import Dialect, DialectCapabilities


class PostgresDialect(AnsiDialect):
    """
    PostgreSQL dialect using percent positional parameters.
    """

    __slots__ = ()

    name = "postgresql"
    param_style = "pyformat"
    capabilities = DialectCapabilities(
        supports_returning=True,
        supports_savepoints=True,
        supports_partial_indexes=True,
        supports_schema_namespaces=True,
    )

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "%s"


def get_postgres_dialect() -> Dialect:
    return PostgresDialect()
