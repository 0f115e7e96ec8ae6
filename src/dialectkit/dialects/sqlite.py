"""
SQLite dialect implementation.
"""

from __future__ import annotations

from .ansi import AnsiDialect
from .base import Dialect, DialectCapabilities


class SQLiteDialect(AnsiDialect):
    """
    SQLite dialect using qmark param style and minimal capabilities.
    """

    __slots__ = ()

    name = "sqlite"
    param_style = "qmark"
    capabilities = DialectCapabilities(
        supports_returning=False,
        supports_savepoints=True,
        supports_partial_indexes=False,
        supports_schema_namespaces=False,
    )

    def format_table(self, table_name: str) -> str:
        return self.quote_identifier(table_name)

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            if limit is None:
                parts.append("LIMIT -1")
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)


def get_sqlite_dialect() -> Dialect:
    return SQLiteDialect()
