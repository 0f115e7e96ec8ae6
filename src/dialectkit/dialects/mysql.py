"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Tuple

from ..conversion.converters import ConverterEntry, timestamp_at_utc_to_aware_datetime
from .ansi import AnsiDialect
from .base import Dialect, DialectCapabilities


class MySQLDialect(AnsiDialect):
    """
    MySQL dialect using percent-style placeholders.
    """

    __slots__ = ()

    name = "mysql"
    param_style = "pyformat"
    capabilities = DialectCapabilities(
        supports_returning=False,
        supports_savepoints=True,
        supports_partial_indexes=False,
        supports_schema_namespaces=True,
    )

    def converters(self) -> Tuple[ConverterEntry, ...]:
        return super().converters() + (timestamp_at_utc_to_aware_datetime,)

    def quote_identifier(self, identifier: str) -> str:
        escaped = identifier.replace("`", "``")
        return f"`{escaped}`"

    def limit_clause(self, limit: int | None, offset: int | None) -> str:
        parts: list[str] = []
        if limit is not None:
            parts.append(f"LIMIT {limit}")
        if offset is not None:
            if limit is None:
                parts.append("LIMIT 18446744073709551615")
            parts.append(f"OFFSET {offset}")
        return " ".join(parts)

    def parameter_placeholder(self, position: int | None = None) -> str:
        return "%s"


def get_mysql_dialect() -> Dialect:
    return MySQLDialect()
