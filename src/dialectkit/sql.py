"""
Schema descriptors consumed by naming strategies.

A renderer hands :class:`Table` and :class:`Column` instances to a
:class:`~dialectkit.render.naming.RenderNamingStrategy`; both expose the
declared name and the name used to reference the object elsewhere in a
statement (the alias when one is set).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Table:
    name: str
    alias: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Table name must not be empty")

    @property
    def reference_name(self) -> str:
        return self.alias or self.name

    def as_(self, alias: str) -> "Table":
        return replace(self, alias=alias)

    def column(self, name: str) -> "Column":
        return Column(name, self)


@dataclass(frozen=True)
class Column:
    name: str
    table: Optional[Table] = None
    alias: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Column name must not be empty")

    @property
    def reference_name(self) -> str:
        return self.alias or self.name

    def as_(self, alias: str) -> "Column":
        return replace(self, alias=alias)
