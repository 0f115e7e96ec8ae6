"""
Naming strategies used while rendering SQL identifiers.
"""

from __future__ import annotations

from typing import Callable

from ..errors import NamingConfigurationError
from ..sql import Column, Table

NameTransform = Callable[[str], str]


class RenderNamingStrategy:
    """
    Maps column and table descriptors to rendered names.

    The base implementation passes the names assigned by the schema model
    through unchanged. Subclasses override individual operations; callers that
    only need to post-process names should use :meth:`derive`.
    """

    def column_name(self, column: Column) -> str:
        return column.name

    def column_reference_name(self, column: Column) -> str:
        return column.reference_name

    def table_name(self, table: Table) -> str:
        return table.name

    def table_reference_name(self, table: Table) -> str:
        return table.reference_name

    def get_name(self, obj: Column | Table) -> str:
        if isinstance(obj, Column):
            return self.column_name(obj)
        if isinstance(obj, Table):
            return self.table_name(obj)
        raise TypeError(f"Cannot render a name for {type(obj).__name__}")

    def get_reference_name(self, obj: Column | Table) -> str:
        if isinstance(obj, Column):
            return self.column_reference_name(obj)
        if isinstance(obj, Table):
            return self.table_reference_name(obj)
        raise TypeError(f"Cannot render a reference name for {type(obj).__name__}")

    def derive(self, transform: NameTransform) -> "RenderNamingStrategy":
        """
        Return a strategy applying ``transform`` to every name this one renders.

        The receiver is left untouched. Deriving from a derived strategy applies
        the inner transform first.
        """

        if transform is None:
            raise NamingConfigurationError("Mapping function must not be None")
        if not callable(transform):
            raise NamingConfigurationError(
                f"Mapping function must be callable, got {type(transform).__name__}"
            )
        return DelegatingRenderNamingStrategy(self, transform)


class DelegatingRenderNamingStrategy(RenderNamingStrategy):
    """
    Strategy delegating to a base strategy and mapping its results.
    """

    def __init__(self, delegate: RenderNamingStrategy, transform: NameTransform) -> None:
        self._delegate = delegate
        self._transform = transform

    @property
    def delegate(self) -> RenderNamingStrategy:
        return self._delegate

    def column_name(self, column: Column) -> str:
        return self._transform(self._delegate.column_name(column))

    def column_reference_name(self, column: Column) -> str:
        return self._transform(self._delegate.column_reference_name(column))

    def table_name(self, table: Table) -> str:
        return self._transform(self._delegate.table_name(table))

    def table_reference_name(self, table: Table) -> str:
        return self._transform(self._delegate.table_reference_name(table))

    def __repr__(self) -> str:
        name = getattr(self._transform, "__name__", repr(self._transform))
        return f"{type(self).__name__}({self._delegate!r}, {name})"


class _AsIsNamingStrategy(RenderNamingStrategy):
    def __repr__(self) -> str:
        return "as_is()"


_AS_IS = _AsIsNamingStrategy()
_TO_UPPER = _AS_IS.derive(str.upper)
_TO_LOWER = _AS_IS.derive(str.lower)


def as_is() -> RenderNamingStrategy:
    """Strategy rendering names exactly as the schema model declares them."""
    return _AS_IS


def to_upper() -> RenderNamingStrategy:
    return _TO_UPPER


def to_lower() -> RenderNamingStrategy:
    return _TO_LOWER


def map_with(transform: NameTransform) -> RenderNamingStrategy:
    return _AS_IS.derive(transform)
