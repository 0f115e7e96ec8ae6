"""
Registry holding the converters installed from one or more dialects.
"""

from __future__ import annotations

from threading import RLock
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Set, Tuple, Union

from ..errors import DialectConfigurationError
from ..utils import get_logger
from .converters import ConverterDirection, ConverterEntry

if TYPE_CHECKING:
    from ..dialects.base import Dialect


class ConverterRegistry:
    """
    Indexes converter entries by declared type and direction.

    A dialect's converter set is meant to be installed once at configuration
    time; lookups afterwards are read-only.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._entries: Dict[Tuple[ConverterDirection, type, type], ConverterEntry] = {}
        self._installed: Set[str] = set()
        self.logger = get_logger("conversion.registry")

    def install(self, source: Union["Dialect", Iterable[ConverterEntry]]) -> List[ConverterEntry]:
        """
        Register every available entry of ``source`` and return the ones registered.

        ``source`` is either a dialect or an iterable of entries. Installing the
        same dialect twice raises :class:`DialectConfigurationError`.
        """

        with self._lock:
            dialect_name: Optional[str] = None
            if hasattr(source, "converters") and hasattr(source, "name"):
                if source.name in self._installed:
                    raise DialectConfigurationError(
                        f"Converters of dialect '{source.name}' are already installed"
                    )
                entries = list(source.converters())
                dialect_name = source.name
            else:
                entries = list(source)

            batch: Dict[Tuple[ConverterDirection, type, type], ConverterEntry] = {}
            for entry in entries:
                if not isinstance(entry, ConverterEntry):
                    raise DialectConfigurationError(
                        f"Expected ConverterEntry, got {type(entry).__name__}"
                    )
                if not entry.is_available():
                    self.logger.debug("Skipping unavailable converter %s", entry.name)
                    continue
                key = (entry.direction, entry.source, entry.target)
                existing = batch.get(key)
                if existing is None:
                    existing = self._entries.get(key)
                self._check_conflict(existing, entry)
                batch[key] = entry

            self._entries.update(batch)
            if dialect_name is not None:
                self._installed.add(dialect_name)
            registered = list(batch.values())
            self.logger.debug(
                "Installed %s converters from %s", len(registered), dialect_name or "custom entries"
            )
            return registered

    @staticmethod
    def _check_conflict(existing: Optional[ConverterEntry], entry: ConverterEntry) -> None:
        if existing is not None and existing is not entry:
            raise DialectConfigurationError(
                f"Conflicting {entry.direction.value} converters for "
                f"{entry.source.__name__} -> {entry.target.__name__}: "
                f"{existing.name} and {entry.name}"
            )

    @property
    def entries(self) -> Tuple[ConverterEntry, ...]:
        return tuple(self._entries.values())

    def _lookup(
        self, direction: ConverterDirection, source_type: type, target: Optional[type]
    ) -> Optional[ConverterEntry]:
        def matches_target(entry: ConverterEntry) -> bool:
            return target is None or entry.target is target

        for klass in source_type.__mro__:
            for (entry_direction, entry_source, _), entry in self._entries.items():
                if entry_direction is direction and entry_source is klass and matches_target(entry):
                    return entry
        # abstract sources such as numbers.Number are not part of the MRO
        for (entry_direction, entry_source, _), entry in self._entries.items():
            if (
                entry_direction is direction
                and issubclass(source_type, entry_source)
                and matches_target(entry)
            ):
                return entry
        return None

    def reading_converter(self, source_type: type, target: type) -> Optional[ConverterEntry]:
        return self._lookup(ConverterDirection.READING, source_type, target)

    def writing_converter(self, source_type: type) -> Optional[ConverterEntry]:
        return self._lookup(ConverterDirection.WRITING, source_type, None)

    def convert_for_write(self, value: Any) -> Any:
        if value is None:
            return None
        entry = self.writing_converter(type(value))
        if entry is None:
            return value
        return entry.convert(value)

    def convert_for_read(self, value: Any, target: type) -> Any:
        if value is None:
            return None
        entry = self.reading_converter(type(value), target)
        if entry is None:
            return value
        return entry.convert(value)
