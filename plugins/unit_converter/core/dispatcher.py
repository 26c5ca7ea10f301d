"""First-match dispatch of a conversion request over the expanded entries."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from .catalog import CATALOG, QuantityGroup, Unit, index_units
from .expander import ConversionEntry, expand_catalog
from .registry import TransformRegistry


class Dispatcher:
    """Resolve ``(from, to)`` signature pairs to a conversion and apply it.

    The entry table and the transforms behind it are built once, at
    construction, and never change. An index keyed by ``(from, to)`` keeps
    the first entry for each key, which is the one a sequential scan would
    pick. A bad declaration raises :class:`ConfigurationError` from here.
    """

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        groups: Iterable[QuantityGroup] = CATALOG,
    ) -> None:
        self.registry = registry if registry is not None else TransformRegistry()
        self.groups: Tuple[QuantityGroup, ...] = tuple(groups)
        self._units = index_units(self.groups)
        self.entries: Tuple[ConversionEntry, ...] = tuple(
            expand_catalog(self.groups, self.registry)
        )
        self._index: Dict[Tuple[str, str], ConversionEntry] = {}
        for entry in self.entries:
            self._index.setdefault((entry.from_signature, entry.to_signature), entry)

    def describe(self, from_signature: str, to_signature: str) -> Optional[ConversionEntry]:
        """Return the entry that would handle the pair, or ``None``."""

        return self._index.get((from_signature, to_signature))

    def process(self, from_signature: str, to_signature: str, value: float) -> Optional[float]:
        """Convert ``value`` or return ``None`` when no conversion applies."""

        if from_signature == to_signature and from_signature in self._units:
            return value
        entry = self.describe(from_signature, to_signature)
        if entry is None:
            return None
        return entry.convert(value)

    def unit(self, signature: str) -> Optional[Unit]:
        return self._units.get(signature)


__all__ = ["Dispatcher"]
