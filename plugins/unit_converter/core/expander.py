"""Expand declared primary/minor transforms into directional conversion entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List

from common.logging import get_logger

from .catalog import QuantityGroup, Unit
from .registry import TransformRegistry
from .transform import Transform

logger = get_logger("unit_converter.expander")


@dataclass(frozen=True)
class ConversionEntry:
    """A resolved rule converting values from one signature to another."""

    from_signature: str
    to_signature: str
    convert: Callable[[float], float]
    quantity: str = ""


def _minor_to_minor(source: Transform, target: Transform) -> Callable[[float], float]:
    def convert(value: float) -> float:
        return target.backward(source.forward(value))

    return convert


def expand_group(group: QuantityGroup, registry: TransformRegistry) -> List[ConversionEntry]:
    """Return every conversion entry for ``group``.

    Entries come out as primary -> minor, then minor -> primary, then one
    entry per ordered pair of distinct minors. Minor to minor conversions go
    through the primary scale.

    Every declared transform is built here, so a bad declaration raises
    :class:`ConfigurationError` before any entry is handed out.
    """

    primary = group.primary
    quantity = group.quantity
    transforms: Dict[Unit, Transform] = {
        minor: registry.get(primary, minor) for minor in group.minors
    }
    entries: List[ConversionEntry] = []
    for minor in group.minors:
        entries.append(
            ConversionEntry(
                primary.signature, minor.signature, transforms[minor].backward, quantity
            )
        )
    for minor in group.minors:
        entries.append(
            ConversionEntry(
                minor.signature, primary.signature, transforms[minor].forward, quantity
            )
        )
    for first in group.minors:
        for second in group.minors:
            if first == second:
                continue
            entries.append(
                ConversionEntry(
                    second.signature,
                    first.signature,
                    _minor_to_minor(transforms[second], transforms[first]),
                    quantity,
                )
            )
    return entries


def expand_catalog(
    groups: Iterable[QuantityGroup], registry: TransformRegistry
) -> List[ConversionEntry]:
    """Concatenate the entries of ``groups`` in declaration order."""

    entries: List[ConversionEntry] = []
    group_count = 0
    for group in groups:
        entries.extend(expand_group(group, registry))
        group_count += 1
    logger.debug("expanded %d conversion entries for %d groups", len(entries), group_count)
    return entries


__all__ = ["ConversionEntry", "expand_group", "expand_catalog"]
