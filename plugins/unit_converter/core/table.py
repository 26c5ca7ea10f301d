"""Declared primary/minor conversions and the transforms built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

from .catalog import (
    CELSIUS,
    FAHRENHEIT,
    GRAM,
    KELVIN,
    METER,
    MILE,
    POOD,
    POUND,
    VERST,
    Unit,
)
from .transform import ConfigurationError, LinearTransform, SwappedLinearTransform, Transform

UnitPair = Tuple[Unit, Unit]


@dataclass(frozen=True)
class AffineSpec:
    """Affine parameters describing a minor unit on its primary scale."""

    factor: float
    offset: float = 0.0


CONVERSION_TABLE: Dict[UnitPair, AffineSpec] = {
    # Weight.
    (GRAM, POUND): AffineSpec(453.592),
    (GRAM, POOD): AffineSpec(16_380.7),
    # Distance.
    (METER, MILE): AffineSpec(1_609.34),
    (METER, VERST): AffineSpec(1_066.8),
    # Temperature.
    (CELSIUS, FAHRENHEIT): AffineSpec(9.0 / 5.0, 32.0),
    (CELSIUS, KELVIN): AffineSpec(1.0, 273.15),
}

# Pairs whose formula is written primary -> minor (F = C * 1.8 + 32).
SWAPPED_PAIRS: FrozenSet[UnitPair] = frozenset(
    {
        (CELSIUS, FAHRENHEIT),
        (CELSIUS, KELVIN),
    }
)


def build_transform(primary: Unit, minor: Unit) -> Transform:
    """Construct the transform declared for ``(primary, minor)``."""

    pair = (primary, minor)
    try:
        spec = CONVERSION_TABLE[pair]
    except KeyError as exc:
        raise ConfigurationError(
            f"No conversion declared between '{primary.signature}' and '{minor.signature}'."
        ) from exc
    transform_cls = SwappedLinearTransform if pair in SWAPPED_PAIRS else LinearTransform
    return transform_cls(spec.factor, spec.offset)


__all__ = [
    "AffineSpec",
    "CONVERSION_TABLE",
    "SWAPPED_PAIRS",
    "UnitPair",
    "build_transform",
]
