"""Static declarations of the supported units grouped by physical quantity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class Unit:
    """A unit identified by its exact, case-sensitive signature."""

    signature: str
    name: str
    quantity: str


@dataclass(frozen=True)
class QuantityGroup:
    """Units measuring one physical quantity around a single primary unit."""

    quantity: str
    primary: Unit
    minors: Tuple[Unit, ...]

    def __post_init__(self) -> None:
        signatures = [unit.signature for unit in self.units]
        if len(set(signatures)) != len(signatures):
            raise ValueError(f"Duplicate unit signature in group '{self.quantity}'.")
        for unit in self.units:
            if unit.quantity != self.quantity:
                raise ValueError(
                    f"Unit '{unit.signature}' belongs to '{unit.quantity}', "
                    f"not '{self.quantity}'."
                )

    @property
    def units(self) -> Tuple[Unit, ...]:
        return (self.primary, *self.minors)

    def to_dict(self) -> Dict[str, object]:
        return {
            "quantity": self.quantity,
            "primary": _unit_dict(self.primary),
            "minors": [_unit_dict(unit) for unit in self.minors],
        }


def _unit_dict(unit: Unit) -> Dict[str, str]:
    return {"signature": unit.signature, "name": unit.name}


# Weight.
GRAM = Unit("g", "gram", "weight")
POUND = Unit("lb", "pound", "weight")
POOD = Unit("p", "pood", "weight")

# Distance.
METER = Unit("m", "meter", "distance")
MILE = Unit("ml", "mile", "distance")
VERST = Unit("v", "verst", "distance")

# Temperature.
CELSIUS = Unit("c", "celsius", "temperature")
FAHRENHEIT = Unit("f", "fahrenheit", "temperature")
KELVIN = Unit("k", "kelvin", "temperature")

WEIGHT = QuantityGroup("weight", GRAM, (POUND, POOD))
DISTANCE = QuantityGroup("distance", METER, (MILE, VERST))
TEMPERATURE = QuantityGroup("temperature", CELSIUS, (FAHRENHEIT, KELVIN))

CATALOG: Tuple[QuantityGroup, ...] = (WEIGHT, DISTANCE, TEMPERATURE)


def index_units(groups: Iterable[QuantityGroup]) -> Dict[str, Unit]:
    """Map every signature in ``groups`` to its unit, rejecting collisions."""

    index: Dict[str, Unit] = {}
    for group in groups:
        for unit in group.units:
            if unit.signature in index:
                raise ValueError(f"Unit signature '{unit.signature}' is declared twice.")
            index[unit.signature] = unit
    return index


__all__ = [
    "Unit",
    "QuantityGroup",
    "GRAM",
    "POUND",
    "POOD",
    "METER",
    "MILE",
    "VERST",
    "CELSIUS",
    "FAHRENHEIT",
    "KELVIN",
    "WEIGHT",
    "DISTANCE",
    "TEMPERATURE",
    "CATALOG",
    "index_units",
]
