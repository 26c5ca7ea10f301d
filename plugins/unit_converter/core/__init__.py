"""Facade for the unit converter core."""

from __future__ import annotations

from typing import Dict, List, Optional

from .catalog import CATALOG, QuantityGroup, Unit
from .dispatcher import Dispatcher
from .expander import ConversionEntry, expand_catalog, expand_group
from .formatting import BadInputError, format_value
from .registry import TransformRegistry
from .table import CONVERSION_TABLE, SWAPPED_PAIRS, build_transform
from .transform import (
    EPSILON,
    ConfigurationError,
    ConversionError,
    LinearTransform,
    SwappedLinearTransform,
    Transform,
)


def build_dispatcher() -> Dispatcher:
    """Create a dispatcher that owns a fresh transform registry."""

    return Dispatcher(TransformRegistry(), CATALOG)


def list_groups(dispatcher: Dispatcher) -> List[Dict[str, object]]:
    """Describe every quantity group served by ``dispatcher``."""

    return [group.to_dict() for group in dispatcher.groups]


def group_for(dispatcher: Dispatcher, quantity: str) -> Optional[QuantityGroup]:
    for group in dispatcher.groups:
        if group.quantity == quantity:
            return group
    return None


__all__ = [
    "BadInputError",
    "CATALOG",
    "CONVERSION_TABLE",
    "ConfigurationError",
    "ConversionEntry",
    "ConversionError",
    "Dispatcher",
    "EPSILON",
    "LinearTransform",
    "QuantityGroup",
    "SWAPPED_PAIRS",
    "SwappedLinearTransform",
    "Transform",
    "TransformRegistry",
    "Unit",
    "build_dispatcher",
    "build_transform",
    "expand_catalog",
    "expand_group",
    "format_value",
    "group_for",
    "list_groups",
]
