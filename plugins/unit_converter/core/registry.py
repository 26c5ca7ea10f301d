"""Lazily built cache of primary/minor transforms."""

from __future__ import annotations

from threading import Lock
from typing import Callable, Dict

from common.logging import get_logger

from .catalog import Unit
from .table import UnitPair, build_transform
from .transform import Transform

TransformFactory = Callable[[Unit, Unit], Transform]

logger = get_logger("unit_converter.registry")


class TransformRegistry:
    """Build each ``(primary, minor)`` transform once and hand out the same instance.

    Lookups after the first one for a pair do not take the lock. The first
    lookup is serialised so concurrent callers never see two instances.
    """

    def __init__(self, factory: TransformFactory = build_transform) -> None:
        self._factory = factory
        self._transforms: Dict[UnitPair, Transform] = {}
        self._lock = Lock()

    def get(self, primary: Unit, minor: Unit) -> Transform:
        pair = (primary, minor)
        transform = self._transforms.get(pair)
        if transform is not None:
            return transform
        with self._lock:
            transform = self._transforms.get(pair)
            if transform is None:
                transform = self._factory(primary, minor)
                self._transforms[pair] = transform
                logger.debug(
                    "built transform %s -> %s: %r",
                    primary.signature,
                    minor.signature,
                    transform,
                )
        return transform

    def __len__(self) -> int:
        return len(self._transforms)

    def __contains__(self, pair: object) -> bool:
        return pair in self._transforms


__all__ = ["TransformFactory", "TransformRegistry"]
