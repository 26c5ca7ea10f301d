"""Numeric transforms between a primary unit and one of its minor units."""

from __future__ import annotations

EPSILON = 1e-10


class ConversionError(Exception):
    """Base exception for conversion failures."""


class ConfigurationError(ConversionError):
    """Raised when a declared conversion cannot be built."""


class Transform:
    """Stateless mapping between the primary scale and a minor scale.

    ``forward`` takes a magnitude expressed in the minor unit onto the primary
    scale and ``backward`` is its inverse.
    """

    def forward(self, value: float) -> float:  # pragma: no cover - interface
        raise NotImplementedError

    def backward(self, value: float) -> float:  # pragma: no cover - interface
        raise NotImplementedError


class LinearTransform(Transform):
    """Affine transform ``primary = factor * minor + offset``."""

    def __init__(self, factor: float = 1.0, offset: float = 0.0) -> None:
        if abs(factor) < EPSILON:
            raise ConfigurationError(
                f"Conversion factor {factor!r} is too small (must be >= {EPSILON})."
            )
        self.factor = float(factor)
        self.offset = float(offset)
        self._reciprocal = 1.0 / self.factor

    def forward(self, value: float) -> float:
        return self.factor * value + self.offset

    def backward(self, value: float) -> float:
        return (value - self.offset) * self._reciprocal

    def __repr__(self) -> str:
        return f"{type(self).__name__}(factor={self.factor!r}, offset={self.offset!r})"


class SwappedLinearTransform(LinearTransform):
    """Affine transform declared in the primary -> minor direction.

    ``F = C * 9/5 + 32`` is written from the primary (celsius) side, so the
    affine directions are exchanged to keep ``forward`` pointing at the
    primary scale.
    """

    def forward(self, value: float) -> float:
        return super().backward(value)

    def backward(self, value: float) -> float:
        return super().forward(value)


__all__ = [
    "EPSILON",
    "ConversionError",
    "ConfigurationError",
    "Transform",
    "LinearTransform",
    "SwappedLinearTransform",
]
