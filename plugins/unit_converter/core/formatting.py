"""Rendering helpers for converted values."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from .transform import ConversionError


class BadInputError(ConversionError):
    """Raised when formatting options cannot be honoured."""


def format_value(
    value: float,
    *,
    decimals: Optional[int] = None,
    sig_figs: Optional[int] = None,
) -> str:
    """Format ``value`` with fixed decimals, significant figures or ``%.15g``."""

    if decimals is not None:
        if decimals < 0:
            raise BadInputError("Decimal precision must be non-negative.")
        return f"{value:.{decimals}f}"
    if sig_figs is not None:
        if sig_figs <= 0:
            raise BadInputError("Significant figures must be positive.")
        if not math.isfinite(value):
            return f"{value}"
        return _format_sig_figs(value, sig_figs)
    return f"{value:.15g}"


def _format_sig_figs(value: float, sig_figs: int) -> str:
    if value == 0:
        return "0" if sig_figs == 1 else "0." + "0" * (sig_figs - 1)
    exponent = int(math.floor(math.log10(abs(value))))
    quantum = Decimal(1).scaleb(exponent - sig_figs + 1)
    with localcontext() as ctx:
        ctx.prec = sig_figs + 3
        rounded = Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    # Rounding can carry into the next power of ten (9.999 -> 10.0).
    exponent = rounded.adjusted()
    if -4 <= exponent < sig_figs:
        return f"{float(rounded):.{max(sig_figs - 1 - exponent, 0)}f}"
    return f"{float(rounded):.{sig_figs - 1}e}"


__all__ = ["BadInputError", "format_value"]
