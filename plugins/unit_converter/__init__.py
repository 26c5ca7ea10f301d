"""Unit converter plugin."""

manifest = {
    "title": "Unit Converter",
    "summary": "Weight, distance and temperature conversions between fixed unit signatures.",
    "blueprint": "unit_converter",
    "category": "General Utilities",
}


__all__ = ["manifest"]
