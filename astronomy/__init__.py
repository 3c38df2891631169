"""Astronomical calculations: exact GPS time values and physical quantities with units."""

__version__ = "0.1.4"
__all__ = ["cli", "time", "units"]