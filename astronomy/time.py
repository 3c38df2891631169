"""GPS time values held as exact decimals."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, order=True)
class Time:
    """A point in time, in GPS seconds, stored as an exact decimal."""

    value: Decimal

    @classmethod
    def from_gps_seconds(cls, seconds: float) -> Time:
        """Build a Time from GPS seconds given as a float."""
        seconds = float(seconds)
        if not math.isfinite(seconds):
            raise ValueError(f"cannot represent {seconds!r} GPS seconds as a Time")
        return cls(Decimal(repr(seconds)))

    def as_gps_seconds(self) -> float:
        """Return the time in GPS seconds as a float."""
        return float(self.value)

    def __str__(self) -> str:
        return format(self.value, "f")

    def __add__(self, other: object) -> Time:
        if not isinstance(other, Time):
            return NotImplemented
        return Time(self.value + other.value)