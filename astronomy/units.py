"""Physical units, dimensions and quantities backed by numpy arrays."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

import numpy as np


class Dimension(IntEnum):
    """The seven SI base dimensions."""

    LENGTH = 0
    MASS = 1
    TIME = 2
    ELECTRIC_CURRENT = 3
    ABSOLUTE_TEMPERATURE = 4
    AMOUNT_OF_SUBSTANCE = 5
    LUMINOUS_INTENSITY = 6


_DIMENSION_COUNT = len(Dimension)


@dataclass(frozen=True)
class UnitProduct:
    """Exponents of each base dimension, ordered as in Dimension."""

    exponents: tuple[int, ...] = field(default=(0,) * _DIMENSION_COUNT)

    def __post_init__(self) -> None:
        if len(self.exponents) != _DIMENSION_COUNT:
            raise ValueError(
                f"expected {_DIMENSION_COUNT} exponents, got {len(self.exponents)}"
            )
        object.__setattr__(self, "exponents", tuple(int(e) for e in self.exponents))

    @classmethod
    def of_dimension(cls, dimension: Dimension) -> UnitProduct:
        """A product with exponent one for the given dimension."""
        return cls.from_components([(dimension, 1)])

    @classmethod
    def from_components(cls, dims: Iterable[tuple[Dimension, int]]) -> UnitProduct:
        """Build a product from (dimension, exponent) pairs; later pairs win."""
        exponents = [0] * _DIMENSION_COUNT
        for dim, exp in dims:
            exponents[Dimension(dim)] = exp
        return cls(tuple(exponents))

    def multiply(self, other: UnitProduct) -> UnitProduct:
        """Combine two products by adding their exponents."""
        return UnitProduct(tuple(a + b for a, b in zip(self.exponents, other.exponents)))

    def inverse(self) -> UnitProduct:
        """Negate every exponent."""
        return UnitProduct(tuple(-e for e in self.exponents))


@dataclass(frozen=True)
class Unit:
    """A unit of measurement with its SI scale and dimensions."""

    name: str
    scale: float
    dimensions: UnitProduct

    def is_equivalent(self, other: Unit) -> bool:
        """True when both units share the same dimensions."""
        return self.dimensions == other.dimensions


SECOND = Unit("s", 1.0, UnitProduct.of_dimension(Dimension.TIME))
METER = Unit("m", 1.0, UnitProduct.of_dimension(Dimension.LENGTH))
KILOGRAM = Unit("kg", 1.0, UnitProduct.of_dimension(Dimension.MASS))
AMPERE = Unit("A", 1.0, UnitProduct.of_dimension(Dimension.ELECTRIC_CURRENT))
KELVIN = Unit("K", 1.0, UnitProduct.of_dimension(Dimension.ABSOLUTE_TEMPERATURE))
MOLE = Unit("mol", 1.0, UnitProduct.of_dimension(Dimension.AMOUNT_OF_SUBSTANCE))
CANDELA = Unit("cd", 1.0, UnitProduct.of_dimension(Dimension.LUMINOUS_INTENSITY))
CENTIMETER = Unit("cm", 0.01, UnitProduct.of_dimension(Dimension.LENGTH))

METER_PER_SECOND = Unit(
    "m/s",
    1.0,
    UnitProduct.from_components([(Dimension.LENGTH, 1), (Dimension.TIME, -1)]),
)
NEWTON = Unit(
    "N",
    1.0,
    UnitProduct.from_components(
        [(Dimension.MASS, 1), (Dimension.LENGTH, 1), (Dimension.TIME, -2)]
    ),
)
JOULE = Unit(
    "J",
    1.0,
    UnitProduct.from_components(
        [(Dimension.MASS, 1), (Dimension.LENGTH, 2), (Dimension.TIME, -2)]
    ),
)


class QuantityError(Exception):
    """Base class for errors raised by quantity operations."""


class IncompatibleUnitsError(QuantityError):
    def __init__(self, from_unit: str, to_unit: str) -> None:
        super().__init__(
            f"Incompatible units: Cannot convert '{from_unit}' to '{to_unit}'. "
            "Dimensions differ."
        )
        self.from_unit = from_unit
        self.to_unit = to_unit


class IncompatibleAdditionError(QuantityError):
    def __init__(self, lhs: str, rhs: str) -> None:
        super().__init__(
            f"Incompatible units: Cannot add '{lhs}' and '{rhs}'. "
            "Units are not identical."
        )
        self.lhs = lhs
        self.rhs = rhs


class IncompatibleSubtractionError(QuantityError):
    def __init__(self, lhs: str, rhs: str) -> None:
        super().__init__(
            f"Incompatible units: Cannot subtract '{lhs}' and '{rhs}'. "
            "Units are not identical."
        )
        self.lhs = lhs
        self.rhs = rhs


class IncompatibleMultiplicationError(QuantityError):
    def __init__(self, lhs: str, rhs: str) -> None:
        super().__init__(
            f"Incompatible units: Cannot multiply '{lhs}' and '{rhs}'. "
            "Units are not compatible."
        )
        self.lhs = lhs
        self.rhs = rhs


class IncompatibleDivisionError(QuantityError):
    def __init__(self, lhs: str, rhs: str) -> None:
        super().__init__(
            f"Incompatible units: Cannot divide '{lhs}' by '{rhs}'. "
            "Units are not compatible."
        )
        self.lhs = lhs
        self.rhs = rhs


class InvalidUnitError(QuantityError):
    def __init__(self, unit: str) -> None:
        super().__init__(f"Invalid unit: '{unit}'")
        self.unit = unit


class InvalidQuantityError(QuantityError):
    def __init__(self, quantity: str) -> None:
        super().__init__(f"Invalid quantity: '{quantity}'")
        self.quantity = quantity


class DivideByZeroError(QuantityError, ZeroDivisionError):
    def __init__(self) -> None:
        super().__init__("Invalid operation: Cannot divide by zero.")


class MismatchError(QuantityError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Mismatched quantity: {detail}")
        self.detail = detail


@dataclass(eq=False)
class Quantity:
    """An array of values carrying a unit."""

    value: np.ndarray
    unit: Unit

    def __post_init__(self) -> None:
        self.value = np.atleast_1d(np.asarray(self.value, dtype=float))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self.unit == other.unit and bool(np.array_equal(self.value, other.value))

    __hash__ = None  # type: ignore[assignment]

    def to(self, target_unit: Unit) -> Quantity:
        """Convert to a unit of the same dimensions."""
        if not self.unit.is_equivalent(target_unit):
            raise IncompatibleUnitsError(self.unit.name, target_unit.name)
        factor = self.unit.scale / target_unit.scale
        return Quantity(self.value * factor, target_unit)

    def multiply_scalar(self, scalar: float) -> Quantity:
        """Scale every value by a number."""
        return Quantity(self.value * scalar, self.unit)

    def divide_scalar(self, scalar: float) -> Quantity:
        """Divide every value by a non-zero number."""
        if scalar == 0.0:
            raise DivideByZeroError()
        return Quantity(self.value / scalar, self.unit)

    def __add__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.unit != other.unit:
            raise IncompatibleAdditionError(self.unit.name, other.unit.name)
        return Quantity(self.value + other.value, self.unit)

    def __sub__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.unit != other.unit:
            raise IncompatibleSubtractionError(self.unit.name, other.unit.name)
        return Quantity(self.value - other.value, self.unit)

    def __mul__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        unit = Unit(
            f"{self.unit.name}*{other.unit.name}",
            self.unit.scale * other.unit.scale,
            self.unit.dimensions.multiply(other.unit.dimensions),
        )
        return Quantity(self.value * other.value, unit)

    def __truediv__(self, other: object) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        if np.any(other.value == 0.0):
            raise DivideByZeroError()
        unit = Unit(
            f"{self.unit.name}/{other.unit.name}",
            self.unit.scale / other.unit.scale,
            self.unit.dimensions.multiply(other.unit.dimensions.inverse()),
        )
        return Quantity(self.value / other.value, unit)