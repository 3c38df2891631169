# astronomy

A small library for astronomical calculations. It provides:

- `astronomy.time.Time`: a GPS time value held as an exact decimal.
- `astronomy.units`: the SI base dimensions, units built from them, and
  array-valued quantities that carry their unit through arithmetic.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Time

```python
from astronomy.time import Time

t = Time.from_gps_seconds(1126259446.0)
later = t + Time.from_gps_seconds(0.5)

print(later)                    # 1126259446.5
print(later.as_gps_seconds())   # 1126259446.5
assert t < later
```

`Time.from_gps_seconds` takes a float and stores the decimal form of its
shortest representation, so `Time.from_gps_seconds(98765.4321)` prints as
`98765.4321`. Infinite or NaN seconds raise `ValueError`.

`Time` values are immutable, compare and order by their value, and add
exactly, because the seconds are held as a `decimal.Decimal` (available as
the `value` attribute) rather than a float. `str()` writes the value in
plain positional notation.

## Units and quantities

### Dimensions and unit products

`Dimension` is an enumeration of the seven SI base dimensions: `LENGTH`,
`MASS`, `TIME`, `ELECTRIC_CURRENT`, `ABSOLUTE_TEMPERATURE`,
`AMOUNT_OF_SUBSTANCE` and `LUMINOUS_INTENSITY`.

A `UnitProduct` holds one integer exponent per dimension:

```python
from astronomy.units import Dimension, UnitProduct

length = UnitProduct.of_dimension(Dimension.LENGTH)
velocity = UnitProduct.from_components([(Dimension.LENGTH, 1), (Dimension.TIME, -1)])

print(velocity.exponents)                  # (1, 0, -1, 0, 0, 0, 0)
print(length.multiply(length).exponents)   # (2, 0, 0, 0, 0, 0, 0)
print(velocity.inverse().exponents)        # (-1, 0, 1, 0, 0, 0, 0)
```

In `from_components`, a dimension given more than once takes the last
exponent given for it.

### Units

A `Unit` has a `name`, a `scale` relative to SI, and its `dimensions`.
`is_equivalent` is true when two units share the same dimensions.

These units are predefined in `astronomy.units`: `SECOND`, `METER`,
`KILOGRAM`, `AMPERE`, `KELVIN`, `MOLE`, `CANDELA`, `CENTIMETER` (scale
0.01), `METER_PER_SECOND`, `NEWTON` and `JOULE`.

```python
from astronomy.units import Unit, UnitProduct, Dimension, METER, CENTIMETER

kilometre = Unit("km", 1000.0, UnitProduct.of_dimension(Dimension.LENGTH))
assert kilometre.is_equivalent(METER)
assert METER.is_equivalent(CENTIMETER)
```

### Quantities

A `Quantity` pairs values with a unit. The values are always stored as a
one-dimensional (or higher) float numpy array; a scalar becomes a
one-element array. Two quantities are equal when their units are equal and
their arrays are equal element by element.

```python
import numpy as np
from astronomy.units import Quantity, METER, CENTIMETER, SECOND

d = Quantity(np.array([1.0, 2.0]), METER)
print(d.to(CENTIMETER).value)           # [100. 200.]

t = Quantity(np.array([2.0, 4.0]), SECOND)
v = d / t
print(v.unit.name)                      # m/s
print(v.value)                          # [0.5 0.5]

print((d * t).unit.name)                # m*s
print(d.multiply_scalar(3.0).value)     # [3. 6.]
print(d.divide_scalar(2.0).value)       # [0.5 1. ]
```

Multiplying or dividing two quantities builds a new unit whose name joins
the two names with `*` or `/`, whose scale is the product or quotient of the
scales, and whose dimensions combine the exponents.

### Errors

Every error is a subclass of `QuantityError`:

- `to` with a unit of different dimensions raises `IncompatibleUnitsError`.
- `+` and `-` need identical units and raise `IncompatibleAdditionError` or
  `IncompatibleSubtractionError` otherwise. Convert first with `to`:

  ```python
  total = d.to(CENTIMETER) + Quantity(np.array([3.0, 4.0]), CENTIMETER)
  print(total.value)                    # [103. 204.]
  ```

- `divide_scalar(0.0)`, or dividing by a quantity with any zero element,
  raises `DivideByZeroError`, which is also a `ZeroDivisionError`. Its
  message is `Invalid operation: Cannot divide by zero.`

The module also defines `IncompatibleMultiplicationError`,
`IncompatibleDivisionError`, `InvalidUnitError`, `InvalidQuantityError` and
`MismatchError` for callers to raise; no operation in the package raises
them itself.

## Command line

```
astronomy
```

Prints `Hello, astronomy!` and exits with status 0. The same is available as
`python -m astronomy.cli`.

## What the package does not do

The command does no calculation: everything the package offers is used from
Python through `astronomy.time` and `astronomy.units`. There is no parsing
of unit names from text, no conversion between time scales, and no unit
registry beyond the predefined constants.