import operator
import re

import numpy as np
import pytest

from astronomy.units import (
    CENTIMETER,
    JOULE,
    KILOGRAM,
    METER,
    METER_PER_SECOND,
    NEWTON,
    SECOND,
    DivideByZeroError,
    Dimension,
    IncompatibleAdditionError,
    IncompatibleSubtractionError,
    IncompatibleUnitsError,
    Quantity,
    QuantityError,
    UnitProduct,
)


def test_quantity_new():
    q = Quantity(np.array([1.0]), METER)
    assert np.array_equal(q.value, np.array([1.0]))
    assert q.unit.name == "m"
    assert q.unit == METER


def test_quantity_to():
    q = Quantity(np.array([1.0, 2.0, 3.0]), METER)
    q_cm = q.to(CENTIMETER)
    assert np.array_equal(q_cm.value, np.array([100.0, 200.0, 300.0]))
    assert q_cm.unit.name == "cm"


def test_quantity_to_incompatible():
    q = Quantity(np.array([1.0]), METER)
    with pytest.raises(IncompatibleUnitsError) as exc:
        q.to(SECOND)
    assert str(exc.value) == (
        "Incompatible units: Cannot convert 'm' to 's'. Dimensions differ."
    )


def test_quantity_multiply_scalar():
    result = Quantity(np.array([1.0, 2.0]), METER).multiply_scalar(2.0)
    assert np.array_equal(result.value, np.array([2.0, 4.0]))
    assert result.unit.name == "m"


def test_quantity_divide_scalar():
    result = Quantity(np.array([2.0, 4.0]), METER).divide_scalar(2.0)
    assert np.array_equal(result.value, np.array([1.0, 2.0]))
    assert result.unit.name == "m"


def test_quantity_divide_scalar_by_zero():
    q = Quantity(np.array([2.0, 4.0]), METER)
    with pytest.raises(DivideByZeroError) as exc:
        q.divide_scalar(0.0)
    assert str(exc.value) == "Invalid operation: Cannot divide by zero."


def test_quantity_addition():
    total = Quantity(np.array([1.0, 2.0]), METER) + Quantity(np.array([3.0, 4.0]), METER)
    assert np.array_equal(total.value, np.array([4.0, 6.0]))
    assert total.unit.name == "m"


def test_quantity_subtraction():
    diff = Quantity(np.array([5.0, 6.0]), METER) - Quantity(np.array([3.0, 4.0]), METER)
    assert np.array_equal(diff.value, np.array([2.0, 2.0]))
    assert diff.unit.name == "m"


def test_quantity_multiplication():
    product = Quantity(np.array([1.0, 2.0]), METER) * Quantity(np.array([3.0, 4.0]), SECOND)
    assert np.array_equal(product.value, np.array([3.0, 8.0]))
    assert product.unit.name == "m*s"


def test_quantity_division():
    quotient = Quantity(np.array([6.0, 8.0]), METER) / Quantity(np.array([2.0, 4.0]), SECOND)
    assert np.array_equal(quotient.value, np.array([3.0, 2.0]))
    assert quotient.unit.name == "m/s"
    assert quotient.unit.is_equivalent(METER_PER_SECOND)


def test_quantity_divide_by_zero():
    q1 = Quantity(np.array([6.0, 8.0]), METER)
    q2 = Quantity(np.array([0.0, 4.0]), SECOND)
    message = "Invalid operation: Cannot divide by zero."
    with pytest.raises(DivideByZeroError, match=re.escape(message)) as exc:
        operator.truediv(q1, q2)
    assert str(exc.value) == message


def test_quantity_addition_incompatible_units():
    q1 = Quantity(np.array([1.0, 2.0]), METER)
    q2 = Quantity(np.array([3.0, 4.0]), SECOND)
    message = "Incompatible units: Cannot add 'm' and 's'. Units are not identical."
    with pytest.raises(IncompatibleAdditionError, match=re.escape(message)) as exc:
        operator.add(q1, q2)
    assert str(exc.value) == message


def test_quantity_subtraction_incompatible_units():
    q1 = Quantity(np.array([5.0, 6.0]), METER)
    q2 = Quantity(np.array([3.0, 4.0]), SECOND)
    message = "Incompatible units: Cannot subtract 'm' and 's'. Units are not identical."
    with pytest.raises(IncompatibleSubtractionError, match=re.escape(message)) as exc:
        operator.sub(q1, q2)
    assert str(exc.value) == message


def test_quantity_multiplication_incompatible_units():
    result = Quantity(np.array([1.0, 2.0]), METER) * Quantity(np.array([3.0, 4.0]), SECOND)
    assert np.array_equal(result.value, np.array([3.0, 8.0]))
    assert result.unit.name == "m*s"


def test_quantity_division_incompatible_units():
    result = Quantity(np.array([6.0, 8.0]), METER) / Quantity(np.array([2.0, 4.0]), SECOND)
    assert np.array_equal(result.value, np.array([3.0, 2.0]))
    assert result.unit.name == "m/s"


def test_quantity_addition_compatible_units():
    q1 = Quantity(np.array([1.0, 2.0]), METER)
    q2 = Quantity(np.array([3.0, 4.0]), CENTIMETER)
    total = q1.to(CENTIMETER) + q2
    assert np.array_equal(total.value, np.array([103.0, 204.0]))
    assert total.unit.name == "cm"


def test_quantity_subtraction_compatible_units():
    q1 = Quantity(np.array([5.0, 6.0]), METER)
    q2 = Quantity(np.array([3.0, 4.0]), CENTIMETER)
    diff = q1.to(CENTIMETER) - q2
    assert np.array_equal(diff.value, np.array([497.0, 596.0]))
    assert diff.unit.name == "cm"


def test_addition_of_equivalent_but_different_units_fails():
    with pytest.raises(QuantityError):
        Quantity(np.array([1.0]), METER) + Quantity(np.array([1.0]), CENTIMETER)


def test_conversion_round_trip():
    q = Quantity(np.array([1.5, -2.0, 7.0]), METER)
    assert np.allclose(q.to(CENTIMETER).to(METER).value, q.value)


def test_multiplication_dimensions():
    force = Quantity(np.array([2.0]), NEWTON)
    distance = Quantity(np.array([3.0]), METER)
    work = force * distance
    assert work.unit.is_equivalent(JOULE)
    assert work.unit.dimensions == JOULE.dimensions


def test_division_scale_combines():
    q = Quantity(np.array([1.0]), CENTIMETER) / Quantity(np.array([1.0]), SECOND)
    assert q.unit.scale == CENTIMETER.scale / SECOND.scale


def test_unit_product_of_dimension():
    product = UnitProduct.of_dimension(Dimension.MASS)
    assert product == KILOGRAM.dimensions
    assert product.exponents[Dimension.MASS] == 1
    assert sum(abs(e) for e in product.exponents) == 1


def test_unit_product_inverse_is_involution():
    assert NEWTON.dimensions.inverse().inverse() == NEWTON.dimensions
    assert NEWTON.dimensions.multiply(NEWTON.dimensions.inverse()) == UnitProduct()


def test_unit_product_from_components_last_wins():
    product = UnitProduct.from_components([(Dimension.LENGTH, 1), (Dimension.LENGTH, 3)])
    assert product.exponents[Dimension.LENGTH] == 3


def test_meter_per_second_is_meter_over_second():
    derived = METER.dimensions.multiply(SECOND.dimensions.inverse())
    assert derived == METER_PER_SECOND.dimensions


def test_unit_product_wrong_length():
    with pytest.raises(ValueError):
        UnitProduct((1, 2))


def test_quantity_equality():
    a = Quantity(np.array([1.0, 2.0]), METER)
    b = Quantity(np.array([1.0, 2.0]), METER)
    c = Quantity(np.array([1.0, 2.0]), CENTIMETER)
    assert a == b
    assert not (a == c)