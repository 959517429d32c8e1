import pytest

from zollstock.units import (
    ONE,
    Dimensions,
    Prefix,
    Unit,
    UnitFactor,
    convertible_units,
    make_unit,
    prefixed_unit,
    to_string,
    unit_dimensions,
    unit_pow,
    unit_scaling_factor,
)

L = Dimensions(length=1)
T = Dimensions(time=1)

m = make_unit(L, "m", 1.0)
s = make_unit(T, "s", 1.0)
rad = make_unit(Dimensions(), "rad", 1.0)
cm = prefixed_unit(L, "m", Prefix("c", 1e-2))
km = prefixed_unit(L, "m", Prefix("k", 1e3))


def test_dimensionless_unit_constant():
    empty = Unit()
    assert empty == ONE
    assert empty.factors == ()
    assert empty.size == 0
    assert unit_pow(m, 0).factors == ()
    assert unit_dimensions(ONE) == Dimensions()
    assert to_string(ONE) == ""


def test_dimensions_arithmetic():
    assert (L * L) == Dimensions(length=2)
    assert (L / T) == Dimensions(length=1, time=-1)
    assert L.pow(3) == Dimensions(length=3)
    assert L.pow(0).is_dimensionless()


def test_dimensions_classification():
    assert L.is_base()
    assert not L.is_derived()
    assert (L / T).is_derived()
    assert Dimensions(length=2).is_derived()
    assert Dimensions().is_dimensionless()
    assert not Dimensions().is_base()


def test_dimensions_pow_rejects_non_integer():
    with pytest.raises(TypeError):
        L.pow(1.5)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (ONE, ONE, ONE),
        (m, ONE, m),
        (ONE, m, m),
        (ONE, ONE ** 0, ONE),
        (ONE ** -1, ONE, ONE),
        (m, m ** 0, m),
        (m ** 0, m, m),
        (m, m, m ** 2),
        (m, m ** 1, m ** 2),
        (m, m ** -1, ONE),
        (m ** -1, m, ONE),
        (m ** -1, m ** -1, m ** -2),
        (m ** 1, m ** 1, m ** 2),
    ],
)
def test_unit_multiplication(left, right, expected):
    assert left * right == expected


@pytest.mark.parametrize(
    "left, right, expected",
    [(ONE, ONE, ONE), (m, ONE, m), (ONE, m, m ** -1), (m, m, ONE)],
)
def test_unit_division(left, right, expected):
    assert left / right == expected


def test_multiplication_is_commutative():
    assert m * s == s * m
    assert (m * s) * m == m * (s * m)
    assert (m * s * m) == (m ** 2) * s


@pytest.mark.parametrize("numerator, denominator", [(m, s), (cm, s), (m, s ** 2), (rad, s), (km, s)])
def test_mixed_division(numerator, denominator):
    mixed = numerator / denominator
    assert mixed.is_derived()
    assert mixed.size == 2
    assert numerator.factors[0] in mixed.factors
    assert (denominator ** -1).factors[0] in mixed.factors


def test_pow_keeps_factor_but_scales_exponent():
    squared = unit_pow(cm, 2)
    factor = squared.factors[0]
    assert factor == UnitFactor(L, "m", 1e-2, "c", 2)
    assert unit_pow(cm, 0) == ONE
    assert unit_pow(cm, 1) == cm
    assert (m * s) ** 2 == m ** 2 * s ** 2


def test_pow_rejects_non_integer():
    with pytest.raises(TypeError) as excinfo:
        unit_pow(m, 0.5)
    assert excinfo.type is TypeError
    assert unit_pow(m, 1) == m


def test_unit_dimensions():
    assert unit_dimensions(m / s) == Dimensions(length=1, time=-1)
    assert unit_dimensions(m ** 3) == Dimensions(length=3)
    assert unit_dimensions(ONE) == Dimensions()
    assert unit_dimensions(rad).is_dimensionless()


def test_unit_scaling_factor():
    assert unit_scaling_factor(m) == 1.0
    assert unit_scaling_factor(km) == 1e3
    assert unit_scaling_factor(cm ** 2) == pytest.approx(1e-4)
    assert unit_scaling_factor(ONE) == 1.0


def test_convertible_units():
    assert convertible_units(m, cm)
    assert convertible_units(m / s, km / s)
    assert not convertible_units(m, s)
    assert convertible_units(rad, ONE)


def test_head_and_tail():
    product = m * s
    assert product.head() * product.tail() == product
    assert product.head().size == 1
    with pytest.raises(ValueError):
        ONE.head()


def test_to_string():
    assert to_string(m) == "m"
    assert to_string(cm) == "cm"
    assert to_string(m ** 2) == "m^2"
    assert to_string(s ** -1) == "s^-1"
    assert to_string(ONE) == ""
    assert to_string(m / s) == "m*s^-1"


def test_units_differ_by_prefix():
    assert cm != m
    assert cm * m != m ** 2
    assert (cm * m).size == 2


def test_multiplication_with_non_unit_is_unsupported():
    with pytest.raises(TypeError):
        m * "x"
    assert isinstance(Unit(), Unit) and Unit() == ONE