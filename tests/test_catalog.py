import math

import pytest

from zollstock.catalog import PREFIXES, literal, prefix, symbols, unit
from zollstock.numbers import NumberType
from zollstock.quantity import Quantity
from zollstock.units import ONE, Dimensions

PREFIX_FACTORS = [
    ("q", 1e-30), ("r", 1e-27), ("y", 1e-24), ("z", 1e-21), ("a", 1e-18),
    ("f", 1e-15), ("p", 1e-12), ("n", 1e-09), ("mic", 1e-06), ("m", 1e-03),
    ("c", 1e-02), ("d", 1e-01), ("da", 1e+01), ("h", 1e+02), ("k", 1e+03),
    ("M", 1e+06), ("G", 1e+09), ("T", 1e+12), ("P", 1e+15), ("E", 1e+18),
    ("Z", 1e+21), ("Y", 1e+24), ("R", 1e+27), ("Q", 1e+30),
]

PREFIX_SYMBOLS = [symbol for symbol, _ in PREFIX_FACTORS]


def _variants(symbol, select):
    unprefixed = [symbol]
    prefixed = [p + symbol for p in PREFIX_SYMBOLS]
    return {"UNPREFIXED": unprefixed, "PREFIXED": prefixed, "ALL": unprefixed + prefixed}[select]


def _pairs(select_1, select_2, symbol_1, symbol_2):
    return [(a, b) for a in _variants(symbol_1, select_1) for b in _variants(symbol_2, select_2)]


@pytest.mark.parametrize("symbol, factor", PREFIX_FACTORS)
def test_si_prefix_factors(symbol, factor):
    assert prefix(symbol).factor == factor


@pytest.mark.parametrize("symbol", PREFIX_SYMBOLS)
def test_si_prefix_symbols(symbol):
    assert prefix(symbol).symbol == symbol


def test_prefix_order():
    looked_up = [prefix(symbol) for symbol in PREFIX_SYMBOLS]
    assert [p.symbol for p in looked_up] == PREFIX_SYMBOLS
    assert list(PREFIXES) == looked_up


BASE_UNITS = [
    ("m", "length"),
    ("g", "mass"),
    ("s", "time"),
    ("A", "electric_current"),
    ("K", "temperature"),
    ("mol", "amount_of_substance"),
    ("cd", "luminous_intensity"),
]


@pytest.mark.parametrize("symbol, dimension", BASE_UNITS)
def test_base_unit_constants(symbol, dimension):
    factor = unit(symbol).factors[0]
    assert factor.dimensions == Dimensions(**{dimension: 1})
    assert factor.symbol == symbol
    assert factor.scaling_factor == 1.0


@pytest.mark.parametrize("symbol, dimension", BASE_UNITS)
@pytest.mark.parametrize("prefix_symbol", PREFIX_SYMBOLS)
def test_prefixed_base_unit_constants(symbol, dimension, prefix_symbol):
    factor = unit(prefix_symbol + symbol).factors[0]
    assert factor.dimensions == Dimensions(**{dimension: 1})
    assert factor.symbol == symbol
    assert factor.scaling_factor == prefix(prefix_symbol).factor
    assert factor.prefix == prefix(prefix_symbol).symbol


@pytest.mark.parametrize("symbol", ["rad", "gon", "asec"])
def test_angle_unit_constants(symbol):
    factor = unit(symbol).factors[0]
    assert factor.dimensions == Dimensions()
    assert factor.symbol == symbol
    assert factor.scaling_factor == 1.0
    for prefix_symbol in PREFIX_SYMBOLS:
        prefixed = unit(prefix_symbol + symbol).factors[0]
        assert prefixed.dimensions == Dimensions()
        assert prefixed.symbol == symbol
        assert prefixed.scaling_factor == prefix(prefix_symbol).factor
        assert prefixed.prefix == prefix_symbol


@pytest.mark.parametrize("symbol, scaling", [("deg", math.pi / 180.0), ("amin", math.pi / 10.8e3)])
def test_unprefixed_angle_constants(symbol, scaling):
    factor = unit(symbol).factors[0]
    assert factor.dimensions == Dimensions()
    assert factor.symbol == symbol
    assert factor.scaling_factor == scaling


RAISED = (
    [(name, 2) for name in _variants("m", "ALL")]
    + [(name, 3) for name in _variants("m", "ALL")]
    + [(name, 2) for name in _variants("s", "ALL")]
    + [(name, 2) for name in ("min", "h", "d", "a")]
)


@pytest.mark.parametrize("symbol, exponent", RAISED)
def test_raised_unit_constants(symbol, exponent):
    assert unit(f"{symbol}{exponent}") == unit(symbol) ** exponent


MIXED = (
    _pairs("ALL", "ALL", "m", "s")
    + [pair for b in ("min", "h", "d", "a") for pair in _pairs("ALL", "UNPREFIXED", "m", b)]
    + _pairs("ALL", "ALL", "m", "s2")
    + [pair for b in ("min2", "h2", "d2", "a2") for pair in _pairs("ALL", "UNPREFIXED", "m", b)]
    + [pair for a in ("rad", "asec", "gon") for pair in _pairs("ALL", "ALL", a, "s")]
    + [
        pair
        for a in ("rad", "asec", "gon")
        for b in ("min", "h", "d", "a")
        for pair in _pairs("ALL", "UNPREFIXED", a, b)
    ]
    + [pair for a in ("deg", "amin") for pair in _pairs("UNPREFIXED", "ALL", a, "s")]
    + [
        pair
        for a in ("deg", "amin")
        for b in ("min", "h", "d", "a")
        for pair in _pairs("UNPREFIXED", "UNPREFIXED", a, b)
    ]
)


@pytest.mark.parametrize("symbol_1, symbol_2", MIXED)
def test_mixed_division_unit_constants(symbol_1, symbol_2):
    unit_1, unit_2 = unit(symbol_1), unit(symbol_2)
    assert unit_1 != unit_2
    mixed = unit_1 / unit_2
    assert mixed.is_derived()
    assert mixed.size == 2
    assert unit_1.factors[0] in mixed.factors
    assert (unit_2 ** -1).factors[0] in mixed.factors


def test_one_is_empty_unit():
    assert unit("1") is ONE
    assert unit("1").factors == ()
    assert unit("1").size == 0


def test_symbols_listing():
    listed = symbols()
    assert {"1", "m", "km", "m2", "mm3", "deg", "kg", "micm", "s2"} <= set(listed)
    assert "ddeg" not in listed
    assert "kmin" not in listed
    assert len(listed) == len(set(listed))


def test_unknown_symbols_raise():
    with pytest.raises(KeyError):
        unit("furlong")
    with pytest.raises(KeyError):
        prefix("x")
    with pytest.raises(KeyError):
        literal(1, "furlong")


def test_literal_builds_quantity():
    q = literal(8.1, "g")
    assert q.value == 8.1
    assert q.unit == unit("g")
    assert q.number is NumberType.DOUBLE
    assert literal(3, "km").number is NumberType.INT


def test_conversions_between_catalogued_units():
    assert Quantity(literal(100, "cm"), unit("m")).value == 1
    assert Quantity(literal(1, "m"), unit("cm")).value == 100
    rad = Quantity(literal(180, "deg"), unit("rad"), NumberType.DOUBLE)
    assert rad.value == pytest.approx(math.pi)
    one = Quantity(literal(180, "deg"), ONE, NumberType.DOUBLE)
    assert one.value == pytest.approx(math.pi)


def test_unit_text():
    assert str(unit("km2")) == "km^2"
    assert str(unit("m") / unit("s")) == "m*s^-1"