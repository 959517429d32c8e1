"""SI prefixes and the catalogue of named units, with unit-tagged literals."""

from __future__ import annotations

import math

from zollstock.quantity import Quantity, make_quantity
from zollstock.units import ONE, Dimensions, Prefix, Unit, make_unit, prefixed_unit

__all__ = ["PREFIXES", "prefix", "unit", "symbols", "literal"]


PREFIXES: tuple[Prefix, ...] = tuple(
    Prefix(symbol, factor)
    for symbol, factor in (
        ("q", 1e-30),
        ("r", 1e-27),
        ("y", 1e-24),
        ("z", 1e-21),
        ("a", 1e-18),
        ("f", 1e-15),
        ("p", 1e-12),
        ("n", 1e-09),
        ("mic", 1e-06),
        ("m", 1e-03),
        ("c", 1e-02),
        ("d", 1e-01),
        ("da", 1e01),
        ("h", 1e02),
        ("k", 1e03),
        ("M", 1e06),
        ("G", 1e09),
        ("T", 1e12),
        ("P", 1e15),
        ("E", 1e18),
        ("Z", 1e21),
        ("Y", 1e24),
        ("R", 1e27),
        ("Q", 1e30),
    )
)

_PREFIX_TABLE = {p.symbol: p for p in PREFIXES}

_DIMENSIONLESS = Dimensions()

# (symbol, dimensions, scaling factor, takes SI prefixes, raised forms)
_FAMILIES = (
    ("m", Dimensions(length=1), 1.0, True, (2, 3)),
    ("g", Dimensions(mass=1), 1.0, True, ()),
    ("s", Dimensions(time=1), 1.0, True, (2,)),
    ("min", Dimensions(time=1), 60.0, False, (2,)),
    ("h", Dimensions(time=1), 3600.0, False, (2,)),
    ("d", Dimensions(time=1), 86400.0, False, (2,)),
    ("a", Dimensions(time=1), 31557600.0, False, (2,)),
    ("A", Dimensions(electric_current=1), 1.0, True, ()),
    ("K", Dimensions(temperature=1), 1.0, True, ()),
    ("mol", Dimensions(amount_of_substance=1), 1.0, True, ()),
    ("cd", Dimensions(luminous_intensity=1), 1.0, True, ()),
    ("rad", _DIMENSIONLESS, 1.0, True, ()),
    ("deg", _DIMENSIONLESS, math.pi / 180.0, False, ()),
    ("amin", _DIMENSIONLESS, math.pi / 10.8e3, False, ()),
    ("asec", _DIMENSIONLESS, 1.0, True, ()),
    ("gon", _DIMENSIONLESS, 1.0, True, ()),
    ("sr", _DIMENSIONLESS, 1.0, True, ()),
)


def _family(symbol: str, dimensions: Dimensions, scaling_factor: float, prefixed: bool):
    yield symbol, make_unit(dimensions, symbol, scaling_factor)
    if prefixed:
        for each in PREFIXES:
            yield each.symbol + symbol, prefixed_unit(dimensions, symbol, each)


def _build_table() -> dict[str, Unit]:
    table: dict[str, Unit] = {"1": ONE}

    def add(name: str, value: Unit) -> None:
        if name in table:
            raise RuntimeError(f"unit symbol {name!r} defined twice")
        table[name] = value

    for symbol, dimensions, factor, prefixed, powers in _FAMILIES:
        members = list(_family(symbol, dimensions, factor, prefixed))
        for name, value in members:
            add(name, value)
        for exponent in powers:
            for name, value in members:
                add(f"{name}{exponent}", value ** exponent)
    return table


_UNITS = _build_table()


def prefix(symbol: str) -> Prefix:
    """The SI prefix with the given symbol, e.g. ``"k"`` or ``"mic"``."""
    try:
        return _PREFIX_TABLE[symbol]
    except KeyError:
        raise KeyError(f"unknown prefix {symbol!r}") from None


def unit(symbol: str) -> Unit:
    """The named unit, e.g. ``"km"``, ``"s2"``, ``"deg"`` or ``"1"``."""
    try:
        return _UNITS[symbol]
    except KeyError:
        raise KeyError(f"unknown unit symbol {symbol!r}") from None


def symbols() -> tuple[str, ...]:
    """Every unit symbol in the catalogue."""
    return tuple(_UNITS)


def literal(value, symbol: str) -> Quantity:
    """A quantity of ``value`` in the named unit."""
    return make_quantity(value, unit(symbol))