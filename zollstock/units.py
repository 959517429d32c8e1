"""Physical dimensions, unit factors and units built as products of factors."""

from __future__ import annotations

import functools
from dataclasses import dataclass, fields

__all__ = [
    "Dimensions",
    "Prefix",
    "UnitFactor",
    "Unit",
    "ONE",
    "make_unit",
    "prefixed_unit",
    "unit_pow",
    "unit_dimensions",
    "unit_scaling_factor",
    "convertible_units",
    "to_string",
]


_DIMENSION_SYMBOLS = {
    "length": "L",
    "mass": "M",
    "time": "T",
    "electric_current": "I",
    "temperature": "Theta",
    "amount_of_substance": "N",
    "luminous_intensity": "J",
}


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class Dimensions:
    """Exponents of the seven SI base dimensions."""

    length: int = 0
    mass: int = 0
    time: int = 0
    electric_current: int = 0
    temperature: int = 0
    amount_of_substance: int = 0
    luminous_intensity: int = 0

    @property
    def exponents(self) -> tuple[int, ...]:
        return tuple(getattr(self, field.name) for field in fields(self))

    @classmethod
    def _from_exponents(cls, exponents) -> Dimensions:
        return cls(*exponents)

    def __mul__(self, other: Dimensions) -> Dimensions:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self._from_exponents(a + b for a, b in zip(self.exponents, other.exponents))

    def __truediv__(self, other: Dimensions) -> Dimensions:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self._from_exponents(a - b for a, b in zip(self.exponents, other.exponents))

    def pow(self, exponent: int) -> Dimensions:
        """The dimensions raised to an integer power."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be an integer, got {exponent!r}")
        return self._from_exponents(e * exponent for e in self.exponents)

    def __pow__(self, exponent: int) -> Dimensions:
        return self.pow(exponent)

    def is_base(self) -> bool:
        """Exactly one base dimension, to the first power."""
        nonzero = [e for e in self.exponents if e != 0]
        return nonzero == [1]

    def is_derived(self) -> bool:
        return not self.is_base()

    def is_dimensionless(self) -> bool:
        return all(e == 0 for e in self.exponents)

    def _sort_key(self) -> tuple[int, ...]:
        return tuple(-e for e in self.exponents)

    def __lt__(self, other: Dimensions) -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        parts = []
        for field in fields(self):
            exponent = getattr(self, field.name)
            if exponent == 0:
                continue
            symbol = _DIMENSION_SYMBOLS[field.name]
            parts.append(symbol if exponent == 1 else f"{symbol}^{exponent}")
        return "*".join(parts) if parts else "1"


@dataclass(frozen=True)
class Prefix:
    """A unit prefix such as k (1e3) or mic (1e-6)."""

    symbol: str
    factor: float


@dataclass(frozen=True)
class UnitFactor:
    """One factor of a unit: a (possibly prefixed) symbol raised to an exponent."""

    dimensions: Dimensions
    symbol: str
    scaling_factor: float
    prefix: str = ""
    exponent: int = 1

    def _order_key(self):
        return (self.dimensions, self.symbol, self.scaling_factor, self.prefix)

    def with_exponent(self, exponent: int) -> UnitFactor:
        return UnitFactor(self.dimensions, self.symbol, self.scaling_factor, self.prefix, exponent)

    def __str__(self) -> str:
        text = self.prefix + self.symbol
        if self.exponent != 1:
            text += f"^{self.exponent}"
        return text


def _merge(factors, incoming: UnitFactor) -> list[UnitFactor]:
    """Insert a factor into an ordered factor list, combining equal factors."""
    result: list[UnitFactor] = []
    placed = False
    key = incoming._order_key()
    for factor in factors:
        if placed:
            result.append(factor)
            continue
        current = factor._order_key()
        if key < current:
            result.extend((incoming, factor))
            placed = True
        elif key == current:
            exponent = factor.exponent + incoming.exponent
            if exponent != 0:
                result.append(factor.with_exponent(exponent))
            placed = True
        else:
            result.append(factor)
    if not placed:
        result.append(incoming)
    return result


@dataclass(frozen=True)
class Unit:
    """A unit as an ordered product of unit factors; the empty product is one."""

    factors: tuple[UnitFactor, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "factors", tuple(self.factors))

    @property
    def size(self) -> int:
        return len(self.factors)

    @property
    def is_homogeneous(self) -> bool:
        return self.size == 1

    def head(self) -> Unit:
        """The unit made of the first factor alone."""
        if not self.factors:
            raise ValueError("the dimensionless unit has no head")
        return Unit(self.factors[:1])

    def tail(self) -> Unit:
        """The unit made of all factors but the first."""
        if not self.factors:
            raise ValueError("the dimensionless unit has no tail")
        return Unit(self.factors[1:])

    def dimensions(self) -> Dimensions:
        result = Dimensions()
        for factor in self.factors:
            result = result * factor.dimensions.pow(factor.exponent)
        return result

    def scaling_factor(self) -> float:
        """The factor that converts a value in this unit to coherent SI units."""
        result = 1.0
        for factor in self.factors:
            result *= factor.scaling_factor ** factor.exponent
        return result

    def is_base(self) -> bool:
        return self.dimensions().is_base()

    def is_derived(self) -> bool:
        return self.dimensions().is_derived()

    def is_dimensionless(self) -> bool:
        return self.dimensions().is_dimensionless()

    def convertible_to(self, other: Unit) -> bool:
        return self.dimensions() == other.dimensions()

    def __mul__(self, other: Unit) -> Unit:
        if not isinstance(other, Unit):
            return NotImplemented
        factors = list(self.factors)
        for factor in other.factors:
            factors = _merge(factors, factor)
        return Unit(tuple(factors))

    def __truediv__(self, other: Unit) -> Unit:
        if not isinstance(other, Unit):
            return NotImplemented
        return self * other ** -1

    def __pow__(self, exponent: int) -> Unit:
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"exponent must be an integer, got {exponent!r}")
        if exponent == 0:
            return ONE
        if exponent == 1:
            return self
        return Unit(tuple(f.with_exponent(f.exponent * exponent) for f in self.factors))

    def __str__(self) -> str:
        return "*".join(str(factor) for factor in self.factors)

    def __repr__(self) -> str:
        return f"Unit({str(self) or '1'})"


ONE = Unit()


def make_unit(dimensions: Dimensions, symbol: str, scaling_factor: float,
              prefix: str = "", exponent: int = 1) -> Unit:
    """A unit consisting of a single factor."""
    return Unit((UnitFactor(dimensions, symbol, float(scaling_factor), prefix, exponent),))


def prefixed_unit(dimensions: Dimensions, symbol: str, prefix: Prefix, exponent: int = 1) -> Unit:
    """A single-factor unit scaled by a prefix."""
    return make_unit(dimensions, symbol, prefix.factor, prefix.symbol, exponent)


def unit_pow(unit: Unit, exponent: int) -> Unit:
    return unit ** exponent


def unit_dimensions(unit: Unit) -> Dimensions:
    return unit.dimensions()


def unit_scaling_factor(unit: Unit) -> float:
    return unit.scaling_factor()


def convertible_units(from_unit: Unit, to_unit: Unit) -> bool:
    return from_unit.convertible_to(to_unit)


def to_string(unit: Unit) -> str:
    return str(unit)