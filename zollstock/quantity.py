"""Quantities: a number tagged with a unit, with unit-aware arithmetic."""

from __future__ import annotations

import math
import re
import struct
import sys
from dataclasses import dataclass

from zollstock.numbers import (
    NarrowingConversion,
    NumberType,
    cmp_equal,
    cmp_greater,
    cmp_greater_equal,
    cmp_less,
    cmp_less_equal,
    lossless_convertible,
    narrow,
)
from zollstock.units import ONE, Unit

__all__ = [
    "UnitMismatchError",
    "Quantity",
    "QuantityLimits",
    "quantity_limits",
    "make_quantity",
    "in_unit",
    "as_quantity",
    "stof",
    "stod",
    "stold",
]


class UnitMismatchError(TypeError):
    """An operation combined quantities whose units do not fit together."""


_INT_RANK = {
    NumberType.SIGNED_CHAR: 1,
    NumberType.UNSIGNED_CHAR: 1,
    NumberType.SHORT: 2,
    NumberType.UNSIGNED_SHORT: 2,
    NumberType.INT: 3,
    NumberType.UNSIGNED_INT: 3,
    NumberType.LONG: 4,
    NumberType.UNSIGNED_LONG: 4,
    NumberType.LONG_LONG: 5,
    NumberType.UNSIGNED_LONG_LONG: 5,
}

_FLOAT_RANK = {
    NumberType.FLOAT: 1,
    NumberType.DOUBLE: 2,
    NumberType.LONG_DOUBLE: 3,
}

_UNSIGNED_OF = {
    NumberType.INT: NumberType.UNSIGNED_INT,
    NumberType.LONG: NumberType.UNSIGNED_LONG,
    NumberType.LONG_LONG: NumberType.UNSIGNED_LONG_LONG,
}


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _literal_type(value) -> NumberType:
    """The number type a plain Python number stands for."""
    if not _is_number(value):
        raise TypeError(f"expected a number, got {value!r}")
    if isinstance(value, float):
        return NumberType.DOUBLE
    for candidate in (NumberType.INT, NumberType.LONG, NumberType.UNSIGNED_LONG_LONG):
        if candidate.continuous_int_range().contains(value):
            return candidate
    raise OverflowError(f"{value} does not fit any integer type")


def _promote(number: NumberType) -> NumberType:
    if number.is_integral() and _INT_RANK[number] < _INT_RANK[NumberType.INT]:
        return NumberType.INT
    return number


def _common_type(first: NumberType, second: NumberType) -> NumberType:
    """The type both operands are converted to by the usual arithmetic conversions."""
    if not first.is_integral() or not second.is_integral():
        floating = [t for t in (first, second) if not t.is_integral()]
        return max(floating, key=_FLOAT_RANK.__getitem__)
    first, second = _promote(first), _promote(second)
    if first is second:
        return first
    if first.is_signed() == second.is_signed():
        return max((first, second), key=_INT_RANK.__getitem__)
    unsigned, signed = (first, second) if not first.is_signed() else (second, first)
    if _INT_RANK[unsigned] >= _INT_RANK[signed]:
        return unsigned
    if signed.continuous_int_range().contains(unsigned.continuous_int_range()):
        return signed
    return _UNSIGNED_OF[signed]


def _wrap(value: int, number: NumberType) -> int:
    modulus = 1 << number.bits
    value %= modulus
    if number.is_signed() and value >= modulus >> 1:
        value -= modulus
    return value


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _coerce(value, number: NumberType):
    """Convert silently, the way an implicit conversion would."""
    if number.is_integral():
        if isinstance(value, float):
            if not math.isfinite(value):
                raise NarrowingConversion(value, None, NumberType.DOUBLE, number)
            value = math.trunc(value)
        return _wrap(int(value), number)
    value = float(value)
    if number is NumberType.FLOAT:
        return _to_float32(value)
    return value


def _divide(dividend, divisor, number: NumberType):
    if number.is_integral():
        if divisor == 0:
            raise ZeroDivisionError("integer division by zero")
        quotient = abs(dividend) // abs(divisor)
        return -quotient if (dividend < 0) != (divisor < 0) else quotient
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)
    return dividend / divisor


def _arith(op: str, value_1, type_1: NumberType, value_2, type_2: NumberType):
    number = _common_type(type_1, type_2)
    a = _coerce(value_1, number)
    b = _coerce(value_2, number)
    if op == "+":
        result = a + b
    elif op == "-":
        result = a - b
    elif op == "*":
        result = a * b
    else:
        result = _divide(a, b, number)
    return _coerce(result, number), number


class Quantity:
    """A value of a given number type measured in a unit."""

    __slots__ = ("_value", "_unit", "_number")
    __hash__ = None

    def __init__(self, value=0, unit: Unit | None = None, number: NumberType | None = None):
        if isinstance(value, Quantity):
            target_unit = value.unit if unit is None else unit
            target_number = value.number if number is None else number
            if not value.unit.convertible_to(target_unit):
                raise UnitMismatchError(
                    f"cannot convert from {value.unit!r} to {target_unit!r}"
                )
            converted = narrow(value.value, target_number, value.number)
            if target_unit != value.unit:
                converted = _coerce(
                    converted * value.unit.scaling_factor() / target_unit.scaling_factor(),
                    target_number,
                )
            self._value = converted
            self._unit = target_unit
            self._number = target_number
            return
        self._unit = ONE if unit is None else unit
        self._number = NumberType.DOUBLE if number is None else number
        self._value = narrow(value, self._number)

    @classmethod
    def _raw(cls, value, unit: Unit, number: NumberType) -> Quantity:
        quantity = cls.__new__(cls)
        quantity._value = value
        quantity._unit = unit
        quantity._number = number
        return quantity

    @property
    def value(self):
        return self._value

    @value.setter
    def value(self, new_value) -> None:
        self._value = narrow(new_value, self._number)

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def number(self) -> NumberType:
        return self._number

    def to(self, unit: Unit, number: NumberType | None = None) -> Quantity:
        """This quantity expressed in another, convertible unit."""
        return Quantity(self, unit, number)

    def _require_same_unit(self, other: Quantity) -> None:
        if self._unit != other._unit:
            raise UnitMismatchError(f"units differ: {self._unit!r} and {other._unit!r}")

    def __eq__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        if self._unit != other._unit:
            return False
        return cmp_equal(self._value, other._value)

    def __lt__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_unit(other)
        return cmp_less(self._value, other._value)

    def __le__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_unit(other)
        return cmp_less_equal(self._value, other._value)

    def __gt__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_unit(other)
        return cmp_greater(self._value, other._value)

    def __ge__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_unit(other)
        return cmp_greater_equal(self._value, other._value)

    def _require_signed(self) -> None:
        if not self._number.is_signed():
            raise TypeError(f"unary sign needs a signed type, not {self._number.type_name()}")

    def __pos__(self) -> Quantity:
        self._require_signed()
        return Quantity._raw(self._value, self._unit, self._number)

    def __neg__(self) -> Quantity:
        self._require_signed()
        if self._number.is_integral():
            return Quantity._raw(narrow(-self._value, self._number), self._unit, self._number)
        return Quantity._raw(-self._value, self._unit, self._number)

    def __add__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_unit(other)
        value, number = _arith("+", self._value, self._number, other._value, other._number)
        return Quantity._raw(value, self._unit, number)

    def __sub__(self, other):
        if not isinstance(other, Quantity):
            return NotImplemented
        self._require_same_unit(other)
        value, number = _arith("-", self._value, self._number, other._value, other._number)
        return Quantity._raw(value, self._unit, number)

    def __mul__(self, other):
        if isinstance(other, Quantity):
            value, number = _arith("*", self._value, self._number, other._value, other._number)
            return Quantity._raw(value, self._unit * other._unit, number)
        if isinstance(other, Unit):
            return Quantity._raw(self._value, self._unit * other, self._number)
        if _is_number(other):
            value, number = _arith("*", self._value, self._number, other, _literal_type(other))
            return Quantity._raw(value, self._unit, number)
        return NotImplemented

    def __rmul__(self, other):
        if _is_number(other):
            value, number = _arith("*", other, _literal_type(other), self._value, self._number)
            return Quantity._raw(value, self._unit, number)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Quantity):
            value, number = _arith("/", self._value, self._number, other._value, other._number)
            return Quantity._raw(value, self._unit / other._unit, number)
        if isinstance(other, Unit):
            return Quantity._raw(self._value, self._unit / other, self._number)
        if _is_number(other):
            value, number = _arith("/", self._value, self._number, other, _literal_type(other))
            return Quantity._raw(value, self._unit, number)
        return NotImplemented

    def _same_type_operand(self, other: Quantity):
        if not isinstance(other, Quantity):
            raise TypeError(f"expected a quantity, got {other!r}")
        if other._unit == self._unit and other._number is self._number:
            return other._value
        if not lossless_convertible(other._number, self._number):
            raise NarrowingConversion(other._value, None, other._number, self._number)
        return Quantity(other, self._unit, self._number)._value

    def __iadd__(self, other):
        operand = self._same_type_operand(other)
        self._value, _ = _arith("+", self._value, self._number, operand, self._number)
        return self

    def __isub__(self, other):
        operand = self._same_type_operand(other)
        self._value, _ = _arith("-", self._value, self._number, operand, self._number)
        return self

    def __imul__(self, other):
        if not _is_number(other):
            return NotImplemented
        operand = _coerce(other, self._number)
        self._value, _ = _arith("*", self._value, self._number, operand, self._number)
        return self

    def __itruediv__(self, other):
        if not _is_number(other):
            return NotImplemented
        operand = _coerce(other, self._number)
        self._value, _ = _arith("/", self._value, self._number, operand, self._number)
        return self

    def _with_unit(self, text: str) -> str:
        unit_text = str(self._unit)
        return f"{text} {unit_text}" if unit_text else text

    def __format__(self, spec: str) -> str:
        return self._with_unit(format(self._value, spec))

    def __str__(self) -> str:
        if isinstance(self._value, float):
            return self._with_unit(format(self._value, "g"))
        return self._with_unit(str(self._value))

    def __repr__(self) -> str:
        return f"Quantity({self._value!r}, {self._unit!r}, {self._number.type_name()})"


@dataclass(frozen=True)
class QuantityLimits:
    """Numeric limits of a quantity type, taken from its number type."""

    unit: Unit
    number: NumberType

    @property
    def is_signed(self) -> bool:
        return self.number.is_signed()

    @property
    def is_integer(self) -> bool:
        return self.number.is_integral()

    @property
    def is_exact(self) -> bool:
        return self.number.is_integral()

    @property
    def has_infinity(self) -> bool:
        return not self.number.is_integral()

    @property
    def has_quiet_nan(self) -> bool:
        return not self.number.is_integral()

    @property
    def radix(self) -> int:
        return 2

    @property
    def digits(self) -> int:
        if self.number.is_integral():
            return self.number.bits - (1 if self.number.is_signed() else 0)
        return 24 if self.number is NumberType.FLOAT else 53

    @property
    def digits10(self) -> int:
        if self.number.is_integral():
            return math.floor(self.digits * math.log10(2))
        return 6 if self.number is NumberType.FLOAT else 15

    @property
    def max_digits10(self) -> int:
        if self.number.is_integral():
            return 0
        return 9 if self.number is NumberType.FLOAT else 17

    def _make(self, value) -> Quantity:
        return Quantity._raw(value, self.unit, self.number)

    def _floating(self, float32_value: float, float64_value: float) -> Quantity:
        return self._make(float32_value if self.number is NumberType.FLOAT else float64_value)

    def min(self) -> Quantity:
        """Smallest integer, or smallest positive normal floating value."""
        if self.number.is_integral():
            return self._make(self.number.continuous_int_range().min)
        return self._floating(1.1754943508222875e-38, sys.float_info.min)

    def lowest(self) -> Quantity:
        if self.number.is_integral():
            return self._make(self.number.continuous_int_range().min)
        return self._floating(-3.4028234663852886e38, -sys.float_info.max)

    def max(self) -> Quantity:
        if self.number.is_integral():
            return self._make(self.number.continuous_int_range().max)
        return self._floating(3.4028234663852886e38, sys.float_info.max)

    def epsilon(self) -> Quantity:
        if self.number.is_integral():
            return self._make(0)
        return self._floating(1.1920928955078125e-07, sys.float_info.epsilon)

    def round_error(self) -> Quantity:
        if self.number.is_integral():
            return self._make(0)
        return self._make(0.5)

    def infinity(self) -> Quantity:
        if self.number.is_integral():
            return self._make(0)
        return self._make(math.inf)

    def quiet_nan(self) -> Quantity:
        if self.number.is_integral():
            return self._make(0)
        return self._make(math.nan)

    def denorm_min(self) -> Quantity:
        if self.number.is_integral():
            return self._make(0)
        return self._floating(1.401298464324817e-45, 5e-324)


def quantity_limits(unit: Unit = ONE, number: NumberType = NumberType.DOUBLE) -> QuantityLimits:
    return QuantityLimits(unit, number)


def make_quantity(value, unit: Unit = ONE, number: NumberType | None = None) -> Quantity:
    """A quantity whose number type follows from the value unless given."""
    return Quantity(value, unit, _literal_type(value) if number is None else number)


def in_unit(quantity: Quantity, unit: Unit) -> Quantity:
    """The quantity converted to ``unit``, keeping its number type."""
    return quantity.to(unit)


def as_quantity(value, unit: Unit = ONE) -> Quantity:
    """Tag a plain number with a unit."""
    return make_quantity(value, unit)


_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_prefix(text: str) -> tuple[float, str]:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number at the start of {text!r}")
    literal = match.group(1)
    value = float(literal)
    return value, literal


def _check_range(value: float, literal: str) -> None:
    if math.isinf(value) and "inf" not in literal.lower():
        raise OverflowError(f"{literal!r} is out of range")


def stof(text: str, unit: Unit = ONE) -> Quantity:
    """Parse the leading number of ``text`` as a float quantity."""
    value, literal = _parse_prefix(text)
    value = _to_float32(value)
    _check_range(value, literal)
    return Quantity._raw(value, unit, NumberType.FLOAT)


def stod(text: str, unit: Unit = ONE) -> Quantity:
    """Parse the leading number of ``text`` as a double quantity."""
    value, literal = _parse_prefix(text)
    _check_range(value, literal)
    return Quantity._raw(value, unit, NumberType.DOUBLE)


def stold(text: str, unit: Unit = ONE) -> Quantity:
    """Parse the leading number of ``text`` as a long double quantity."""
    value, literal = _parse_prefix(text)
    _check_range(value, literal)
    return Quantity._raw(value, unit, NumberType.LONG_DOUBLE)