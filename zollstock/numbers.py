"""Arithmetic number types, lossless conversion checks and safe comparisons."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass

__all__ = [
    "NumberType",
    "IntRange",
    "NarrowingConversion",
    "lossless_convertible",
    "narrow",
    "cmp_equal",
    "cmp_not_equal",
    "cmp_less",
    "cmp_greater",
    "cmp_less_equal",
    "cmp_greater_equal",
]


# (type name, integral, signed, bit width)
_TRAITS = {
    "signed char": (True, True, 8),
    "short int": (True, True, 16),
    "int": (True, True, 32),
    "long int": (True, True, 64),
    "long long int": (True, True, 64),
    "unsigned char": (True, False, 8),
    "unsigned short int": (True, False, 16),
    "unsigned int": (True, False, 32),
    "unsigned long int": (True, False, 64),
    "unsigned long long int": (True, False, 64),
    "float": (False, True, 32),
    "double": (False, True, 64),
    "long double": (False, True, 64),
}


@dataclass(frozen=True)
class IntRange:
    """A closed range of integers."""

    min: int = 0
    max: int = 0

    def contains(self, other: int | IntRange) -> bool:
        """Whether an integer, or every integer of another range, lies in this range."""
        if isinstance(other, IntRange):
            return self.contains(other.min) and self.contains(other.max)
        if isinstance(other, bool) or not isinstance(other, int):
            raise TypeError(f"expected an integer or IntRange, got {other!r}")
        return self.min <= other <= self.max


class NumberType(enum.Enum):
    """The arithmetic types a quantity may hold its value in."""

    SIGNED_CHAR = "signed char"
    SHORT = "short int"
    INT = "int"
    LONG = "long int"
    LONG_LONG = "long long int"
    UNSIGNED_CHAR = "unsigned char"
    UNSIGNED_SHORT = "unsigned short int"
    UNSIGNED_INT = "unsigned int"
    UNSIGNED_LONG = "unsigned long int"
    UNSIGNED_LONG_LONG = "unsigned long long int"
    FLOAT = "float"
    DOUBLE = "double"
    LONG_DOUBLE = "long double"

    def type_name(self) -> str:
        """The spelled-out name of the type."""
        return self.value

    def is_integral(self) -> bool:
        return _TRAITS[self.value][0]

    def is_signed(self) -> bool:
        return _TRAITS[self.value][1]

    @property
    def bits(self) -> int:
        return _TRAITS[self.value][2]

    def continuous_int_range(self) -> IntRange:
        """The range in which every integer is exactly representable."""
        if self.is_integral():
            if self.is_signed():
                half = 1 << (self.bits - 1)
                return IntRange(-half, half - 1)
            return IntRange(0, (1 << self.bits) - 1)
        if self is NumberType.FLOAT:
            return IntRange(-16777216, 16777216)
        return IntRange(-9_007_199_254_740_992, 9_007_199_254_740_992)


class NarrowingConversion(ArithmeticError):
    """A value changed when converted from one number type to another."""

    def __init__(self, source, target, source_type: NumberType, target_type: NumberType):
        self.source = source
        self.target = target
        self.source_type = source_type
        self.target_type = target_type
        shown_target = "?" if target is None else target
        super().__init__(
            f"Narrowing conversion from {source_type.type_name()} {source} "
            f"to {target_type.type_name()} {shown_target}"
        )


def lossless_convertible(source: NumberType, target: NumberType) -> bool:
    """Whether every value of ``source`` converts to ``target`` unchanged."""
    if source is target:
        return True
    if not source.is_integral() and target.is_integral():
        return False
    if source is NumberType.FLOAT and target in (NumberType.DOUBLE, NumberType.LONG_DOUBLE):
        return True
    if source is NumberType.DOUBLE and target is NumberType.LONG_DOUBLE:
        return True
    if source.is_integral():
        return target.continuous_int_range().contains(source.continuous_int_range())
    return False


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _wrap(value: int, target: NumberType) -> int:
    modulus = 1 << target.bits
    value %= modulus
    if target.is_signed() and value >= modulus >> 1:
        value -= modulus
    return value


def _cast(value, source: NumberType, target: NumberType):
    """Convert ``value`` the way a static cast between the types would."""
    if target.is_integral():
        if source.is_integral():
            return _wrap(value, target)
        if not math.isfinite(value):
            raise NarrowingConversion(value, None, source, target)
        truncated = math.trunc(value)
        if not target.continuous_int_range().contains(truncated):
            raise NarrowingConversion(value, _wrap(truncated, target), source, target)
        return truncated
    as_float = float(value)
    if target is NumberType.FLOAT:
        return _to_float32(as_float)
    return as_float


def _infer_type(value) -> NumberType:
    if isinstance(value, float):
        return NumberType.DOUBLE
    if NumberType.LONG_LONG.continuous_int_range().contains(value):
        return NumberType.LONG_LONG
    return NumberType.UNSIGNED_LONG_LONG


def _check_number(value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")


def _check_source(value, source: NumberType):
    if source.is_integral():
        if not isinstance(value, int):
            raise TypeError(f"{source.type_name()} value must be an integer, got {value!r}")
        if not source.continuous_int_range().contains(value):
            raise ValueError(f"{value} is out of range for {source.type_name()}")
        return value
    return float(value)


def narrow(value, target: NumberType, source: NumberType | None = None):
    """Convert ``value`` to ``target``, raising NarrowingConversion if it changes."""
    _check_number(value)
    if source is None:
        source = _infer_type(value)
    value = _check_source(value, source)

    if lossless_convertible(source, target):
        return _cast(value, source, target)

    converted = _cast(value, target=target, source=source)
    if _cast(converted, target, source) != value:
        raise NarrowingConversion(value, converted, source, target)
    if source.is_signed() != target.is_signed() and (converted < 0) != (value < 0):
        raise NarrowingConversion(value, converted, source, target)
    return converted


def _operands(number_1, number_2):
    _check_number(number_1)
    _check_number(number_2)
    if isinstance(number_1, float) or isinstance(number_2, float):
        return float(number_1), float(number_2)
    return number_1, number_2


def cmp_equal(number_1, number_2) -> bool:
    a, b = _operands(number_1, number_2)
    return a == b


def cmp_not_equal(number_1, number_2) -> bool:
    a, b = _operands(number_1, number_2)
    return a != b


def cmp_less(number_1, number_2) -> bool:
    a, b = _operands(number_1, number_2)
    return a < b


def cmp_greater(number_1, number_2) -> bool:
    a, b = _operands(number_1, number_2)
    return a > b


def cmp_less_equal(number_1, number_2) -> bool:
    a, b = _operands(number_1, number_2)
    return a <= b


def cmp_greater_equal(number_1, number_2) -> bool:
    a, b = _operands(number_1, number_2)
    return a >= b