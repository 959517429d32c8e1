"""The constant pi as a dimensionless quantity and as an angle in radians."""

from __future__ import annotations

import math
import struct

from zollstock.catalog import unit
from zollstock.numbers import NumberType
from zollstock.quantity import Quantity
from zollstock.units import ONE

__all__ = [
    "pi_v",
    "pi_1_v",
    "pi_rad_v",
    "pi_f",
    "pi",
    "pi_l",
    "pi_f_1",
    "pi_1",
    "pi_l_1",
    "pi_f_rad",
    "pi_rad",
    "pi_l_rad",
]


def _pi_value(number: NumberType) -> float:
    if number.is_integral():
        raise TypeError(f"pi has no {number.type_name()} value")
    if number is NumberType.FLOAT:
        return struct.unpack("f", struct.pack("f", math.pi))[0]
    return math.pi


def pi_v(number: NumberType = NumberType.DOUBLE) -> Quantity:
    """Pi as a dimensionless quantity of the given floating type."""
    return Quantity(_pi_value(number), ONE, number)


def pi_1_v(number: NumberType = NumberType.DOUBLE) -> Quantity:
    """Pi as a dimensionless quantity of the given floating type."""
    return Quantity(_pi_value(number), ONE, number)


def pi_rad_v(number: NumberType = NumberType.DOUBLE) -> Quantity:
    """Pi radians in the given floating type."""
    return Quantity(_pi_value(number), unit("rad"), number)


pi_f = pi_v(NumberType.FLOAT)
pi = pi_v(NumberType.DOUBLE)
pi_l = pi_v(NumberType.LONG_DOUBLE)

pi_f_1 = pi_1_v(NumberType.FLOAT)
pi_1 = pi_1_v(NumberType.DOUBLE)
pi_l_1 = pi_1_v(NumberType.LONG_DOUBLE)

pi_f_rad = pi_rad_v(NumberType.FLOAT)
pi_rad = pi_rad_v(NumberType.DOUBLE)
pi_l_rad = pi_rad_v(NumberType.LONG_DOUBLE)