# zollstock

Physical quantities that carry their unit with them. A unit knows its
dimensions, its scaling factor and its SI prefix. Quantities can be
multiplied, divided, compared and converted. Adding or comparing
quantities in incompatible units raises an error instead of giving a wrong number.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Units

You look up units by symbol in the catalogue, with or without a prefix:

```python
from zollstock.catalog import unit, prefix, symbols

m = unit("m")
mm = unit("mm")
s = unit("s")

velocity = m / s
area = m ** 2
print(str(velocity))                # m*s^-1
print(mm.convertible_to(m))         # True
print(prefix("k").factor)           # 1000.0
print(len(symbols()))
```

The catalogue contains these units:

- the base units `m`, `g`, `s`, `A`, `K`, `mol` and `cd`, each with all 24 SI prefixes (`q` … `Q`, with `mic` for micro);
- the time units `min`, `h`, `d` and `a`;
- the angles `rad`, `asec` and `gon` (prefixable), and `deg` and `amin`;
- the solid angle `sr` (prefixable);
- the dimensionless unit `"1"`;
- the raised forms `m2`, `m3` (prefixed too, e.g. `cm3`), `s2` (prefixed too) and `min2`, `h2`, `d2`, `a2`.

`zollstock.units` provides `Dimensions`, `Prefix`, `UnitFactor` and `Unit`,
together with the helpers `make_unit`, `prefixed_unit`, `unit_pow`,
`unit_dimensions`, `unit_scaling_factor`, `convertible_units` and `to_string`.
A unit is a normalised product of factors. So `m * m` equals `m ** 2`, and
`m / m` is the dimensionless unit `ONE`.

## Quantities

```python
from zollstock.quantity import Quantity, in_unit, stod
from zollstock.catalog import unit, literal

length = Quantity(1.5, unit("m"))
print(in_unit(length, unit("mm")))  # 1500 mm

width = literal(20, "cm")
print(length * width)               # value with the unit m*cm

parsed = stod("2.5", unit("kg"))
print(f"{parsed:.2f}")              # 2.50 kg
```

The following operations raise `UnitMismatchError`:

- adding, subtracting or ordering quantities whose units differ;
- converting to a unit with other dimensions.

Number types (`int`, `unsigned int`, `float`, `double`, …) are modelled by
`NumberType` in `zollstock.numbers`. Converting a value into a type that
cannot hold it unchanged raises `NarrowingConversion`.

`stof`, `stod` and `stold` parse the leading number of a string into a
quantity.

`quantity_limits` gives the numeric limits of a quantity type:

```python
from zollstock.quantity import quantity_limits
from zollstock.numbers import NumberType
from zollstock.catalog import unit

print(quantity_limits(unit("m"), NumberType.INT).max())  # 2147483647 m
```

## Constants

`zollstock.constants` provides pi in three forms, each for the float, double
and long double types:

- dimensionless: `pi_f`, `pi`, `pi_l`, `pi_f_1`, `pi_1`, `pi_l_1`;
- in radians: `pi_f_rad`, `pi_rad`, `pi_l_rad`.

The factory functions `pi_v`, `pi_1_v` and `pi_rad_v` build the same values
for a given floating `NumberType`:

```python
from zollstock.constants import pi_rad_v
from zollstock.numbers import NumberType

print(pi_rad_v(NumberType.DOUBLE).value)  # 3.141592653589793
```

## pcalc

`pcalc` is a small calculator for the mass of a copper pipe:

```
pcalc <wall thickness (mm)> <outer diameter (mm)> <length (m)>
```

For example, `pcalc 1 22 3` prints the pipe mass in kilograms with two
decimals. Invalid arguments print a usage message and exit with status 1.

## What it does not do

- There are no mathematical functions on quantities, such as trigonometric functions or sign tests.
- The catalogue has no named derived units such as newton or joule. Build them from base units with `*`, `/` and `**`.
- Temperatures are plain kelvin scalings, with no offset scales such as Celsius.