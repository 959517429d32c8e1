"""Command-line calculator for the mass of a copper pipe."""

from __future__ import annotations

import sys

from zollstock.catalog import literal, unit
from zollstock.constants import pi
from zollstock.quantity import Quantity, UnitMismatchError, in_unit, stod
from zollstock.units import Dimensions

__all__ = ["read_args", "calculate_pipe_mass", "main"]

USAGE = "Usage: pcalc <wall thickness (mm)> <outer diameter (mm)> <length (m)>"

_LENGTH = Dimensions(length=1)

_COPPER_DENSITY = in_unit(literal(8.1, "g") / unit("cm3"), unit("g") / unit("mm3"))


def read_args(argv) -> tuple[Quantity, Quantity, Quantity]:
    """Parse wall thickness (mm), outer diameter (mm) and length (m) as millimetres."""
    if len(argv) != 3:
        raise ValueError("Invalid arguments")
    try:
        return (
            stod(argv[0], unit("mm")),
            stod(argv[1], unit("mm")),
            in_unit(stod(argv[2], unit("m")), unit("mm")),
        )
    except (ValueError, OverflowError) as error:
        raise ValueError("Invalid arguments") from error


def _require_length(name: str, quantity: Quantity) -> None:
    if quantity.unit.dimensions() != _LENGTH:
        raise UnitMismatchError(f"{name} must be a length, got {quantity!r}")


def calculate_pipe_mass(wall_thickness: Quantity, outer_diameter: Quantity,
                        pipe_length: Quantity) -> Quantity:
    """The mass in kilograms of a copper pipe of the given dimensions."""
    _require_length("wall thickness", wall_thickness)
    _require_length("outer diameter", outer_diameter)
    _require_length("pipe length", pipe_length)

    outer_radius = outer_diameter / 2
    inner_radius = outer_radius - wall_thickness
    outer_area = pi * outer_radius * outer_radius
    inner_area = pi * inner_radius * inner_radius
    ring_area = outer_area - inner_area
    pipe_volume = ring_area * pipe_length

    return in_unit(pipe_volume * _COPPER_DENSITY, unit("kg"))


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        wall_thickness, outer_diameter, pipe_length = read_args(args)
    except ValueError:
        print("Invalid arguments", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    mass = calculate_pipe_mass(wall_thickness, outer_diameter, pipe_length)
    print(f"pipe mass: {mass:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())