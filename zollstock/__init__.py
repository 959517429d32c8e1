"""Physical quantities with units, dimensions, checked conversions and a pipe-mass calculator."""

__version__ = "0.3.0"

__all__ = ["catalog", "constants", "numbers", "pcalc", "quantity", "units"]