"""Mutable rational numbers in canonical form and small arithmetic command-line tools."""

__version__ = "1.0.0"
__all__ = ["booleans", "checksum", "demo", "fuel", "grades", "math_helper", "rational"]