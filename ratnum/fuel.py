"""Estimate the remaining driving range from fuel figures."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence


def estimated_range(
    remaining_fuel: float, consumed_fuel: float, distance_traveled: float = 100.0
) -> float:
    """Return the distance the remaining fuel lasts.

    consumed_fuel was used over distance_traveled; with the default of 100 it
    is a consumption per 100 distance units.
    """
    return remaining_fuel / (consumed_fuel / distance_traveled)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print two example range estimates."""
    parser = argparse.ArgumentParser(
        prog="ratnum-fuel", description="Print example driving range estimates."
    )
    parser.parse_args(argv)
    print(f"Estimated remaining range = {estimated_range(30.0, 6.0):.2f} km")
    print(f"Estimated remaining range = {estimated_range(15.0, 12.0, 200.0):.2f} km")
    return 0


if __name__ == "__main__":
    sys.exit(main())