"""Digit sums of natural numbers."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence


def _check_natural(number: int) -> None:
    if number < 0:
        raise ValueError(f"expected a natural number, got {number}")


def checksum(number: int) -> int:
    """Return the sum of the decimal digits of number."""
    _check_natural(number)
    result = 0
    while number > 0:
        number, digit = divmod(number, 10)
        result += digit
    return result


def checksum_recursive(number: int) -> int:
    """Return the sum of the decimal digits of number, computed recursively."""
    _check_natural(number)
    if number % 10 == number:
        return number
    return number % 10 + checksum_recursive(number // 10)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a natural number and print its checksum."""
    parser = argparse.ArgumentParser(
        prog="ratnum-checksum", description="Print the digit sum of a natural number."
    )
    parser.add_argument(
        "--recursive", action="store_true", help="use the recursive computation"
    )
    args = parser.parse_args(argv)
    sys.stdout.write("Natural number: ")
    sys.stdout.flush()
    words = sys.stdin.readline().split()
    try:
        if not words:
            raise ValueError("no number given")
        number = int(words[0])
        compute = checksum_recursive if args.recursive else checksum
        result = compute(number)
    except ValueError as error:
        sys.stderr.write(f"error: {error}\n")
        return 1
    sys.stdout.write(f"Checksum = {result}\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())