"""Truth tables and conversions between booleans and integers."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

_VALUES = (False, True)


def _show(value: bool, alpha: bool) -> str:
    if alpha:
        return "true" if value else "false"
    return str(int(value))


def truth_table_not(alpha: bool = True) -> list[str]:
    """Return the lines of the truth table of logical not."""
    lines = ["logical not"]
    lines.extend(f"{_show(p, alpha)}\t-->\t{_show(not p, alpha)}" for p in _VALUES)
    return lines


def _binary_table(title: str, func, alpha: bool) -> list[str]:
    lines = [title]
    lines.extend(
        f"{_show(p, alpha)}\t{_show(q, alpha)}\t -->\t{_show(func(p, q), alpha)}"
        for p in _VALUES
        for q in _VALUES
    )
    return lines


def truth_table_and(alpha: bool = True) -> list[str]:
    """Return the lines of the truth table of logical and."""
    return _binary_table("logical and", lambda p, q: p and q, alpha)


def truth_table_or(alpha: bool = True) -> list[str]:
    """Return the lines of the truth table of inclusive or."""
    return _binary_table("logical or", lambda p, q: p or q, alpha)


def bool_to_int_lines() -> list[str]:
    """Return lines showing how booleans convert to integers."""
    lines = ["converting bool to int"]
    lines.extend(
        f"bool value {_show(p, True)} becomes int value {int(p)}" for p in _VALUES
    )
    return lines


def int_to_bool_lines() -> list[str]:
    """Return lines showing how the integers -2 to 2 convert to booleans."""
    lines = ["converting int to bool"]
    lines.extend(
        f"int value {i} becomes bool value {_show(bool(i), True)}" for i in range(-2, 3)
    )
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the truth tables and conversion examples."""
    parser = argparse.ArgumentParser(
        prog="ratnum-booleans", description="Print boolean truth tables."
    )
    parser.parse_args(argv)
    sections = [
        truth_table_not(alpha=True),
        truth_table_and(alpha=False),
        truth_table_or(alpha=True),
        bool_to_int_lines(),
        int_to_bool_lines(),
    ]
    for section in sections:
        print()
        print("\n".join(section))
    return 0


if __name__ == "__main__":
    sys.exit(main())