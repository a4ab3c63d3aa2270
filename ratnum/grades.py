"""Doctoral grades, ordered from worst to best."""

from __future__ import annotations

import argparse
import enum
import sys
from typing import Optional, Sequence


class PhDGrade(enum.IntEnum):
    """A doctoral grade; a greater value is a better grade."""

    NON_SUFFICIT = 0
    RITE = 1
    CUM_LAUDE = 2
    MAGNA_CUM_LAUDE = 3
    SUMMA_CUM_LAUDE = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compare two grades and print them by name."""
    parser = argparse.ArgumentParser(
        prog="ratnum-grades", description="Compare and print doctoral grades."
    )
    parser.parse_args(argv)
    alex_grade = PhDGrade.RITE
    jordans_grade = PhDGrade.SUMMA_CUM_LAUDE
    better = "true" if alex_grade > jordans_grade else "false"
    print(f"Is Alex' grade better than Jordan's grade? {better}")
    alex_grade = PhDGrade.CUM_LAUDE
    jordans_grade = PhDGrade.NON_SUFFICIT
    print(f"alexGrade = {str(alex_grade)}")
    print(f"jordansGrade = {str(jordans_grade)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())