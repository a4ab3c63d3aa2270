"""Interactive demonstrations of RationalNumber."""

from __future__ import annotations

import argparse
import copy
import io
import sys
from typing import Optional, Sequence, TextIO

from ratnum.rational import RationalNumber


def operators_demo(
    instream: Optional[TextIO] = None,
    outstream: Optional[TextIO] = None,
    errstream: Optional[TextIO] = None,
) -> None:
    """Read one rational number and combine it with fixed ones using operators."""
    instream = sys.stdin if instream is None else instream
    outstream = sys.stdout if outstream is None else outstream
    errstream = sys.stderr if errstream is None else errstream

    outstream.write("Please enter rational number\n")
    a = RationalNumber().prompt(instream, outstream, errstream)
    b = RationalNumber(2, 3)
    c = RationalNumber(5, 7)
    d = RationalNumber(11, 13)
    total = a + b + c + d
    outstream.write(f"{a} + {b} + {c} + {d} = {total}\n")
    outstream.write(f"{total} = {total.to_float():g}\n")

    buffer = io.StringIO()
    for value in (a - b, b * c, c / d):
        value.write(buffer)
    reader = io.StringIO(buffer.getvalue())
    difference = RationalNumber().read(reader)
    product = RationalNumber().read(reader)
    quotient = RationalNumber().read(reader)
    outstream.write(
        f"{a} - {b} = {difference}\n"
        f"{b} * {c} = {product}\n"
        f"{c} / {d} = {quotient}\n"
    )
    outstream.flush()


def methods_demo(
    instream: Optional[TextIO] = None,
    outstream: Optional[TextIO] = None,
    errstream: Optional[TextIO] = None,
) -> None:
    """Read two rational numbers and show their sum, difference, product and quotient."""
    instream = sys.stdin if instream is None else instream
    outstream = sys.stdout if outstream is None else outstream
    errstream = sys.stderr if errstream is None else errstream

    outstream.write("Enter 1st rational number\n")
    a = RationalNumber().prompt(instream, outstream, errstream)
    outstream.write("Enter 2nd rational number\n")
    b = RationalNumber().prompt(instream, outstream, errstream)

    saved = copy.copy(a)
    a.add(b)
    outstream.write(f"sum = {a}\n")
    a = copy.copy(saved)
    a.subtract(b)
    outstream.write(f"difference = {a}\n")
    a = copy.copy(saved)
    a.multiply(b)
    outstream.write(f"product = {a}\n")
    a.numerator = saved.numerator
    a.denominator = saved.denominator
    a.divide(b)
    outstream.write(f"quotient = {a}\n")
    outstream.flush()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the demonstrations on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="ratnum-demo", description="Demonstrate arithmetic on rational numbers."
    )
    parser.add_argument(
        "--methods",
        action="store_true",
        help="use the in-place arithmetic methods instead of the operators",
    )
    args = parser.parse_args(argv)
    demo = methods_demo if args.methods else operators_demo
    try:
        demo(sys.stdin, sys.stdout, sys.stderr)
    except (EOFError, ValueError, ZeroDivisionError) as error:
        sys.stderr.write(f"error: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())