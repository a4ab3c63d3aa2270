"""Mutable rational numbers kept in canonical form."""

from __future__ import annotations

import math
import operator
import sys
from typing import Optional, TextIO

from ratnum.math_helper import sign


class _Scanner:
    """Reads characters and integers from a text stream with one character of lookahead."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: Optional[str] = None

    def _next(self) -> str:
        if self._pending is not None:
            char, self._pending = self._pending, None
            return char
        return self._stream.read(1)

    def _skip_whitespace(self) -> str:
        char = self._next()
        while char and char.isspace():
            char = self._next()
        return char

    def read_char(self) -> str:
        char = self._skip_whitespace()
        if not char:
            raise EOFError("unexpected end of input")
        return char

    def read_int(self) -> int:
        char = self._skip_whitespace()
        if not char:
            raise EOFError("unexpected end of input")
        text = ""
        if char in "+-":
            text = char
            char = self._next()
        while char and char.isdigit():
            text += char
            char = self._next()
        if char:
            self._pending = char
        if not text.lstrip("+-"):
            raise ValueError(f"expected an integer, got {text + (char or '')!r}")
        return int(text)


def _normalized(numerator: int, denominator: int) -> tuple[int, int]:
    if denominator == 0:
        raise ZeroDivisionError("denominator must not be 0")
    divisor = math.gcd(numerator, denominator)
    return (
        sign(numerator) * sign(denominator) * abs(numerator) // divisor,
        abs(denominator) // divisor,
    )


class RationalNumber:
    """A rational number that is normalized on construction and on every change.

    Arithmetic methods change the number in place and return it; the
    operators leave their operands alone and return a new number.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        self._numerator, self._denominator = _normalized(
            operator.index(numerator), operator.index(denominator)
        )

    @property
    def numerator(self) -> int:
        return self._numerator

    @numerator.setter
    def numerator(self, value: int) -> None:
        self._assign(operator.index(value), self._denominator)

    @property
    def denominator(self) -> int:
        return self._denominator

    @denominator.setter
    def denominator(self, value: int) -> None:
        self._assign(self._numerator, operator.index(value))

    def _assign(self, numerator: int, denominator: int) -> RationalNumber:
        self._numerator, self._denominator = _normalized(numerator, denominator)
        return self

    def _copy(self) -> RationalNumber:
        clone = RationalNumber.__new__(RationalNumber)
        clone._numerator = self._numerator
        clone._denominator = self._denominator
        return clone

    @staticmethod
    def _coerce(value: object) -> Optional[RationalNumber]:
        if isinstance(value, RationalNumber):
            return value
        if isinstance(value, int):
            return RationalNumber(value)
        return None

    def _operand(self, value: object) -> RationalNumber:
        other = self._coerce(value)
        if other is None:
            raise TypeError(f"cannot combine RationalNumber with {type(value).__name__}")
        return other

    def add(self, other: RationalNumber | int) -> RationalNumber:
        """Add other to this number in place and return it."""
        other = self._operand(other)
        return self._assign(
            self._numerator * other._denominator + self._denominator * other._numerator,
            self._denominator * other._denominator,
        )

    def subtract(self, other: RationalNumber | int) -> RationalNumber:
        """Subtract other from this number in place and return it."""
        other = self._operand(other)
        return self._assign(
            self._numerator * other._denominator - self._denominator * other._numerator,
            self._denominator * other._denominator,
        )

    def multiply(self, other: RationalNumber | int) -> RationalNumber:
        """Multiply this number by other in place and return it."""
        other = self._operand(other)
        return self._assign(
            self._numerator * other._numerator,
            self._denominator * other._denominator,
        )

    def divide(self, other: RationalNumber | int) -> RationalNumber:
        """Divide this number by other in place and return it."""
        other = self._operand(other)
        return self._assign(
            self._numerator * other._denominator,
            self._denominator * other._numerator,
        )

    def write(self, stream: TextIO) -> None:
        """Serialize the number to stream as "(n/d)"."""
        stream.write(str(self))
        stream.flush()

    def read(self, stream: TextIO) -> RationalNumber:
        """Deserialize a number written as "(n/d)" from stream.

        Whitespace between the parts is skipped, the delimiters are not
        checked and the result is stored as read, without normalizing.
        """
        scanner = _Scanner(stream)
        scanner.read_char()
        numerator = scanner.read_int()
        scanner.read_char()
        denominator = scanner.read_int()
        scanner.read_char()
        self._numerator, self._denominator = numerator, denominator
        return self

    def to_float(self) -> float:
        """Return a float approximating the value of the number."""
        return self._numerator / self._denominator

    def prompt(
        self,
        instream: Optional[TextIO] = None,
        outstream: Optional[TextIO] = None,
        errstream: Optional[TextIO] = None,
    ) -> RationalNumber:
        """Ask for numerator and denominator until the denominator is not 0.

        The values are stored as entered, without normalizing.
        """
        instream = sys.stdin if instream is None else instream
        outstream = sys.stdout if outstream is None else outstream
        errstream = sys.stderr if errstream is None else errstream
        scanner = _Scanner(instream)
        outstream.write("numerator: ")
        outstream.flush()
        numerator = scanner.read_int()
        while True:
            outstream.write("denominator: ")
            outstream.flush()
            denominator = scanner.read_int()
            if denominator != 0:
                break
            errstream.write("Error, denominator may not be 0!\n")
            errstream.flush()
        self._numerator, self._denominator = numerator, denominator
        return self

    def __add__(self, other: object) -> RationalNumber:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._copy().add(operand)

    def __radd__(self, other: object) -> RationalNumber:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._copy().add(self)

    def __sub__(self, other: object) -> RationalNumber:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._copy().subtract(operand)

    def __rsub__(self, other: object) -> RationalNumber:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._copy().subtract(self)

    def __mul__(self, other: object) -> RationalNumber:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._copy().multiply(operand)

    def __rmul__(self, other: object) -> RationalNumber:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._copy().multiply(self)

    def __truediv__(self, other: object) -> RationalNumber:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._copy().divide(operand)

    def __rtruediv__(self, other: object) -> RationalNumber:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._copy().divide(self)

    def __str__(self) -> str:
        return f"({self._numerator}/{self._denominator})"