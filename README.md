# ratnum

Mutable rational numbers that are kept in canonical form. The package also
has a few small command-line tools for digit sums, doctoral grade names,
boolean truth tables and fuel range estimates.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Rational numbers

`ratnum.rational.RationalNumber(numerator=0, denominator=1)` stores a
numerator and a denominator. The constructor and every arithmetic operation
reduce the value to lowest terms. The denominator is always positive, so any
sign is carried by the numerator. A denominator of 0 raises
`ZeroDivisionError`.

```python
from ratnum.rational import RationalNumber

a = RationalNumber(1, -5)   # (-1/5)
b = RationalNumber(-2, 3)

print(a + b)        # (-13/15)
print(a - 2)        # (-11/5)
print(3 / b)        # (-9/2)
print(RationalNumber(-22, -7).to_float())
```

- `numerator` and `denominator` are properties. Setting either one reduces
  the number again.
- `add`, `subtract`, `multiply` and `divide` change the number in place and
  return it, so calls can be chained. They accept a `RationalNumber` or an
  `int`; any other type raises `TypeError`.
- The operators `+`, `-`, `*` and `/` leave their operands alone and return
  a new number. A plain integer works on either side.
- `str(r)` gives the form `(n/d)`. `write(stream)` writes that form to a
  text stream.
- `read(stream)` reads one number in the form `(n/d)` from a text stream and
  returns the number. Whitespace between the parts is skipped, the delimiter
  characters are not checked, and the values are stored exactly as read,
  without reducing them. A `(0/0)` is accepted. It raises `EOFError` at the
  end of input and `ValueError` where an integer is expected but not found.
- `to_float()` returns the value as a float.
- `prompt(instream, outstream, errstream)` writes `numerator: ` and reads an
  integer. It then writes `denominator: ` and reads again, for as long as the
  denominator is 0. It reports each 0 on the error stream. The values are
  stored as entered. The streams default to standard input, output and error.

`ratnum.math_helper.sign(n)` returns -1, 0 or +1.

## Other modules

- `ratnum.checksum`: `checksum(number)` and `checksum_recursive(number)`
  return the sum of the decimal digits of a natural number. A negative
  number raises `ValueError`.
- `ratnum.grades`: `PhDGrade` is an `IntEnum`, ordered from `NON_SUFFICIT`
  to `SUMMA_CUM_LAUDE`. Its `str()` is the name in words, for example
  `magna cum laude`.
- `ratnum.booleans`: `truth_table_not`, `truth_table_and` and
  `truth_table_or` return the lines of a truth table. Values are shown as
  `true`/`false`, or as `1`/`0` when `alpha=False`. `bool_to_int_lines()`
  and `int_to_bool_lines()` return lines that show the conversions.
- `ratnum.fuel`: `estimated_range(remaining_fuel, consumed_fuel,
  distance_traveled=100.0)` returns how far the remaining fuel lasts.

## Command-line tools

| Command | What it does |
|---|---|
| `ratnum-demo` | Asks for one rational number. Prints its sum with (2/3), (5/7) and (11/13), that sum as a decimal, and a difference, product and quotient after a round trip through the text form. With `--methods` it asks for two numbers instead, and prints their sum, difference, product and quotient computed with the in-place methods. |
| `ratnum-checksum` | Asks for a natural number and prints the sum of its digits. With `--recursive` it uses the recursive computation. |
| `ratnum-grades` | Compares two fixed doctoral grades and prints their names. |
| `ratnum-booleans` | Prints the truth tables for not, and, and or, and the conversions between bool and int. |
| `ratnum-fuel` | Prints the estimated remaining range for two fixed sample readings. |

`ratnum-demo` and `ratnum-checksum` print an error and exit with status 1
when the input is not a valid number or ends too early.

## Limits

The tools only show fixed examples or read a single value. They keep no
state between runs and take no input other than what is listed above.
`RationalNumber` has no comparison operators and no hashing.