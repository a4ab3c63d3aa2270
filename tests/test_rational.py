import io

import pytest

from ratnum.rational import RationalNumber


def parts(r):
    return r.numerator, r.denominator


# constructor


def test_constructor_defaults():
    assert parts(RationalNumber()) == (0, 1)
    assert parts(RationalNumber(1)) == (1, 1)
    assert parts(RationalNumber(2, 1)) == (2, 1)


def test_constructor_canonical_form():
    assert parts(RationalNumber(-2 * 3 * 5, -2 * 3 * 7)) == (5, 7)


def test_constructor_zero_denominator_raises():
    with pytest.raises(ZeroDivisionError):
        RationalNumber(5, 0)


def test_constructor_rejects_float():
    with pytest.raises(TypeError):
        RationalNumber(1.5, 2)


# setters


def test_setting_parts_normalizes():
    r = RationalNumber(1, 3)
    r.numerator = 6
    assert parts(r) == (2, 1)
    r.denominator = -4
    assert parts(r) == (-1, 2)


def test_setting_zero_denominator_keeps_state():
    r = RationalNumber(3, 4)
    with pytest.raises(ZeroDivisionError):
        r.denominator = 0
    assert parts(r) == (3, 4)


# arithmetic methods


@pytest.fixture
def a():
    return RationalNumber(4, 7)


@pytest.fixture
def b():
    return RationalNumber(2, 7)


def test_add(a, b):
    a.add(b)
    assert parts(a) == (6, 7)


def test_subtract(a, b):
    a.subtract(b)
    assert parts(a) == (2, 7)


def test_multiply(a, b):
    a.multiply(b)
    assert parts(a) == (8, 49)


def test_divide(a, b):
    a.divide(b)
    assert parts(a) == (2, 1)


def test_methods_return_self_for_chaining(a, b):
    result = a.add(b).multiply(RationalNumber(7, 3))
    assert result is a
    assert parts(a) == (2, 1)


def test_divide_by_zero_raises(a):
    with pytest.raises(ZeroDivisionError):
        a.divide(RationalNumber(0))


# output


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (RationalNumber(), "(0/1)"),
        (RationalNumber(2), "(2/1)"),
        (RationalNumber(2 * 3 * 5, 3 * 5 * 7), "(2/7)"),
        (RationalNumber(2 * 3 * 5, -3 * 5 * 7), "(-2/7)"),
        (RationalNumber(-2 * 3 * 5, 3 * 5 * 7), "(-2/7)"),
        (RationalNumber(-2 * 3 * 5, -3 * 5 * 7), "(2/7)"),
    ],
)
def test_write_single(number, expected):
    stream = io.StringIO()
    number.write(stream)
    assert stream.getvalue() == expected


def test_write_several():
    stream = io.StringIO()
    RationalNumber(2, 5).write(stream)
    RationalNumber(3, -7).write(stream)
    RationalNumber(-11, 13).write(stream)
    RationalNumber(-17, -19).write(stream)
    assert stream.getvalue() == "(2/5)(-3/7)(-11/13)(17/19)"


# input


def test_read_sequence_without_normalizing():
    stream = io.StringIO(
        "(1/2)(-1/2) (1/-2)   (-1/-2) (  2/  4)  (   -2 /   -4)  (0/0)"
    )
    r = RationalNumber()
    expected = [(1, 2), (-1, 2), (1, -2), (-1, -2), (2, 4), (-2, -4), (0, 0)]
    for pair in expected:
        r.read(stream)
        assert parts(r) == pair


def test_read_truncated_input_raises():
    r = RationalNumber()
    with pytest.raises(EOFError):
        r.read(io.StringIO("(3/"))


def test_read_non_integer_raises():
    r = RationalNumber()
    with pytest.raises(ValueError):
        r.read(io.StringIO("(x/2)"))


def test_write_read_round_trip():
    stream = io.StringIO()
    RationalNumber(-22, 8).write(stream)
    stream.seek(0)
    r = RationalNumber().read(stream)
    assert parts(r) == (-11, 4)


# to_float


def test_to_float():
    assert RationalNumber(-22, -7).to_float() == pytest.approx(3.14285, abs=0.0005)


# prompt


def test_prompt_rejects_zero_denominator():
    instream = io.StringIO("3\n0\n4\n")
    outstream = io.StringIO()
    errstream = io.StringIO()
    r = RationalNumber().prompt(instream, outstream, errstream)
    assert parts(r) == (3, 4)
    assert outstream.getvalue() == "numerator: denominator: denominator: "
    assert errstream.getvalue() == "Error, denominator may not be 0!\n"


def test_prompt_stores_values_as_entered():
    r = RationalNumber().prompt(io.StringIO("2 4"), io.StringIO(), io.StringIO())
    assert parts(r) == (2, 4)


def test_prompt_end_of_input_raises():
    with pytest.raises(EOFError):
        RationalNumber().prompt(io.StringIO("5\n"), io.StringIO(), io.StringIO())


# operators


@pytest.fixture
def x():
    return RationalNumber(1, -5)


@pytest.fixture
def y():
    return RationalNumber(-2, 3)


def test_operator_add(x, y):
    assert parts(x + y) == (-13, 15)
    assert parts(x + 2) == (9, 5)
    assert parts(3 + y) == (7, 3)


def test_operator_subtract(x, y):
    assert parts(x - y) == (7, 15)
    assert parts(x - 2) == (-11, 5)
    assert parts(3 - y) == (11, 3)


def test_operator_multiply(x, y):
    assert parts(x * y) == (2, 15)
    assert parts(x * 2) == (-2, 5)
    assert parts(3 * y) == (-2, 1)


def test_operator_divide(x, y):
    assert parts(x / y) == (3, 10)
    assert parts(x / 2) == (-1, 10)
    assert parts(3 / y) == (-9, 2)


def test_operators_leave_operands_unchanged(x, y):
    _ = x + y
    _ = x * y
    assert parts(x) == (-1, 5)
    assert parts(y) == (-2, 3)


def test_operator_with_unsupported_type_raises():
    x = RationalNumber(1, -5)
    with pytest.raises(TypeError):
        _ = x + 1.5
    assert parts(x) == (-1, 5)


def test_str():
    assert str(RationalNumber(24, 7)) == "(24/7)"


def test_read_from_string_stream():
    r = RationalNumber().read(io.StringIO("(24/7)"))
    assert parts(r) == (24, 7)