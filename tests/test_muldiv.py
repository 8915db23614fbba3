import pytest
from hypothesis import given
from hypothesis import strategies as st

from wideint.muldiv import (
    idiv,
    idivmod,
    imulc,
    irem,
    mul,
    udiv,
    udivmod,
    umulc,
    umulddi3,
    urem,
)

UMAX = (1 << 256) - 1
IMIN = -(1 << 255)
IMAX = (1 << 255) - 1
U128MAX = (1 << 128) - 1

unsigned = st.integers(min_value=0, max_value=UMAX)
signed = st.integers(min_value=IMIN, max_value=IMAX)


def words(hi, lo):
    return (hi << 128) | lo


def test_multiplication_cases():
    assert umulc(6, 7) == (42, False)
    assert umulc(UMAX, 1) == (UMAX, False)
    assert umulc(1, UMAX) == (UMAX, False)
    assert umulc(UMAX, 0) == (0, False)
    assert umulc(0, UMAX) == (0, False)
    assert umulc(UMAX, 5) == (UMAX ^ 4, True)
    assert umulc(U128MAX, U128MAX) == (words((U128MAX << 1) & U128MAX, 1), False)


def test_umulddi3_full_product():
    assert umulddi3(U128MAX, U128MAX) == words(U128MAX - 1, 1)
    assert umulddi3(6, 7) == 42


def test_umulddi3_rejects_wide_operand():
    with pytest.raises(ValueError):
        umulddi3(1 << 128, 1)


def test_mul_wraps():
    assert mul(UMAX, 5) == UMAX ^ 4
    assert mul(-1, -1) == 1


def test_imulc_cases():
    assert imulc(5, 2) == (10, False)
    assert imulc(IMAX, 2) == (-2, True)
    assert imulc(IMIN, -1) == (IMIN, True)
    assert imulc(IMIN, 1) == (IMIN, False)
    assert imulc(IMIN, 0) == (0, False)
    assert imulc(-4, 3) == (-12, False)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (100, 9, 11),
        (U128MAX, 1 << 128, 0),
        (words(100, 0), words(10, 0), 10),
        (words(100, 1337), 1 << 130, 25),
        (words(1337, U128MAX), words(63, 0), 21),
        (words(42, 0), 1, words(42, 0)),
        (words(42, 42), 1 << 42, 42 << (128 - 42)),
        (words(1337, U128MAX), 0xC0FFEE, 35996389033280467545299711090127855),
        (words(42, 0), 99, 144362216269489045105674075880144089708),
        (words(100, 100), words(1000, 1000), 0),
        (words(1337, U128MAX), words(43, U128MAX), 30),
    ],
)
def test_division(a, b, expected):
    assert udiv(a, b) == expected


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (100, 9, 1),
        (U128MAX, 1 << 128, U128MAX),
        (words(100, 0), words(10, 0), 0),
        (words(100, 1337), 1 << 130, 1337),
        (words(1337, U128MAX), words(63, 0), words(14, U128MAX)),
        (words(42, 0), 1, 0),
        (words(42, 42), 1 << 42, 42),
        (words(1337, U128MAX), 0xC0FFEE, 1910477),
        (words(42, 0), 99, 60),
        (words(100, 100), words(1000, 1000), words(100, 100)),
        (words(1337, U128MAX), words(43, U128MAX), words(18, 29)),
    ],
)
def test_remainder(a, b, expected):
    assert urem(a, b) == expected


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        udiv(1, 0)


def test_remainder_by_zero():
    with pytest.raises(ZeroDivisionError):
        urem(1, 0)


def test_signed_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        idivmod(5, 0)


def test_signed_division_truncates():
    assert idivmod(7, 4) == (1, 3)
    assert idivmod(-7, 4) == (-1, -3)
    assert idivmod(7, -4) == (-1, 3)
    assert idivmod(-7, -4) == (1, -3)


def test_signed_min_by_minus_one_wraps():
    assert idiv(IMIN, -1) == IMIN
    assert irem(IMIN, -1) == 0


@given(unsigned, unsigned.filter(bool))
def test_udivmod_invariant(a, b):
    q, r = udivmod(a, b)
    assert q * b + r == a
    assert 0 <= r < b


@given(signed, signed.filter(bool))
def test_idivmod_invariant(a, b):
    q, r = idivmod(a, b)
    if not (a == IMIN and b == -1):
        assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


@given(unsigned, unsigned)
def test_umulc_consistent_with_mul(a, b):
    result, overflow = umulc(a, b)
    assert result == mul(a, b)
    assert overflow == (a * b > UMAX)


@given(signed, signed)
def test_imulc_flag_matches_range(a, b):
    result, overflow = imulc(a, b)
    assert overflow == (not IMIN <= a * b <= IMAX)
    assert (result - a * b) % (1 << 256) == 0