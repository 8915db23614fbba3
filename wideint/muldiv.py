"""Multiplication and division primitives on 256-bit integers.

Values are plain ``int``. Unsigned operations reduce their operands to the
256-bit two's complement pattern and return values in ``[0, 2**256)``.
Signed operations return values in ``[-2**255, 2**255)`` and wrap on
overflow. Division by zero raises :class:`ZeroDivisionError`.
"""

from __future__ import annotations

from .bitops import to_signed, to_unsigned

__all__ = [
    "umulddi3",
    "mul",
    "umulc",
    "imulc",
    "udivmod",
    "udiv",
    "urem",
    "idivmod",
    "idiv",
    "irem",
]

_HALF_BITS = 128
_HALF_MAX = (1 << _HALF_BITS) - 1
_UMAX = (1 << 256) - 1
_IMIN = -(1 << 255)
_IMAX = (1 << 255) - 1


def umulddi3(a: int, b: int) -> int:
    """Multiply two unsigned 128-bit values into their full 256-bit product."""
    for operand in (a, b):
        if not 0 <= operand <= _HALF_MAX:
            raise ValueError(f"{operand} is not an unsigned 128-bit value")
    return a * b


def mul(a: int, b: int) -> int:
    """Wrapping multiplication; returns the unsigned 256-bit result."""
    return (to_unsigned(a) * to_unsigned(b)) & _UMAX


def umulc(a: int, b: int) -> tuple[int, bool]:
    """Unsigned multiplication returning the wrapped product and an overflow flag."""
    product = to_unsigned(a) * to_unsigned(b)
    return product & _UMAX, product > _UMAX


def imulc(a: int, b: int) -> tuple[int, bool]:
    """Signed multiplication returning the wrapped product and an overflow flag."""
    product = to_signed(a) * to_signed(b)
    return to_signed(product), not _IMIN <= product <= _IMAX


def _check_divisor(divisor: int) -> None:
    if divisor == 0:
        raise ZeroDivisionError("attempt to divide by zero")


def udivmod(a: int, b: int) -> tuple[int, int]:
    """Unsigned division returning ``(quotient, remainder)``."""
    dividend, divisor = to_unsigned(a), to_unsigned(b)
    _check_divisor(divisor)
    return divmod(dividend, divisor)


def udiv(a: int, b: int) -> int:
    """Unsigned quotient."""
    return udivmod(a, b)[0]


def urem(a: int, b: int) -> int:
    """Unsigned remainder."""
    return udivmod(a, b)[1]


def idivmod(a: int, b: int) -> tuple[int, int]:
    """Signed division rounding toward zero, returning ``(quotient, remainder)``.

    The remainder takes the sign of the dividend. ``MIN / -1`` wraps to
    ``MIN`` with a remainder of zero.
    """
    dividend, divisor = to_signed(a), to_signed(b)
    _check_divisor(divisor)
    quotient, remainder = divmod(abs(dividend), abs(divisor))
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    if dividend < 0:
        remainder = -remainder
    return to_signed(quotient), to_signed(remainder)


def idiv(a: int, b: int) -> int:
    """Signed quotient, rounded toward zero."""
    return idivmod(a, b)[0]


def irem(a: int, b: int) -> int:
    """Signed remainder with the sign of the dividend."""
    return idivmod(a, b)[1]