"""Signed 256-bit arithmetic with explicit overflow behaviour.

Values are plain ``int`` read as 256-bit two's complement: any integer is
first reduced to its 256-bit pattern and interpreted as signed, so results
lie in ``[-2**255, 2**255)``. Plain operations (``div``, ``rem``,
``negate``, ``pow``) raise :class:`OverflowError` when the exact result does
not fit. ``wrapping_*`` operations wrap around, and ``overflowing_*``
operations return the wrapped result together with an overflow flag.
Division by zero always raises :class:`ZeroDivisionError`.
"""

from __future__ import annotations

from collections.abc import Callable

from .bitops import iaddc, isubc, sar, shl, to_signed, to_unsigned
from .muldiv import idivmod, imulc

__all__ = [
    "div",
    "rem",
    "div_euclid",
    "rem_euclid",
    "negate",
    "pow",
    "unsigned_abs",
    "wrapping_add",
    "wrapping_sub",
    "wrapping_mul",
    "wrapping_div",
    "wrapping_div_euclid",
    "wrapping_rem",
    "wrapping_rem_euclid",
    "wrapping_neg",
    "wrapping_shl",
    "wrapping_shr",
    "wrapping_abs",
    "wrapping_pow",
    "overflowing_add",
    "overflowing_sub",
    "overflowing_mul",
    "overflowing_div",
    "overflowing_div_euclid",
    "overflowing_rem",
    "overflowing_rem_euclid",
    "overflowing_neg",
    "overflowing_shl",
    "overflowing_shr",
    "overflowing_abs",
    "overflowing_pow",
]

_MIN = -(1 << 255)
_U32_MAX = (1 << 32) - 1


def _check_u32(value: int, what: str) -> None:
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{what} {value} is not an unsigned 32-bit value")


def _is_min_by_minus_one(a: int, b: int) -> bool:
    return a == _MIN and b == -1


def _check_divisor(b: int) -> None:
    if b == 0:
        raise ZeroDivisionError("attempt to divide by zero")


def div(a: int, b: int) -> int:
    """Signed quotient rounded toward zero; raises on ``MIN / -1``."""
    a, b = to_signed(a), to_signed(b)
    _check_divisor(b)
    if _is_min_by_minus_one(a, b):
        raise OverflowError("attempt to divide with overflow")
    return idivmod(a, b)[0]


def rem(a: int, b: int) -> int:
    """Signed remainder with the sign of ``a``; raises on ``MIN % -1``."""
    a, b = to_signed(a), to_signed(b)
    _check_divisor(b)
    if _is_min_by_minus_one(a, b):
        raise OverflowError("attempt to calculate the remainder with overflow")
    return idivmod(a, b)[1]


def div_euclid(a: int, b: int) -> int:
    """Euclidean quotient: ``a = q * b + r`` with ``0 <= r < abs(b)``."""
    a, b = to_signed(a), to_signed(b)
    quotient = div(a, b)
    if rem(a, b) < 0:
        return quotient - 1 if b > 0 else quotient + 1
    return quotient


def rem_euclid(a: int, b: int) -> int:
    """Least non-negative remainder of ``a`` modulo ``b``."""
    a, b = to_signed(a), to_signed(b)
    remainder = rem(a, b)
    if remainder < 0:
        return remainder - b if b < 0 else remainder + b
    return remainder


def negate(a: int) -> int:
    """Negation; raises when ``a`` is the minimum value."""
    a = to_signed(a)
    if a == _MIN:
        raise OverflowError("attempt to negate with overflow")
    return -a


def _power(
    a: int, exp: int, multiply: Callable[[int, int], tuple[int, bool]]
) -> tuple[int, bool]:
    _check_u32(exp, "exponent")
    if exp == 0:
        return 1, False
    base = to_signed(a)
    acc = 1
    overflown = False
    while exp > 1:
        if exp & 1:
            acc, flag = multiply(acc, base)
            overflown |= flag
        exp //= 2
        base, flag = multiply(base, base)
        overflown |= flag
    # The last bit is handled apart so the base is not squared needlessly.
    acc, flag = multiply(acc, base)
    return acc, overflown or flag


def pow(a: int, exp: int) -> int:  # noqa: A001 - mirrors the integer method name
    """Exponentiation by squaring; raises if the result does not fit."""
    result, overflow = _power(a, exp, imulc)
    if overflow:
        raise OverflowError("attempt to multiply with overflow")
    return result


def unsigned_abs(a: int) -> int:
    """Absolute value as an unsigned 256-bit integer; never overflows."""
    return to_unsigned(wrapping_abs(a))


def wrapping_add(a: int, b: int) -> int:
    """Addition wrapping at the type boundary."""
    return iaddc(a, b)[0]


def wrapping_sub(a: int, b: int) -> int:
    """Subtraction wrapping at the type boundary."""
    return isubc(a, b)[0]


def wrapping_mul(a: int, b: int) -> int:
    """Multiplication wrapping at the type boundary."""
    return imulc(a, b)[0]


def wrapping_div(a: int, b: int) -> int:
    """Division where ``MIN / -1`` yields ``MIN``."""
    return overflowing_div(a, b)[0]


def wrapping_div_euclid(a: int, b: int) -> int:
    """Euclidean division where ``MIN / -1`` yields ``MIN``."""
    return overflowing_div_euclid(a, b)[0]


def wrapping_rem(a: int, b: int) -> int:
    """Remainder where ``MIN % -1`` yields ``0``."""
    return overflowing_rem(a, b)[0]


def wrapping_rem_euclid(a: int, b: int) -> int:
    """Euclidean remainder where ``MIN % -1`` yields ``0``."""
    return overflowing_rem_euclid(a, b)[0]


def wrapping_neg(a: int) -> int:
    """Negation where ``-MIN`` yields ``MIN``."""
    return wrapping_sub(0, a)


def wrapping_shl(a: int, n: int) -> int:
    """Left shift by ``n`` masked to the low 8 bits."""
    _check_u32(n, "shift amount")
    return to_signed(shl(a, n & 0xFF))


def wrapping_shr(a: int, n: int) -> int:
    """Arithmetic right shift by ``n`` masked to the low 8 bits."""
    _check_u32(n, "shift amount")
    return sar(a, n & 0xFF)


def wrapping_abs(a: int) -> int:
    """Absolute value where ``abs(MIN)`` yields ``MIN``."""
    a = to_signed(a)
    return wrapping_neg(a) if a < 0 else a


def wrapping_pow(a: int, exp: int) -> int:
    """Exponentiation wrapping at the type boundary."""
    return _power(a, exp, imulc)[0]


def overflowing_add(a: int, b: int) -> tuple[int, bool]:
    """Wrapped sum and whether it overflowed."""
    return iaddc(a, b)


def overflowing_sub(a: int, b: int) -> tuple[int, bool]:
    """Wrapped difference and whether it overflowed."""
    return isubc(a, b)


def overflowing_mul(a: int, b: int) -> tuple[int, bool]:
    """Wrapped product and whether it overflowed."""
    return imulc(a, b)


def overflowing_div(a: int, b: int) -> tuple[int, bool]:
    """Quotient and overflow flag; ``MIN / -1`` gives ``(MIN, True)``."""
    a, b = to_signed(a), to_signed(b)
    _check_divisor(b)
    if _is_min_by_minus_one(a, b):
        return a, True
    return div(a, b), False


def overflowing_div_euclid(a: int, b: int) -> tuple[int, bool]:
    """Euclidean quotient and overflow flag; ``MIN / -1`` gives ``(MIN, True)``."""
    a, b = to_signed(a), to_signed(b)
    _check_divisor(b)
    if _is_min_by_minus_one(a, b):
        return a, True
    return div_euclid(a, b), False


def overflowing_rem(a: int, b: int) -> tuple[int, bool]:
    """Remainder and overflow flag; ``MIN % -1`` gives ``(0, True)``."""
    a, b = to_signed(a), to_signed(b)
    _check_divisor(b)
    if _is_min_by_minus_one(a, b):
        return 0, True
    return rem(a, b), False


def overflowing_rem_euclid(a: int, b: int) -> tuple[int, bool]:
    """Euclidean remainder and overflow flag; ``MIN % -1`` gives ``(0, True)``."""
    a, b = to_signed(a), to_signed(b)
    _check_divisor(b)
    if _is_min_by_minus_one(a, b):
        return 0, True
    return rem_euclid(a, b), False


def overflowing_neg(a: int) -> tuple[int, bool]:
    """Negation and overflow flag; ``-MIN`` gives ``(MIN, True)``."""
    a = to_signed(a)
    if a == _MIN:
        return _MIN, True
    return -a, False


def overflowing_shl(a: int, n: int) -> tuple[int, bool]:
    """Masked left shift and whether ``n`` was 256 or more."""
    return wrapping_shl(a, n), n > 255


def overflowing_shr(a: int, n: int) -> tuple[int, bool]:
    """Masked arithmetic right shift and whether ``n`` was 256 or more."""
    return wrapping_shr(a, n), n > 255


def overflowing_abs(a: int) -> tuple[int, bool]:
    """Absolute value and overflow flag; ``abs(MIN)`` gives ``(MIN, True)``."""
    a = to_signed(a)
    return wrapping_abs(a), a == _MIN


def overflowing_pow(a: int, exp: int) -> tuple[int, bool]:
    """Wrapped power and whether any step overflowed."""
    return _power(a, exp, imulc)