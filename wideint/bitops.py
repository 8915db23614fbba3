"""Wrapping add, subtract, shift, rotate and bit-count primitives on 256 bits.

Values are plain ``int``. Unsigned operations take any integer, reduce it to
its 256-bit two's complement pattern and return a value in ``[0, 2**256)``.
Signed operations return values in ``[-2**255, 2**255)``.
"""

from __future__ import annotations

__all__ = [
    "to_unsigned",
    "to_signed",
    "add",
    "uaddc",
    "iaddc",
    "sub",
    "usubc",
    "isubc",
    "shl",
    "shr",
    "sar",
    "rol",
    "ror",
    "ctlz",
    "cttz",
]

_BITS = 256
_MASK = (1 << _BITS) - 1
_SIGN = 1 << (_BITS - 1)


def to_unsigned(value: int) -> int:
    """Reduce ``value`` to its unsigned 256-bit pattern."""
    return value & _MASK


def to_signed(value: int) -> int:
    """Interpret the 256-bit pattern of ``value`` as two's complement."""
    unsigned = value & _MASK
    return unsigned - (1 << _BITS) if unsigned & _SIGN else unsigned


def add(a: int, b: int) -> int:
    """Wrapping addition."""
    return (a + b) & _MASK


def uaddc(a: int, b: int) -> tuple[int, bool]:
    """Unsigned addition returning the wrapped sum and a carry flag."""
    total = to_unsigned(a) + to_unsigned(b)
    return total & _MASK, total > _MASK


def iaddc(a: int, b: int) -> tuple[int, bool]:
    """Signed addition returning the wrapped sum and an overflow flag."""
    total = to_signed(a) + to_signed(b)
    result = to_signed(total)
    return result, result != total


def sub(a: int, b: int) -> int:
    """Wrapping subtraction."""
    return (a - b) & _MASK


def usubc(a: int, b: int) -> tuple[int, bool]:
    """Unsigned subtraction returning the wrapped difference and a borrow flag."""
    diff = to_unsigned(a) - to_unsigned(b)
    return diff & _MASK, diff < 0


def isubc(a: int, b: int) -> tuple[int, bool]:
    """Signed subtraction returning the wrapped difference and an overflow flag."""
    diff = to_signed(a) - to_signed(b)
    result = to_signed(diff)
    return result, result != diff


def _check_shift(amount: int) -> None:
    if not 0 <= amount < _BITS:
        raise ValueError(f"shift amount {amount} is outside 0..{_BITS - 1}")


def shl(a: int, b: int) -> int:
    """Left shift by ``b`` bits, ``0 <= b < 256``."""
    _check_shift(b)
    return (to_unsigned(a) << b) & _MASK


def shr(a: int, b: int) -> int:
    """Logical right shift by ``b`` bits, ``0 <= b < 256``."""
    _check_shift(b)
    return to_unsigned(a) >> b


def sar(a: int, b: int) -> int:
    """Arithmetic right shift by ``b`` bits, ``0 <= b < 256``; returns signed."""
    _check_shift(b)
    return to_signed(a) >> b


def rol(a: int, b: int) -> int:
    """Rotate left by ``b`` bits (taken modulo 256)."""
    return shl(a, b & 0xFF) | shr(a, -b & 0xFF)


def ror(a: int, b: int) -> int:
    """Rotate right by ``b`` bits (taken modulo 256)."""
    return shr(a, b & 0xFF) | shl(a, -b & 0xFF)


def ctlz(a: int) -> int:
    """Count leading zero bits; 256 for zero."""
    return _BITS - to_unsigned(a).bit_length()


def cttz(a: int) -> int:
    """Count trailing zero bits; 256 for zero."""
    unsigned = to_unsigned(a)
    if not unsigned:
        return _BITS
    return (unsigned & -unsigned).bit_length() - 1