"""Bit counting, rotation and byte-order helpers for signed 256-bit integers.

Values are plain ``int`` read as 256-bit two's complement: any integer is
first reduced to its 256-bit pattern and interpreted as signed, so results
lie in ``[-2**255, 2**255)``. Byte conversions always work on exactly 32
bytes.
"""

from __future__ import annotations

import sys

from .bitops import ctlz, cttz, rol, ror, to_signed, to_unsigned

__all__ = [
    "count_ones",
    "count_zeros",
    "leading_zeros",
    "trailing_zeros",
    "leading_ones",
    "trailing_ones",
    "rotate_left",
    "rotate_right",
    "swap_bytes",
    "reverse_bits",
    "to_be_bytes",
    "to_le_bytes",
    "to_ne_bytes",
    "from_be_bytes",
    "from_le_bytes",
    "from_ne_bytes",
]

_BITS = 256
_BYTES = _BITS // 8
_U32_MAX = (1 << 32) - 1


def _check_u32(value: int) -> None:
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"rotation amount {value} is not an unsigned 32-bit value")


def count_ones(a: int) -> int:
    """Number of set bits in the 256-bit pattern of ``a``."""
    return bin(to_unsigned(a)).count("1")


def count_zeros(a: int) -> int:
    """Number of clear bits in the 256-bit pattern of ``a``."""
    return _BITS - count_ones(a)


def leading_zeros(a: int) -> int:
    """Number of leading zero bits; 256 for zero."""
    return ctlz(a)


def trailing_zeros(a: int) -> int:
    """Number of trailing zero bits; 256 for zero."""
    return cttz(a)


def leading_ones(a: int) -> int:
    """Number of leading one bits."""
    return ctlz(~to_unsigned(a))


def trailing_ones(a: int) -> int:
    """Number of trailing one bits."""
    return cttz(~to_unsigned(a))


def rotate_left(a: int, n: int) -> int:
    """Rotate the bits left by ``n``, wrapping the high bits to the bottom."""
    _check_u32(n)
    return to_signed(rol(a, n))


def rotate_right(a: int, n: int) -> int:
    """Rotate the bits right by ``n``, wrapping the low bits to the top."""
    _check_u32(n)
    return to_signed(ror(a, n))


def swap_bytes(a: int) -> int:
    """Reverse the byte order of the 256-bit pattern."""
    return from_le_bytes(to_be_bytes(a))


def reverse_bits(a: int) -> int:
    """Reverse the order of all 256 bits."""
    pattern = format(to_unsigned(a), f"0{_BITS}b")
    return to_signed(int(pattern[::-1], 2))


def to_be_bytes(a: int) -> bytes:
    """The 32-byte big-endian representation of ``a``."""
    return to_unsigned(a).to_bytes(_BYTES, "big")


def to_le_bytes(a: int) -> bytes:
    """The 32-byte little-endian representation of ``a``."""
    return to_unsigned(a).to_bytes(_BYTES, "little")


def to_ne_bytes(a: int) -> bytes:
    """The 32-byte representation of ``a`` in the platform's byte order."""
    return to_unsigned(a).to_bytes(_BYTES, sys.byteorder)


def _from_bytes(data: bytes, order: str) -> int:
    raw = bytes(data)
    if len(raw) != _BYTES:
        raise ValueError(f"expected {_BYTES} bytes, got {len(raw)}")
    return to_signed(int.from_bytes(raw, order))


def from_be_bytes(data: bytes) -> int:
    """Build a signed value from 32 big-endian bytes."""
    return _from_bytes(data, "big")


def from_le_bytes(data: bytes) -> int:
    """Build a signed value from 32 little-endian bytes."""
    return _from_bytes(data, "little")


def from_ne_bytes(data: bytes) -> int:
    """Build a signed value from 32 bytes in the platform's byte order."""
    return _from_bytes(data, sys.byteorder)