# wideint

256-bit two's-complement integer arithmetic for Python.

Python's `int` is unbounded. `wideint` provides functions that treat plain
`int` values as 256-bit machine integers and let you choose what happens at
the edges: wrap around, report overflow with a flag, or raise.

Every function takes ordinary Python integers. An argument is first reduced
to its 256-bit pattern, so any integer is accepted. Unsigned results lie in
`[0, 2**256)`, signed results in `[-2**255, 2**255)`.

## Installation

```
pip install wideint
```

## Modules

- `wideint.bitops` – the basic primitives: `to_unsigned`, `to_signed`,
  wrapping `add` and `sub`, `uaddc` / `iaddc` and `usubc` / `isubc` (result
  plus carry or overflow flag), shifts `shl`, `shr` (logical), `sar`
  (arithmetic), rotations `rol` and `ror`, and `ctlz` / `cttz` for leading
  and trailing zero counts. Shift amounts outside `0..255` raise
  `ValueError`.
- `wideint.muldiv` – multiplication and division: `umulddi3` (full product
  of two unsigned 128-bit values), wrapping `mul`, `umulc` and `imulc` with
  overflow flags, `udivmod`, `udiv`, `urem`, and the signed `idivmod`,
  `idiv`, `irem`, which round toward zero with the remainder taking the sign
  of the dividend.
- `wideint.wrapping` – signed arithmetic with explicit overflow behaviour:
  - plain `div`, `rem`, `div_euclid`, `rem_euclid`, `negate` and `pow`,
    which raise `OverflowError` when the result does not fit;
  - `wrapping_*` versions of add, sub, mul, div, div_euclid, rem,
    rem_euclid, neg, shl, shr, abs and pow, which wrap around;
  - `overflowing_*` versions of the same, returning `(result, overflowed)`;
  - `unsigned_abs`, which never overflows.
- `wideint.bits` – bit and byte helpers for signed values: `count_ones`,
  `count_zeros`, `leading_zeros`, `trailing_zeros`, `leading_ones`,
  `trailing_ones`, `rotate_left`, `rotate_right`, `swap_bytes`,
  `reverse_bits`, and 32-byte conversions `to_be_bytes`, `to_le_bytes`,
  `to_ne_bytes`, `from_be_bytes`, `from_le_bytes`, `from_ne_bytes`.

## Examples

```python
from wideint import bitops, bits, muldiv, wrapping

MAX = 2**255 - 1
MIN = -(2**255)

wrapping.overflowing_add(MAX, 1)     # (MIN, True)
wrapping.wrapping_mul(MAX, 2)        # -2
wrapping.div(-7, 2)                  # -3   (rounds toward zero)
wrapping.div_euclid(-7, 4)           # -2
wrapping.rem_euclid(-7, 4)           # 1
wrapping.overflowing_div(MIN, -1)    # (MIN, True)
wrapping.negate(MIN)                 # raises OverflowError

muldiv.udivmod(100, 9)               # (11, 1)
muldiv.umulc(2**256 - 1, 5)          # (2**256 - 5, True)

bitops.to_signed(2**256 - 1)         # -1
bits.count_ones(-1)                  # 256
bits.leading_zeros(1)                # 255
bits.rotate_left(MIN, 1)             # 1
bits.to_be_bytes(1)                  # 31 zero bytes followed by b"\x01"
```

## Errors

- Division or remainder by zero raises `ZeroDivisionError`.
- `wrapping.div`, `rem`, `div_euclid`, `rem_euclid`, `negate` and `pow`
  raise `OverflowError` when the exact result does not fit in 256 bits.
- Shift amounts, rotation amounts and exponents outside their allowed range,
  and byte strings that are not exactly 32 bytes long, raise `ValueError`.

## What is not included

The package works on plain `int` values only. It does not provide an integer
class with operators, parsing of numbers from strings, radix or exponent
formatting, checked (`None`-returning) or saturating operations, or
conversions to floats and narrower integer types.

## Running the tests

```
pip install "wideint[test]"
pytest
```