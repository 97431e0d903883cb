"""
Bit-level helpers: reinterpret floats as integers and back, round to single
precision, and a few integer tricks.

Integer results follow two's-complement conventions: 32-bit values come back as signed ints in [-2**31, 2**31), 64-bit
values as signed ints in [-2**63, 2**63).
"""

from __future__ import annotations

import math
import struct

_F32 = struct.Struct("<f")
_I32 = struct.Struct("<i")
_U32 = struct.Struct("<I")
_F64 = struct.Struct("<d")
_I64 = struct.Struct("<q")
_U64 = struct.Struct("<Q")

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _signed32(x: int) -> int:
    x &= _MASK32
    return x - 0x100000000 if x & 0x80000000 else x


def _signed64(x: int) -> int:
    x &= _MASK64
    return x - 0x10000000000000000 if x & 0x8000000000000000 else x


def to_float32(x: float) -> float:
    """Round a float to the nearest IEEE single-precision value; overflow saturates to infinity."""
    try:
        return _F32.unpack(_F32.pack(x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def float_to_int_bits(x: float) -> int:
    """Bits of `x` as a float32, as a signed 32-bit int."""
    return _I32.unpack(_F32.pack(to_float32(x)))[0]


def int_bits_to_float(bits: int) -> float:
    """The float32 whose bit pattern is the low 32 bits of `bits`."""
    return _F32.unpack(_U32.pack(bits & _MASK32))[0]


def double_to_long_bits(x: float) -> int:
    return _I64.unpack(_F64.pack(x))[0]


def long_bits_to_double(bits: int) -> float:
    return _F64.unpack(_U64.pack(bits & _MASK64))[0]


def double_to_high_int_bits(x: float) -> int:
    """Upper 32 bits of the double's bit pattern (sign, exponent, top of mantissa)."""
    return double_to_long_bits(x) >> 32


def next_power_of_two(n: int) -> int:
    """Smallest power of two >= n, and never less than 2."""
    return 1 << (max(2, n) - 1).bit_length()


def modular_multiplicative_inverse_32(a: int) -> int:
    """
    x such that a * x == 1 modulo 2**32, for odd `a` (Newton's iteration).
    Even inputs have no inverse and return garbage.
    """
    a &= _MASK32
    x = (2 ^ (a * 3)) & _MASK32
    for _ in range(3):
        x = (x * (2 - a * x)) & _MASK32
    return _signed32(x)


def modular_multiplicative_inverse_64(a: int) -> int:
    """64-bit version of :func:`modular_multiplicative_inverse_32`."""
    a &= _MASK64
    x = (2 ^ (a * 3)) & _MASK64
    for _ in range(4):
        x = (x * (2 - a * x)) & _MASK64
    return _signed64(x)
