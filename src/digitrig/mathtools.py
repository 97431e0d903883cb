"""
Small scalar helpers: interpolation, angle interpolation, periodic waves,
Barron's bias/gain spline, and a few integer and rounding odds and ends.

The float helpers never raise for numeric input: NaN or infinite arguments to
the floor-based ones give NaN.
"""

from __future__ import annotations

import math
import sys

from .bits import double_to_high_int_bits, float_to_int_bits, int_bits_to_float
from .trig.tables import _ratio

FLOAT_ROUNDING_ERROR = 0.000001
E = math.e

_MIN_NORMAL = sys.float_info.min
_TRUNCATE_SCALE = float(1 << 42)


def lerp(from_value: float, to_value: float, progress: float) -> float:
    return from_value + (to_value - from_value) * progress


def fract(value: float) -> float:
    """Fractional part in [0, 1) (so fract(-0.25) == 0.75); NaN for non-finite input."""
    if not math.isfinite(value):
        return math.nan
    return value - math.floor(value)


def clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)


def is_equal(a: float, b: float, tolerance: float = FLOAT_ROUNDING_ERROR) -> bool:
    return abs(a - b) <= tolerance


def _lerp_angle(from_angle: float, to_angle: float, progress: float, full: float) -> float:
    # work in turns; d - 0.5 is the signed shortest delta
    a = from_angle / full
    d = fract((to_angle - from_angle) / full + 0.5)
    return fract(a + progress * (d - 0.5)) * full


def lerp_angle(from_radians: float, to_radians: float, progress: float) -> float:
    """
    Interpolates between two angles in radians the short way round.

    Result is in [0, 2pi).
    """
    return _lerp_angle(from_radians, to_radians, progress, math.pi * 2.0)


def lerp_angle_deg(from_degrees: float, to_degrees: float, progress: float) -> float:
    """Like :func:`lerp_angle`, in degrees; result in [0, 360)."""
    return _lerp_angle(from_degrees, to_degrees, progress, 360.0)


def lerp_angle_turns(from_turns: float, to_turns: float, progress: float) -> float:
    """Like :func:`lerp_angle`, in turns; result in [0, 1)."""
    return _lerp_angle(from_turns, to_turns, progress, 1.0)


def _fold(value: float):
    if not math.isfinite(value):
        return math.nan, 0
    floor = math.floor(value)
    return value - floor, floor


def zigzag(value: float) -> float:
    """
    Triangle wave in [-1, 1]: -1 at even integers, 1 at odd ones, 0 halfway.
    """
    t, floor = _fold(value)
    f = -(floor & 1) | 1
    return t * (f << 1) - f


def sway(value: float) -> float:
    """
    Like :func:`zigzag`, but eased with the quintic smootherstep, which gives a
    squashed sine wave with half the frequency of sin_turns.
    """
    t, floor = _fold(value)
    f = -(floor & 1) | 1
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0) * (f << 1) - f


def sway_cubic(value: float) -> float:
    """Like :func:`sway`, eased with cubic smoothstep (rounder peaks)."""
    t, floor = _fold(value)
    f = -(floor & 1) | 1
    return t * t * (3.0 - t * 2.0) * (f << 1) - f


def sway_tight(value: float) -> float:
    """Like :func:`sway`, but in [0, 1]: 0 at even integers, 1 at odd ones."""
    t, floor = _fold(value)
    floor &= 1
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0) * (-floor | 1) + floor


def barron_spline(x: float, shape: float, turning: float) -> float:
    """
    Jon Barron's generalized bias/gain curve (arXiv:2010.09714), branch-free.

    x and turning in [0, 1], shape >= 0. shape > 1 eases in and out like a
    smoothstep, shape < 1 starts fast and lands abruptly; the two curves meet
    at x == turning.
    """
    d = turning - x
    f = double_to_high_int_bits(d) >> 31  # -1 when d is negative, else 0
    n = f | 1
    return ((turning * n - f) * (x + f)) / (_MIN_NORMAL - f + (x + shape * d) * n) - f


def cbrt(x: float) -> float:
    """
    Fast cube root: a bit-level first guess from the float32 pattern of x,
    then two Newton steps. Negative x gives a negative root.

    Relative error stays well under 1e-4 for x inside the float32 range;
    outside it the first guess is poor. Use ``x ** (1 / 3)`` when exactness
    matters more than speed.
    """
    if x == 0.0 or not math.isfinite(x):
        return x
    ix = float_to_int_bits(x)
    sign = ix & 0x80000000
    ix &= 0x7FFFFFFF
    ix = (ix >> 2) + (ix >> 4)
    ix += ix >> 4
    ix = (ix + (ix >> 8) + 0x2A5137A0) | sign
    y = int_bits_to_float(ix)
    y = (2.0 * y + x / (y * y)) / 3.0
    return (2.0 * y + x / (y * y)) / 3.0


def isqrt(n: int) -> int:
    """
    Floor of the square root of n. Negative n is read as an unsigned 64-bit
    value, so the result is large rather than an error.
    """
    if n < 0:
        n &= 0xFFFFFFFFFFFFFFFF
    return math.isqrt(n)


def greatest_common_divisor(a: int, b: int) -> int:
    """Euclid's algorithm on |a| and |b|; the result is never negative."""
    return math.gcd(a, b)


def _ln(x: float) -> float:
    if x > 0.0:
        return math.log(x)
    if x == 0.0:
        return -math.inf
    return math.nan


def log(base: float, arg: float) -> float:
    """
    Logarithm of `arg` in any `base`. Zero, negative and NaN arguments give
    -inf or NaN like the IEEE log; base 1 gives a signed infinity.
    """
    return _ratio(_ln(arg), _ln(base))


def raise_to_power(value: int, power: int) -> int:
    """value ** power for integers; negative powers are rejected."""
    if power < 0:
        raise ValueError("raise_to_power does not support negative powers")
    return value ** power


def truncate(n: float) -> float:
    """
    Drop the low 42 bits of precision (keeping 2**-42 steps), erasing tiny
    fluctuations around a round value so it prints without an exponent.
    Rounds toward zero. Non-finite n is returned unchanged.
    """
    if not math.isfinite(n):
        return n
    return math.trunc(n * _TRUNCATE_SCALE) / _TRUNCATE_SCALE
