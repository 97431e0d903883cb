"""
Rough exponentials, logarithms and the logistic function.

These build a float32 directly from its bit pattern: the integer part of a
base-2 exponent goes into the exponent field and a small rational correction
shapes the mantissa (Paul Mineiro's fastapprox). ``*_rough`` functions have a
relative error well under 1e-3; ``*_rougher`` skip the correction and are only
good to a few percent.

Exponents are clamped to [-126, 128], so tiny results bottom out at the
smallest normal float32 (about 1.2e-38) and huge ones at the largest (about
3.4e38); results never become infinite or raise. NaN propagates.
Logarithms of zero or negative numbers return meaningless finite values.
"""

from __future__ import annotations

from .bits import float_to_int_bits, int_bits_to_float

_LOG2_E = 1.442695040
_LN_2 = 0.69314718
_MAX_FINITE_BITS = 0x7F7FFFFF
_SHIFT = float(1 << 23)


def _from_bits(v: float) -> float:
    return int_bits_to_float(min(int(v), _MAX_FINITE_BITS))


def pow2_rough(p: float) -> float:
    """2 ** p, to about 4 significant digits."""
    if p != p:
        return p
    clip = min(max(-126.0, p), 128.0)
    z = clip - int(clip + 126.0) + 126.0
    return _from_bits(_SHIFT * (clip + 121.2740575 + 27.7280233 / (4.84252568 - z) - 1.49012907 * z))


def pow2_rougher(p: float) -> float:
    """2 ** p, very roughly; linear between integer powers of two."""
    if p != p:
        return p
    return _from_bits(_SHIFT * (min(max(-126.0, p), 128.0) + 126.94269504))


def exp_rough(p: float) -> float:
    """e ** p, to about 4 significant digits."""
    return pow2_rough(p * _LOG2_E)


def exp_rougher(p: float) -> float:
    return pow2_rougher(p * _LOG2_E)


def log2_rough(x: float) -> float:
    """Base-2 logarithm of a positive x."""
    if x != x:
        return x
    vx = float_to_int_bits(x)
    mx = int_bits_to_float((vx & 0x007FFFFF) | 0x3F000000)
    return vx * 1.1920928955078125e-7 - 124.22551499 - 1.498030302 * mx - 1.72587999 / (0.3520887068 + mx)


def log_rough(x: float) -> float:
    """Natural logarithm of a positive x."""
    return log2_rough(x) * _LN_2


def logistic_rough(x: float) -> float:
    """1 / (1 + e ** -x), in (0, 1]."""
    return 1.0 / (1.0 + exp_rough(-x))


def logistic_rougher(x: float) -> float:
    return 1.0 / (1.0 + exp_rougher(-x))
