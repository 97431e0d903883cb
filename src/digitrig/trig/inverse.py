"""
Inverse trigonometric approximations: asin, acos, atan and atan2.

No lookup tables here. asin/acos follow the Abramowitz & Stegun style form
``sqrt(1 - |a|) * P3(a)`` (from the RAND "Approximations for Digital Computers"
sheets), with max error near 7e-5 radians. atan maps any n >= 0 to
``c = (n - 1) / (n + 1)`` in [-1, 1) and evaluates a degree-11 odd polynomial
in c around atan(1) = pi/4, so one polynomial covers the whole half line.

The polynomial coefficients are calibrated constants; each unit has its own
set rather than converting the radian result, so each set is rounded for its
own scale. Keep them verbatim: see ``digitrig.design.minimax_polys`` to refit.

Nothing here validates its domain. asin(2.0) saturates at a right angle
instead of raising, and NaN in gives NaN out.
"""

from __future__ import annotations

import math
import sys
from typing import Tuple

from .tables import HALF_PI, PI

_MAX = sys.float_info.max

# asin/acos: k0 - k1 a + k2 a^2 - k3 a^3 (signs flip on the negative branch)
_ASIN_RAD = (1.5707288, 0.2121144, 0.0742610, 0.0187293)
_ASIN_DEG = (89.99613099964837, 12.153259893949748, 4.2548418824210055, 1.0731098432343729)
_ACOS_DEG = (89.99613099964837, 12.153259533621753, 4.254842010910525, 1.0731098035209208)
_ASIN_TURNS = (0.24998925277680104, 0.033759055260971525, 0.011819005228947238, 0.0029808606756510357)

# atan: eighth turn + k1 c - k3 c^3 + k5 c^5 - k7 c^7 + k9 c^9 - k11 c^11
_ATAN_RAD = (0.7853981633974483,
             0.99997726, 0.33262347, 0.19354346, 0.11643287, 0.05265332, 0.0117212)
_ATAN_DEG = (45.0,
             57.2944766070562, 19.05792099799635, 11.089223410359068,
             6.6711120475953765, 3.016813013351768, 0.6715752908287405)
_ATAN_TURNS = (0.125,
               0.15915132390848943, 0.052938669438878753, 0.030803398362108523,
               0.01853086679887605, 0.008380036148199356, 0.0018654869189687236)


def _root(x: float) -> float:
    # sqrt without the ValueError: negatives give (-)0.0, NaN stays NaN
    return math.sqrt(x) if x > 0.0 else 0.0 * x


def _signum(x: float) -> float:
    return math.copysign(1.0, x) if x else x


def _saturate(a: float) -> float:
    # clamp to [-1, 1] before the cubic can overflow; NaN passes through
    return min(max(a, -1.0), 1.0)


def _below(r: float, full: float) -> float:
    # a tiny negative angle plus a full turn rounds up to exactly one full turn
    return r if r < full else r - full


def _asin(a: float, k: Tuple[float, float, float, float], quarter: float) -> float:
    a = _saturate(a)
    a2 = a * a
    a3 = a * a2
    if a >= 0.0:
        return quarter - _root(1.0 - a) * (k[0] - k[1] * a + k[2] * a2 - k[3] * a3)
    return _root(1.0 + a) * (k[0] + k[1] * a + k[2] * a2 + k[3] * a3) - quarter


def _acos(a: float, k: Tuple[float, float, float, float], half: float) -> float:
    a = _saturate(a)
    a2 = a * a
    a3 = a * a2
    if a >= 0.0:
        return _root(1.0 - a) * (k[0] - k[1] * a + k[2] * a2 - k[3] * a3)
    return half - _root(1.0 + a) * (k[0] + k[1] * a + k[2] * a2 + k[3] * a3)


def _atan(i: float, n: float, k: Tuple[float, ...]) -> float:
    c = (n - 1.0) / (n + 1.0)
    c2 = c * c
    c3 = c * c2
    c5 = c3 * c2
    c7 = c5 * c2
    c9 = c7 * c2
    c11 = c9 * c2
    return _signum(i) * (k[0] + (k[1] * c - k[2] * c3 + k[3] * c5 - k[4] * c7 + k[5] * c9 - k[6] * c11))


# --- asin / acos -----------------------------------------------------------

def asin(a: float) -> float:
    """Arcsine in radians, for a in [-1, 1]; result in [-pi/2, pi/2]."""
    return _asin(a, _ASIN_RAD, HALF_PI)


def asin_deg(a: float) -> float:
    return _asin(a, _ASIN_DEG, 90.0)


def asin_turns(a: float) -> float:
    return _asin(a, _ASIN_TURNS, 0.25)


def acos(a: float) -> float:
    """Arccosine in radians, for a in [-1, 1]; result in [0, pi]."""
    return _acos(a, _ASIN_RAD, PI)


def acos_deg(a: float) -> float:
    return _acos(a, _ACOS_DEG, 180.0)


def acos_turns(a: float) -> float:
    return _acos(a, _ASIN_TURNS, 0.5)


# --- atan --------------------------------------------------------------------

def atan_unchecked(i: float) -> float:
    """
    Arctangent in radians without clamping the input.

    Only meant for finite i; an infinite i gives NaN. :func:`atan` is the safe
    version.
    """
    return _atan(i, abs(i), _ATAN_RAD)


def atan_unchecked_deg(i: float) -> float:
    return _atan(i, abs(i), _ATAN_DEG)


def atan_unchecked_turns(i: float) -> float:
    return _atan(i, abs(i), _ATAN_TURNS)


def atan(i: float) -> float:
    """Arctangent in radians, result in [-pi/2, pi/2]; infinite input is clamped."""
    return _atan(i, min(abs(i), _MAX), _ATAN_RAD)


def atan_deg(i: float) -> float:
    return _atan(i, min(abs(i), _MAX), _ATAN_DEG)


def atan_turns(i: float) -> float:
    return _atan(i, min(abs(i), _MAX), _ATAN_TURNS)


# --- atan2 -------------------------------------------------------------------

def _slope(y: float, x: float) -> Tuple[float, float]:
    """
    Returns (n, x) where n = y / x with the degenerate cases folded in:
    both infinite uses the +-1 diagonal, and an infinite ratio (y infinitely
    larger than x) zeroes x so the caller picks a straight up/down direction.
    """
    if x == 0.0:
        if y == 0.0:
            return math.nan, x
        n = math.copysign(math.inf, y) * math.copysign(1.0, x)
    else:
        n = y / x
    if n != n:
        n = 1.0 if y == x else -1.0
    elif math.isinf(n):
        x = 0.0
    return n, x


def atan2(y: float, x: float) -> float:
    """
    Angle in radians of the point (x, y), in (-pi, pi].

    atan2(0, 0) is 0. NaN in either argument gives NaN. Never raises.
    """
    if y != y or x != x:
        return math.nan
    n, x = _slope(y, x)
    if x > 0.0:
        return atan_unchecked(n)
    if x < 0.0:
        if y >= 0.0:
            return atan_unchecked(n) + PI
        return atan_unchecked(n) - PI
    if y > 0.0:
        return x + HALF_PI
    if y < 0.0:
        return x - HALF_PI
    return x + y


def atan2_deg(y: float, x: float) -> float:
    """Like :func:`atan2`, in degrees, in (-180, 180]."""
    if y != y or x != x:
        return math.nan
    n, x = _slope(y, x)
    if x > 0.0:
        return atan_unchecked_deg(n)
    if x < 0.0:
        if y >= 0.0:
            return atan_unchecked_deg(n) + 180.0
        return atan_unchecked_deg(n) - 180.0
    if y > 0.0:
        return x + 90.0
    if y < 0.0:
        return x - 90.0
    return x + y


def atan2_deg360(y: float, x: float) -> float:
    """Like :func:`atan2`, in degrees, in [0, 360). Straight down is 270."""
    if y != y or x != x:
        return math.nan
    n, x = _slope(y, x)
    if x > 0.0:
        if y >= 0.0:
            return atan_unchecked_deg(n)
        return _below(atan_unchecked_deg(n) + 360.0, 360.0)
    if x < 0.0:
        return atan_unchecked_deg(n) + 180.0
    if y > 0.0:
        return x + 90.0
    if y < 0.0:
        return x + 270.0
    return x + y


def atan2_turns(y: float, x: float) -> float:
    """Like :func:`atan2`, in turns, in [0, 1)."""
    if y != y or x != x:
        return math.nan
    n, x = _slope(y, x)
    if x > 0.0:
        if y >= 0.0:
            return atan_unchecked_turns(n)
        return _below(atan_unchecked_turns(n) + 1.0, 1.0)
    if x < 0.0:
        return atan_unchecked_turns(n) + 0.5
    if y > 0.0:
        return x + 0.25
    if y < 0.0:
        return x + 0.75
    return x + y
