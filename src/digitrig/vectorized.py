# vectorized.py
"""
numpy versions of the trig approximations, one call per array.

Every function takes array-likes and returns an ndarray. The angle unit and
the sin/cos/tan tier are keyword arguments rather than separate functions::

    vectorized.sin(x, unit="degrees", tier="smoother")

Width follows the input: float32 arrays read the single-precision tables and
come back as float32; everything else (ints, float64, Python floats) is
computed and returned as float64. Index arithmetic is always done in float64,
so a float32 result matches ``to_float32`` of the scalar single-precision
lookup. Non-finite elements give NaN, as in the scalar functions.

Requires numpy: ``pip install "digitrig[vector]"``.
"""

from __future__ import annotations

import math
import sys
from typing import Any, Dict, Tuple

from .core.errors import DependencyUnavailableError
from .core.types import AngleUnit, canonical_tier
from .trig.inverse import (
    _ACOS_DEG,
    _ASIN_DEG,
    _ASIN_RAD,
    _ASIN_TURNS,
    _ATAN_DEG,
    _ATAN_RAD,
    _ATAN_TURNS,
)
from .trig.tables import DEFAULT_TABLES, angle_unit

_PADE_TAN = (0.0010582010582010583, 0.1111111111111111, 0.015873015873015872, 0.4444444444444444)

# unit name -> (asin coefficients, acos coefficients, atan coefficients)
_INVERSE_COEFFS: Dict[str, Tuple[Tuple[float, ...], Tuple[float, ...], Tuple[float, ...]]] = {
    "radians": (_ASIN_RAD, _ASIN_RAD, _ATAN_RAD),
    "degrees": (_ASIN_DEG, _ACOS_DEG, _ATAN_DEG),
    "turns": (_ASIN_TURNS, _ASIN_TURNS, _ATAN_TURNS),
}

_TABLE_CACHE: Dict[bool, Tuple[Any, Any]] = {}


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise DependencyUnavailableError('Need numpy. Install: pip install "digitrig[vector]"') from e


def _tables(np, single: bool):
    cached = _TABLE_CACHE.get(single)
    if cached is None:
        if single:
            cached = (np.asarray(DEFAULT_TABLES.sin_f32, dtype=np.float32),
                      np.asarray(DEFAULT_TABLES.cos_f32, dtype=np.float32))
        else:
            cached = (np.asarray(DEFAULT_TABLES.sin, dtype=np.float64),
                      np.asarray(DEFAULT_TABLES.cos, dtype=np.float64))
        _TABLE_CACHE[single] = cached
    return cached


def _prepare(np, x) -> Tuple[Any, bool]:
    a = np.asarray(x)
    single = a.dtype == np.float32
    return a.astype(np.float64), single


def _finish(np, out, finite, single: bool):
    out = np.where(finite, out, np.nan)
    return out.astype(np.float32) if single else out


# --- sin / cos / tan ---------------------------------------------------------

def _table_tier(np, table, v):
    idx = np.mod(np.floor(v + 0.5), DEFAULT_TABLES.size).astype(np.intp)
    return table[idx]


def _smoother_tier(np, table, v):
    lo = np.floor(v)
    idx = np.mod(lo, DEFAULT_TABLES.size).astype(np.intp)
    a = table[idx].astype(np.float64)
    return a + (table[idx + 1] - a) * (v - lo)


def _smooth_tier(np, q):
    ceil = np.ceil(q)
    k = ceil - np.mod(ceil, 2.0)
    q = q - k
    q2 = q * q
    sign = np.where(np.mod(k, 4.0) == 2.0, -1.0, 1.0)
    return (11.0 * q - 3.0 * q * q2) / (7.0 + q2) * sign


def _smooth_tan(np, h):
    h = h + 0.5
    h = h - np.floor(h)
    x = (h - 0.5) * math.pi
    x2 = x * x
    x4 = x2 * x2
    k = _PADE_TAN
    return x * (k[0] * x4 - k[1] * x2 + 1.0) / (k[2] * x4 - k[3] * x2 + 1.0)


def _sin_cos(x, unit: str, tier: str, cosine: bool):
    np = _need_numpy()
    u: AngleUnit = angle_unit(unit)
    tier = canonical_tier(tier)
    a, single = _prepare(np, x)
    finite = np.isfinite(a)
    a = np.where(finite, a, 0.0)

    if tier == "smooth":
        out = _smooth_tier(np, a * u.to_quarters + (1.0 if cosine else 0.0))
    else:
        sin_t, cos_t = _tables(np, single)
        table = cos_t if cosine else sin_t
        v = a * u.to_index
        out = _table_tier(np, table, v) if tier == "table" else _smoother_tier(np, table, v)
    return _finish(np, out, finite, single)


def sin(x, unit: str = "radians", tier: str = "table"):
    """Elementwise sine; `tier` is "table", "smooth" or "smoother"."""
    return _sin_cos(x, unit, tier, cosine=False)


def cos(x, unit: str = "radians", tier: str = "table"):
    """Elementwise cosine; see :func:`sin`."""
    return _sin_cos(x, unit, tier, cosine=True)


def tan(x, unit: str = "radians", tier: str = "table"):
    """
    Elementwise tangent. The table tiers divide sine by cosine, so right angles
    on the table grid give signed infinities; "smooth" is the Pade form.
    """
    np = _need_numpy()
    u = angle_unit(unit)
    tier = canonical_tier(tier)
    a, single = _prepare(np, x)
    finite = np.isfinite(a)
    a = np.where(finite, a, 0.0)

    with np.errstate(divide="ignore", invalid="ignore"):
        if tier == "smooth":
            out = _smooth_tan(np, a * (1.0 / u.half_turn))
        else:
            sin_t, cos_t = _tables(np, single)
            v = a * u.to_index
            if tier == "table":
                s, c = _table_tier(np, sin_t, v), _table_tier(np, cos_t, v)
            else:
                s, c = _smoother_tier(np, sin_t, v), _smoother_tier(np, cos_t, v)
            out = s.astype(np.float64) / c
    return _finish(np, out, finite, single)


# --- inverses ----------------------------------------------------------------

def _poly3(k, a, a2, a3, sign: float):
    return k[0] + sign * k[1] * a + k[2] * a2 + sign * k[3] * a3


def asin(a, unit: str = "radians"):
    """Elementwise arcsine; out-of-domain input saturates at a right angle."""
    np = _need_numpy()
    u = angle_unit(unit)
    k = _INVERSE_COEFFS[u.name][0]
    a, single = _prepare(np, a)
    a = np.clip(a, -1.0, 1.0)
    a2 = a * a
    a3 = a * a2
    pos = u.quarter_turn - np.sqrt(np.maximum(1.0 - a, 0.0)) * _poly3(k, a, a2, a3, -1.0)
    neg = np.sqrt(np.maximum(1.0 + a, 0.0)) * _poly3(k, a, a2, a3, 1.0) - u.quarter_turn
    out = np.where(a >= 0.0, pos, neg)
    return _finish(np, out, ~np.isnan(a), single)


def acos(a, unit: str = "radians"):
    """Elementwise arccosine, in [0, half turn]."""
    np = _need_numpy()
    u = angle_unit(unit)
    k = _INVERSE_COEFFS[u.name][1]
    a, single = _prepare(np, a)
    a = np.clip(a, -1.0, 1.0)
    a2 = a * a
    a3 = a * a2
    pos = np.sqrt(np.maximum(1.0 - a, 0.0)) * _poly3(k, a, a2, a3, -1.0)
    neg = u.half_turn - np.sqrt(np.maximum(1.0 + a, 0.0)) * _poly3(k, a, a2, a3, 1.0)
    out = np.where(a >= 0.0, pos, neg)
    return _finish(np, out, ~np.isnan(a), single)


def _atan_abs(np, n, k):
    # n >= 0 and finite
    c = (n - 1.0) / (n + 1.0)
    c2 = c * c
    c3 = c * c2
    c5 = c3 * c2
    c7 = c5 * c2
    c9 = c7 * c2
    c11 = c9 * c2
    return k[0] + (k[1] * c - k[2] * c3 + k[3] * c5 - k[4] * c7 + k[5] * c9 - k[6] * c11)


def atan(i, unit: str = "radians"):
    """Elementwise arctangent; infinite input gives plus or minus a quarter turn."""
    np = _need_numpy()
    u = angle_unit(unit)
    k = _INVERSE_COEFFS[u.name][2]
    i, single = _prepare(np, i)
    n = np.minimum(np.abs(i), sys.float_info.max)
    out = np.sign(i) * _atan_abs(np, np.where(np.isnan(n), 0.0, n), k)
    return _finish(np, out, ~np.isnan(i), single)


def atan2(y, x, unit: str = "radians", positive: bool = False):
    """
    Elementwise angle of the points (x, y).

    Range is (-half turn, half turn], or [0, full turn) with ``positive=True``.
    (0, 0) gives 0, both infinite gives a diagonal, NaN gives NaN.
    """
    np = _need_numpy()
    u = angle_unit(unit)
    k = _INVERSE_COEFFS[u.name][2]
    y, single_y = _prepare(np, y)
    x, single_x = _prepare(np, x)
    y, x = np.broadcast_arrays(y, x)
    valid = ~(np.isnan(y) | np.isnan(x))

    with np.errstate(divide="ignore", invalid="ignore"):
        n = y / x
    diagonal = np.isinf(y) & np.isinf(x)
    n = np.where(diagonal, np.where(y == x, 1.0, -1.0), n)
    x = np.where(np.isinf(n), 0.0, x)
    n = np.where(np.isfinite(n), n, 0.0)

    base = np.sign(n) * _atan_abs(np, np.abs(n), k)
    q, h, f = u.quarter_turn, u.half_turn, u.full_turn
    if positive:
        wrapped = base + f
        wrapped = np.where(wrapped < f, wrapped, wrapped - f)
        choices = [np.where(y >= 0.0, base, wrapped), base + h, q, 3.0 * q]
    else:
        choices = [base, np.where(y >= 0.0, base + h, base - h), q, -q]
    out = np.select([x > 0.0, x < 0.0, y > 0.0, y < 0.0], choices, 0.0)
    return _finish(np, out, valid, single_y and single_x)
