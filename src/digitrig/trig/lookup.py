"""
Table-lookup sin, cos and tan: one read from the default table at the nearest index.

Output is quantized to the table's resolution (visible as small steps when
graphed), which is fine for graphics and animation but not for code that needs
a continuous result; see :mod:`.smoother` for that.
"""

from __future__ import annotations

import math

from .tables import (
    COS_TABLE,
    DEG_TO_INDEX,
    RAD_TO_INDEX,
    SIN_TABLE,
    TURN_TO_INDEX,
    _lookup,
    _ratio,
    table_index,
)


def _tan(angle: float, to_index: float) -> float:
    i = table_index(angle, to_index)
    if i is None:
        return math.nan
    return _ratio(SIN_TABLE[i], COS_TABLE[i])


def sin(radians: float) -> float:
    """Approximate sine of an angle in radians, by table lookup."""
    return _lookup(SIN_TABLE, radians, RAD_TO_INDEX)


def cos(radians: float) -> float:
    """Approximate cosine of an angle in radians, by table lookup."""
    return _lookup(COS_TABLE, radians, RAD_TO_INDEX)


def tan(radians: float) -> float:
    """
    Approximate tangent in radians, as sine entry / cosine entry.

    Near odd multiples of pi/2 the result gets very large, and exactly at the
    table's right angles it is a signed infinity.
    """
    return _tan(radians, RAD_TO_INDEX)


def sin_deg(degrees: float) -> float:
    return _lookup(SIN_TABLE, degrees, DEG_TO_INDEX)


def cos_deg(degrees: float) -> float:
    return _lookup(COS_TABLE, degrees, DEG_TO_INDEX)


def tan_deg(degrees: float) -> float:
    return _tan(degrees, DEG_TO_INDEX)


def sin_turns(turns: float) -> float:
    """Sine of an angle in turns (1.0 is a full revolution)."""
    return _lookup(SIN_TABLE, turns, TURN_TO_INDEX)


def cos_turns(turns: float) -> float:
    return _lookup(COS_TABLE, turns, TURN_TO_INDEX)


def tan_turns(turns: float) -> float:
    return _tan(turns, TURN_TO_INDEX)
