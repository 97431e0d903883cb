"""Trigonometric approximations in radians, degrees and turns.

Three tiers for sin/cos/tan, picked by name suffix:

- no suffix: single table lookup (fastest, visibly stepped)
- ``_smooth``: closed-form, table-free, continuous
- ``_smoother``: linear interpolation between table entries (most precise)

and polynomial inverses (asin, acos, atan, atan2) with no table at all.
"""

from .tables import (
    COS_TABLE,
    COS_TABLE_F32,
    DEFAULT_TABLES,
    DEG_TO_INDEX,
    DEGREES,
    DEGREES_TO_RADIANS,
    HALF_PI,
    INDEX_TO_DEG,
    INDEX_TO_RAD,
    INDEX_TO_TURN,
    PI,
    PI2,
    PI_INVERSE,
    QUARTER_PI,
    RAD_TO_INDEX,
    RADIANS,
    RADIANS_TO_DEGREES,
    SIN_BITS,
    SIN_TABLE,
    SIN_TABLE_F32,
    SIN_TO_COS,
    TABLE_MASK,
    TABLE_SIZE,
    TAU,
    TURN_TO_INDEX,
    TURNS,
    SinCosTables,
    angle_unit,
    build_tables,
    table_index,
)
from .lookup import cos, cos_deg, cos_turns, sin, sin_deg, sin_turns, tan, tan_deg, tan_turns
from .smooth import (
    cos_smooth,
    cos_smooth_deg,
    cos_smooth_turns,
    sin_smooth,
    sin_smooth_deg,
    sin_smooth_turns,
    tan_smooth,
    tan_smooth_deg,
    tan_smooth_turns,
)
from .smoother import (
    cos_smoother,
    cos_smoother_deg,
    cos_smoother_turns,
    sin_smoother,
    sin_smoother_deg,
    sin_smoother_turns,
    tan_smoother,
    tan_smoother_deg,
    tan_smoother_turns,
)
from .inverse import (
    acos,
    acos_deg,
    acos_turns,
    asin,
    asin_deg,
    asin_turns,
    atan,
    atan2,
    atan2_deg,
    atan2_deg360,
    atan2_turns,
    atan_deg,
    atan_turns,
    atan_unchecked,
    atan_unchecked_deg,
    atan_unchecked_turns,
)

__all__ = [
    # tables and constants
    "SIN_BITS", "TABLE_SIZE", "TABLE_MASK", "SIN_TO_COS",
    "PI", "PI2", "TAU", "HALF_PI", "QUARTER_PI", "PI_INVERSE",
    "RADIANS_TO_DEGREES", "DEGREES_TO_RADIANS",
    "RAD_TO_INDEX", "DEG_TO_INDEX", "TURN_TO_INDEX",
    "INDEX_TO_RAD", "INDEX_TO_DEG", "INDEX_TO_TURN",
    "SIN_TABLE", "COS_TABLE", "SIN_TABLE_F32", "COS_TABLE_F32",
    "DEFAULT_TABLES", "SinCosTables", "build_tables", "table_index",
    "RADIANS", "DEGREES", "TURNS", "angle_unit",
    # lookup
    "sin", "cos", "tan", "sin_deg", "cos_deg", "tan_deg", "sin_turns", "cos_turns", "tan_turns",
    # smooth
    "sin_smooth", "cos_smooth", "tan_smooth",
    "sin_smooth_deg", "cos_smooth_deg", "tan_smooth_deg",
    "sin_smooth_turns", "cos_smooth_turns", "tan_smooth_turns",
    # smoother
    "sin_smoother", "cos_smoother", "tan_smoother",
    "sin_smoother_deg", "cos_smoother_deg", "tan_smoother_deg",
    "sin_smoother_turns", "cos_smoother_turns", "tan_smoother_turns",
    # inverse
    "asin", "asin_deg", "asin_turns", "acos", "acos_deg", "acos_turns",
    "atan", "atan_deg", "atan_turns",
    "atan_unchecked", "atan_unchecked_deg", "atan_unchecked_turns",
    "atan2", "atan2_deg", "atan2_deg360", "atan2_turns",
]
