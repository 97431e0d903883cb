"""
digitrig.trig.tables
--------------------
The sine/cosine lookup tables and the angle-to-index arithmetic shared by every
table-based function.

A table of N = 2**bits samples covers one full turn, plus one extra entry at
index N that repeats index 0, so that interpolation can always read ``i + 1``
after masking ``i`` into ``[0, N)``. The cosine table is the sine table shifted
by a quarter turn (N/4 indices).

The default tables are built once, when this module is first imported, and are
stored as tuples; nothing writes to them afterwards, so they can be shared
freely between threads.
"""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from ..core.errors import TableConfigError
from ..core.types import AngleUnit, canonical_unit_name, make_units

PI = math.pi
PI2 = PI * 2.0
TAU = PI2
HALF_PI = PI * 0.5
QUARTER_PI = PI * 0.25
PI_INVERSE = 1.0 / PI

RADIANS_TO_DEGREES = 180.0 / PI
DEGREES_TO_RADIANS = PI / 180.0

SIN_BITS = 14  # 16384 samples per turn
TABLE_SIZE = 1 << SIN_BITS
TABLE_MASK = TABLE_SIZE - 1
SIN_TO_COS = TABLE_SIZE >> 2

RAD_TO_INDEX = TABLE_SIZE / PI2
DEG_TO_INDEX = TABLE_SIZE / 360.0
TURN_TO_INDEX = float(TABLE_SIZE)
INDEX_TO_RAD = PI2 / TABLE_SIZE
INDEX_TO_DEG = 360.0 / TABLE_SIZE
INDEX_TO_TURN = 1.0 / TABLE_SIZE

MIN_BITS = 2
MAX_BITS = 24


def table_index(angle: float, to_index: float, mask: int = TABLE_MASK) -> Optional[int]:
    """
    Nearest table index for `angle`, wrapped into ``[0, mask]``.

    `to_index` is the number of table steps per unit of `angle`. Python's
    ``&`` on negative ints behaves as two's complement, so negative angles wrap
    the same way positive ones do. Returns None for infinite or NaN input.
    """
    v = angle * to_index
    if not math.isfinite(v):
        return None
    return math.floor(v + 0.5) & mask


def _ratio(num: float, den: float) -> float:
    # IEEE division: a zero denominator gives a signed infinity, not an exception.
    if den == 0.0:
        if num == 0.0 or num != num:
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def _lookup(table: Sequence[float], angle: float, to_index: float, mask: int = TABLE_MASK) -> float:
    v = angle * to_index
    if not math.isfinite(v):
        return math.nan
    return table[math.floor(v + 0.5) & mask]


def _interpolate(table: Sequence[float], angle: float, to_index: float, mask: int = TABLE_MASK) -> float:
    v = angle * to_index
    if not math.isfinite(v):
        return math.nan
    lo = math.floor(v)
    i = lo & mask
    a = table[i]
    return a + (table[i + 1] - a) * (v - lo)


@dataclass(frozen=True)
class SinCosTables:
    """
    One full turn of sine and cosine samples, in double and single precision.

    Build instances with :func:`build_tables`; the module-level functions use
    :data:`DEFAULT_TABLES`. The ``lookup_*`` and ``interpolate_*`` methods run
    the same algorithms as the module-level functions, against this table, with
    `to_index` taken from :attr:`units` or given directly.
    """
    bits: int
    sin: Tuple[float, ...]      # length size + 1
    cos: Tuple[float, ...]      # length size + 1
    sin_f32: Tuple[float, ...]
    cos_f32: Tuple[float, ...]

    @property
    def size(self) -> int:
        return 1 << self.bits

    @property
    def mask(self) -> int:
        return self.size - 1

    @property
    def sin_to_cos(self) -> int:
        return self.size >> 2

    @property
    def units(self) -> Dict[str, AngleUnit]:
        return make_units(self.size)

    def unit(self, name: str) -> AngleUnit:
        return self.units[canonical_unit_name(name)]

    def index(self, angle: float, to_index: float) -> Optional[int]:
        return table_index(angle, to_index, self.mask)

    # -- direct lookup -------------------------------------------------

    def lookup_sin(self, angle: float, to_index: Optional[float] = None) -> float:
        return _lookup(self.sin, angle, self._scale(to_index), self.mask)

    def lookup_cos(self, angle: float, to_index: Optional[float] = None) -> float:
        return _lookup(self.cos, angle, self._scale(to_index), self.mask)

    def lookup_tan(self, angle: float, to_index: Optional[float] = None) -> float:
        i = table_index(angle, self._scale(to_index), self.mask)
        if i is None:
            return math.nan
        return _ratio(self.sin[i], self.cos[i])

    # -- linear interpolation ------------------------------------------

    def interpolate_sin(self, angle: float, to_index: Optional[float] = None) -> float:
        return _interpolate(self.sin, angle, self._scale(to_index), self.mask)

    def interpolate_cos(self, angle: float, to_index: Optional[float] = None) -> float:
        return _interpolate(self.cos, angle, self._scale(to_index), self.mask)

    def interpolate_tan(self, angle: float, to_index: Optional[float] = None) -> float:
        scale = self._scale(to_index)
        return _ratio(_interpolate(self.sin, angle, scale, self.mask),
                      _interpolate(self.cos, angle, scale, self.mask))

    def _scale(self, to_index: Optional[float]) -> float:
        # radians by default
        return self.size / PI2 if to_index is None else to_index


def build_tables(bits: int = SIN_BITS) -> SinCosTables:
    """
    Sample sin(i / N * 2pi) for i in [0, N], N = 2**bits.

    The four right angles are overwritten with exact values, since floating
    point sampling leaves tiny residues there (sin(pi) is about 1.2e-16).
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TableConfigError(f"bits must be an int, got {type(bits).__name__}")
    if not MIN_BITS <= bits <= MAX_BITS:
        raise TableConfigError(f"bits must be in {MIN_BITS}..{MAX_BITS}, got {bits}")

    n = 1 << bits
    mask = n - 1
    quarter = n >> 2

    s = [math.sin(i / n * PI2) for i in range(n + 1)]
    s[0] = 0.0
    s[quarter] = 1.0
    s[quarter * 2] = 0.0
    s[quarter * 3] = -1.0
    s[n] = s[0]

    c = [s[(i + quarter) & mask] for i in range(n + 1)]

    return SinCosTables(
        bits=bits,
        sin=tuple(s),
        cos=tuple(c),
        sin_f32=tuple(array("f", s)),
        cos_f32=tuple(array("f", c)),
    )


DEFAULT_TABLES = build_tables(SIN_BITS)

SIN_TABLE = DEFAULT_TABLES.sin
COS_TABLE = DEFAULT_TABLES.cos
SIN_TABLE_F32 = DEFAULT_TABLES.sin_f32
COS_TABLE_F32 = DEFAULT_TABLES.cos_f32

_UNITS = make_units(TABLE_SIZE)
RADIANS = _UNITS["radians"]
DEGREES = _UNITS["degrees"]
TURNS = _UNITS["turns"]


def angle_unit(name: str) -> AngleUnit:
    """Look up RADIANS, DEGREES or TURNS by name ("rad", "deg", "turns", ...)."""
    return _UNITS[canonical_unit_name(name)]
