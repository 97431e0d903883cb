"""digitrig public API.

Fast approximate trigonometry (table lookup, table-free and interpolated
tiers, polynomial inverses) in radians, degrees and turns, plus rough
exponentials, bit helpers and easing curves in their own submodules.
"""

from . import bits, interpolations, mathtools, rough
from .core.errors import (
    DependencyUnavailableError,
    DigitrigError,
    TableConfigError,
    UnknownInterpolatorError,
    UnknownTierError,
    UnknownUnitError,
)
from .core.types import AngleUnit
from .trig import *  # noqa: F401,F403
from .trig import __all__ as _trig_all

__all__ = [
    "bits",
    "interpolations",
    "mathtools",
    "rough",
    "AngleUnit",
    "DigitrigError",
    "TableConfigError",
    "UnknownUnitError",
    "UnknownTierError",
    "UnknownInterpolatorError",
    "DependencyUnavailableError",
] + list(_trig_all)
