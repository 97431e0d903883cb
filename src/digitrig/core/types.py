from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Literal

from .errors import UnknownTierError, UnknownUnitError

UnitName = Literal["radians", "degrees", "turns"]
Tier = Literal["table", "smooth", "smoother"]

TIERS = ("table", "smooth", "smoother")

@dataclass(frozen=True)
class AngleUnit:
    """An angle unit, described by the size of one full revolution in it."""
    name: UnitName
    full_turn: float
    to_index: float      # table indices per unit
    quarter_turn: float  # full_turn / 4, spelled out so it stays exact

    @property
    def half_turn(self) -> float:
        return self.full_turn * 0.5

    @property
    def to_quarters(self) -> float:
        """Multiplier taking an angle in this unit to quarter turns."""
        return 1.0 / self.quarter_turn


def make_units(table_size: int) -> Dict[str, AngleUnit]:
    """Build the radians/degrees/turns descriptors for a table of `table_size` entries."""
    tau = math.pi * 2.0
    return {
        "radians": AngleUnit("radians", tau, table_size / tau, math.pi * 0.5),
        "degrees": AngleUnit("degrees", 360.0, table_size / 360.0, 90.0),
        "turns": AngleUnit("turns", 1.0, float(table_size), 0.25),
    }


_ALIASES = {
    "radians": "radians", "radian": "radians", "rad": "radians",
    "degrees": "degrees", "degree": "degrees", "deg": "degrees",
    "turns": "turns", "turn": "turns",
}


def canonical_unit_name(name: str) -> UnitName:
    try:
        return _ALIASES[name.strip().lower()]  # type: ignore[return-value]
    except (KeyError, AttributeError):
        raise UnknownUnitError(
            f"Unknown angle unit {name!r}. Available: {sorted(set(_ALIASES.values()))}"
        ) from None


def canonical_tier(name: str) -> Tier:
    if name not in TIERS:
        raise UnknownTierError(f"tier must be one of: {', '.join(TIERS)}")
    return name  # type: ignore[return-value]
