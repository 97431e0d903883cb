#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..core.errors import DependencyUnavailableError, UnknownUnitError
from ..core.types import TIERS
from ..trig.tables import angle_unit


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise DependencyUnavailableError('Need numpy. Install: pip install "digitrig[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib
        matplotlib.use("Agg")
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise DependencyUnavailableError('Need matplotlib. Install: pip install "digitrig[diagnostics]"') from e


def error_curves(np, func: str, unit: str, tiers: List[str], num_points: int, turns: float):
    """Sample angle grid and the signed error of each tier, as (x, {tier: err})."""
    from .. import vectorized

    u = angle_unit(unit)
    x = np.linspace(0.0, turns * u.full_turn, num_points)
    exact = getattr(np, func)(x * (2.0 * np.pi / u.full_turn))
    fn = getattr(vectorized, func)
    return x, {t: fn(x, unit=unit, tier=t) - exact for t in tiers}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the signed error of each sin/cos/tan tier.")
    p.add_argument("--func", choices=("sin", "cos", "tan"), default="sin")
    p.add_argument("--unit", default="radians", help="radians, degrees or turns (default: radians).")
    p.add_argument("--tiers", default=",".join(TIERS), help="Comma list of tiers (default: all).")
    p.add_argument("--turns", type=float, default=1.0, help="How many full turns to sweep (default: 1).")
    p.add_argument("--points", type=int, default=20000)
    p.add_argument("--log", action="store_true", help="Plot |error| on a log scale.")
    p.add_argument("--out", default="trig_errors.png")
    args = p.parse_args(argv)

    tiers = [t.strip() for t in args.tiers.split(",") if t.strip()]
    bad = [t for t in tiers if t not in TIERS]
    if bad or not tiers:
        print(f"Error: unknown tier(s) {bad}. Known: {list(TIERS)}", file=sys.stderr)
        return 1
    try:
        u = angle_unit(args.unit)
    except UnknownUnitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    np = _need_numpy()
    plt = _need_matplotlib()

    x, curves = error_curves(np, args.func, u.name, tiers, args.points, args.turns)

    fig, ax = plt.subplots(figsize=(12, 4.5))
    for tier, err in curves.items():
        finite = np.isfinite(err)
        if args.log:
            ax.semilogy(x[finite], np.abs(err[finite]) + 1e-20, lw=0.8, label=tier)
        else:
            ax.plot(x[finite], err[finite], lw=0.8, label=tier)

    ax.set_xlabel(f"angle ({u.name})")
    ax.set_ylabel("|error|" if args.log else "approx - exact")
    ax.set_title(f"{args.func} error by tier")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=150)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
