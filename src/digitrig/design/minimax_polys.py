# design/minimax_polys.py

from __future__ import annotations

import argparse
import math
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.errors import DependencyUnavailableError, UnknownUnitError
from ..trig import inverse
from ..trig.tables import angle_unit


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise DependencyUnavailableError('Need numpy. Install: pip install "digitrig[design]"') from e


def _need_scipy():
    try:
        import scipy.optimize as opt
        return opt
    except ImportError as e:
        raise DependencyUnavailableError('Need scipy. Install: pip install "digitrig[design]"') from e


def optimize_minimax(
    target: Sequence[float],
    columns: Sequence[Sequence[float]],
    initial: Optional[Sequence[float]] = None,
) -> Tuple[List[float], float]:
    """
    Minimax fit of `target` by a linear combination of `columns` (all sampled
    on the same grid). Starts from least squares, or from `initial`, and polishes
    the max absolute error with Powell. Returns (coefficients, max_error).
    """
    np = _need_numpy()
    opt = _need_scipy()

    y = np.asarray(target, dtype=np.float64)
    A = np.vstack([np.asarray(c, dtype=np.float64) for c in columns]).T

    if initial is None:
        c_init, _, _, _ = np.linalg.lstsq(A, y, rcond=None)
    else:
        c_init = np.asarray(initial, dtype=np.float64)

    def cost(c) -> float:
        return float(np.max(np.abs(y - A @ c)))

    res = opt.minimize(
        cost,
        c_init,
        method="Powell",
        options={"xtol": 1e-14, "ftol": 1e-14, "maxiter": 20000},
    )
    best = res.x if cost(res.x) <= cost(c_init) else c_init
    return [float(c) for c in best], cost(best)


def fit_atan(degree: int = 11, scale: float = 1.0, num_points: int = 20001) -> Tuple[List[float], List[int], float]:
    """
    Fit the odd polynomial behind the atan functions.

    With c = (n - 1) / (n + 1), atan(n) == pi/4 + atan(c) and c covers [-1, 1)
    as n covers [0, inf), so a single odd polynomial in c on [-1, 1] handles the
    whole half line. `scale` converts radians to the output unit.
    Returns (coefficients, powers, max_error).
    """
    np = _need_numpy()
    powers = [2 * i + 1 for i in range((degree + 1) // 2)]
    c = np.linspace(-1.0, 1.0, num_points)
    y = np.arctan(c) * scale
    coeffs, err = optimize_minimax(y, [c ** p for p in powers])
    return coeffs, powers, err


def fit_asin(degree: int = 3, scale: float = 1.0, num_points: int = 20001) -> Tuple[List[float], List[int], float]:
    """
    Fit P in acos(a) ~= sqrt(1 - a) * P(a) on [0, 1], the form used by
    asin/acos (the negative half follows by symmetry).
    Returns (coefficients, powers, max_error).
    """
    np = _need_numpy()
    powers = list(range(degree + 1))
    a = np.linspace(0.0, 1.0, num_points)
    root = np.sqrt(1.0 - a)
    y = np.arccos(a) * scale
    coeffs, err = optimize_minimax(y, [root * a ** p for p in powers])
    return coeffs, powers, err


def current_max_error(fn: Callable[[float], float], exact: Callable[[float], float],
                      lo: float, hi: float, num_points: int = 20001) -> float:
    """Max absolute error of one of the shipped scalar functions on [lo, hi]."""
    worst = 0.0
    for k in range(num_points):
        x = lo + (hi - lo) * k / (num_points - 1)
        err = abs(fn(x) - exact(x))
        if err > worst:
            worst = err
    return worst


def _coeff_table(lines: List[str], coeffs: Sequence[float], powers: Sequence[int], var: str) -> None:
    lines.append(f"{'Power':<8} | {'Hex-Float (IEEE 754)':<25} | {'Decimal Coefficient'}")
    lines.append("-" * 95)
    for c, p in zip(coeffs, powers):
        lines.append(f"{var}^{p:<6} | {float(c).hex():<25} | {c:+.18f}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Refit the asin/acos and atan polynomial coefficients.")
    p.add_argument("--unit", default="radians", help="Output unit: radians, degrees or turns (default: radians).")
    p.add_argument("--atan-degree", type=int, default=11, help="Max odd degree of the atan polynomial (default: 11).")
    p.add_argument("--asin-degree", type=int, default=3, help="Degree of the asin polynomial (default: 3).")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    try:
        unit = angle_unit(args.unit)
    except UnknownUnitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    scale = unit.full_turn / (2.0 * math.pi)

    atan_degree = args.atan_degree if args.atan_degree % 2 != 0 else args.atan_degree - 1
    if atan_degree < 1 or args.asin_degree < 0:
        print("Error: atan degree must be at least 1 and asin degree at least 0.", file=sys.stderr)
        return 1

    shipped = {
        "radians": (inverse.atan, inverse.asin),
        "degrees": (inverse.atan_deg, inverse.asin_deg),
        "turns": (inverse.atan_turns, inverse.asin_turns),
    }[unit.name]

    lines = []
    lines.append(f"Minimax polynomials for the inverse functions (unit: {unit.name})")
    lines.append("=" * 95)

    coeffs, powers, err = fit_atan(atan_degree, scale)
    now = current_max_error(shipped[0], lambda x: math.atan(x) * scale, -8.0, 8.0)
    lines.append(f"\n--- atan: eighth turn + P(c), c = (n - 1) / (n + 1), P odd, degree {atan_degree} ---")
    lines.append(f"Maximum Absolute Error: {err:.8e}   (shipped coefficients: {now:.8e})")
    lines.append(f"Eighth turn: {float(unit.full_turn / 8.0).hex()} ({unit.full_turn / 8.0!r})")
    lines.append("-" * 95)
    _coeff_table(lines, coeffs, powers, "c")

    coeffs, powers, err = fit_asin(args.asin_degree, scale)
    now = current_max_error(shipped[1], lambda x: math.asin(x) * scale, -1.0, 1.0)
    lines.append(f"\n\n--- asin: quarter turn - sqrt(1 - a) * P(a), degree {args.asin_degree} ---")
    lines.append(f"Maximum Absolute Error: {err:.8e}   (shipped coefficients: {now:.8e})")
    lines.append("For a < 0 use asin(a) = -asin(-a); acos(a) = quarter turn - asin(a).")
    lines.append("-" * 95)
    _coeff_table(lines, coeffs, powers, "a")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
