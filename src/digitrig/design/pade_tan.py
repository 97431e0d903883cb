# design/pade_tan.py

from __future__ import annotations

import argparse
import math
import sys
from fractions import Fraction
from typing import List, Optional, Sequence, Tuple

from ..core.errors import DependencyUnavailableError


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


def taylor_tan(order: int) -> List[Fraction]:
    """
    Exact Taylor coefficients t_0..t_order of tan(x) around 0.

    Uses tan' = 1 + tan^2, i.e. (k + 1) t_{k+1} = [k == 0] + sum_{i+j=k} t_i t_j.
    """
    t = [Fraction(0)] * (order + 1)
    for k in range(order):
        acc = Fraction(1) if k == 0 else Fraction(0)
        for i in range(k + 1):
            acc += t[i] * t[k - i]
        t[k + 1] = acc / (k + 1)
    return t


def _solve(matrix: List[List[Fraction]], rhs: List[Fraction]) -> List[Fraction]:
    # Gauss-Jordan elimination in exact arithmetic
    n = len(rhs)
    m = [row[:] + [b] for row, b in zip(matrix, rhs)]
    for col in range(n):
        pivot = next((r for r in range(col, n) if m[r][col] != 0), None)
        if pivot is None:
            raise ValueError("Pade system is singular for this [m/n]; try other degrees.")
        m[col], m[pivot] = m[pivot], m[col]
        inv = 1 / m[col][col]
        m[col] = [v * inv for v in m[col]]
        for r in range(n):
            if r != col and m[r][col] != 0:
                f = m[r][col]
                m[r] = [a - f * b for a, b in zip(m[r], m[col])]
    return [m[r][n] for r in range(n)]


def pade_tan_coefficients(deg_num: int, deg_den: int) -> Tuple[List[Fraction], List[Fraction]]:
    """
    The [deg_num/deg_den] Pade approximant P/Q of tan(x), with Q(0) == 1.

    Returns (p, q) as exact coefficient lists in ascending powers. For [5/4]
    this is x (945 - 105x^2 + x^4) / (945 - 420x^2 + 15x^4).
    """
    if deg_num < 0 or deg_den < 0:
        raise ValueError("degrees must be non-negative")
    t = taylor_tan(deg_num + deg_den)

    def tc(k: int) -> Fraction:
        return t[k] if k >= 0 else Fraction(0)

    # rows k = m+1..m+n of T*Q - P == 0, with q_0 = 1 moved to the right side
    matrix = [[tc(k - j) for j in range(1, deg_den + 1)]
              for k in range(deg_num + 1, deg_num + deg_den + 1)]
    rhs = [-tc(k) for k in range(deg_num + 1, deg_num + deg_den + 1)]
    q = [Fraction(1)] + (_solve(matrix, rhs) if deg_den else [])
    p = [sum((q[j] * tc(k - j) for j in range(min(k, deg_den) + 1)), Fraction(0))
         for k in range(deg_num + 1)]
    return p, q


def _eval(coeffs: Sequence[float], x: float) -> float:
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc


def max_errors(p: Sequence[float], q: Sequence[float], num_points: int = 20001) -> Tuple[float, float]:
    """
    (max absolute error on [-pi/4, pi/4], max relative error on (-pi/2, pi/2))
    of P/Q against math.tan.
    """
    abs_err = 0.0
    rel_err = 0.0
    half = math.pi / 2.0
    for k in range(1, num_points):
        x = -half + math.pi * k / num_points
        exact = math.tan(x)
        den = _eval(q, x)
        approx = _eval(p, x) / den if den != 0.0 else math.copysign(math.inf, exact)
        err = abs(approx - exact)
        if abs(x) <= math.pi / 4.0 and err > abs_err:
            abs_err = err
        if exact != 0.0 and err / abs(exact) > rel_err:
            rel_err = err / abs(exact)
    return abs_err, rel_err


def refine_minimax(p: Sequence[float], q: Sequence[float], num_points: int = 5000) -> Tuple[List[float], List[float], float]:
    """
    Polish Pade coefficients toward minimax relative error on (-pi/2, pi/2)
    with Powell (numpy + scipy). q_0 stays 1 and zero coefficients (the even
    powers of P and odd powers of Q) stay zero.
    """
    np = _need_numpy()
    opt = _need_scipy()

    num_idx = [i for i, c in enumerate(p) if c != 0.0]
    den_idx = [i for i, c in enumerate(q) if c != 0.0 and i > 0]

    half = math.pi / 2.0
    x = np.linspace(-half, half, num_points + 2)[1:-1]
    y = np.tan(x)

    def unpack(params):
        pn = [0.0] * len(p)
        qn = [0.0] * len(q)
        qn[0] = 1.0
        for j, i in enumerate(num_idx):
            pn[i] = float(params[j])
        for j, i in enumerate(den_idx):
            qn[i] = float(params[len(num_idx) + j])
        return pn, qn

    def cost(params) -> float:
        pn, qn = unpack(params)
        P = sum(c * x ** i for i, c in enumerate(pn))
        Q = sum(c * x ** i for i, c in enumerate(qn))
        with np.errstate(divide="ignore", invalid="ignore"):
            rel = np.abs((P / Q - y) / y)
        rel = rel[np.isfinite(rel)]
        return float(np.max(rel)) if rel.size else 1e6

    init = [float(p[i]) for i in num_idx] + [float(q[i]) for i in den_idx]
    res = opt.minimize(cost, init, method="Powell",
                       options={"xtol": 1e-14, "ftol": 1e-14, "maxiter": 20000})
    best = res.x if cost(res.x) <= cost(init) else init
    pn, qn = unpack(best)
    return pn, qn, cost(best)


def _coeff_lines(lines: List[str], coeffs: Sequence, exact: bool) -> None:
    lines.append(f"{'Power':<8} | {'Hex-Float (IEEE 754)':<25} | {'Decimal Coefficient':<24} | Exact")
    lines.append("-" * 95)
    for i, c in enumerate(coeffs):
        if c == 0:
            continue
        frac = str(c) if exact else ""
        lines.append(f"x^{i:<6} | {float(c).hex():<25} | {float(c):+.18f} | {frac}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Compute the Pade approximant of tan and its error.")
    p.add_argument("--deg-num", type=int, default=5, help="Degree of numerator (default: 5).")
    p.add_argument("--deg-den", type=int, default=4, help="Degree of denominator (default: 4).")
    p.add_argument("--refine", action="store_true",
                   help="Polish toward minimax relative error (needs numpy and scipy).")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.deg_num < 1 or args.deg_den < 0:
        print("Error: Numerator degree must be >= 1, denominator degree >= 0.", file=sys.stderr)
        return 1

    try:
        num, den = pade_tan_coefficients(args.deg_num, args.deg_den)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    pf = [float(c) for c in num]
    qf = [float(c) for c in den]
    abs_err, rel_err = max_errors(pf, qf)

    lines = []
    lines.append(f"Pade Approximant [{args.deg_num}/{args.deg_den}] for tan(x)")
    lines.append("=" * 95)
    lines.append(f"Max Absolute Error on [-pi/4, pi/4]: {abs_err:.8e}")
    lines.append(f"Max Relative Error on (-pi/2, pi/2): {rel_err:.8e}")
    lines.append("\n--- Numerator P(x) ---")
    _coeff_lines(lines, num, exact=True)
    lines.append("\n--- Denominator Q(x) ---")
    _coeff_lines(lines, den, exact=True)

    if args.refine:
        pn, qn, rel = refine_minimax(pf, qf)
        abs_err, _ = max_errors(pn, qn)
        lines.append("\n\nMinimax-refined coefficients")
        lines.append("=" * 95)
        lines.append(f"Max Absolute Error on [-pi/4, pi/4]: {abs_err:.8e}")
        lines.append(f"Max Relative Error on (-pi/2, pi/2): {rel:.8e}")
        lines.append("\n--- Numerator P(x) ---")
        _coeff_lines(lines, pn, exact=False)
        lines.append("\n--- Denominator Q(x) ---")
        _coeff_lines(lines, qn, exact=False)

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
