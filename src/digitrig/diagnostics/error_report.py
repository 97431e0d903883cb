from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .. import trig


@dataclass(frozen=True)
class Probe:
    """One approximation paired with the exact function and a sample range."""
    name: str
    fn: Callable[[float], float]
    exact: Callable[[float], float]
    lo: float
    hi: float


def _deg(f: Callable[[float], float]) -> Callable[[float], float]:
    return lambda d: f(math.radians(d))


def _turns(f: Callable[[float], float]) -> Callable[[float], float]:
    return lambda t: f(t * 2.0 * math.pi)


def _angle_of(fn: Callable[[float, float], float]) -> Callable[[float], float]:
    # atan2 probes sweep the unit circle by angle
    return lambda t: fn(math.sin(t), math.cos(t))


def _deg360(t: float) -> float:
    return math.degrees(math.atan2(math.sin(t), math.cos(t))) % 360.0


def _turns01(t: float) -> float:
    return (math.atan2(math.sin(t), math.cos(t)) / (2.0 * math.pi)) % 1.0


TAU = 2.0 * math.pi
_TAN_RAD = 1.4   # stay clear of the asymptotes
_TAN_DEG = math.degrees(_TAN_RAD)
_TAN_TURNS = _TAN_RAD / TAU


def default_probes() -> List[Probe]:
    probes: List[Probe] = []
    for suffix in ("", "_smooth", "_smoother"):
        for base, exact in (("sin", math.sin), ("cos", math.cos)):
            probes.append(Probe(f"{base}{suffix}", getattr(trig, f"{base}{suffix}"), exact, -TAU, TAU))
            probes.append(Probe(f"{base}{suffix}_deg", getattr(trig, f"{base}{suffix}_deg"), _deg(exact), -360.0, 360.0))
            probes.append(Probe(f"{base}{suffix}_turns", getattr(trig, f"{base}{suffix}_turns"), _turns(exact), -1.0, 1.0))
        probes.append(Probe(f"tan{suffix}", getattr(trig, f"tan{suffix}"), math.tan, -_TAN_RAD, _TAN_RAD))
        probes.append(Probe(f"tan{suffix}_deg", getattr(trig, f"tan{suffix}_deg"), _deg(math.tan), -_TAN_DEG, _TAN_DEG))
        probes.append(Probe(f"tan{suffix}_turns", getattr(trig, f"tan{suffix}_turns"), _turns(math.tan), -_TAN_TURNS, _TAN_TURNS))

    probes += [
        Probe("asin", trig.asin, math.asin, -1.0, 1.0),
        Probe("asin_deg", trig.asin_deg, lambda a: math.degrees(math.asin(a)), -1.0, 1.0),
        Probe("asin_turns", trig.asin_turns, lambda a: math.asin(a) / TAU, -1.0, 1.0),
        Probe("acos", trig.acos, math.acos, -1.0, 1.0),
        Probe("acos_deg", trig.acos_deg, lambda a: math.degrees(math.acos(a)), -1.0, 1.0),
        Probe("acos_turns", trig.acos_turns, lambda a: math.acos(a) / TAU, -1.0, 1.0),
        Probe("atan", trig.atan, math.atan, -100.0, 100.0),
        Probe("atan_deg", trig.atan_deg, lambda i: math.degrees(math.atan(i)), -100.0, 100.0),
        Probe("atan_turns", trig.atan_turns, lambda i: math.atan(i) / TAU, -100.0, 100.0),
        Probe("atan2", _angle_of(trig.atan2), _angle_of(math.atan2), -3.14, 3.14),
        Probe("atan2_deg", _angle_of(trig.atan2_deg), _angle_of(lambda y, x: math.degrees(math.atan2(y, x))), -3.14, 3.14),
        Probe("atan2_deg360", _angle_of(trig.atan2_deg360), _deg360, 0.001, TAU - 0.001),
        Probe("atan2_turns", _angle_of(trig.atan2_turns), _turns01, 0.001, TAU - 0.001),
    ]
    return probes


def measure(probe: Probe, num_samples: int) -> Tuple[float, float]:
    """(max, mean) absolute error of `probe` over evenly spaced samples."""
    worst = 0.0
    total = 0.0
    for k in range(num_samples + 1):
        x = probe.lo + (probe.hi - probe.lo) * k / num_samples
        err = abs(probe.fn(x) - probe.exact(x))
        total += err
        if err > worst:
            worst = err
    return worst, total / (num_samples + 1)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Tabulate the error of every approximation against the math module.")
    p.add_argument("--samples", type=int, default=20000, help="Samples per function (default: 20000).")
    p.add_argument("--only", type=str, default="", help="Only functions whose name contains this text.")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.samples < 1:
        print("Error: Number of samples must be at least 1.", file=sys.stderr)
        return 1

    probes = [pr for pr in default_probes() if args.only in pr.name]
    if not probes:
        print(f"Error: no function matches {args.only!r}", file=sys.stderr)
        return 1

    lines = [f"{'function':<22} | {'range':<24} | {'max abs err':>12} | {'mean abs err':>12}"]
    lines.append("-" * 80)
    for pr in probes:
        worst, mean = measure(pr, args.samples)
        rng = f"[{pr.lo:g}, {pr.hi:g}]"
        lines.append(f"{pr.name:<22} | {rng:<24} | {worst:>12.4e} | {mean:>12.4e}")

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
