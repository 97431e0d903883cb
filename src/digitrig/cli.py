from __future__ import annotations

import argparse
import importlib
import inspect
import sys
from typing import List, Optional


def _run_module_main(modpath: str, argv: List[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _public_function(name: str):
    import digitrig

    if name not in digitrig.__all__:
        return None
    fn = getattr(digitrig, name)
    return fn if inspect.isroutine(fn) else None


def cmd_eval(argv: List[str]) -> int:
    from digitrig.core.errors import DigitrigError

    p = argparse.ArgumentParser(prog="digitrig eval", description="Evaluate one approximation, e.g. sin_smoother 0.5")
    p.add_argument("func", help="function name (sin, cos_deg, tan_smooth_turns, atan2, ...)")
    p.add_argument("args", type=float, nargs="+", help="argument(s); atan2 takes Y X")
    args = p.parse_args(argv)

    fn = _public_function(args.func)
    if fn is None:
        print(f"Error: unknown function {args.func!r}", file=sys.stderr)
        return 1
    try:
        value = fn(*args.args)
    except TypeError:
        n = len(inspect.signature(fn).parameters)
        print(f"Error: {args.func} takes {n} argument(s), got {len(args.args)}", file=sys.stderr)
        return 1
    except DigitrigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(repr(value))
    return 0


def cmd_interp(argv: List[str]) -> int:
    from digitrig import interpolations
    from digitrig.core.errors import UnknownInterpolatorError

    p = argparse.ArgumentParser(prog="digitrig interp", description="Evaluate a named interpolation curve.")
    p.add_argument("tag", nargs="?", help="interpolator tag, e.g. pow2In, bounceOut, elastic")
    p.add_argument("alpha", type=float, nargs="*", help="alpha value(s), clamped to [0, 1]")
    p.add_argument("--list", action="store_true", help="list registered tags and exit")
    args = p.parse_args(argv)

    if args.list:
        for tag in interpolations.tags():
            print(tag)
        return 0
    if args.tag is None:
        print("Error: give a tag (or --list)", file=sys.stderr)
        return 1

    try:
        interp = interpolations.get(args.tag)
    except UnknownInterpolatorError:
        print(f"Error: no interpolator tagged {args.tag!r}; see --list", file=sys.stderr)
        return 1

    for a in args.alpha or [0.0, 0.25, 0.5, 0.75, 1.0]:
        print(f"{a:g}\t{interp(a)!r}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="digitrig")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("eval", help="Evaluate one approximation at given argument(s)")
    sub.add_parser("interp", help="Evaluate or list named interpolation curves")

    # Diagnostics
    sub.add_parser("errors", help="Tabulate the error of every approximation (diagnostics)")
    sub.add_parser("plot", help="Plot error curves per tier (needs numpy + matplotlib)")

    # Design tools
    sub.add_parser("sine-table", help="Build lookup tables and report per-tier error.")
    sub.add_parser("minimax", help="Refit the asin/acos and atan polynomial coefficients.")
    sub.add_parser("pade-tan", help="Compute the Pade approximant of tan.")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "eval":
        return cmd_eval(rest)

    if args.cmd == "interp":
        return cmd_interp(rest)

    tool_map = {
        "errors": "digitrig.diagnostics.error_report",
        "plot": "digitrig.diagnostics.plot_errors",
        "sine-table": "digitrig.design.sine_tables",
        "minimax": "digitrig.design.minimax_polys",
        "pade-tan": "digitrig.design.pade_tan",
    }
    if args.cmd in tool_map:
        return _run_module_main(tool_map[args.cmd], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
