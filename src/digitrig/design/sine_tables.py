# design/sine_tables.py

from __future__ import annotations

import argparse
import math
import sys
from typing import Dict, List, Optional

from ..core.errors import TableConfigError
from ..trig.smooth import sin_smooth
from ..trig.tables import PI2, SinCosTables, build_tables


def evaluate_tier_errors(tables: SinCosTables, num_samples: int = 100000) -> Dict[str, float]:
    """
    Maximum absolute error of each sine tier against math.sin over one turn.

    "table" and "smoother" read `tables`; "smooth" is table-free and only
    listed for comparison. "table_f32" is the single-precision lookup.
    """
    errs = {"table": 0.0, "table_f32": 0.0, "smoother": 0.0, "smooth": 0.0}
    to_index = tables.size / PI2

    for k in range(num_samples + 1):
        theta = (k / num_samples) * PI2
        exact = math.sin(theta)

        i = tables.index(theta, to_index)
        got = {
            "table": tables.sin[i],
            "table_f32": tables.sin_f32[i],
            "smoother": tables.interpolate_sin(theta, to_index),
            "smooth": sin_smooth(theta),
        }
        for name, value in got.items():
            err = abs(value - exact)
            if err > errs[name]:
                errs[name] = err
    return errs


def format_table_literal(tables: SinCosTables, per_line: int = 4) -> List[str]:
    """The sine table as Python source lines, one hex-float per entry."""
    lines = [f"SIN_TABLE = (  # {tables.size + 1} entries, bits={tables.bits}"]
    values = [float(v).hex() for v in tables.sin]
    for j in range(0, len(values), per_line):
        lines.append("    " + ", ".join(values[j:j + per_line]) + ",")
    lines.append(")")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Build sine/cosine lookup tables and report per-tier error.")
    p.add_argument("--bits", type=int, nargs="+", default=[10, 12, 14, 16],
                   help="Table sizes to evaluate, as log2 of the entry count (default: 10 12 14 16).")
    p.add_argument("--samples", type=int, default=100000, help="Grid points over one turn (default: 100000).")
    p.add_argument("--emit", action="store_true", help="Also print the last table as a Python literal.")
    p.add_argument("--out-txt", type=str, default="", help="Optional text file to save the output.")
    args = p.parse_args(argv)

    if args.samples < 1:
        print("Error: Number of samples must be at least 1.", file=sys.stderr)
        return 1

    lines = []
    lines.append(f"{'bits':>4} | {'entries':>8} | {'table':>10} | {'table_f32':>10} | {'smoother':>10} | {'smooth':>10}")
    lines.append("-" * 70)

    tables = None
    for bits in args.bits:
        try:
            tables = build_tables(bits)
        except TableConfigError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        errs = evaluate_tier_errors(tables, args.samples)
        lines.append(
            f"{bits:>4} | {tables.size:>8} | {errs['table']:>10.3e} | {errs['table_f32']:>10.3e} | "
            f"{errs['smoother']:>10.3e} | {errs['smooth']:>10.3e}"
        )

    if args.emit and tables is not None:
        lines.append("")
        lines.extend(format_table_literal(tables))

    output_text = "\n".join(lines)
    print(output_text)

    if args.out_txt:
        with open(args.out_txt, "w", encoding="utf-8") as f:
            f.write(output_text + "\n")
        print(f"\nSaved results to {args.out_txt}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
