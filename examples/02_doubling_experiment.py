#!/usr/bin/env python
"""Doubling experiment: measure how running time grows with N.

Quick-find and quick-union are quadratic for N connections (time ratio near 4),
weighted quick-union is close to linear (ratio near 2).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from ufalg.benchmark import estimate_exponent, run_doubling, save_doubling
from ufalg.complexity import complexity_table
from ufalg.config import ALGORITHMS


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--algorithm", action="append", default=None, help="May be given several times (default: all)")
    ap.add_argument("--start", type=int, default=250)
    ap.add_argument("--steps", type=int, default=5)
    ap.add_argument("--repeat", type=int, default=1)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--out", default="doubling.npz")
    ap.add_argument("--plot", default=None, help="Write a log-log figure (requires matplotlib)")
    args = ap.parse_args()

    names = args.algorithm or list(ALGORITHMS)
    results = []
    for name in names:
        res = run_doubling(name, start=args.start, steps=args.steps, seed=args.seed, repeat=args.repeat, verbose=True)
        results.append(res)
        documented = complexity_table(ALGORITHMS[res.algorithm]).get("union")
        b = estimate_exponent(res) if args.steps > 1 else float("nan")
        doc = documented.value if documented is not None else "?"
        print(f"estimated exponent b={b:.2f} (union documented as {doc})\n")

    print("saving:", save_doubling(args.out, *results))
    if args.plot:
        from ufalg.plotting import plot_doubling

        print("saving:", plot_doubling(results, args.plot))


if __name__ == "__main__":
    main()
