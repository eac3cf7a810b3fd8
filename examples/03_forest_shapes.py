#!/usr/bin/env python
"""Compare the forest shapes produced by quick-union and weighted quick-union.

The same random connections are applied to both structures; quick-union trees
grow tall while weighted quick-union stays within lg N.
"""

from __future__ import annotations

import argparse
import math
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from ufalg.dataset import random_dataset
from ufalg.diagnostics import print_forest_stats, tree_depths
from ufalg.quick_union import QuickUnion
from ufalg.weighted import WeightedQuickUnion


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--n", type=int, default=2000)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--outdir", default=None, help="Write depth histograms here (requires matplotlib)")
    args = ap.parse_args()

    data = random_dataset(args.n, args.n, seed=args.seed)
    structures = [QuickUnion(data.total).union_all(data), WeightedQuickUnion(data.total).union_all(data)]

    print(f"==== forest shapes: n={data.total} m={len(data)} lg(n)={math.log2(data.total):.2f} ====")
    for uf in structures:
        print_forest_stats(uf)
        print(f"  max depth = {int(tree_depths(uf).max())}\n")

    if args.outdir:
        from ufalg.plotting import plot_tree_depths

        outdir = Path(args.outdir)
        for uf in structures:
            print("saving:", plot_tree_depths(uf, outdir / f"depths_{type(uf).__name__}.png"))


if __name__ == "__main__":
    main()
