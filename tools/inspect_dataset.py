#!/usr/bin/env python
"""Print a compact summary of a union-find input file.

Handy for checking a dataset before running the client, or for converting
between the JSON and algs4 text formats.

Usage
-----
    python tools/inspect_dataset.py path/to/tinyUF.txt
    python tools/inspect_dataset.py path/to/tinyUF.txt --convert out.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np

# Allow running without installing: add repo root to sys.path
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("path", type=str, help="Path to a JSON or algs4 text dataset")
    ap.add_argument("--format", dest="fmt", choices=("json", "text"), default=None)
    ap.add_argument("--max", type=int, default=20, help="Max pairs to show")
    ap.add_argument("--convert", type=str, default=None, help="Write the dataset to this path (format from suffix)")
    args = ap.parse_args()

    from ufalg.dataset import DatasetError, read_dataset, write_dataset
    from ufalg.diagnostics import print_summary, summarize_array
    from ufalg.labels import count_components

    p = Path(args.path)
    if not p.exists():
        raise SystemExit(f"error: dataset file not found: {p.resolve()}")
    try:
        data = read_dataset(p, args.fmt)
    except DatasetError as e:
        raise SystemExit(f"error: {e}")

    print(f"==== inspect_dataset: {args.path} ====")
    print(f"total={data.total} pairs={len(data)}")
    if len(data):
        degree = np.bincount(data.pairs.reshape(-1), minlength=data.total)
        print_summary(summarize_array("degree", degree), indent="")
        self_loops = int(np.count_nonzero(data.pairs[:, 0] == data.pairs[:, 1]))
        print(f"self_loops={self_loops}")
    print(f"components={count_components(data.total, data.pairs)}")
    for p_, q_ in list(data)[: args.max]:
        print(f"  {p_} {q_}")
    if len(data) > args.max:
        print(f"  ... ({len(data) - args.max} more)")

    if args.convert:
        print("saving:", write_dataset(args.convert, data))
    print("done")


if __name__ == "__main__":
    main()
