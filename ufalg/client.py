"""Dynamic-connectivity client (the ``ufalg`` application entry point).

Reads the number of sites and a sequence of pairs. For every pair that is not
yet connected, it connects the two sites and prints the pair; pairs that are
already connected are skipped. At the end it prints the number of components::

    $ ufalg examples/data/tinyUF.txt
    4 3
    3 8
    ...
    2 components
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .base import UnionFind
from .config import ALGORITHMS, ALIASES, UFConfig, config_from_dataset, make_union_find, resolve_algorithm
from .dataset import FORMATS, Dataset, DatasetError, parse_dataset, read_dataset


@dataclass(frozen=True)
class ClientRun:
    """Container returned by :func:`run_client`."""

    cfg: UFConfig
    uf: UnionFind
    connections: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return self.uf.count()


def run_client(
    dataset: Dataset,
    algorithm: str | None = None,
    *,
    echo: Optional[Callable[[str], None]] = None,
) -> ClientRun:
    """Process ``dataset`` pair by pair and record the connections that merged components."""
    cfg = config_from_dataset(dataset, algorithm)
    uf = make_union_find(cfg)
    connections: List[Tuple[int, int]] = []
    for p, q in dataset:
        if uf.connected(p, q):
            continue
        uf.union(p, q)
        connections.append((p, q))
        if echo is not None:
            echo(f"{p} {q}")
    return ClientRun(cfg=cfg, uf=uf, connections=connections)


def _algorithm_arg(value: str) -> str:
    try:
        return resolve_algorithm(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="ufalg",
        description="Dynamic connectivity client: print each new connection and the final component count.",
    )
    ap.add_argument("input", help="Input file (JSON or algs4 text), or '-' for stdin")
    ap.add_argument(
        "-a",
        "--algorithm",
        default=None,
        type=_algorithm_arg,
        metavar="{" + ",".join(sorted(ALGORITHMS) + sorted(ALIASES)) + "}",
        help="Union-find implementation (default: $UFALG_ALGORITHM or weighted-quick-union)",
    )
    ap.add_argument("--format", dest="fmt", choices=FORMATS, default=None, help="Input format (default: auto)")
    ap.add_argument("--quiet", action="store_true", help="Do not print the individual connections")
    ap.add_argument("--groups", action="store_true", help="Print the members of every component")
    ap.add_argument("--verbose", action="store_true", help="Print forest statistics and complexity records")
    ap.add_argument("--out", default=None, help="Save labels and parent forest to this .npz file")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    try:
        if args.input == "-":
            dataset = parse_dataset(sys.stdin.read(), args.fmt)
        else:
            dataset = read_dataset(args.input, args.fmt)
    except FileNotFoundError:
        ap.error(f"input file not found: {args.input}")
    except OSError as e:
        ap.error(f"cannot read {args.input}: {e.strerror or e}")
    except DatasetError as e:
        ap.error(f"invalid dataset {args.input}: {e}")

    run = run_client(dataset, args.algorithm, echo=None if args.quiet else print)
    print(f"{run.count} components")

    if args.groups:
        for k, members in enumerate(run.uf.groups()):
            print(f"  [{k}] " + " ".join(str(s) for s in members))

    if args.verbose:
        from .diagnostics import print_forest_stats

        print(f"\n==== ufalg: {run.cfg.algorithm} n={run.cfg.n} pairs={len(dataset)} ====")
        print(f"connections={len(run.connections)} skipped={len(dataset) - len(run.connections)}")
        print_forest_stats(run.uf, indent="", complexity=True)

    if args.out:
        from .benchmark import save_npz
        from .labels import labels_from_union_find

        path = save_npz(
            Path(args.out),
            labels=labels_from_union_find(run.uf),
            forest=run.uf.forest(),
            connections=np.asarray(run.connections, dtype=np.intp).reshape(-1, 2),
        )
        print("saving:", path)
    return 0
