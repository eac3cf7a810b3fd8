"""Doubling experiments for the union-find implementations.

Each experiment processes ``n`` random connections on ``n`` sites and doubles
``n`` at every step. For an algorithm whose cost grows like ``N^b`` the ratio
of consecutive running times approaches ``2^b``, so the measured exponent can
be compared against the documented complexities:

- quick-find, quick-union: O(N^2) for N connections, ratio -> 4
- weighted quick-union: close to linear, ratio -> 2
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from .config import make_union_find, resolve_algorithm
from .dataset import random_dataset


@dataclass(frozen=True)
class DoublingResult:
    algorithm: str
    n: np.ndarray        # (steps,) problem sizes
    seconds: np.ndarray  # (steps,) best wall time per size
    ratio: np.ndarray    # (steps,) seconds[k] / seconds[k-1], NaN for k=0


def time_union_find(
    algorithm: str | None,
    n: int,
    m: int | None = None,
    *,
    seed: int | None = None,
    repeat: int = 1,
) -> float:
    """Best wall time (seconds) to process ``m`` random pairs on ``n`` sites."""
    algorithm = resolve_algorithm(algorithm)
    m = int(n) if m is None else int(m)
    data = random_dataset(n, m, seed=seed)
    pairs = [(int(p), int(q)) for p, q in data.pairs]
    best = float("inf")
    for _ in range(max(1, int(repeat))):
        uf = make_union_find(algorithm, n)
        t0 = time.perf_counter()
        for p, q in pairs:
            if not uf.connected(p, q):
                uf.union(p, q)
        best = min(best, time.perf_counter() - t0)
    return best


def run_doubling(
    algorithm: str | None = None,
    *,
    start: int = 250,
    steps: int = 5,
    seed: int | None = 0,
    repeat: int = 1,
    verbose: bool = False,
) -> DoublingResult:
    start = int(start)
    steps = int(steps)
    if start <= 0:
        raise ValueError(f"start must be positive, got {start}")
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    algorithm = resolve_algorithm(algorithm)
    sizes = start * (2 ** np.arange(steps, dtype=np.int64))
    seconds = np.zeros(steps, dtype=float)
    ratio = np.full(steps, np.nan, dtype=float)
    if verbose:
        print(f"==== doubling: {algorithm} ====")
        print(f"{'n':>10s} {'seconds':>12s} {'ratio':>8s}")
    for k, n in enumerate(sizes):
        seed_k = None if seed is None else int(seed) + k
        seconds[k] = time_union_find(algorithm, int(n), seed=seed_k, repeat=repeat)
        if k > 0 and seconds[k - 1] > 0:
            ratio[k] = seconds[k] / seconds[k - 1]
        if verbose:
            r = "-" if np.isnan(ratio[k]) else f"{ratio[k]:.2f}"
            print(f"{int(n):>10d} {seconds[k]:>12.6f} {r:>8s}")
    return DoublingResult(algorithm=algorithm, n=sizes, seconds=seconds, ratio=ratio)


def estimate_exponent(result: DoublingResult) -> float:
    """Slope ``b`` of the least-squares fit ``log T = b log N + c``."""
    n = np.asarray(result.n, dtype=float)
    t = np.asarray(result.seconds, dtype=float)
    ok = (n > 0) & (t > 0)
    if int(np.count_nonzero(ok)) < 2:
        raise ValueError("need at least two positive timings to estimate an exponent")
    slope, _ = np.polyfit(np.log2(n[ok]), np.log2(t[ok]), 1)
    return float(slope)


def save_npz(path: str | Path, **arrays) -> Path:
    """Save arrays into a NumPy `.npz` file and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    np.savez(path, **arrays)
    return path


def save_doubling(path: str | Path, *results: DoublingResult) -> Path:
    """Save one or more doubling results, keys prefixed by algorithm name."""
    arrays = {}
    for res in results:
        key = res.algorithm.replace("-", "_")
        arrays[f"{key}_n"] = res.n
        arrays[f"{key}_seconds"] = res.seconds
        arrays[f"{key}_ratio"] = res.ratio
    return save_npz(path, **arrays)
