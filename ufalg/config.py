"""Run configuration: which union-find implementation processes which input.

The algorithm defaults to weighted quick-union. ``UFALG_ALGORITHM`` overrides
the default for scripts that do not pass one explicitly.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Type

from .base import UnionFind
from .dataset import Dataset, FORMATS, read_dataset
from .quick_find import QuickFind
from .quick_union import QuickUnion
from .weighted import WeightedQuickUnion


ALGORITHMS: Dict[str, Type[UnionFind]] = {
    "quick-find": QuickFind,
    "quick-union": QuickUnion,
    "weighted-quick-union": WeightedQuickUnion,
}

ALIASES: Dict[str, str] = {
    "qf": "quick-find",
    "qu": "quick-union",
    "wqu": "weighted-quick-union",
    "weighted": "weighted-quick-union",
}

DEFAULT_ALGORITHM = "weighted-quick-union"
ENV_ALGORITHM = "UFALG_ALGORITHM"


def resolve_algorithm(name: str | None = None) -> str:
    """Return the canonical algorithm name for ``name`` (or the default)."""
    if name is None:
        name = os.environ.get(ENV_ALGORITHM) or DEFAULT_ALGORITHM
    key = str(name).strip().lower().replace("_", "-")
    key = ALIASES.get(key, key)
    if key not in ALGORITHMS:
        choices = ", ".join(sorted(ALGORITHMS) + sorted(ALIASES))
        raise ValueError(f"unknown union-find algorithm {name!r}; choose one of: {choices}")
    return key


@dataclass(frozen=True)
class UFConfig:
    algorithm: str
    n: int
    fmt: str | None = None

    @property
    def cls(self) -> Type[UnionFind]:
        return ALGORITHMS[self.algorithm]


def config_from_dataset(dataset: Dataset, algorithm: str | None = None, fmt: str | None = None) -> UFConfig:
    if fmt is not None and fmt not in FORMATS:
        raise ValueError(f"unknown dataset format {fmt!r}; expected one of {FORMATS}")
    return UFConfig(algorithm=resolve_algorithm(algorithm), n=int(dataset.total), fmt=fmt)


def load_config(
    path: str | Path,
    algorithm: str | None = None,
    fmt: str | None = None,
) -> tuple[UFConfig, Dataset]:
    dataset = read_dataset(path, fmt)
    cfg = config_from_dataset(dataset, algorithm, fmt)
    return cfg, dataset


def make_union_find(cfg: UFConfig | str | None = None, n: int | None = None) -> UnionFind:
    """Instantiate a union-find from a config, or from an algorithm name and ``n``."""
    if isinstance(cfg, UFConfig):
        if n is not None and int(n) != cfg.n:
            raise ValueError(f"n={n} conflicts with config n={cfg.n}")
        return cfg.cls(cfg.n)
    if n is None:
        raise ValueError("n is required when no UFConfig is given")
    return ALGORITHMS[resolve_algorithm(cfg)](n)
