"""Public, user-facing API for ufalg.

This module re-exports a small set of names that cover the common workflows:
- Structures: the three union-find implementations
- I/O: read input files, run the connectivity client
- Batch: vectorized component labels
- Timing: doubling experiments

Advanced users can import lower-level helpers directly from submodules.
"""

from __future__ import annotations

from .client import ClientRun, run_client
from .config import load_config, make_union_find
from .dataset import Dataset, random_dataset, read_dataset, write_dataset
from .labels import component_labels, count_components
from .benchmark import estimate_exponent, run_doubling
from .quick_find import QuickFind
from .quick_union import QuickUnion
from .weighted import WeightedQuickUnion

__all__ = [
    # Structures
    "QuickFind",
    "QuickUnion",
    "WeightedQuickUnion",
    "make_union_find",
    # I/O / client
    "Dataset",
    "read_dataset",
    "write_dataset",
    "random_dataset",
    "load_config",
    "ClientRun",
    "run_client",
    # Batch labeling
    "component_labels",
    "count_components",
    # Timing
    "run_doubling",
    "estimate_exponent",
]
