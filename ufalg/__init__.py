"""ufalg: union-find (dynamic connectivity) algorithms.

Contains:
- quick-find, quick-union and weighted quick-union (with path compression)
- documented time complexities attached to every operation
- JSON / algs4-text input readers and the connectivity client
- batch component labeling (NumPy, or JAX when installed)
- doubling experiments and diagnostics
"""

from . import api
from .base import UnionFind
from .complexity import Complexity, complexity_table, format_complexity_table, stateful, time_complexity
from .quick_find import QuickFind
from .quick_union import QuickUnion
from .weighted import WeightedQuickUnion
from .config import ALGORITHMS, DEFAULT_ALGORITHM, UFConfig, load_config, make_union_find, resolve_algorithm
from .dataset import (
    Dataset,
    DatasetError,
    dump_json,
    dump_text,
    parse_json,
    parse_text,
    random_dataset,
    read_dataset,
    write_dataset,
)
from .client import ClientRun, run_client
from .labels import component_labels, count_components, labels_from_union_find
from .diagnostics import Summary, component_sizes, print_forest_stats, print_summary, summarize_array, tree_depths
from .benchmark import DoublingResult, estimate_exponent, run_doubling, save_doubling, save_npz, time_union_find

__version__ = "0.1.0"

__all__ = [
    "api",
    "UnionFind",
    "Complexity",
    "complexity_table",
    "format_complexity_table",
    "stateful",
    "time_complexity",
    "QuickFind",
    "QuickUnion",
    "WeightedQuickUnion",
    "ALGORITHMS",
    "DEFAULT_ALGORITHM",
    "UFConfig",
    "load_config",
    "make_union_find",
    "resolve_algorithm",
    "Dataset",
    "DatasetError",
    "dump_json",
    "dump_text",
    "parse_json",
    "parse_text",
    "random_dataset",
    "read_dataset",
    "write_dataset",
    "ClientRun",
    "run_client",
    "component_labels",
    "count_components",
    "labels_from_union_find",
    "Summary",
    "component_sizes",
    "print_forest_stats",
    "print_summary",
    "summarize_array",
    "tree_depths",
    "DoublingResult",
    "estimate_exponent",
    "run_doubling",
    "save_doubling",
    "save_npz",
    "time_union_find",
]
