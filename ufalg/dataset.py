"""Readers and writers for union-find input files.

Two formats are supported:

- **JSON**, as used by the bundled test fixtures::

      {"total": 10, "data": [{"p": 4, "q": 3}, {"p": 3, "q": 8}]}

  Unknown keys are ignored.

- **algs4 text** (``tinyUF.txt`` and friends): the number of sites followed by
  whitespace-separated pairs::

      10
      4 3
      3 8

Both parse into a :class:`Dataset`. No third-party dependency beyond NumPy.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Tuple

import numpy as np


FORMATS = ("json", "text")


class DatasetError(ValueError):
    """Raised for malformed union-find input."""


@dataclass(frozen=True)
class Dataset:
    total: int
    pairs: np.ndarray  # (k, 2) int

    def __len__(self) -> int:
        return int(self.pairs.shape[0])

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for p, q in self.pairs:
            yield int(p), int(q)


def _as_int(value: Any, what: str) -> int:
    # bool is an int subclass; JSON true/false must not pass as 1/0
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise DatasetError(f"{what} must be an integer, got {value!r}")
    return int(value)


def make_dataset(total: Any, pairs: Any) -> Dataset:
    """Validate ``total`` and ``pairs`` and build a :class:`Dataset`."""
    total = _as_int(total, "total")
    if total <= 0:
        raise DatasetError(f"total must be positive, got {total}")
    try:
        arr = np.array(pairs, dtype=np.intp) if len(pairs) else np.zeros((0, 2), dtype=np.intp)
    except OverflowError as e:
        raise DatasetError(f"pairs contain a site out of range for total={total}") from e
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise DatasetError(f"pairs must have shape (k, 2), got {arr.shape}")
    bad = (arr < 0) | (arr >= total)
    if bad.any():
        row = int(np.argwhere(bad)[0][0])
        p, q = (int(v) for v in arr[row])
        raise DatasetError(f"pair #{row} ({p}, {q}) is out of bounds for total={total}")
    arr.setflags(write=False)
    return Dataset(total=total, pairs=arr)


def parse_json(text: str) -> Dataset:
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise DatasetError(f"invalid JSON: {e}") from e
    if not isinstance(doc, dict):
        raise DatasetError("JSON dataset must be an object with 'total' and 'data'")
    if "total" not in doc:
        raise DatasetError("JSON dataset is missing 'total'")
    data = doc.get("data", [])
    if not isinstance(data, list):
        raise DatasetError("'data' must be a list of {'p': int, 'q': int} objects")

    pairs = []
    for k, item in enumerate(data):
        if not isinstance(item, dict) or "p" not in item or "q" not in item:
            raise DatasetError(f"data[{k}] must be an object with 'p' and 'q'")
        pairs.append((_as_int(item["p"], f"data[{k}].p"), _as_int(item["q"], f"data[{k}].q")))
    return make_dataset(doc["total"], pairs)


_INT_RE = re.compile(r"[+-]?\d+")


def parse_text(text: str) -> Dataset:
    tokens = text.split()
    if not tokens:
        raise DatasetError("empty input: expected the number of sites")
    for tok in tokens:
        if not _INT_RE.fullmatch(tok):
            raise DatasetError(f"expected an integer, got {tok!r}")
    values = [int(tok) for tok in tokens]
    total, rest = values[0], values[1:]
    if len(rest) % 2 != 0:
        raise DatasetError(f"odd number of site tokens ({len(rest)}): last pair is incomplete")
    pairs = [(rest[i], rest[i + 1]) for i in range(0, len(rest), 2)]
    return make_dataset(total, pairs)


def detect_format(path: str | Path | None, text: str) -> str:
    if path is not None and Path(path).suffix.lower() == ".json":
        return "json"
    return "json" if text.lstrip().startswith("{") else "text"


def parse_dataset(text: str, fmt: str | None = None, *, path: str | Path | None = None) -> Dataset:
    fmt = fmt or detect_format(path, text)
    if fmt == "json":
        return parse_json(text)
    if fmt == "text":
        return parse_text(text)
    raise ValueError(f"unknown dataset format {fmt!r}; expected one of {FORMATS}")


def read_dataset(path: str | Path, fmt: str | None = None) -> Dataset:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"dataset file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DatasetError(f"{path}: not valid UTF-8 text") from e
    return parse_dataset(text, fmt, path=path)


def dump_json(dataset: Dataset, *, indent: int | None = 2) -> str:
    doc = {
        "total": int(dataset.total),
        "data": [{"p": p, "q": q} for p, q in dataset],
    }
    return json.dumps(doc, indent=indent)


def dump_text(dataset: Dataset) -> str:
    lines = [str(int(dataset.total))]
    lines.extend(f"{p} {q}" for p, q in dataset)
    return "\n".join(lines) + "\n"


def write_dataset(path: str | Path, dataset: Dataset, fmt: str | None = None) -> Path:
    path = Path(path)
    if fmt is None:
        fmt = "json" if path.suffix.lower() == ".json" else "text"
    if fmt == "json":
        text = dump_json(dataset) + "\n"
    elif fmt == "text":
        text = dump_text(dataset)
    else:
        raise ValueError(f"unknown dataset format {fmt!r}; expected one of {FORMATS}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def random_dataset(n: int, m: int, seed: int | None = None) -> Dataset:
    """Return ``m`` uniformly random pairs over ``n`` sites."""
    n = int(n)
    m = int(m)
    if m < 0:
        raise ValueError(f"m must be non-negative, got {m}")
    rng = np.random.default_rng(seed)
    pairs = rng.integers(0, n, size=(m, 2)) if n > 0 else np.zeros((0, 2), dtype=np.intp)
    return make_dataset(n, pairs)
