"""Pytest configuration.

Allows running tests directly from the repo without requiring an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import os


_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


def require_slow() -> None:
    """Skip timing tests unless RUN_SLOW=1 is set."""
    if os.environ.get("RUN_SLOW", "") != "1":
        pytest.skip("Set RUN_SLOW=1 to run slow timing tests")


@pytest.fixture(scope="session")
def data_dir() -> Path:
    return _ROOT / "examples" / "data"


@pytest.fixture(scope="session")
def tiny_uf(data_dir):
    """The bundled tinyUF dataset (10 sites, 11 pairs, 2 components)."""
    from ufalg.dataset import read_dataset

    data = read_dataset(data_dir / "tinyUF.json")
    assert data.total == 10
    assert len(data) == 11
    return data


@pytest.fixture(params=["quick-find", "quick-union", "weighted-quick-union"])
def algorithm(request) -> str:
    return request.param


@pytest.fixture(autouse=True)
def _no_algorithm_env(monkeypatch):
    monkeypatch.delenv("UFALG_ALGORITHM", raising=False)
