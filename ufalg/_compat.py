"""Small compatibility layer.

The union-find structures are plain NumPy. The batch labeling kernels in
:mod:`ufalg.labels` can run on JAX when it is installed; without JAX the same
code paths run on NumPy (no jit).

Integer dtype
-------------
JAX defaults to 32-bit integers unless x64 is enabled. Site indices fit into
int32 for any realistic problem, so unlike float64 there is nothing to enable
here; ``UFALG_JAX_X64=1`` is honored for users who want int64 labels anyway.
"""

from __future__ import annotations

from typing import Any, Callable, Tuple

import os

import numpy as _np


def _try_import_jax() -> Tuple[Any, Any, Callable[[Callable[..., Any]], Callable[..., Any]]]:
    try:
        import jax
        import jax.numpy as jnp

        if os.environ.get("UFALG_JAX_X64", "0") == "1":
            try:
                jax.config.update("jax_enable_x64", True)
            except Exception:
                pass

        return jax, jnp, jax.jit
    except Exception:
        # numpy fallback: no jit
        return None, _np, (lambda f: f)


jax, jnp, jit = _try_import_jax()


def has_jax() -> bool:
    return jax is not None


def to_numpy(x: Any) -> _np.ndarray:
    """Convert a backend array (JAX or NumPy) to a NumPy array."""
    return _np.asarray(x)
