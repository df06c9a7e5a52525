"""
Reference operations backed by jax, used to cross-check the loop kernels.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
import numpy as np
import opt_einsum as oe

jax.config.update("jax_enable_x64", True)


def reference_dot(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    """
    Matrix product of two 2D arrays computed by opt_einsum on the jax backend.

    Parameters
    ----------
    lhs : np.ndarray
        Left operand shaped (m, k)
    rhs : np.ndarray
        Right operand shaped (k, n)

    Returns
    -------
    np.ndarray
        Product shaped (m, n), float64
    """
    out = oe.contract(
        "ij,jk->ik",
        jnp.asarray(lhs, dtype=jnp.float64),
        jnp.asarray(rhs, dtype=jnp.float64),
        backend="jax",
    )
    return np.asarray(out, dtype=np.float64)


def reference_transpose(mat: np.ndarray) -> np.ndarray:
    return np.asarray(jnp.transpose(jnp.asarray(mat, dtype=jnp.float64)))


__all__ = ["reference_dot", "reference_transpose"]
