from __future__ import annotations

import jax
import jax.numpy as jnp
import numpy as np

from matweave.exceptions import ShapeMismatch
from matweave.matrix.matrix import Matrix


def to_jax(mat: Matrix) -> jnp.ndarray:
    """
    Copy a Matrix into a (rows, columns) float64 jax array.
    """
    return jnp.asarray(mat.data.reshape(mat.rows, mat.columns), dtype=jnp.float64)

def from_jax(array: jnp.ndarray) -> Matrix:
    """
    Copy a 2D jax array into a new Matrix.
    """
    if array.ndim != 2:
        raise ShapeMismatch(f"Expected a 2D array, got {array.ndim} dimensions")
    host = np.asarray(jax.device_get(array), dtype=np.float64)
    return Matrix(host.reshape(-1), host.shape)
