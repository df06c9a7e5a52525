from __future__ import annotations

import numpy as np

from matweave.exceptions import ShapeMismatch
from matweave.matrix.matrix import Matrix


def to_numpy(mat: Matrix) -> np.ndarray:
    """
    Copy a Matrix into a (rows, columns) float64 numpy array.
    """
    return mat.data.reshape(mat.rows, mat.columns)


def from_numpy(array: np.ndarray) -> Matrix:
    """
    Copy a 2D numpy array into a new Matrix.

    Raises
    ------
    ShapeMismatch
        If the array is not two dimensional
    """
    array = np.asarray(array, dtype=np.float64)
    if array.ndim != 2:
        raise ShapeMismatch(f"Expected a 2D array, got {array.ndim} dimensions")
    return Matrix(array.reshape(-1), array.shape)
