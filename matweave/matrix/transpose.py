"""
Transpose of a matrix.
"""

from __future__ import annotations

from matweave.core import jitted, kernels
from matweave.matrix.matrix import Matrix
from matweave.matweave import Config


def transpose(mat: Matrix) -> Matrix:
    """
    Returns a new matrix with rows and columns swapped, ``out[c, r] == mat[r, c]``.

    The input buffer is copied, never shared, and no arithmetic is done, so
    transposing twice reproduces the original values exactly.
    """
    rows, cols = mat.rows, mat.columns
    if Config().use_jit:
        buffer = jitted.transpose_buffer(mat._data, rows, cols)
    else:
        buffer = kernels.transpose_buffer(mat._data, rows, cols)
    return Matrix._from_buffer(buffer, mat.shape.transposed())
