"""
Stateless flat-buffer kernels for transpose and the matrix product.

Design notes
------------
- Kernels operate on row-major float64 buffers plus a few static extents
  and never touch `Matrix` objects.
- Callers validate dimensions before calling in (see `matweave.core.meta`);
  kernels assume the buffers fit the extents they are given.
- Every kernel allocates its output and never writes into an input.
"""

from __future__ import annotations

from typing import List

import numpy as np

from matweave.core.meta import DotMeta


def transpose_buffer(data: np.ndarray, rows: int, cols: int) -> np.ndarray:
    """
    Transpose a `rows` x `cols` row-major buffer into a `cols` x `rows` one.

    Parameters
    ----------
    data : np.ndarray
        Flat row-major buffer of length rows * cols.
    rows : int
        Number of rows of the input.
    cols : int
        Number of columns of the input.

    Returns
    -------
    np.ndarray
        New flat buffer where out[c * rows + r] == data[r * cols + c].
    """
    src = data.tolist()
    out = [0.0] * (rows * cols)
    for y in range(rows):
        for x in range(cols):
            out[y + rows * x] = src[x + cols * y]
    return np.array(out, dtype=np.float64)


def dot_direct(lhs: np.ndarray, rhs: np.ndarray, meta: DotMeta) -> np.ndarray:
    """
    Triple loop over (row, col, idx) reading both operands in place.
    """
    left = lhs.tolist()
    right = rhs.tolist()
    rows, cols, items = meta.rows, meta.cols, meta.items

    out: List[float] = []
    for row in range(rows):
        for col in range(cols):
            acc = 0.0
            for idx in range(items):
                acc += left[row * items + idx] * right[idx * cols + col]
            out.append(acc)
    return np.array(out, dtype=np.float64)


def dot_transposed(lhs: np.ndarray, rhs: np.ndarray, meta: DotMeta) -> np.ndarray:
    """
    Transpose the right operand first so both operands are read along rows.

    Meant to be friendlier to the cache for large operands; it has not
    been measured to beat `dot_direct`.
    """
    left = lhs.tolist()
    right_t = transpose_buffer(rhs, meta.items, meta.cols).tolist()
    rows, cols, items = meta.rows, meta.cols, meta.items

    out: List[float] = []
    for row in range(rows):
        for col in range(cols):
            acc = 0.0
            for idx in range(items):
                acc += left[row * items + idx] * right_t[col * items + idx]
            out.append(acc)
    return np.array(out, dtype=np.float64)


def dot_columns(lhs: np.ndarray, rhs: np.ndarray, meta: DotMeta) -> np.ndarray:
    """
    Split the left operand into row slices, materialise every column of
    the right operand, then take one inner product per output cell.

    The slowest of the three kernels, kept as a baseline.
    """
    rows, cols, items = meta.rows, meta.cols, meta.items
    lhs_rows = [lhs[row * items:(row + 1) * items] for row in range(rows)]
    rhs_cols = [np.array(rhs[col::cols], dtype=np.float64) for col in range(cols)]

    out = np.empty(meta.total_elements, dtype=np.float64)
    pos = 0
    for row_slice in lhs_rows:
        for column in rhs_cols:
            out[pos] = sum(a * b for a, b in zip(row_slice.tolist(), column.tolist()))
            pos += 1
    return out
