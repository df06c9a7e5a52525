"""
numba-compiled versions of the loop kernels.

These mirror `matweave.core.kernels` one to one and are selected when
`Config().use_jit` is enabled. Compilation happens on first call.
"""

from __future__ import annotations

import numpy as np
from numba import njit

from matweave.core.meta import DotMeta


@njit(cache=False)
def _transpose(data, rows, cols):
    out = np.empty(rows * cols, dtype=np.float64)
    for y in range(rows):
        for x in range(cols):
            out[y + rows * x] = data[x + cols * y]
    return out


@njit(cache=False)
def _dot_direct(lhs, rhs, rows, cols, items):
    out = np.empty(rows * cols, dtype=np.float64)
    for row in range(rows):
        for col in range(cols):
            acc = 0.0
            for idx in range(items):
                acc += lhs[row * items + idx] * rhs[idx * cols + col]
            out[row * cols + col] = acc
    return out


@njit(cache=False)
def _dot_transposed(lhs, rhs, rows, cols, items):
    rhs_t = _transpose(rhs, items, cols)
    out = np.empty(rows * cols, dtype=np.float64)
    for row in range(rows):
        for col in range(cols):
            acc = 0.0
            for idx in range(items):
                acc += lhs[row * items + idx] * rhs_t[col * items + idx]
            out[row * cols + col] = acc
    return out


def transpose_buffer(data: np.ndarray, rows: int, cols: int) -> np.ndarray:
    return _transpose(np.ascontiguousarray(data, dtype=np.float64), rows, cols)


def dot_direct(lhs: np.ndarray, rhs: np.ndarray, meta: DotMeta) -> np.ndarray:
    return _dot_direct(
        np.ascontiguousarray(lhs, dtype=np.float64),
        np.ascontiguousarray(rhs, dtype=np.float64),
        meta.rows,
        meta.cols,
        meta.items,
    )


def dot_transposed(lhs: np.ndarray, rhs: np.ndarray, meta: DotMeta) -> np.ndarray:
    return _dot_transposed(
        np.ascontiguousarray(lhs, dtype=np.float64),
        np.ascontiguousarray(rhs, dtype=np.float64),
        meta.rows,
        meta.cols,
        meta.items,
    )
