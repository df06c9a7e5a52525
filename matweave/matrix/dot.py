"""
Matrix product with interchangeable strategies.

All strategies compute ``out[i, j] = sum_t lhs[i, t] * rhs[t, j]`` and differ
only in how they walk the operands:

- ``DotStrategy.DIRECT``: triple loop reading both operands in place, no
  intermediate allocation.
- ``DotStrategy.TRANSPOSED``: transposes the right operand first so both
  operands are read along rows. Not measurably faster than DIRECT so far.
- ``DotStrategy.COLUMNS``: materialises every column of the right operand
  and takes row/column inner products. The slowest one, kept as a baseline.

Summation order differs between strategies, so results agree within
floating point tolerance but are not guaranteed to be bit-identical.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Union

import numpy as np

from matweave.core import jitted, kernels
from matweave.core.meta import DotMeta, DotStrategy, make_meta
from matweave.exceptions import DimensionIncompatibility
from matweave.matrix.matrix import Matrix
from matweave.matrix.shape import Shape
from matweave.matweave import Config

logger = logging.getLogger(__name__)

Kernel = Callable[[np.ndarray, np.ndarray, DotMeta], np.ndarray]

_KERNELS: Dict[DotStrategy, Kernel] = {
    DotStrategy.DIRECT: kernels.dot_direct,
    DotStrategy.TRANSPOSED: kernels.dot_transposed,
    DotStrategy.COLUMNS: kernels.dot_columns,
}

# The column kernel works on materialised vectors and has no compiled form
_JIT_KERNELS: Dict[DotStrategy, Kernel] = {
    DotStrategy.DIRECT: jitted.dot_direct,
    DotStrategy.TRANSPOSED: jitted.dot_transposed,
}


def product_meta(lhs: Matrix, rhs: Matrix) -> DotMeta:
    """
    Validate two operands for multiplication.

    Raises
    ------
    DimensionIncompatibility
        If ``lhs.columns != rhs.rows``
    """
    meta = make_meta(lhs.shape.as_tuple(), rhs.shape.as_tuple())
    if meta is None:
        raise DimensionIncompatibility(
            f"Cannot multiply {lhs.rows}x{lhs.columns} by {rhs.rows}x{rhs.columns}: "
            f"inner dimensions {lhs.columns} and {rhs.rows} differ"
        )
    return meta


def select_kernel(strategy: DotStrategy, use_jit: bool = False) -> Kernel:
    if use_jit and strategy in _JIT_KERNELS:
        return _JIT_KERNELS[strategy]
    return _KERNELS[strategy]


def dot(
    lhs: Matrix,
    rhs: Matrix,
    strategy: Union[DotStrategy, str, None] = None,
) -> Matrix:
    """
    Matrix product of `lhs` (m, k) and `rhs` (k, n), shaped (m, n).

    Parameters
    ----------
    lhs: Matrix
        Left operand
    rhs: Matrix
        Right operand
    strategy: DotStrategy | str | None
        Strategy to use, `Config().dot_strategy` when omitted

    Returns
    -------
    Matrix
        New matrix holding the product

    Raises
    ------
    DimensionIncompatibility
        If the inner dimensions disagree, whatever the strategy
    """
    strategy = Config().dot_strategy if strategy is None else DotStrategy(strategy)
    meta = product_meta(lhs, rhs)
    use_jit = Config().use_jit
    logger.debug(
        "dot %s x %s with %s strategy (jit=%s)",
        lhs.shape, rhs.shape, strategy.value, use_jit,
    )
    buffer = select_kernel(strategy, use_jit)(lhs._data, rhs._data, meta)
    return Matrix._from_buffer(buffer, Shape(meta.rows, meta.cols))


def dot_direct(lhs: Matrix, rhs: Matrix) -> Matrix:
    return dot(lhs, rhs, DotStrategy.DIRECT)


def dot_transposed(lhs: Matrix, rhs: Matrix) -> Matrix:
    return dot(lhs, rhs, DotStrategy.TRANSPOSED)


def dot_columns(lhs: Matrix, rhs: Matrix) -> Matrix:
    return dot(lhs, rhs, DotStrategy.COLUMNS)
