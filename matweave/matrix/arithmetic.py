"""
Elementwise arithmetic between matrices and scalars.

Scalar operations apply to every cell and keep the operand's shape.
Matrix-matrix operations require both shapes to be exactly equal.
Every function returns a new Matrix.

Subtraction of two matrices is provided with the same shape contract as
addition. Subtracting a matrix from a scalar is not provided.
"""

from __future__ import annotations

from numbers import Real
from typing import Union

import numpy as np

from matweave.exceptions import DimensionIncompatibility
from matweave.matrix.matrix import Matrix


def _check_same_shape(lhs: Matrix, rhs: Matrix, op: str) -> None:
    if lhs.shape != rhs.shape:
        raise DimensionIncompatibility(
            f"Cannot {op} matrices of shape {lhs.shape.as_tuple()} "
            f"and {rhs.shape.as_tuple()}"
        )


def add_scalar(lhs: Union[Matrix, Real], rhs: Union[Matrix, Real]) -> Matrix:
    """
    Add a scalar to every cell. Accepts the scalar on either side:
    ``add_scalar(m, s)`` and ``add_scalar(s, m)`` give the same result.
    """
    if isinstance(lhs, Matrix) and not isinstance(rhs, Matrix):
        mat, scalar = lhs, rhs
    elif isinstance(rhs, Matrix) and not isinstance(lhs, Matrix):
        mat, scalar = rhs, lhs
    else:
        raise TypeError("add_scalar expects exactly one Matrix and one scalar")
    return Matrix._from_buffer(mat._data + float(scalar), mat.shape)


def sub_scalar(mat: Matrix, scalar: Real) -> Matrix:
    return Matrix._from_buffer(mat._data - float(scalar), mat.shape)


def mul_scalar(mat: Matrix, scalar: Real) -> Matrix:
    return Matrix._from_buffer(mat._data * float(scalar), mat.shape)


def div_scalar(mat: Matrix, scalar: Real) -> Matrix:
    """
    Divide every cell by a scalar.

    Raises
    ------
    ZeroDivisionError
        If `scalar` is zero
    """
    if scalar == 0:
        raise ZeroDivisionError("Cannot divide a matrix by zero")
    return Matrix._from_buffer(mat._data / float(scalar), mat.shape)


def add_matrix(lhs: Matrix, rhs: Matrix) -> Matrix:
    _check_same_shape(lhs, rhs, "add")
    return Matrix._from_buffer(np.add(lhs._data, rhs._data), lhs.shape)


def sub_matrix(lhs: Matrix, rhs: Matrix) -> Matrix:
    _check_same_shape(lhs, rhs, "subtract")
    return Matrix._from_buffer(np.subtract(lhs._data, rhs._data), lhs.shape)


__all__ = [
    "add_scalar",
    "sub_scalar",
    "mul_scalar",
    "div_scalar",
    "add_matrix",
    "sub_matrix",
]
