import unittest

import numpy as np
import pytest

from matweave.core.rng import NormalSampler
from matweave.exceptions import DimensionIncompatibility
from matweave.matrix import arithmetic
from matweave.matrix.matrix import Matrix


def _grid() -> Matrix:
    return Matrix([0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0], (3, 3))


class TestScalarArithmetic(unittest.TestCase):
    def test_add_float(self) -> None:
        m = Matrix.zeros((3, 3))
        m = m + 1.0
        m = 2.0 + m
        self.assertEqual(m.to_list(), [3.0] * 9)

    def test_add_scalar_is_commutative(self) -> None:
        m = Matrix.random((4, 3), sampler=NormalSampler.from_seed(1))
        self.assertEqual(arithmetic.add_scalar(m, 0.25), arithmetic.add_scalar(0.25, m))

    def test_add_scalar_needs_one_matrix(self) -> None:
        with self.assertRaises(TypeError):
            arithmetic.add_scalar(1.0, 2.0)  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            arithmetic.add_scalar(_grid(), _grid())

    def test_sub_float(self) -> None:
        m = _grid() - 1.0
        self.assertEqual(m.to_list(), [-1.0, 0.0, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0])

    def test_add_then_sub_recovers_matrix(self) -> None:
        m = Matrix.random((5, 4), sampler=NormalSampler.from_seed(9))
        for scalar in (0.0, 1e-3, -7.5, 1234.5678):
            back = arithmetic.sub_scalar(arithmetic.add_scalar(m, scalar), scalar)
            self.assertTrue(back.allclose(m, rtol=1e-9, atol=1e-9))

    def test_mul_and_div(self) -> None:
        m = _grid()
        self.assertEqual((m * 2.0).to_list(), [2.0 * v for v in m.to_list()])
        self.assertEqual((3 * m).to_list(), [3.0 * v for v in m.to_list()])
        self.assertEqual((m / 2.0).to_list(), [v / 2.0 for v in m.to_list()])
        self.assertEqual((-m).to_list(), [-v for v in m.to_list()])
        with self.assertRaises(ZeroDivisionError):
            arithmetic.div_scalar(m, 0)

    def test_numpy_scalars(self) -> None:
        m = _grid()
        self.assertEqual(np.float64(1.0) + m, m + 1.0)
        self.assertEqual(m - np.float64(1.0), m - 1.0)

    def test_scalar_ops_keep_shape_and_inputs(self) -> None:
        m = Matrix([1.0, 2.0], (2, 1))
        out = m + 5.0
        self.assertEqual(out.shape, m.shape)
        self.assertEqual(m.to_list(), [1.0, 2.0])


def test_add_matrix():
    out = arithmetic.add_matrix(_grid(), _grid())
    assert out.to_list() == [0.0, 2.0, 4.0, 6.0, 8.0, 10.0, 12.0, 14.0, 16.0]
    assert (_grid() + _grid()) == out


def test_add_matrix_is_commutative():
    a = Matrix.random((3, 5), sampler=NormalSampler.from_seed(1))
    b = Matrix.random((3, 5), sampler=NormalSampler.from_seed(2))
    assert arithmetic.add_matrix(a, b) == arithmetic.add_matrix(b, a)


def test_sub_matrix():
    a = Matrix.random((3, 2), sampler=NormalSampler.from_seed(4))
    assert (a - a).to_list() == [0.0] * 6
    b = Matrix([1.0] * 6, (3, 2))
    assert (a - b).allclose(a + (-1.0))


@pytest.mark.parametrize(
    "lhs_shape, rhs_shape",
    [
        ((1, 2), (2, 3)),
        ((2, 2), (2, 3)),  # same rows, different columns
        ((2, 3), (3, 3)),  # same columns, different rows
        ((2, 3), (3, 2)),
    ],
)
def test_elementwise_ops_reject_unequal_shapes(lhs_shape, rhs_shape):
    lhs = Matrix.zeros(lhs_shape)
    rhs = Matrix.zeros(rhs_shape)
    with pytest.raises(DimensionIncompatibility):
        arithmetic.add_matrix(lhs, rhs)
    with pytest.raises(DimensionIncompatibility):
        lhs + rhs
    with pytest.raises(DimensionIncompatibility):
        arithmetic.sub_matrix(lhs, rhs)


def test_unsupported_operands():
    m = _grid()
    with pytest.raises(TypeError):
        m + "1"
    with pytest.raises(TypeError):
        m * m
    with pytest.raises(TypeError):
        1.0 - m
