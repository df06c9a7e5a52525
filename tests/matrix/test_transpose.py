import pytest

from matweave.core.rng import NormalSampler
from matweave.matrix.matrix import Matrix
from matweave.matrix.shape import Shape
from matweave.matrix.transpose import transpose
from matweave.matweave import Session


def test_transpose_swaps_rows_and_columns():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    t = transpose(m)
    assert t.shape == Shape(3, 2)
    assert t.to_rows() == [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]]
    for r in range(m.rows):
        for c in range(m.columns):
            assert t[c, r] == m[r, c]


@pytest.mark.parametrize("use_jit", [False, True])
@pytest.mark.parametrize("shape", [(1, 1), (1, 7), (7, 1), (4, 9), (6, 6)])
def test_double_transpose_is_exact(use_jit, shape):
    m = Matrix.random(shape, sampler=NormalSampler.from_seed(sum(shape)))
    with Session(use_jit=use_jit):
        assert transpose(transpose(m)) == m


def test_transpose_does_not_alias_input():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    t = m.T
    t.resample_in_place(NormalSampler.from_seed(0))
    assert m.to_rows() == [[1.0, 2.0], [3.0, 4.0]]
    assert m.transpose() == transpose(m)


def test_transpose_of_vector():
    row = Matrix([1.0, 2.0, 3.0], (1, 3))
    assert transpose(row) == Matrix([1.0, 2.0, 3.0], (3, 1))
