import numpy as np
import pytest

from matweave.core import jitted, kernels
from matweave.core.meta import DotMeta, DotStrategy, make_meta
from matweave.core.ops import reference_dot, reference_transpose

LHS = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
RHS = np.array([7.0, 8.0, 9.0, 10.0, 11.0, 12.0])
META = DotMeta(rows=2, cols=2, items=3)
EXPECTED = [58.0, 64.0, 139.0, 154.0]


def test_make_meta():
    assert make_meta((2, 3), (3, 4)) == DotMeta(rows=2, cols=4, items=3)
    assert make_meta((2, 3), (2, 3)) is None
    assert DotMeta(rows=2, cols=4, items=3).total_elements == 8


def test_strategy_values():
    assert DotStrategy("direct") is DotStrategy.DIRECT
    assert DotStrategy("transposed") is DotStrategy.TRANSPOSED
    assert DotStrategy("columns") is DotStrategy.COLUMNS


@pytest.mark.parametrize(
    "kernel",
    [
        kernels.dot_direct,
        kernels.dot_transposed,
        kernels.dot_columns,
        jitted.dot_direct,
        jitted.dot_transposed,
    ],
)
def test_dot_kernels_concrete_case(kernel):
    out = kernel(LHS, RHS, META)
    assert out.dtype == np.float64
    assert out.tolist() == EXPECTED


@pytest.mark.parametrize(
    "kernel",
    [
        kernels.dot_direct,
        kernels.dot_transposed,
        kernels.dot_columns,
        jitted.dot_direct,
        jitted.dot_transposed,
    ],
)
def test_dot_kernels_do_not_write_inputs(kernel):
    lhs = LHS.copy()
    rhs = RHS.copy()
    kernel(lhs, rhs, META)
    assert np.array_equal(lhs, LHS)
    assert np.array_equal(rhs, RHS)


@pytest.mark.parametrize("transpose", [kernels.transpose_buffer, jitted.transpose_buffer])
def test_transpose_buffer(transpose):
    out = transpose(LHS, 2, 3)
    assert out.tolist() == [1.0, 4.0, 2.0, 5.0, 3.0, 6.0]
    assert out is not LHS


def test_kernels_match_reference():
    rng = np.random.default_rng(0)
    lhs = rng.normal(size=(5, 7))
    rhs = rng.normal(size=(7, 3))
    meta = make_meta(lhs.shape, rhs.shape)
    expected = reference_dot(lhs, rhs).reshape(-1)
    for kernel in (kernels.dot_direct, kernels.dot_transposed, kernels.dot_columns):
        out = kernel(lhs.reshape(-1), rhs.reshape(-1), meta)
        assert np.allclose(out, expected, rtol=1e-9, atol=1e-12)


def test_reference_transpose():
    mat = np.arange(6.0).reshape(2, 3)
    assert np.array_equal(reference_transpose(mat), mat.T)
