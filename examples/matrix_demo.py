"""
An example, building a few matrices with matweave and printing them
"""

import os

os.environ.setdefault("JAX_PLATFORMS", "cpu")

from matweave import DotStrategy, Matrix, NormalSampler, dot, transpose
from matweave.logging import setup_logging


def main() -> None:
    setup_logging()

    row = Matrix([1.0, 2.0, 3.0, 4.0, 5.0, 6.0], (1, 6))
    print(repr(row))

    lhs = Matrix.from_rows([[1, 2, 3], [4, 5, 6]])
    rhs = Matrix.from_rows([[7, 8], [9, 10], [11, 12]])
    for strategy in DotStrategy:
        print(f"{strategy.value}:")
        print(dot(lhs, rhs, strategy))

    print(transpose(lhs))

    sampler = NormalSampler.from_seed(2024)
    weights = Matrix.random((3, 3), sampler=sampler)
    print(weights)
    print(weights + 1.0)

    scratch = Matrix.zeros((10, 10))
    scratch.resample_in_place()
    print(scratch)


if __name__ == "__main__":
    main()
