"""
Dense row-major matrix of float64 values.
"""

from __future__ import annotations

import logging
from numbers import Real
from typing import TYPE_CHECKING, Any, List, Optional, Sequence, Union

import numpy as np

from matweave.core.rng import NormalSampler
from matweave.exceptions import ShapeMismatch
from matweave.matrix.shape import Shape
from matweave.matweave import Config

if TYPE_CHECKING:
    from matweave.core.meta import DotStrategy

logger = logging.getLogger(__name__)

ShapeLike = Union[Shape, Sequence[int]]


class Matrix:
    """
    Flat float64 buffer paired with a `Shape`.

    The value at (row r, column c) sits at ``r * columns + c``. The buffer
    length always equals ``shape.total_elements()``. A Matrix owns its
    buffer exclusively: construction copies the given data and accessors
    hand out copies. Apart from `resample_in_place`, every operation
    returns a new Matrix and leaves its inputs untouched.
    """

    __slots__ = ("_data", "_shape")

    # Makes numpy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    def __init__(self, data: Union[Sequence[float], np.ndarray], shape: ShapeLike) -> None:
        shape = Shape.create(shape)
        buffer = np.array(data, dtype=np.float64)
        if buffer.ndim != 1:
            raise ShapeMismatch(
                f"Matrix data must be flat, got an array with {buffer.ndim} dimensions"
            )
        self._assign(buffer, shape)

    def _assign(self, buffer: np.ndarray, shape: Shape) -> None:
        if buffer.shape[0] != shape.total_elements():
            raise ShapeMismatch(
                f"The data does not fit the shape: {buffer.shape[0]} values "
                f"for {shape.rows}x{shape.columns}"
            )
        self._data = buffer
        self._shape = shape

    @classmethod
    def create(cls, data: Union[Sequence[float], np.ndarray], shape: ShapeLike) -> "Matrix":
        return cls(data, shape)

    @classmethod
    def _from_buffer(cls, buffer: np.ndarray, shape: Shape) -> "Matrix":
        # Takes ownership of `buffer` without copying it
        mat = cls.__new__(cls)
        mat._assign(buffer, shape)
        return mat

    @classmethod
    def zeros(cls, shape: ShapeLike) -> "Matrix":
        shape = Shape.create(shape)
        return cls._from_buffer(np.zeros(shape.total_elements(), dtype=np.float64), shape)

    @classmethod
    def random(
        cls, shape: ShapeLike, sampler: Optional[NormalSampler] = None
    ) -> "Matrix":
        """
        Matrix filled with independent normal draws, in row-major order.

        Parameters
        ----------
        shape: ShapeLike
            Shape of the new matrix
        sampler: Optional[NormalSampler]
            Sampler to draw from; its stream simply continues. When omitted
            a fresh standard normal sampler is taken from `Config().sampler()`,
            which is clock seeded unless a seed is configured.

        Returns
        -------
        Matrix
        """
        shape = Shape.create(shape)
        if sampler is None:
            sampler = Config().sampler()
        buffer = sampler.fill(np.empty(shape.total_elements(), dtype=np.float64))
        return cls._from_buffer(buffer, shape)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """
        Build a matrix from a list of equally long rows.
        """
        rows = [list(r) for r in rows]
        if not rows:
            raise ShapeMismatch("At least one row is required")
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ShapeMismatch(
                    f"Row {index} has {len(row)} values, expected {width}"
                )
        return cls([v for row in rows for v in row], (len(rows), width))

    def resample_in_place(self, sampler: Optional[NormalSampler] = None) -> None:
        """
        Redraws every cell of this matrix.

        Without an explicit sampler a new clock seeded standard normal
        sampler is built for every call, so each call is an independent
        stream and never continues a previous one. Config seeding does not
        apply here; pass a sampler to continue a stream of your own.
        """
        if sampler is None:
            sampler = NormalSampler.from_time()
        logger.debug("Resampling %s matrix in place", self._shape)
        sampler.fill(self._data)

    @property
    def shape(self) -> Shape:
        return self._shape

    def dim(self) -> Shape:
        return self._shape

    @property
    def rows(self) -> int:
        return self._shape.rows

    @property
    def columns(self) -> int:
        return self._shape.columns

    @property
    def data(self) -> np.ndarray:
        """
        Copy of the flat row-major buffer
        """
        return self._data.copy()

    def to_list(self) -> List[float]:
        return self._data.tolist()

    def to_rows(self) -> List[List[float]]:
        cols = self.columns
        flat = self._data.tolist()
        return [flat[r * cols:(r + 1) * cols] for r in range(self.rows)]

    def row(self, index: int) -> List[float]:
        if not 0 <= index < self.rows:
            raise IndexError(f"Row {index} out of range for {self._shape}")
        cols = self.columns
        return self._data[index * cols:(index + 1) * cols].tolist()

    def column(self, index: int) -> List[float]:
        if not 0 <= index < self.columns:
            raise IndexError(f"Column {index} out of range for {self._shape}")
        return self._data[index::self.columns].tolist()

    def copy(self) -> "Matrix":
        return Matrix._from_buffer(self._data.copy(), self._shape)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        if not (0 <= row < self.rows and 0 <= col < self.columns):
            raise IndexError(f"Index {index} out of range for {self._shape}")
        return float(self._data[row * self.columns + col])

    def __len__(self) -> int:
        return self._data.shape[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def allclose(self, other: "Matrix", rtol: float = 1e-9, atol: float = 1e-12) -> bool:
        """
        True when both shapes match and every pair of values agrees within
        the given tolerances.
        """
        return self._shape == other._shape and bool(
            np.allclose(self._data, other._data, rtol=rtol, atol=atol)
        )

    def dot(self, other: "Matrix", strategy: "Optional[DotStrategy | str]" = None) -> "Matrix":
        from matweave.matrix.dot import dot

        return dot(self, other, strategy=strategy)

    def transpose(self) -> "Matrix":
        from matweave.matrix.transpose import transpose

        return transpose(self)

    @property
    def T(self) -> "Matrix":
        return self.transpose()

    def __add__(self, other: Any) -> "Matrix":
        from matweave.matrix import arithmetic

        if isinstance(other, Matrix):
            return arithmetic.add_matrix(self, other)
        if isinstance(other, Real):
            return arithmetic.add_scalar(self, other)
        return NotImplemented

    def __radd__(self, other: Any) -> "Matrix":
        from matweave.matrix import arithmetic

        if isinstance(other, Real):
            return arithmetic.add_scalar(other, self)
        return NotImplemented

    def __sub__(self, other: Any) -> "Matrix":
        from matweave.matrix import arithmetic

        if isinstance(other, Matrix):
            return arithmetic.sub_matrix(self, other)
        if isinstance(other, Real):
            return arithmetic.sub_scalar(self, other)
        return NotImplemented

    def __mul__(self, other: Any) -> "Matrix":
        from matweave.matrix import arithmetic

        if isinstance(other, Real):
            return arithmetic.mul_scalar(self, other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "Matrix":
        from matweave.matrix import arithmetic

        if isinstance(other, Real):
            return arithmetic.div_scalar(self, other)
        return NotImplemented

    def __neg__(self) -> "Matrix":
        from matweave.matrix import arithmetic

        return arithmetic.mul_scalar(self, -1.0)

    def __matmul__(self, other: Any) -> "Matrix":
        if isinstance(other, Matrix):
            return self.dot(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Matrix(shape={self._shape.as_tuple()}, data={self._data.tolist()})"

    def __str__(self) -> str:
        body = "\n".join(
            "  [" + ", ".join(f"{v:.6g}" for v in row) + "]" for row in self.to_rows()
        )
        return f"Matrix {self.rows}x{self.columns}\n[\n{body}\n]"
