"""
Two dimensional extent of a matrix.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from matweave.exceptions import InvalidShape


@dataclass(frozen=True)
class Shape:
    """
    Immutable (rows, columns) pair, both strictly positive.

    For a column vector use (N, 1) and for a row vector (1, N).
    """

    rows: int
    columns: int

    def __post_init__(self) -> None:
        for name in ("rows", "columns"):
            value = getattr(self, name)
            if isinstance(value, bool):
                raise InvalidShape(f"{name} must be an integer, got {value!r}")
            try:
                value = operator.index(value)
            except TypeError as e:
                raise InvalidShape(
                    f"{name} must be an integer, got {value!r}"
                ) from e
            if value < 1:
                raise InvalidShape(f"{name} must be positive, got {value}")
            object.__setattr__(self, name, value)

    @classmethod
    def create(cls, extent: "Shape | Sequence[int]") -> "Shape":
        """
        Resolve an extent into a Shape.

        Parameters
        ----------
        extent: Shape | Sequence[int]
            Either an existing Shape or a sequence of exactly two positive
            integers

        Returns
        -------
        Shape

        Raises
        ------
        InvalidShape
            If the extent does not resolve to exactly two positive dimensions
        """
        if isinstance(extent, Shape):
            return extent
        try:
            dims = tuple(extent)
        except TypeError as e:
            raise InvalidShape(f"Shape must be a pair of dimensions, got {extent!r}") from e
        if len(dims) != 2:
            raise InvalidShape(
                "The shape must have exactly 2 dimensions. For a column vector "
                f"use (N, 1) and for a row vector (1, N), got {dims!r}"
            )
        return cls(dims[0], dims[1])

    def total_elements(self) -> int:
        return self.rows * self.columns

    def compatible_product(self, other: "Shape") -> Optional["Shape"]:
        """
        Shape of ``self @ other``, or None when the inner dimensions disagree.
        """
        if self.columns != other.rows:
            return None
        return Shape(self.rows, other.columns)

    def transposed(self) -> "Shape":
        return Shape(self.columns, self.rows)

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def __getitem__(self, index: int) -> int:
        return self.as_tuple()[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.as_tuple())

    def __len__(self) -> int:
        return 2

    def __repr__(self) -> str:
        return f"Shape({self.rows}, {self.columns})"
