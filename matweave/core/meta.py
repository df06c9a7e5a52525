"""
Metadata helpers for the dot-product kernels.

`DotMeta` collects the three static extents of a product so every kernel
receives the same, already validated, dimensions.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DotStrategy(Enum):
    """Interchangeable ways of computing the same matrix product"""

    DIRECT = "direct"
    TRANSPOSED = "transposed"
    COLUMNS = "columns"


@dataclass(frozen=True)
class DotMeta:
    rows: int
    cols: int
    items: int

    @property
    def total_elements(self) -> int:
        return self.rows * self.cols


def make_meta(
    lhs_extent: tuple[int, int], rhs_extent: tuple[int, int]
) -> Optional[DotMeta]:
    """
    Build the product metadata, or return None if the inner dimensions
    disagree.
    """
    if lhs_extent[1] != rhs_extent[0]:
        return None
    return DotMeta(rows=lhs_extent[0], cols=rhs_extent[1], items=lhs_extent[1])
