"""
Bridges between `Matrix` and array libraries.

Conversions always copy, so a Matrix never shares its buffer with an
array owned by another library.
"""

from .jax_arrays import from_jax, to_jax
from .numpy_arrays import from_numpy, to_numpy

__all__ = [
    "from_jax",
    "to_jax",
    "from_numpy",
    "to_numpy",
]
