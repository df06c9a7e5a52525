"""
Core kernels and generators.

These functions operate purely on flat buffers plus lightweight metadata
(row/column/inner extents) and never touch `Matrix` objects.
"""

from matweave.core import jitted, kernels, meta, ops, rng

__all__ = ["kernels", "jitted", "meta", "ops", "rng"]
