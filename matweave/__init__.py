"""Top-level matweave helpers."""

# Matrices are float64 end to end; jax must not silently downcast when it
# is used as a reference or interop backend.

import jax

jax.config.update("jax_enable_x64", True)

from matweave import core, exceptions, interop, matrix  # noqa: E402
from matweave.core.meta import DotStrategy  # noqa: E402
from matweave.core.rng import BitGenerator, NormalSampler, SeedExpander  # noqa: E402
from matweave.exceptions import (  # noqa: E402
    DimensionIncompatibility,
    InvalidShape,
    MatweaveError,
    SamplerExhausted,
    ShapeMismatch,
)
from matweave.matrix import Matrix, Shape, dot, transpose  # noqa: E402
from matweave.matweave import Config, Session  # noqa: E402

__all__ = [
    "core",
    "exceptions",
    "interop",
    "matrix",
    "Config",
    "Session",
    "DotStrategy",
    "SeedExpander",
    "BitGenerator",
    "NormalSampler",
    "Matrix",
    "Shape",
    "dot",
    "transpose",
    "MatweaveError",
    "InvalidShape",
    "ShapeMismatch",
    "DimensionIncompatibility",
    "SamplerExhausted",
]
