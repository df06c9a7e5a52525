"""
Error types raised by matweave.

Every shape problem is detected by the call that receives the offending
arguments; nothing is retried or repaired internally.
"""


class MatweaveError(Exception):
    """Base class for all matweave errors"""


class InvalidShape(MatweaveError, ValueError):
    """Raised when an extent does not describe exactly two positive dimensions"""


class ShapeMismatch(MatweaveError, ValueError):
    """Raised when the supplied data length does not fit the declared shape"""


class DimensionIncompatibility(MatweaveError, ValueError):
    """
    Raised when two shapes cannot be combined: the inner dimensions of a
    product disagree, or an elementwise operation receives unequal shapes.
    """


class SamplerExhausted(MatweaveError, RuntimeError):
    """Raised when the normal sampler rejection loop hits its safety cap"""
