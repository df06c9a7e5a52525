# flake8: noqa

from .arithmetic import (  # noqa: F401
    add_matrix,
    add_scalar,
    div_scalar,
    mul_scalar,
    sub_matrix,
    sub_scalar,
)
from .dot import dot, dot_columns, dot_direct, dot_transposed  # noqa: F401
from .matrix import Matrix  # noqa: F401
from .shape import Shape  # noqa: F401
from .transpose import transpose  # noqa: F401
