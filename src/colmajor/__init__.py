"""Column-major flattening of two-dimensional collections.

The top-level module re-exports :func:`serialize` and the types needed to
describe its inputs and outputs.
"""

from .errors import ShapeError
from .fixed import FixedArray
from .serialize import (
    apply_serialize,
    column_major_index,
    effective_length,
    iter_serialize,
    serialize,
    serialize_array,
)
from .shapes import Shape, ShapeKind

__all__ = [
    "FixedArray",
    "Shape",
    "ShapeError",
    "ShapeKind",
    "apply_serialize",
    "column_major_index",
    "effective_length",
    "iter_serialize",
    "serialize",
    "serialize_array",
]
