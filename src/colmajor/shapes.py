"""Shape adapters that normalise matrix-like inputs before flattening.

Every accepted input (a list of lists, a tuple of read-only rows, nested
:class:`~colmajor.fixed.FixedArray` values, any iterable of rows) is reduced
to one representation: an indexable tuple of rows, the row count ``width``
and the effective column count ``length``.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field

from .errors import ShapeError
from .fixed import FixedArray


class ShapeKind(str, enum.Enum):
    RAGGED = "ragged"
    FIXED_COUNT = "fixed_count"
    FIXED_LENGTH = "fixed_length"
    FIXED = "fixed"


def _kind_for(width_known: bool, length_known: bool) -> ShapeKind:
    if width_known and length_known:
        return ShapeKind.FIXED
    if width_known:
        return ShapeKind.FIXED_COUNT
    if length_known:
        return ShapeKind.FIXED_LENGTH
    return ShapeKind.RAGGED


class Shape(BaseModel):
    """Dimensions the caller vouches for.

    ``width`` is the row count and ``length`` the per-row length. A declared
    dimension is checked against the input; an undeclared one is measured.
    ``strict`` turns silent truncation of ragged rows into a ``ShapeError``.
    ``None`` for ``strict`` defers to ``COLMAJOR_STRICT``.
    """

    width: int | None = Field(default=None, ge=0)
    length: int | None = Field(default=None, ge=0)
    strict: bool | None = None

    @property
    def kind(self) -> ShapeKind:
        return _kind_for(self.width is not None, self.length is not None)


@dataclass(frozen=True)
class ResolvedShape:
    rows: tuple[Sequence[Any], ...]
    width: int
    length: int
    kind: ShapeKind
    dropped: int = 0

    @property
    def size(self) -> int:
        return self.width * self.length


def _is_row(value: Any) -> bool:
    if isinstance(value, Mapping):
        return False
    if isinstance(value, Sequence):
        return True
    # numpy rows and other array-likes are indexable without registering as Sequence
    return hasattr(value, "__len__") and hasattr(value, "__getitem__") and getattr(value, "ndim", 1) == 1


def _materialize_rows(rows: Any) -> tuple[Sequence[Any], ...]:
    if isinstance(rows, (str, bytes, Mapping)) or not isinstance(rows, Iterable):
        raise TypeError(f"expected a sequence of rows, got {type(rows).__name__}")

    materialized = tuple(rows)
    for index, row in enumerate(materialized):
        if not _is_row(row):
            raise TypeError(f"row {index} is not a sequence (got {type(row).__name__})")
    return materialized


def _fixed_row_size(rows: tuple[Sequence[Any], ...]) -> int | None:
    """Return the shared size when every row is a ``FixedArray`` of one size."""

    if not rows or not all(isinstance(row, FixedArray) for row in rows):
        return None
    sizes = {row.size for row in rows}
    if len(sizes) != 1:
        return None
    return sizes.pop()


def effective_length(rows: Iterable[Sequence[Any]]) -> int:
    """Length of the shortest row, or ``0`` when there are no rows."""

    return min((len(row) for row in rows), default=0)


def resolve_shape(rows: Any, shape: Shape | None = None, *, strict: bool = False) -> ResolvedShape:
    """Normalise ``rows`` against ``shape``.

    Parameters
    ----------
    rows:
        Matrix-like input: an iterable of row sequences.
    shape:
        Declared dimensions. Omitted dimensions are measured from ``rows``.
    strict:
        Default strictness used when ``shape.strict`` is ``None``.

    Raises
    ------
    ShapeError
        A declared dimension does not match the input, or ``strict`` is on
        and the rows are ragged.
    TypeError
        ``rows`` is not an iterable of sequences.
    """

    shape = shape or Shape()
    strict = strict if shape.strict is None else shape.strict
    materialized = _materialize_rows(rows)
    width = len(materialized)

    if shape.width is not None and shape.width != width:
        raise ShapeError(f"expected {shape.width} rows, got {width}")

    width_known = shape.width is not None or isinstance(rows, FixedArray)

    if shape.length is not None:
        for index, row in enumerate(materialized):
            if len(row) != shape.length:
                raise ShapeError(
                    f"row {index} has length {len(row)}, expected {shape.length}"
                )
        return ResolvedShape(
            rows=materialized,
            width=width,
            length=shape.length,
            kind=_kind_for(width_known, True),
        )

    # an empty FixedArray has no rows to measure but both dimensions are known
    if isinstance(rows, FixedArray) and width == 0:
        return ResolvedShape(rows=materialized, width=0, length=0, kind=ShapeKind.FIXED)

    fixed_size = _fixed_row_size(materialized)
    if fixed_size is not None:
        return ResolvedShape(
            rows=materialized,
            width=width,
            length=fixed_size,
            kind=_kind_for(width_known, True),
        )

    lengths = [len(row) for row in materialized]
    length = min(lengths, default=0)
    if strict and len(set(lengths)) > 1:
        raise ShapeError(
            f"ragged rows with lengths between {length} and {max(lengths)} in strict mode"
        )

    return ResolvedShape(
        rows=materialized,
        width=width,
        length=length,
        kind=_kind_for(width_known, False),
        dropped=sum(lengths) - width * length,
    )


__all__ = [
    "ResolvedShape",
    "Shape",
    "ShapeKind",
    "effective_length",
    "resolve_shape",
]
