"""Column-major flattening of two-dimensional inputs.

``serialize`` reads one element from every row before moving on to the next
column::

    >>> serialize([[1, 2], [3, 4]])
    [1, 3, 2, 4]

Ragged rows are truncated to the shortest row, so a single empty row yields
an empty result. When both the row count and the row length are known up
front the result is a :class:`~colmajor.fixed.FixedArray` of ``width *
length`` items; otherwise it is a ``list``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Callable

import numpy as np

from .config import Settings, clone_function, load_settings
from .errors import ShapeError
from .fixed import FixedArray
from .logging import get_logger
from .shapes import ResolvedShape, Shape, ShapeKind, effective_length, resolve_shape

logger = get_logger(__name__)

Clone = Callable[[Any], Any] | str | None


def column_major_index(i: int, width: int) -> tuple[int, int]:
    """Return the ``(row, column)`` read for output position ``i``."""

    if width <= 0:
        raise ValueError("width must be > 0")
    if i < 0:
        raise ValueError("i must be >= 0")
    return i % width, i // width


def _resolve_clone(clone: Clone, settings: Settings) -> Callable[[Any], Any]:
    if clone is None:
        return settings.clone_callable()
    if isinstance(clone, str):
        return clone_function(clone)
    return clone


def _prepare(
    rows: Any,
    width: int | None,
    length: int | None,
    strict: bool | None,
    clone: Clone,
) -> tuple[ResolvedShape, Callable[[Any], Any]]:
    settings = load_settings()
    resolved = resolve_shape(
        rows,
        Shape(width=width, length=length, strict=strict),
        strict=settings.strict,
    )
    logger.debug(
        "flattening %s input: width=%d length=%d dropped=%d",
        resolved.kind.value,
        resolved.width,
        resolved.length,
        resolved.dropped,
    )
    return resolved, _resolve_clone(clone, settings)


def _walk(resolved: ResolvedShape, clone: Callable[[Any], Any]) -> Iterator[Any]:
    rows = resolved.rows
    width = resolved.width
    for i in range(resolved.size):
        yield clone(rows[i % width][i // width])


def iter_serialize(
    rows: Any,
    *,
    width: int | None = None,
    length: int | None = None,
    strict: bool | None = None,
    clone: Clone = None,
) -> Iterator[Any]:
    """Lazily yield the column-major flattening of ``rows``.

    Shape checks run immediately; only element duplication is deferred.
    """

    resolved, clone_fn = _prepare(rows, width, length, strict, clone)
    return _walk(resolved, clone_fn)


def serialize_array(
    array: np.ndarray,
    *,
    width: int | None = None,
    length: int | None = None,
    strict: bool | None = None,
    clone: Clone = None,
) -> np.ndarray:
    """Flatten a 2-D array in column-major order.

    Both dimensions of an ``ndarray`` are fixed, so no truncation applies and
    ``strict`` has nothing to reject. The result is always a fresh 1-D array.
    Numeric buffers are copied wholesale; ``object`` arrays, or any call with
    an explicit ``clone``, duplicate each element with the clone function.

    Raises
    ------
    ShapeError
        ``array`` is not 2-D, or ``width``/``length`` disagree with
        ``array.shape``.
    """

    array = np.asarray(array)
    if array.ndim != 2:
        raise ShapeError(f"expected a 2-D array, got {array.ndim}-D")

    rows, cols = array.shape
    if width is not None and width != rows:
        raise ShapeError(f"expected {width} rows, got {rows}")
    if length is not None and length != cols:
        raise ShapeError(f"expected rows of length {length}, got {cols}")

    logger.debug("flattening ndarray input: width=%d length=%d", rows, cols)
    flat = np.array(array.ravel(order="F"), copy=True)
    if clone is None and flat.dtype != object:
        return flat

    clone_fn = _resolve_clone(clone, load_settings())
    if flat.dtype == object:
        out = np.empty(flat.size, dtype=object)
        for i, value in enumerate(flat):
            out[i] = clone_fn(value)
        return out
    return np.fromiter((clone_fn(value) for value in flat), dtype=flat.dtype, count=flat.size)


def serialize(
    rows: Any,
    *,
    width: int | None = None,
    length: int | None = None,
    strict: bool | None = None,
    clone: Clone = None,
) -> list[Any] | FixedArray[Any] | np.ndarray:
    """Flatten ``rows`` so that ``out[i] == rows[i % W][i // W]``.

    Parameters
    ----------
    rows:
        Matrix-like input. Rows may be lists, tuples, ``FixedArray`` values,
        or any other sequences; a 2-D ``numpy.ndarray`` is routed to
        :func:`serialize_array`.
    width:
        Declared row count. Checked against ``rows``.
    length:
        Declared row length. Every row must have exactly this length; no
        minimum is computed.
    strict:
        Reject ragged rows instead of truncating them. Defaults to
        ``COLMAJOR_STRICT``.
    clone:
        Callable used to duplicate each element, or one of ``"copy"``,
        ``"deepcopy"``, ``"none"``. Defaults to ``COLMAJOR_CLONE`` (``copy``).

    Returns
    -------
    list | FixedArray | numpy.ndarray
        A ``FixedArray`` when both dimensions are known (declared, or
        ``FixedArray`` rows inside a ``FixedArray``), an ``ndarray`` for
        array input, and a ``list`` otherwise.
    """

    if isinstance(rows, np.ndarray):
        return serialize_array(rows, width=width, length=length, strict=strict, clone=clone)

    resolved, clone_fn = _prepare(rows, width, length, strict, clone)
    values = list(_walk(resolved, clone_fn))
    if resolved.kind is ShapeKind.FIXED:
        return FixedArray(resolved.size, values)
    return values


def apply_serialize(rows: Any, *, params: Shape | dict[str, Any]) -> list[Any] | FixedArray[Any] | np.ndarray:
    parsed = params if isinstance(params, Shape) else Shape.model_validate(params)
    return serialize(rows, width=parsed.width, length=parsed.length, strict=parsed.strict)


__all__ = [
    "apply_serialize",
    "column_major_index",
    "effective_length",
    "iter_serialize",
    "serialize",
    "serialize_array",
]
