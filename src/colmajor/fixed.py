"""Fixed-length sequence used where both dimensions of a matrix are known."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Generic, Iterator, TypeVar, overload

from .errors import ShapeError

T = TypeVar("T")


class FixedArray(Sequence, Generic[T]):
    """An immutable sequence whose length is checked against ``size``.

    ``FixedArray`` stands in for a statically sized array: once built, its
    length is guaranteed to equal :attr:`size`.

    >>> FixedArray(2, [1.0, 2.0])
    FixedArray(2, [1.0, 2.0])
    """

    __slots__ = ("_size", "_items")

    def __init__(self, size: int, items: Iterable[T]):
        if size < 0:
            raise ShapeError(f"size must be >= 0, got {size}")
        values = tuple(items)
        if len(values) != size:
            raise ShapeError(f"expected {size} items, got {len(values)}")
        self._size = size
        self._items = values

    @classmethod
    def of(cls, items: Iterable[T]) -> "FixedArray[T]":
        """Build a ``FixedArray`` sized to ``items``."""

        values = tuple(items)
        return cls(len(values), values)

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, FixedArray):
            return self._items == other._items
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return len(other) == self._size and all(a == b for a, b in zip(self._items, other))
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"FixedArray({self._size}, {list(self._items)!r})"

    def to_list(self) -> list[T]:
        return list(self._items)
