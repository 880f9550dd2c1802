"""Tests for shape resolution."""

import pytest

from colmajor.errors import ShapeError
from colmajor.fixed import FixedArray
from colmajor.shapes import Shape, ShapeKind, effective_length, resolve_shape


def test_shape_kind_reflects_declared_dimensions():
    assert Shape().kind is ShapeKind.RAGGED
    assert Shape(width=2).kind is ShapeKind.FIXED_COUNT
    assert Shape(length=3).kind is ShapeKind.FIXED_LENGTH
    assert Shape(width=2, length=3).kind is ShapeKind.FIXED


def test_shape_rejects_negative_dimensions():
    with pytest.raises(ValueError):
        Shape(length=-1)


def test_effective_length():
    assert effective_length([]) == 0
    assert effective_length([[1, 2, 3], [4]]) == 1
    assert effective_length([[], [1]]) == 0


def test_resolve_ragged_rows_reports_dropped_elements():
    resolved = resolve_shape([[1, 2, 3], [4, 5], [6, 7, 8, 9]])
    assert resolved.kind is ShapeKind.RAGGED
    assert (resolved.width, resolved.length) == (3, 2)
    assert resolved.size == 6
    assert resolved.dropped == 3


def test_resolve_declared_length_skips_minimum():
    resolved = resolve_shape([[1, 2], [3, 4]], Shape(length=2))
    assert resolved.kind is ShapeKind.FIXED_LENGTH
    assert resolved.length == 2
    assert resolved.dropped == 0


def test_resolve_infers_length_from_fixed_rows():
    rows = [FixedArray(2, [1, 2]), FixedArray(2, [3, 4])]
    resolved = resolve_shape(rows)
    assert resolved.kind is ShapeKind.FIXED_LENGTH
    assert resolved.length == 2


def test_resolve_fixed_rows_of_different_sizes_are_ragged():
    rows = [FixedArray(2, [1, 2]), FixedArray(3, [3, 4, 5])]
    resolved = resolve_shape(rows)
    assert resolved.kind is ShapeKind.RAGGED
    assert resolved.length == 2


def test_resolve_fixed_outer_array_marks_width_known():
    rows = FixedArray(2, [[1, 2, 3], [4, 5]])
    assert resolve_shape(rows).kind is ShapeKind.FIXED_COUNT


def test_resolve_strict_argument_is_default_for_shape():
    with pytest.raises(ShapeError, match="strict"):
        resolve_shape([[1], [2, 3]], strict=True)
    resolved = resolve_shape([[1], [2, 3]], Shape(strict=False), strict=True)
    assert resolved.length == 1


def test_resolve_rejects_mapping_and_string_input():
    with pytest.raises(TypeError):
        resolve_shape({"a": [1]})
    with pytest.raises(TypeError):
        resolve_shape("abc")


def test_resolve_accepts_string_rows():
    resolved = resolve_shape(["ab", "cd"])
    assert (resolved.width, resolved.length) == (2, 2)


def test_resolve_empty_fixed_outer_array_is_fully_fixed():
    resolved = resolve_shape(FixedArray(0, []))
    assert resolved.kind is ShapeKind.FIXED
    assert resolved.size == 0
