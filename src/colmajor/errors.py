"""Exceptions raised by :mod:`colmajor`."""


class ShapeError(ValueError):
    """Input rows do not match the shape the caller declared."""
