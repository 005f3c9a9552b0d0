"""Piece shapes stored as square grids and read under a rotation."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Sequence


class Rotation(Enum):
    """The four orientations of a piece, clockwise from spawn."""

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    def clockwise(self) -> Rotation:
        """The orientation one quarter turn clockwise."""
        return Rotation((self.value + 1) % 4)

    def counter_clockwise(self) -> Rotation:
        """The orientation one quarter turn counter-clockwise."""
        return Rotation((self.value + 3) % 4)

    def opposite(self) -> Rotation:
        """The orientation half a turn away."""
        return Rotation((self.value + 2) % 4)


def _index(dimension: int, rotation: Rotation, x: int, y: int) -> int:
    if rotation is Rotation.UP:
        return y * dimension + x
    if rotation is Rotation.RIGHT:
        return dimension * (dimension - 1) - dimension * x + y
    if rotation is Rotation.DOWN:
        return (dimension * dimension - 1) - dimension * y - x
    return (dimension - 1) + dimension * x - y


def _check(shape: Sequence[bool], dimension: int) -> None:
    if dimension < 0 or len(shape) != dimension * dimension:
        raise ValueError(
            f"a shape of dimension {dimension} needs {dimension * dimension} cells,"
            f" got {len(shape)}"
        )


def cell_filled(
    shape: Sequence[bool], dimension: int, rotation: Rotation, x: int, y: int
) -> bool:
    """Return whether cell ``(x, y)`` of the rotated shape is filled."""
    _check(shape, dimension)
    if not (0 <= x < dimension and 0 <= y < dimension):
        raise IndexError(f"cell ({x}, {y}) is outside a {dimension}x{dimension} shape")
    return bool(shape[_index(dimension, rotation, x, y)])


def rotated_cells(
    shape: Sequence[bool], dimension: int, rotation: Rotation
) -> Iterator[tuple[int, int]]:
    """Yield the filled ``(x, y)`` cells of the rotated shape, row by row."""
    _check(shape, dimension)
    for y in range(dimension):
        for x in range(dimension):
            if shape[_index(dimension, rotation, x, y)]:
                yield x, y