"""Parity rules of the hex grid.

Fields, corners and edges share one integer coordinate space. A field sits at
``(x, y)`` with ``y % 6 == 2`` and even ``x`` or ``y % 6 == 5`` and odd ``x``.
Its six corners lie two rows above and below and one column to either side.
Corners alternate between two orientations: rows with ``y % 3 == 0`` point
down to their third neighbour, rows with ``y % 3 == 1`` point up.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .config import MAX_X, MAX_Y
from .types import Coordinate


class BoardCoordinateError(ValueError):
    """Raised when a coordinate is not a field, corner or edge location."""


def check_coordinate(coord: Coordinate) -> Tuple[int, int]:
    if coord is None:
        raise ValueError("Coordinate must not be None")
    try:
        x, y = coord
    except (TypeError, ValueError):
        raise ValueError(f"Coordinate must be an (x, y) pair, got {coord!r}") from None
    if not isinstance(x, int) or not isinstance(y, int):
        raise ValueError(f"Coordinate must hold integers, got {coord!r}")
    return x, y


def is_field_coordinate(coord: Coordinate) -> bool:
    x, y = check_coordinate(coord)
    if not (1 <= x <= MAX_X - 1 and 2 <= y <= MAX_Y - 2):
        return False
    return (y % 6 == 2 and x % 2 == 0) or (y % 6 == 5 and x % 2 == 1)


def is_corner_coordinate(coord: Coordinate) -> bool:
    x, y = check_coordinate(coord)
    if not (0 <= x <= MAX_X and 0 <= y <= MAX_Y):
        return False
    if x % 2 == 0:
        return y % 6 in (0, 4)
    return y % 6 in (1, 3)


def corners_of_field(coord: Coordinate) -> List[Coordinate]:
    """The six corners clockwise from the top."""
    if not is_field_coordinate(coord):
        raise BoardCoordinateError(f"{coord} is not a field coordinate")
    x, y = coord
    return [
        (x, y - 2),
        (x + 1, y - 1),
        (x + 1, y + 1),
        (x, y + 2),
        (x - 1, y + 1),
        (x - 1, y - 1),
    ]


def neighbour_corners(coord: Coordinate) -> List[Coordinate]:
    if not is_corner_coordinate(coord):
        raise BoardCoordinateError(f"{coord} is not a corner coordinate")
    x, y = coord
    if y % 3 == 0:
        candidates = [(x - 1, y + 1), (x + 1, y + 1), (x, y - 2)]
    else:
        candidates = [(x - 1, y - 1), (x + 1, y - 1), (x, y + 2)]
    return [c for c in candidates if is_corner_coordinate(c)]


def fields_of_corner(coord: Coordinate) -> List[Coordinate]:
    """Field locations touching a corner, whether or not a field was placed there."""
    if not is_corner_coordinate(coord):
        raise BoardCoordinateError(f"{coord} is not a corner coordinate")
    x, y = coord
    if y % 3 == 0:
        candidates = [(x, y + 2), (x - 1, y - 1), (x + 1, y - 1)]
    else:
        candidates = [(x, y - 2), (x - 1, y + 1), (x + 1, y + 1)]
    return [c for c in candidates if is_field_coordinate(c)]


def are_adjacent_corners(a: Coordinate, b: Coordinate) -> bool:
    check_coordinate(a)
    check_coordinate(b)
    if not is_corner_coordinate(a) or not is_corner_coordinate(b):
        return False
    return tuple(b) in neighbour_corners(a)


@dataclass(frozen=True)
class Edge:
    """Undirected edge between two adjacent corners.

    Build it with :meth:`between`, which orders the endpoints so that
    ``Edge.between(a, b) == Edge.between(b, a)``.
    """

    a: Coordinate
    b: Coordinate

    @classmethod
    def between(cls, a: Coordinate, b: Coordinate) -> "Edge":
        ax, ay = check_coordinate(a)
        bx, by = check_coordinate(b)
        if (ax, ay) == (bx, by):
            raise BoardCoordinateError(f"Edge endpoints must differ, got {a} twice")
        if not are_adjacent_corners((ax, ay), (bx, by)):
            raise BoardCoordinateError(f"{a} and {b} are not adjacent corners")
        first, second = sorted([(ax, ay), (bx, by)])
        return cls(first, second)

    @property
    def corners(self) -> Tuple[Coordinate, Coordinate]:
        return self.a, self.b

    def touches(self, corner: Coordinate) -> bool:
        return tuple(corner) in (self.a, self.b)

    def is_vertical(self) -> bool:
        return self.a[0] == self.b[0]


def edges_of_corner(coord: Coordinate) -> List[Edge]:
    return [Edge.between(coord, other) for other in neighbour_corners(coord)]


def edges_of_field(coord: Coordinate) -> List[Edge]:
    corners = corners_of_field(coord)
    return [Edge.between(corners[i], corners[(i + 1) % 6]) for i in range(6)]
