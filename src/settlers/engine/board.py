from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Generic, Iterable, List, Optional, TypeVar, Union

from .config import INITIAL_THIEF_POSITION, LAND_LAYOUT, WATER_FIELDS, check_dice_value
from .hexgrid import (
    BoardCoordinateError,
    Edge,
    check_coordinate,
    corners_of_field,
    edges_of_corner,
    edges_of_field,
    fields_of_corner,
    neighbour_corners,
)
from .types import Coordinate, CornerStructure, Field, Land, Road

logger = logging.getLogger(__name__)

F = TypeVar("F")
C = TypeVar("C")
E = TypeVar("E")


class Lookup(Enum):
    NOT_APPLICABLE = "not_applicable"


NOT_APPLICABLE = Lookup.NOT_APPLICABLE


class HexBoard(Generic[F, C, E]):
    """Fields, corner occupants and edge occupants keyed by grid coordinate.

    A corner or edge becomes part of the board when the first field touching
    it is added. Until then it is treated as an invalid location.
    """

    def __init__(self) -> None:
        self._fields: Dict[Coordinate, F] = {}
        self._corners: Dict[Coordinate, Optional[C]] = {}
        self._edges: Dict[Edge, Optional[E]] = {}

    # Fields

    def add_field(self, coord: Coordinate, field: F) -> None:
        if field is None:
            raise ValueError("Field must not be None")
        key = check_coordinate(coord)
        if key in self._fields:
            raise ValueError(f"A field already exists at {key}")
        corners = corners_of_field(key)
        self._fields[key] = field
        for corner in corners:
            self._corners.setdefault(corner, None)
        for edge in edges_of_field(key):
            self._edges.setdefault(edge, None)

    def has_field(self, coord: Coordinate) -> bool:
        return check_coordinate(coord) in self._fields

    def get_field(self, coord: Coordinate) -> F:
        key = check_coordinate(coord)
        if key not in self._fields:
            raise BoardCoordinateError(f"No field at {key}")
        return self._fields[key]

    def field_coordinates(self) -> List[Coordinate]:
        """All field coordinates, top to bottom and left to right."""
        return sorted(self._fields, key=lambda c: (c[1], c[0]))

    # Corners

    def is_corner(self, coord: Coordinate) -> bool:
        return check_coordinate(coord) in self._corners

    def _corner_key(self, coord: Coordinate) -> Coordinate:
        key = check_coordinate(coord)
        if key not in self._corners:
            raise BoardCoordinateError(f"{key} is not a corner of this board")
        return key

    def set_corner(self, coord: Coordinate, occupant: Optional[C]) -> None:
        self._corners[self._corner_key(coord)] = occupant

    def get_corner(self, coord: Coordinate) -> Optional[C]:
        return self._corners[self._corner_key(coord)]

    def lookup_corner(self, coord: Coordinate) -> Union[C, None, Lookup]:
        """Like get_corner, but invalid locations yield NOT_APPLICABLE."""
        key = check_coordinate(coord)
        if key not in self._corners:
            return NOT_APPLICABLE
        return self._corners[key]

    def corner_coordinates(self) -> List[Coordinate]:
        return sorted(self._corners, key=lambda c: (c[1], c[0]))

    def get_fields(self, corner: Coordinate) -> List[F]:
        """Fields touching a corner (one to three)."""
        key = self._corner_key(corner)
        return [self._fields[c] for c in fields_of_corner(key) if c in self._fields]

    def get_corners_of_field(self, coord: Coordinate) -> List[C]:
        """Occupants of the corners around a field; empty corners are skipped."""
        self.get_field(coord)
        occupants = (self._corners.get(c) for c in corners_of_field(tuple(coord)))
        return [o for o in occupants if o is not None]

    def get_neighbours_of_corner(self, coord: Coordinate) -> List[C]:
        key = self._corner_key(coord)
        occupants = (self._corners.get(c) for c in neighbour_corners(key))
        return [o for o in occupants if o is not None]

    # Edges

    def _edge_key(self, a: Coordinate, b: Coordinate) -> Edge:
        edge = Edge.between(a, b)
        if edge not in self._edges:
            raise BoardCoordinateError(f"{a}-{b} is not an edge of this board")
        return edge

    def has_edge(self, a: Coordinate, b: Coordinate) -> bool:
        check_coordinate(a)
        check_coordinate(b)
        try:
            self._edge_key(a, b)
        except BoardCoordinateError:
            return False
        return True

    def set_edge(self, a: Coordinate, b: Coordinate, occupant: Optional[E]) -> None:
        self._edges[self._edge_key(a, b)] = occupant

    def get_edge(self, a: Coordinate, b: Coordinate) -> Optional[E]:
        return self._edges[self._edge_key(a, b)]

    def get_adjacent_edges(self, corner: Coordinate) -> List[E]:
        """Occupants of the edges touching a corner; empty edges are skipped."""
        key = self._corner_key(corner)
        occupants = (self._edges.get(edge) for edge in edges_of_corner(key))
        return [o for o in occupants if o is not None]

    def edges(self) -> Iterable[Edge]:
        return list(self._edges)


class SettlersBoard(HexBoard[Field, CornerStructure, Road]):
    """Hex board with game fields and a robber."""

    def __init__(self) -> None:
        super().__init__()
        self.thief_position: Optional[Coordinate] = None

    def set_thief_position(self, coord: Coordinate) -> bool:
        key = check_coordinate(coord)
        if key not in self._fields or self._fields[key].land is Land.WATER:
            return False
        if self.thief_position is not None:
            self._fields[self.thief_position].has_thief = False
        self._fields[key].has_thief = True
        self.thief_position = key
        return True

    def fields_for_dice_value(self, value: int) -> List[Coordinate]:
        """Coordinates of producing fields triggered by ``value``.

        Fields under the robber and fields without a resource are left out.
        """
        check_dice_value(value)
        return [
            coord
            for coord in self.field_coordinates()
            if self._fields[coord].dice_value == value
            and not self._fields[coord].has_thief
            and self._fields[coord].resource is not None
        ]

    def lands_for_corner(self, corner: Coordinate) -> List[Land]:
        return [field.land for field in self.get_fields(corner)]


def standard_board() -> SettlersBoard:
    board = SettlersBoard()
    layout = [(coord, Land.WATER, 0) for coord in WATER_FIELDS] + list(LAND_LAYOUT)
    for coord, land, dice_value in sorted(layout, key=lambda item: (item[0][1], item[0][0])):
        board.add_field(coord, Field(land=land, dice_value=dice_value))
    board.set_thief_position(INITIAL_THIEF_POSITION)
    logger.debug("Built standard board with %d fields", len(layout))
    return board
