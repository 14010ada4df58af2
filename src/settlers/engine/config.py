from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .types import Coordinate, Land, Resource, ResourceBank, Structure

DEFAULT_BANK_COUNT = 19

STRUCTURE_STOCK: Dict[Structure, int] = {
    Structure.ROAD: 15,
    Structure.SETTLEMENT: 5,
    Structure.CITY: 4,
}

COSTS: Dict[Structure, ResourceBank] = {
    Structure.ROAD: {
        Resource.BRICK: 1,
        Resource.LUMBER: 1,
        Resource.ORE: 0,
        Resource.GRAIN: 0,
        Resource.WOOL: 0,
    },
    Structure.SETTLEMENT: {
        Resource.BRICK: 1,
        Resource.LUMBER: 1,
        Resource.ORE: 0,
        Resource.GRAIN: 1,
        Resource.WOOL: 1,
    },
    Structure.CITY: {
        Resource.BRICK: 0,
        Resource.LUMBER: 0,
        Resource.ORE: 3,
        Resource.GRAIN: 2,
        Resource.WOOL: 0,
    },
}

MIN_DICE = 2
MAX_DICE = 12
DICE_DROP_VALUE = 7
HAND_LIMIT = 7

TRADE_OFFER = 4
TRADE_WANT = 1

MIN_WIN_POINTS = 3
MAX_WIN_POINTS = 20
MIN_PLAYERS = 2
MAX_PLAYERS = 4

MAX_X = 14
MAX_Y = 22

INITIAL_THIEF_POSITION: Coordinate = (7, 11)

WATER_FIELDS: List[Coordinate] = [
    (4, 2), (6, 2), (8, 2), (10, 2),
    (3, 5), (11, 5),
    (2, 8), (12, 8),
    (1, 11), (13, 11),
    (2, 14), (12, 14),
    (3, 17), (11, 17),
    (4, 20), (6, 20), (8, 20), (10, 20),
]

# (coordinate, land, dice value), top to bottom, left to right.
LAND_LAYOUT: List[Tuple[Coordinate, Land, int]] = [
    ((5, 5), Land.FOREST, 6),
    ((7, 5), Land.PASTURE, 3),
    ((9, 5), Land.PASTURE, 8),
    ((4, 8), Land.FIELDS, 2),
    ((6, 8), Land.MOUNTAIN, 4),
    ((8, 8), Land.FIELDS, 5),
    ((10, 8), Land.FOREST, 10),
    ((3, 11), Land.FOREST, 5),
    ((5, 11), Land.HILLS, 9),
    ((7, 11), Land.DESERT, 7),
    ((9, 11), Land.MOUNTAIN, 6),
    ((11, 11), Land.FIELDS, 9),
    ((4, 14), Land.FIELDS, 10),
    ((6, 14), Land.MOUNTAIN, 11),
    ((8, 14), Land.FOREST, 3),
    ((10, 14), Land.PASTURE, 12),
    ((5, 17), Land.PASTURE, 8),
    ((7, 17), Land.HILLS, 4),
    ((9, 17), Land.HILLS, 11),
]


@dataclass(frozen=True)
class GameConfig:
    win_points: int = 10
    num_players: int = 4
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if not MIN_WIN_POINTS <= self.win_points <= MAX_WIN_POINTS:
            raise ValueError(
                f"win_points must be in [{MIN_WIN_POINTS}, {MAX_WIN_POINTS}], got {self.win_points}"
            )
        if not MIN_PLAYERS <= self.num_players <= MAX_PLAYERS:
            raise ValueError(
                f"num_players must be in [{MIN_PLAYERS}, {MAX_PLAYERS}], got {self.num_players}"
            )


def check_dice_value(value: int) -> None:
    if value is None or not MIN_DICE <= value <= MAX_DICE:
        raise ValueError(f"Dice value must be in [{MIN_DICE}, {MAX_DICE}], got {value}")
