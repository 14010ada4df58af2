from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple

Coordinate = Tuple[int, int]


class Resource(str, Enum):
    BRICK = "brick"
    LUMBER = "lumber"
    ORE = "ore"
    GRAIN = "grain"
    WOOL = "wool"

    @property
    def code(self) -> str:
        return _RESOURCE_CODES[self]


_RESOURCE_CODES = {
    Resource.BRICK: "BR",
    Resource.LUMBER: "LU",
    Resource.ORE: "OR",
    Resource.GRAIN: "GR",
    Resource.WOOL: "WL",
}


class Land(str, Enum):
    FOREST = "forest"
    PASTURE = "pasture"
    FIELDS = "fields"
    MOUNTAIN = "mountain"
    HILLS = "hills"
    WATER = "water"
    DESERT = "desert"

    @property
    def resource(self) -> Optional[Resource]:
        """Resource produced by this land, or None for water and desert."""
        return _LAND_RESOURCES.get(self)

    @property
    def code(self) -> str:
        if self is Land.WATER:
            return "~~"
        if self is Land.DESERT:
            return "--"
        return _RESOURCE_CODES[_LAND_RESOURCES[self]]


_LAND_RESOURCES = {
    Land.FOREST: Resource.LUMBER,
    Land.PASTURE: Resource.WOOL,
    Land.FIELDS: Resource.GRAIN,
    Land.MOUNTAIN: Resource.ORE,
    Land.HILLS: Resource.BRICK,
}


class Faction(str, Enum):
    RED = "rr"
    BLUE = "bb"
    GREEN = "gg"
    YELLOW = "yy"


class Structure(str, Enum):
    ROAD = "road"
    SETTLEMENT = "settlement"
    CITY = "city"


ResourceBank = Dict[Resource, int]


def empty_resources() -> ResourceBank:
    return {
        Resource.BRICK: 0,
        Resource.LUMBER: 0,
        Resource.ORE: 0,
        Resource.GRAIN: 0,
        Resource.WOOL: 0,
    }


@dataclass
class Field:
    """One hex cell. Only the robber flag changes after setup."""

    land: Land
    dice_value: int = 0
    has_thief: bool = False

    @property
    def resource(self) -> Optional[Resource]:
        return self.land.resource

    @property
    def label(self) -> str:
        return "TH" if self.has_thief else self.land.code


# Payout factor and point value per corner structure kind.
_CORNER_VALUES = {
    Structure.SETTLEMENT: (1, 1),
    Structure.CITY: (2, 2),
}


@dataclass(frozen=True)
class CornerStructure:
    """A settlement or city; promotion swaps the kind and keeps the owner."""

    owner: Faction
    kind: Structure = Structure.SETTLEMENT

    def __post_init__(self) -> None:
        if self.owner is None:
            raise ValueError("Corner structure needs an owner")
        if self.kind not in _CORNER_VALUES:
            raise ValueError(f"{self.kind} is not a corner structure")

    @property
    def payout_factor(self) -> int:
        return _CORNER_VALUES[self.kind][0]

    @property
    def points(self) -> int:
        return _CORNER_VALUES[self.kind][1]

    @property
    def is_city(self) -> bool:
        return self.kind is Structure.CITY

    def promote(self) -> "CornerStructure":
        if self.is_city:
            raise ValueError("A city cannot be promoted further")
        return replace(self, kind=Structure.CITY)

    def is_owned_by(self, faction: Faction) -> bool:
        return self.owner is faction

    @property
    def label(self) -> str:
        return self.owner.value.upper() if self.is_city else self.owner.value


@dataclass(frozen=True)
class Road:
    owner: Faction

    def __post_init__(self) -> None:
        if self.owner is None:
            raise ValueError("Road needs an owner")

    def is_owned_by(self, faction: Faction) -> bool:
        return self.owner is faction

    @property
    def label(self) -> str:
        return self.owner.value
