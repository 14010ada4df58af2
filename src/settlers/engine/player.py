from __future__ import annotations

import random
from typing import Dict, List, Optional

from .bank import ResourceStock, count_resources
from .config import HAND_LIMIT, STRUCTURE_STOCK
from .types import Faction, Resource, ResourceBank, Structure


def _is_count(value: int) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class Player(ResourceStock):
    """A faction with its hand of cards, unbuilt structures and points."""

    def __init__(self, faction: Faction, rng: Optional[random.Random] = None) -> None:
        if faction is None:
            raise ValueError("Player needs a faction")
        super().__init__()
        self.faction = faction
        self.rng = rng if rng is not None else random.Random()
        self._structures: Dict[Structure, int] = dict(STRUCTURE_STOCK)
        self.points = 0

    def structure_stock(self, structure: Structure) -> int:
        return self._structures[structure]

    def structures_used(self, structure: Structure) -> int:
        return STRUCTURE_STOCK[structure] - self._structures[structure]

    def has_structure(self, structure: Structure) -> bool:
        if structure is None:
            raise ValueError("Structure must not be None")
        return self._structures[structure] > 0

    def remove_structure(self, structure: Structure) -> None:
        if not self.has_structure(structure):
            raise ValueError(f"{self.faction.name} has no {structure.value} left")
        self._structures[structure] -= 1

    def add_structure(self, structure: Structure) -> None:
        if structure is None:
            raise ValueError("Structure must not be None")
        if self._structures[structure] >= STRUCTURE_STOCK[structure]:
            raise ValueError(f"{self.faction.name} already holds every {structure.value}")
        self._structures[structure] += 1

    def add_points(self, points: int) -> None:
        if not _is_count(points):
            raise ValueError(f"Points to add must be non-negative, got {points!r}")
        self.points += points

    def remove_points(self, points: int) -> None:
        if not _is_count(points):
            raise ValueError(f"Points to remove must be non-negative, got {points!r}")
        if points > self.points:
            raise ValueError(f"Cannot remove {points} points from {self.points}")
        self.points -= points

    def drop_half_resources(self) -> ResourceBank:
        """Discard half the hand, rounded down, when it holds more than the limit.

        Each card is drawn by picking uniformly among kinds still held.
        """
        total = self.total()
        if total <= HAND_LIMIT:
            return count_resources([])
        dropped: List[Resource] = []
        for _ in range(total // 2):
            resource = self.rng.choice(self.kinds_held())
            self.remove({resource: 1})
            dropped.append(resource)
        return count_resources(dropped)

    def steal_random_resource(self) -> Optional[Resource]:
        held = self.kinds_held()
        if not held:
            return None
        resource = self.rng.choice(held)
        self.remove({resource: 1})
        return resource

    def __repr__(self) -> str:
        return f"Player({self.faction.name}, points={self.points}, {self.as_dict()})"
