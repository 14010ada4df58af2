from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional

from .config import DEFAULT_BANK_COUNT
from .types import Resource, ResourceBank, empty_resources


def check_resource(resource: Resource) -> Resource:
    if resource is None:
        raise ValueError("Resource must not be None")
    if not isinstance(resource, Resource):
        raise ValueError(f"Not a resource kind: {resource!r}")
    return resource


def _check_amount(amount: int) -> int:
    if isinstance(amount, bool) or not isinstance(amount, int) or amount < 0:
        raise ValueError(f"Amount must be a non-negative integer, got {amount!r}")
    return amount


def count_resources(cards: Iterable[Resource]) -> ResourceBank:
    counts = empty_resources()
    for card in cards:
        counts[check_resource(card)] += 1
    return counts


class ResourceStock:
    """Non-negative count of cards per resource kind."""

    def __init__(self, initial: Optional[Mapping[Resource, int]] = None) -> None:
        self._resources: ResourceBank = empty_resources()
        if initial:
            self.add(initial)

    def get(self, resource: Resource) -> int:
        return self._resources[check_resource(resource)]

    def set(self, resource: Resource, amount: int) -> None:
        self._resources[check_resource(resource)] = _check_amount(amount)

    def total(self) -> int:
        return sum(self._resources.values())

    def as_dict(self) -> ResourceBank:
        return dict(self._resources)

    def available_up_to(self, resource: Resource, requested: int) -> int:
        return min(self.get(resource), _check_amount(requested))

    def has_at_least(self, resource: Resource, amount: int) -> bool:
        return self.get(resource) >= _check_amount(amount)

    def has_all(self, bundle: Mapping[Resource, int]) -> bool:
        if bundle is None:
            raise ValueError("Bundle must not be None")
        return all(self.has_at_least(res, amount) for res, amount in bundle.items())

    def add(self, resources: Mapping[Resource, int]) -> None:
        if resources is None:
            raise ValueError("Resources must not be None")
        for res, amount in resources.items():
            self._resources[check_resource(res)] += _check_amount(amount)

    def add_cards(self, cards: Iterable[Resource]) -> None:
        self.add(count_resources(cards))

    def remove(self, resources: Mapping[Resource, int]) -> ResourceBank:
        """Remove up to the requested amounts and return what was removed."""
        if resources is None:
            raise ValueError("Resources must not be None")
        removed = empty_resources()
        for res, amount in resources.items():
            taken = self.available_up_to(res, amount)
            self._resources[res] -= taken
            removed[res] = taken
        return removed

    def kinds_held(self) -> List[Resource]:
        return [res for res, amount in self._resources.items() if amount > 0]

    def __repr__(self) -> str:
        held = ", ".join(f"{res.value}={amount}" for res, amount in self._resources.items())
        return f"{type(self).__name__}({held})"


class Bank(ResourceStock):
    def __init__(self, initial: Optional[Dict[Resource, int]] = None) -> None:
        if initial is None:
            initial = {res: DEFAULT_BANK_COUNT for res in Resource}
        super().__init__(initial)
