from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from .bank import check_resource, count_resources
from .config import COSTS, DICE_DROP_VALUE, TRADE_OFFER, TRADE_WANT, check_dice_value
from .game_state import GameState
from .hexgrid import check_coordinate
from .types import (
    Coordinate,
    CornerStructure,
    Faction,
    Land,
    Resource,
    ResourceBank,
    Road,
    Structure,
    empty_resources,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleViolation:
    reason: str


def _cards(resources: ResourceBank) -> List[Resource]:
    cards: List[Resource] = []
    for resource in Resource:
        cards.extend([resource] * resources.get(resource, 0))
    return cards


def _pay_cost(state: GameState, structure: Structure) -> None:
    paid = state.current_player.remove(COSTS[structure])
    state.bank.add(paid)


def _reject(operation: str, state: GameState, violations: List[RuleViolation]) -> bool:
    logger.debug(
        "%s rejected for %s: %s",
        operation,
        state.current_player_faction().name,
        ", ".join(v.reason for v in violations),
    )
    return False


def _touches_land(state: GameState, corner: Coordinate) -> bool:
    return any(land is not Land.WATER for land in state.board.lands_for_corner(corner))


def _has_road_to_corner(state: GameState, corner: Coordinate) -> bool:
    faction = state.current_player_faction()
    return any(road.is_owned_by(faction) for road in state.board.get_adjacent_edges(corner))


def check_initial_settlement(state: GameState, corner: Coordinate) -> List[RuleViolation]:
    check_coordinate(corner)
    board = state.board
    if not board.is_corner(corner):
        return [RuleViolation(reason="invalid_corner")]

    violations: List[RuleViolation] = []
    if board.get_corner(corner) is not None:
        violations.append(RuleViolation(reason="corner_occupied"))
    if not _touches_land(state, corner):
        violations.append(RuleViolation(reason="corner_on_water"))
    if board.get_neighbours_of_corner(corner):
        violations.append(RuleViolation(reason="too_close_to_settlement"))
    if not state.current_player.has_structure(Structure.SETTLEMENT):
        violations.append(RuleViolation(reason="no_settlement_left"))
    return violations


def check_settlement(state: GameState, corner: Coordinate) -> List[RuleViolation]:
    violations = check_initial_settlement(state, corner)
    if any(v.reason == "invalid_corner" for v in violations):
        return violations
    if not _has_road_to_corner(state, corner):
        violations.append(RuleViolation(reason="no_connecting_road"))
    if not state.current_player.has_all(COSTS[Structure.SETTLEMENT]):
        violations.append(RuleViolation(reason="insufficient_resources"))
    return violations


def check_city(state: GameState, corner: Coordinate) -> List[RuleViolation]:
    check_coordinate(corner)
    board = state.board
    if not board.is_corner(corner):
        return [RuleViolation(reason="invalid_corner")]

    violations: List[RuleViolation] = []
    occupant = board.get_corner(corner)
    if occupant is None or not occupant.is_owned_by(state.current_player_faction()):
        violations.append(RuleViolation(reason="no_own_settlement"))
    elif occupant.is_city:
        violations.append(RuleViolation(reason="already_city"))
    if not state.current_player.has_structure(Structure.CITY):
        violations.append(RuleViolation(reason="no_city_left"))
    if not state.current_player.has_all(COSTS[Structure.CITY]):
        violations.append(RuleViolation(reason="insufficient_resources"))
    return violations


def check_road(
    state: GameState, a: Coordinate, b: Coordinate, initial: bool = False
) -> List[RuleViolation]:
    check_coordinate(a)
    check_coordinate(b)
    board = state.board
    if not board.has_edge(a, b):
        return [RuleViolation(reason="invalid_edge")]

    violations: List[RuleViolation] = []
    faction = state.current_player_faction()
    if board.get_edge(a, b) is not None:
        violations.append(RuleViolation(reason="edge_occupied"))
    if not (_touches_land(state, a) or _touches_land(state, b)):
        violations.append(RuleViolation(reason="edge_on_water"))

    start, end = board.get_corner(a), board.get_corner(b)
    if any(s is not None and not s.is_owned_by(faction) for s in (start, end)):
        violations.append(RuleViolation(reason="foreign_structure"))
    elif start is None and end is None:
        if not (_has_road_to_corner(state, a) or _has_road_to_corner(state, b)):
            violations.append(RuleViolation(reason="not_connected"))

    if not state.current_player.has_structure(Structure.ROAD):
        violations.append(RuleViolation(reason="no_road_left"))
    if not initial and not state.current_player.has_all(COSTS[Structure.ROAD]):
        violations.append(RuleViolation(reason="insufficient_resources"))
    return violations


def check_trade(state: GameState, offer: Resource, want: Resource) -> List[RuleViolation]:
    check_resource(offer)
    check_resource(want)
    violations: List[RuleViolation] = []
    if not state.current_player.has_at_least(offer, TRADE_OFFER):
        violations.append(RuleViolation(reason="insufficient_resources"))
    if not state.bank.has_at_least(want, TRADE_WANT):
        violations.append(RuleViolation(reason="bank_depleted"))
    return violations


def place_initial_settlement(state: GameState, corner: Coordinate, payout: bool) -> bool:
    violations = check_initial_settlement(state, corner)
    if violations:
        return _reject("Initial settlement", state, violations)

    player = state.current_player
    settlement = CornerStructure(owner=player.faction)
    state.board.set_corner(corner, settlement)
    player.remove_structure(Structure.SETTLEMENT)
    player.add_points(settlement.points)

    received: ResourceBank = empty_resources()
    if payout:
        award = count_resources(
            land.resource for land in state.board.lands_for_corner(corner) if land.resource
        )
        received = state.bank.remove(award)
        player.add(received)
    logger.info(
        "%s placed initial settlement at %s, received %s",
        player.faction.name,
        tuple(corner),
        [r.value for r in _cards(received)],
    )
    return True


def place_initial_road(state: GameState, a: Coordinate, b: Coordinate) -> bool:
    violations = check_road(state, a, b, initial=True)
    if violations:
        return _reject("Initial road", state, violations)

    player = state.current_player
    player.remove_structure(Structure.ROAD)
    state.board.set_edge(a, b, Road(owner=player.faction))
    logger.info("%s placed initial road %s-%s", player.faction.name, tuple(a), tuple(b))
    return True


def build_settlement(state: GameState, corner: Coordinate) -> bool:
    violations = check_settlement(state, corner)
    if violations:
        return _reject("Settlement", state, violations)

    player = state.current_player
    _pay_cost(state, Structure.SETTLEMENT)
    player.remove_structure(Structure.SETTLEMENT)
    settlement = CornerStructure(owner=player.faction)
    state.board.set_corner(corner, settlement)
    player.add_points(settlement.points)
    logger.info("%s built settlement at %s", player.faction.name, tuple(corner))
    return True


def build_city(state: GameState, corner: Coordinate) -> bool:
    violations = check_city(state, corner)
    if violations:
        return _reject("City", state, violations)

    player = state.current_player
    settlement = state.board.get_corner(corner)
    city = settlement.promote()
    _pay_cost(state, Structure.CITY)
    player.remove_structure(Structure.CITY)
    player.add_structure(Structure.SETTLEMENT)
    state.board.set_corner(corner, city)
    player.remove_points(settlement.points)
    player.add_points(city.points)
    logger.info("%s built city at %s", player.faction.name, tuple(corner))
    return True


def build_road(state: GameState, a: Coordinate, b: Coordinate) -> bool:
    violations = check_road(state, a, b)
    if violations:
        return _reject("Road", state, violations)

    player = state.current_player
    _pay_cost(state, Structure.ROAD)
    player.remove_structure(Structure.ROAD)
    state.board.set_edge(a, b, Road(owner=player.faction))
    logger.info("%s built road %s-%s", player.faction.name, tuple(a), tuple(b))
    return True


def trade_with_bank_four_to_one(state: GameState, offer: Resource, want: Resource) -> bool:
    violations = check_trade(state, offer, want)
    if violations:
        return _reject("Trade", state, violations)

    player = state.current_player
    state.bank.add(player.remove({offer: TRADE_OFFER}))
    player.add(state.bank.remove({want: TRADE_WANT}))
    logger.info(
        "%s traded %d %s for %d %s",
        player.faction.name,
        TRADE_OFFER,
        offer.value,
        TRADE_WANT,
        want.value,
    )
    return True


def resources_to_pay_per_faction(state: GameState, value: int) -> Dict[Faction, ResourceBank]:
    """Resources each faction earns from a roll, without touching any stock.

    Every field is judged against the bank as it stands before the roll. A
    field pays in full when the bank covers every request on it. When it does
    not, a field owned by a single faction pays that faction what the bank
    holds, and a field shared between factions pays nobody. The plan can ask
    for more than the bank holds in total; throw_dice then hands out cards in
    turn order until the stock runs out.
    """
    check_dice_value(value)
    payout: Dict[Faction, ResourceBank] = {
        faction: empty_resources() for faction in state.player_factions()
    }
    for coord in state.board.fields_for_dice_value(value):
        resource = state.board.get_field(coord).resource
        requested: Dict[Faction, int] = {}
        for structure in state.board.get_corners_of_field(coord):
            requested[structure.owner] = requested.get(structure.owner, 0) + structure.payout_factor
        total = sum(requested.values())
        if total == 0:
            continue

        available = state.bank.get(resource)
        if available >= total:
            granted = requested
        elif len(requested) == 1:
            (owner,) = requested
            granted = {owner: available}
        else:
            logger.debug("Withholding %s from shared field %s", resource.value, coord)
            granted = {}

        for faction, amount in granted.items():
            payout.setdefault(faction, empty_resources())[resource] += amount
    return payout


def throw_dice(state: GameState, value: int) -> Dict[Faction, List[Resource]]:
    """Resolve a roll and return the cards each faction received."""
    check_dice_value(value)
    if value == DICE_DROP_VALUE:
        for player in state.players:
            dropped = player.drop_half_resources()
            state.bank.add(dropped)
            if any(dropped.values()):
                logger.info("%s dropped %s", player.faction.name, [r.value for r in _cards(dropped)])
        return {faction: [] for faction in state.player_factions()}

    payout = resources_to_pay_per_faction(state, value)
    # Earlier players draw first when the plan exceeds the bank.
    received: Dict[Faction, List[Resource]] = {}
    for player in state.players:
        taken = state.bank.remove(payout[player.faction])
        player.add(taken)
        received[player.faction] = _cards(taken)
    logger.debug("Roll %d paid %s", value, {f.name: [r.value for r in c] for f, c in received.items()})
    return received


def place_thief_and_steal_card(state: GameState, field_coord: Coordinate) -> bool:
    check_coordinate(field_coord)
    if not state.board.set_thief_position(field_coord):
        logger.debug("Thief cannot be placed on %s", tuple(field_coord))
        return False

    thief = state.current_player
    logger.info("%s moved the thief to %s", thief.faction.name, tuple(field_coord))
    targets = [
        structure
        for structure in state.board.get_corners_of_field(field_coord)
        if not structure.is_owned_by(thief.faction)
    ]
    if not targets:
        return True

    victim = state.player_for(state.rng.choice(targets).owner)
    stolen = victim.steal_random_resource()
    if stolen is None:
        logger.info("%s had nothing to steal", victim.faction.name)
    else:
        thief.add({stolen: 1})
        logger.info("%s stole %s from %s", thief.faction.name, stolen.value, victim.faction.name)
    return True


def get_winner(state: GameState) -> Optional[Faction]:
    for player in state.players:
        if player.points >= state.required_win_points:
            return player.faction
    return None


def roll_dice(rng: random.Random) -> int:
    return rng.randint(1, 6) + rng.randint(1, 6)
