import random
from collections import Counter

import pytest

from settlers.engine.bank import Bank
from settlers.engine.game_state import initial_game_state
from settlers.engine.rules import resources_to_pay_per_faction, roll_dice
from settlers.engine.types import CornerStructure, Faction, Resource, Structure


def _state(bank=None, players=3, seed=4):
    return initial_game_state(5, players, rng=random.Random(seed), bank=bank)


def _settle(state, faction, corner, city=False):
    kind = Structure.CITY if city else Structure.SETTLEMENT
    state.board.set_corner(corner, CornerStructure(faction, kind))


def test_roll_pays_every_structure_on_matching_fields():
    state = _state()
    # grain field (4, 14) and forest (10, 8) both carry a 10
    _settle(state, Faction.RED, (3, 13))
    _settle(state, Faction.RED, (4, 16))
    _settle(state, Faction.RED, (10, 6))
    _settle(state, Faction.BLUE, (11, 9))

    payout = state.throw_dice(10)
    assert Counter(payout[Faction.RED]) == Counter(
        {Resource.GRAIN: 2, Resource.LUMBER: 1}
    )
    assert payout[Faction.BLUE] == [Resource.LUMBER]
    assert payout[Faction.GREEN] == []
    assert state.players[0].get(Resource.GRAIN) == 2
    assert state.bank.get(Resource.LUMBER) == 17
    assert state.bank.get(Resource.GRAIN) == 17


def test_city_pays_double():
    state = _state()
    _settle(state, Faction.RED, (7, 3), city=True)
    assert state.throw_dice(3)[Faction.RED] == [Resource.WOOL, Resource.WOOL]


def test_shortage_pays_exclusive_owner_and_withholds_shared_field():
    state = _state(bank=Bank({Resource.GRAIN: 1, Resource.LUMBER: 1}))
    _settle(state, Faction.RED, (3, 13))
    _settle(state, Faction.RED, (4, 16))
    _settle(state, Faction.RED, (10, 6))
    _settle(state, Faction.BLUE, (11, 9))

    payout = state.throw_dice(10)
    assert payout[Faction.RED] == [Resource.GRAIN]
    assert payout[Faction.BLUE] == []
    assert state.bank.get(Resource.GRAIN) == 0
    assert state.bank.get(Resource.LUMBER) == 1
    assert state.players[0].get(Resource.LUMBER) == 0
    assert state.players[1].get(Resource.LUMBER) == 0


def test_exclusive_owner_gets_what_is_left():
    state = _state(bank=Bank({Resource.WOOL: 1}))
    _settle(state, Faction.RED, (7, 3), city=True)
    assert state.throw_dice(3)[Faction.RED] == [Resource.WOOL]
    assert state.bank.get(Resource.WOOL) == 0


def test_mixed_owners_get_nothing_on_shortage():
    state = _state(bank=Bank({Resource.WOOL: 2}))
    _settle(state, Faction.RED, (7, 3), city=True)
    _settle(state, Faction.BLUE, (8, 6))

    payout = state.throw_dice(3)
    assert payout[Faction.RED] == []
    assert payout[Faction.BLUE] == []
    assert state.bank.get(Resource.WOOL) == 2


@pytest.mark.parametrize("city_owner, settlement_owner", [(Faction.RED, Faction.BLUE), (Faction.BLUE, Faction.RED)])
def test_scarce_resource_goes_to_first_player_in_turn_order(city_owner, settlement_owner):
    # pastures (9, 5) and (5, 17) both carry an 8 and each field is judged
    # against the one wool the bank holds
    state = _state(bank=Bank({Resource.WOOL: 1}))
    _settle(state, city_owner, (9, 3), city=True)
    _settle(state, settlement_owner, (5, 15))

    plan = resources_to_pay_per_faction(state, 8)
    assert plan[city_owner][Resource.WOOL] == 1
    assert plan[settlement_owner][Resource.WOOL] == 1

    payout = state.throw_dice(8)
    assert payout[Faction.RED] == [Resource.WOOL]
    assert payout[Faction.BLUE] == []
    assert state.bank.get(Resource.WOOL) == 0


def test_fields_of_one_roll_do_not_starve_each_other():
    # two wool left: each pasture is covered on its own, both are paid
    state = _state(bank=Bank({Resource.WOOL: 2}))
    _settle(state, Faction.BLUE, (9, 3))
    _settle(state, Faction.GREEN, (5, 15))

    payout = state.throw_dice(8)
    assert payout[Faction.BLUE] == [Resource.WOOL]
    assert payout[Faction.GREEN] == [Resource.WOOL]
    assert state.bank.get(Resource.WOOL) == 0


def test_payout_plan_does_not_touch_stocks():
    state = _state()
    _settle(state, Faction.RED, (7, 3))
    plan = resources_to_pay_per_faction(state, 3)
    assert plan[Faction.RED][Resource.WOOL] == 1
    assert state.bank.get(Resource.WOOL) == 19
    assert state.players[0].total() == 0


def test_thief_blocks_field():
    state = _state()
    _settle(state, Faction.RED, (10, 12))
    assert state.board.set_thief_position((10, 14))
    assert state.throw_dice(12)[Faction.RED] == []

    assert state.board.set_thief_position((7, 11))
    assert state.throw_dice(12)[Faction.RED] == [Resource.WOOL]


def test_seven_halves_large_hands():
    state = _state()
    red, blue = state.players[0], state.players[1]
    hand = {
        Resource.GRAIN: 2,
        Resource.WOOL: 2,
        Resource.BRICK: 2,
        Resource.ORE: 1,
        Resource.LUMBER: 1,
    }
    red.add(state.bank.remove(hand))
    blue.add(state.bank.remove({Resource.ORE: 7}))

    payout = state.throw_dice(7)
    assert payout == {Faction.RED: [], Faction.BLUE: [], Faction.GREEN: []}
    assert red.total() == 4
    assert blue.total() == 7
    assert state.bank.total() == 95 - 4 - 7


def test_seven_pays_nothing():
    state = _state()
    _settle(state, Faction.RED, (6, 10))
    state.throw_dice(7)
    assert state.players[0].total() == 0


@pytest.mark.parametrize("value", [1, 13, None])
def test_dice_value_range(value):
    with pytest.raises(ValueError):
        _state().throw_dice(value)


def test_roll_dice_sums_two_dice():
    rng = random.Random(9)
    rolls = [roll_dice(rng) for _ in range(200)]
    assert min(rolls) >= 2
    assert max(rolls) <= 12
    assert 7 in rolls
