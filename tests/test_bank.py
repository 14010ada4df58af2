import pytest

from settlers.engine.bank import Bank, ResourceStock
from settlers.engine.types import Resource


def test_bank_starts_with_nineteen_of_each():
    bank = Bank()
    assert all(bank.get(res) == 19 for res in Resource)
    assert bank.total() == 95


def test_available_up_to():
    bank = Bank({Resource.GRAIN: 2})
    assert bank.available_up_to(Resource.GRAIN, 5) == 2
    assert bank.available_up_to(Resource.GRAIN, 1) == 1
    assert bank.available_up_to(Resource.ORE, 3) == 0
    with pytest.raises(ValueError):
        bank.available_up_to(None, 1)


def test_remove_is_clamped():
    bank = Bank({Resource.GRAIN: 2, Resource.ORE: 4})
    removed = bank.remove({Resource.GRAIN: 5, Resource.ORE: 1})
    assert removed[Resource.GRAIN] == 2
    assert removed[Resource.ORE] == 1
    assert bank.get(Resource.GRAIN) == 0
    assert bank.get(Resource.ORE) == 3


def test_add_and_has_at_least():
    stock = ResourceStock()
    stock.add({Resource.WOOL: 3})
    stock.add_cards([Resource.WOOL, Resource.BRICK])
    assert stock.has_at_least(Resource.WOOL, 4)
    assert not stock.has_at_least(Resource.WOOL, 5)
    assert stock.has_all({Resource.WOOL: 4, Resource.BRICK: 1})
    assert stock.kinds_held() == [Resource.BRICK, Resource.WOOL]


def test_negative_amounts_rejected():
    stock = ResourceStock()
    with pytest.raises(ValueError):
        stock.add({Resource.WOOL: -1})
    with pytest.raises(ValueError):
        stock.remove({Resource.WOOL: -1})
    with pytest.raises(ValueError):
        stock.add(None)


@pytest.mark.parametrize("amount", [1.5, True, "2", None])
def test_amounts_must_be_integers(amount):
    stock = ResourceStock()
    with pytest.raises(ValueError):
        stock.add({Resource.WOOL: amount})
    with pytest.raises(ValueError):
        stock.has_at_least(Resource.WOOL, amount)
    assert stock.get(Resource.WOOL) == 0
