import pytest

from beastbound.battle.party import Party, PARTY_CAPACITY
from tests.helpers import beast


def test_capture_respects_capacity():
    saves = []
    party = Party([beast(name=f"B{i}") for i in range(5)], on_change=lambda: saves.append(1))
    foe = beast(name="Pebblit", hp=7, max_hp=55)
    assert party.try_capture(foe)
    assert len(party) == PARTY_CAPACITY
    assert saves == [1]
    # Stored entry is a copy with the HP it had when bound
    assert party[5] is not foe
    assert (party[5].hp, party[5].max_hp) == (7, 55)
    assert not party.try_capture(beast(name="Extra"))
    assert len(party) == PARTY_CAPACITY
    assert saves == [1]


def test_party_cannot_start_over_capacity():
    with pytest.raises(ValueError):
        Party([beast() for _ in range(7)])


def test_swap_and_reserve_lookup():
    party = Party([beast(name="A", hp=0), beast(name="B", hp=0), beast(name="C", hp=9)])
    assert party.first_living_reserve() == 2
    assert party.swap(0, 2)
    assert party.active().name == "C"
    assert not party.swap(0, 3)
    assert party.swap(1, 1)


def test_heal_and_wipe_recovery():
    saves = []
    party = Party([beast(hp=0, max_hp=50), beast(hp=0, max_hp=41), beast(hp=0, max_hp=1)],
                  on_change=lambda: saves.append(1))
    assert not party.has_living()
    party.apply_wipe_recovery()
    assert [m.hp for m in party] == [25, 20, 1]
    party.heal_all()
    assert [m.hp for m in party] == [50, 41, 1]
    assert len(saves) == 2


def test_starter_only_once():
    party = Party()
    party.add_starter(beast())
    with pytest.raises(ValueError):
        party.add_starter(beast())
