import pytest

from beastbound.battle.models import Creature
from tests.helpers import beast


def test_clone_is_independent():
    a = beast(hp=30)
    b = a.clone()
    assert b == a
    b.take_damage(10)
    b.moves.append("TideSnap")
    assert a.hp == 30
    assert a.moves == ["GlowPeck", "MoonMend"]


def test_hp_stays_in_range():
    a = beast(hp=10, max_hp=50)
    assert a.take_damage(25) == 10
    assert a.hp == 0 and a.fainted
    assert a.restore(500) == 50
    assert a.hp == 50
    a.set_hp(-4)
    assert a.hp == 0


def test_invalid_creatures_rejected():
    with pytest.raises(ValueError):
        beast(max_hp=0)
    with pytest.raises(ValueError):
        beast(moves=())
    with pytest.raises(ValueError):
        beast(level=0)


def test_dict_form():
    a = beast(hp=12, max_hp=40, level=4)
    data = a.to_dict()
    assert data["max_hp"] == 40 and data["hp"] == 12
    assert Creature.from_dict(data) == a
    data["hp"] = 41
    with pytest.raises(ValueError):
        Creature.from_dict(data)
