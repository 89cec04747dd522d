import pytest

from beastbound.battle.capture import attempt_bind, bind_chance, flee_success
from tests.helpers import DummyRng


def test_bind_chance_tiers():
    assert bind_chance(50, 50) == pytest.approx(0.15)
    assert bind_chance(25, 50) == pytest.approx(0.15)   # exactly half is not below half
    assert bind_chance(24, 50) == pytest.approx(0.40)
    assert bind_chance(12, 50) == pytest.approx(0.65)
    assert bind_chance(0, 50) == pytest.approx(0.65)


def test_bind_chance_monotonic_as_hp_drops():
    last = 0.0
    for hp in range(100, -1, -1):
        c = bind_chance(hp, 100)
        assert c >= last
        last = c


def test_full_party_never_binds():
    res = attempt_bind(DummyRng(roll=0.0), 1, 100, party_full=True)
    assert not res.success
    assert res.party_full


def test_bind_roll():
    assert attempt_bind(DummyRng(roll=0.0), 50, 50, party_full=False).success
    assert not attempt_bind(DummyRng(roll=0.15), 50, 50, party_full=False).success
    assert attempt_bind(DummyRng(roll=0.6), 5, 50, party_full=False).success


def test_flee_threshold():
    assert flee_success(DummyRng(roll=0.5))
    assert not flee_success(DummyRng(roll=0.75))
    assert not flee_success(DummyRng(roll=0.9))
