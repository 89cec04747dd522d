import random

from beastbound.battle.mechanics import accuracy_check, damage_roll, heal_roll, MIN_DAMAGE, MAX_DAMAGE
from tests.helpers import DummyRng


def test_damage_formula_extremes():
    # 16 + 6//2 with variance -3 / +3
    assert damage_roll(DummyRng(pick="low"), 16, 6) == 16
    assert damage_roll(DummyRng(pick="high"), 16, 6) == 22


def test_damage_always_clamped():
    for pick in ("low", "mid", "high"):
        rng = DummyRng(pick=pick)
        assert damage_roll(rng, -500, 1) == MIN_DAMAGE
        assert damage_roll(rng, 0, 0) >= MIN_DAMAGE
        assert damage_roll(rng, 5000, 100) == MAX_DAMAGE
    rng = random.Random(5)
    for power in range(-20, 40):
        for level in (1, 3, 7, 50):
            assert MIN_DAMAGE <= damage_roll(rng, power, level) <= MAX_DAMAGE


def test_accuracy_is_inclusive():
    assert accuracy_check(DummyRng(roll=0.95), 0.95)
    assert not accuracy_check(DummyRng(roll=0.96), 0.95)
    assert accuracy_check(DummyRng(roll=0.999), 1.0)


def test_heal_roll_range():
    assert heal_roll(DummyRng(pick="low"), 14) == 14
    assert heal_roll(DummyRng(pick="high"), 14) == 19
