"""Bind (capture) and flee probability model."""
from __future__ import annotations
from dataclasses import dataclass
import random

BIND_BASE_CHANCE = 0.15
BIND_HALF_HP_BONUS = 0.25     # foe below 50% HP
BIND_QUARTER_HP_BONUS = 0.25  # foe below 25% HP, stacks with the above
RUN_SUCCESS_CHANCE = 0.75

@dataclass
class CaptureResult:
    success: bool
    chance: float
    party_full: bool = False


def bind_chance(current_hp: int, max_hp: int) -> float:
    ratio = current_hp / max_hp if max_hp > 0 else 0.0
    chance = BIND_BASE_CHANCE
    if ratio < 0.5:
        chance += BIND_HALF_HP_BONUS
    if ratio < 0.25:
        chance += BIND_QUARTER_HP_BONUS
    return chance


def attempt_bind(rng: random.Random, current_hp: int, max_hp: int, *, party_full: bool) -> CaptureResult:
    """Roll a bind attempt.

    A full party can never receive the foe, so the attempt fails before any
    roll is made.
    """
    chance = bind_chance(current_hp, max_hp)
    if party_full:
        return CaptureResult(False, chance, party_full=True)
    return CaptureResult(rng.random() < chance, chance)


def flee_success(rng: random.Random, chance: float = RUN_SUCCESS_CHANCE) -> bool:
    return rng.random() < chance

__all__ = ["attempt_bind","bind_chance","flee_success","CaptureResult","RUN_SUCCESS_CHANCE"]
