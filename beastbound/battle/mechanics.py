"""Move resolution math: accuracy, damage and healing rolls."""
from __future__ import annotations
import random

MIN_DAMAGE = 1
MAX_DAMAGE = 999
DAMAGE_VARIANCE = 3
HEAL_VARIANCE = 5
ENEMY_POWER_PENALTY = 4  # wild moves land a little softer

def clamp(v: int, lo: int, hi: int) -> int:
    return max(lo, min(v, hi))

def accuracy_check(rng: random.Random, accuracy: float) -> bool:
    return rng.random() <= accuracy

def damage_roll(rng: random.Random, power: int, attacker_level: int) -> int:
    base = power + attacker_level // 2
    variance = rng.randint(-DAMAGE_VARIANCE, DAMAGE_VARIANCE)
    return clamp(base + variance, MIN_DAMAGE, MAX_DAMAGE)

def heal_roll(rng: random.Random, power: int) -> int:
    return power + rng.randint(0, HEAL_VARIANCE)

__all__ = ["clamp","accuracy_check","damage_roll","heal_roll","ENEMY_POWER_PENALTY","MIN_DAMAGE","MAX_DAMAGE"]
