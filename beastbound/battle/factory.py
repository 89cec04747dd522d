"""Factory helpers for constructing Creature instances from species templates.

Shared across the encounter generator, starter selection and tests.
"""
from __future__ import annotations
import random
from typing import Tuple
from .models import Creature
from beastbound.data.catalog import get_species, wild_pool

COMPANION_LEVELS: Tuple[int, int] = (5, 7)
WILD_LEVELS: Tuple[int, int] = (3, 7)
WILD_HP_BONUS: Tuple[int, int] = (0, 9)

def create_from_species(species_id: str, rng: random.Random, level_range: Tuple[int, int] = COMPANION_LEVELS) -> Creature:
    tpl = get_species(species_id)
    lo, hi = level_range
    return Creature(
        species_id=species_id,
        name=tpl.name,
        color=tpl.color,
        max_hp=tpl.base_hp,
        hp=tpl.base_hp,
        moves=list(tpl.move_keys),
        level=rng.randint(lo, hi),
    )

def create_wild(species_id: str, rng: random.Random) -> Creature:
    beast = create_from_species(species_id, rng, WILD_LEVELS)
    beast.max_hp += rng.randint(*WILD_HP_BONUS)
    # spawn at full health including the bonus
    beast.hp = beast.max_hp
    return beast

def random_wild(rng: random.Random) -> Creature:
    return create_wild(rng.choice(wild_pool()), rng)

__all__ = ["create_from_species", "create_wild", "random_wild", "COMPANION_LEVELS", "WILD_LEVELS", "WILD_HP_BONUS"]
