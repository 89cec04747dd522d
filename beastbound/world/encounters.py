from __future__ import annotations
import random
from typing import Optional
from beastbound.core.logging import logger
from beastbound.battle.factory import random_wild, create_from_species
from beastbound.battle.models import Creature
from .tilemap import TileKind

ENCOUNTER_RATE = 0.12
FIXED_FOE = "sprigbit"

class EncounterGenerator:
    def __init__(self, rng: Optional[random.Random] = None, rate: float = ENCOUNTER_RATE):
        self.rng = rng or random.Random()
        self.rate = rate

    def maybe_encounter(self, tile: TileKind) -> Optional[Creature]:
        if tile is not TileKind.GRASS:
            return None
        if self.rng.random() >= self.rate:
            return None
        foe = random_wild(self.rng)
        logger.info("WildEncounter", species=foe.species_id, level=foe.level, max_hp=foe.max_hp)
        return foe

    def fixed_encounter(self, species_id: str = FIXED_FOE) -> Creature:
        """Deterministic opponent for scripted (non-wild) battles."""
        foe = create_from_species(species_id, self.rng)
        logger.info("FixedEncounter", species=foe.species_id, level=foe.level)
        return foe

__all__ = ["EncounterGenerator", "ENCOUNTER_RATE", "FIXED_FOE"]
