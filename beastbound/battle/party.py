"""Player roster: up to six creatures, slot 0 is the active combatant."""
from __future__ import annotations
from typing import Callable, List, Optional
from beastbound.core.logging import logger
from .models import Creature

PARTY_CAPACITY = 6

class Party:
    def __init__(self, members: Optional[List[Creature]] = None, *,
                 capacity: int = PARTY_CAPACITY,
                 on_change: Optional[Callable[[], None]] = None):
        self.members: List[Creature] = list(members or [])
        if len(self.members) > capacity:
            raise ValueError(f"party holds at most {capacity} creatures")
        self.capacity = capacity
        self.on_change = on_change

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self):
        return iter(self.members)

    def __getitem__(self, index: int) -> Creature:
        return self.members[index]

    def _persist(self):
        if self.on_change:
            self.on_change()

    def active(self) -> Creature:
        if not self.members:
            raise IndexError("party is empty")
        return self.members[0]

    def is_full(self) -> bool:
        return len(self.members) >= self.capacity

    def has_living(self) -> bool:
        return any(m.hp > 0 for m in self.members)

    def first_living_reserve(self) -> Optional[int]:
        for i, m in enumerate(self.members):
            if i > 0 and m.hp > 0:
                return i
        return None

    def swap(self, i: int, j: int) -> bool:
        n = len(self.members)
        if not (0 <= i < n and 0 <= j < n):
            return False
        if i != j:
            self.members[i], self.members[j] = self.members[j], self.members[i]
        return True

    def sync_active_hp(self, hp: int):
        """Copy an in-battle HP value back onto the active party entry."""
        self.active().set_hp(hp)

    def add_starter(self, creature: Creature):
        if self.members:
            raise ValueError("starter already chosen")
        self.members.append(creature)
        logger.info("StarterChosen", species=creature.species_id, level=creature.level)
        self._persist()

    def try_capture(self, creature: Creature) -> bool:
        if self.is_full():
            logger.debug("CaptureRejectedPartyFull", species=creature.species_id)
            return False
        self.members.append(creature.clone())
        logger.info("CreatureCaptured", species=creature.species_id, hp=creature.hp, max_hp=creature.max_hp)
        self._persist()
        return True

    def heal_all(self):
        for m in self.members:
            m.full_heal()
        self._persist()

    def apply_wipe_recovery(self):
        for m in self.members:
            m.set_hp(max(1, m.max_hp // 2))
        logger.info("PartyWipeRecovery", size=len(self.members))
        self._persist()

    def to_list(self) -> List[dict]:
        return [m.to_dict() for m in self.members]

__all__ = ["Party", "PARTY_CAPACITY"]
