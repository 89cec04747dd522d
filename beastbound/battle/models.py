from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any

@dataclass
class Creature:
    species_id: str
    name: str
    color: str
    max_hp: int
    hp: int
    moves: List[str] = field(default_factory=list)
    level: int = 5

    def __post_init__(self):
        if self.max_hp <= 0:
            raise ValueError(f"{self.name}: max_hp must be positive (got {self.max_hp})")
        if self.level <= 0:
            raise ValueError(f"{self.name}: level must be positive (got {self.level})")
        if not self.moves:
            raise ValueError(f"{self.name}: a creature needs at least one move")
        self.hp = max(0, min(int(self.hp), self.max_hp))

    @property
    def fainted(self) -> bool:
        return self.hp == 0

    @property
    def hp_ratio(self) -> float:
        return self.hp / self.max_hp

    def clone(self) -> "Creature":
        """Independent copy; the move list is not shared with the original."""
        return Creature(species_id=self.species_id, name=self.name, color=self.color,
                        max_hp=self.max_hp, hp=self.hp, moves=list(self.moves), level=self.level)

    def take_damage(self, amount: int) -> int:
        before = self.hp
        self.hp = max(0, min(self.hp - amount, self.max_hp))
        return before - self.hp

    def restore(self, amount: int) -> int:
        before = self.hp
        self.hp = max(0, min(self.hp + amount, self.max_hp))
        return self.hp - before

    def set_hp(self, hp: int):
        self.hp = max(0, min(int(hp), self.max_hp))

    def full_heal(self):
        self.hp = self.max_hp

    def to_dict(self) -> Dict[str, Any]:
        return {
            "species_id": self.species_id,
            "name": self.name,
            "color": self.color,
            "max_hp": self.max_hp,
            "hp": self.hp,
            "moves": list(self.moves),
            "level": self.level,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Creature":
        hp = int(data["hp"])
        max_hp = int(data["max_hp"])
        if hp < 0 or hp > max_hp:
            raise ValueError(f"hp {hp} outside [0, {max_hp}]")
        return cls(
            species_id=str(data["species_id"]),
            name=str(data["name"]),
            color=str(data.get("color", "#ffffff")),
            max_hp=max_hp,
            hp=hp,
            moves=[str(m) for m in data["moves"]],
            level=int(data["level"]),
        )

__all__ = ["Creature"]
