"""Per-battle state: the in-combat copy of the player's creature and the foe.

The player side is always a clone of the party entry; the party only sees
its HP again when the battle machine syncs it back.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Literal, Dict, Any
from .models import Creature
from .party import Party

TurnOwner = Literal["player", "enemy"]
Actor = Literal["player", "enemy", "system"]

@dataclass
class LogEntry:
    actor: Actor
    text: str

@dataclass
class BattleSession:
    player: Creature
    foe: Creature
    is_wild: bool = True
    turn_owner: TurnOwner = "player"
    log: List[LogEntry] = field(default_factory=list)

    @classmethod
    def begin(cls, party: Party, foe: Creature, *, is_wild: bool = True) -> "BattleSession":
        return cls(player=party.active().clone(), foe=foe, is_wild=is_wild)

    def record(self, actor: Actor, text: str) -> LogEntry:
        entry = LogEntry(actor, text)
        self.log.append(entry)
        return entry

    def entries_for(self, actor: Actor) -> List[LogEntry]:
        return [e for e in self.log if e.actor == actor]

    @property
    def foe_label(self) -> str:
        return f"Wild {self.foe.name}" if self.is_wild else self.foe.name

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player": self.player.to_dict(),
            "foe": self.foe.to_dict(),
            "turn": self.turn_owner,
            "wild": self.is_wild,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BattleSession":
        turn = data.get("turn", "player")
        if turn not in ("player", "enemy"):
            raise ValueError(f"bad turn owner {turn!r}")
        return cls(
            player=Creature.from_dict(data["player"]),
            foe=Creature.from_dict(data["foe"]),
            is_wild=bool(data.get("wild", True)),
            turn_owner=turn,
        )

__all__ = ["BattleSession", "LogEntry", "TurnOwner"]
