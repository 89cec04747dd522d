"""Presentation boundary: what the core asks the player.

Each prompt is a message plus the choices currently on offer. The
presentation layer shows it and sends back exactly one choice value.
A prompt without choices means input is closed until the core emits again.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

@dataclass(frozen=True)
class Choice:
    label: str
    value: str

@dataclass
class Prompt:
    message: str
    choices: List[Choice] = field(default_factory=list)

    @property
    def accepts_input(self) -> bool:
        return bool(self.choices)

    def values(self) -> List[str]:
        return [c.value for c in self.choices]

    def find(self, value: str) -> Optional[Choice]:
        for c in self.choices:
            if c.value == value:
                return c
        return None

CONTINUE = Choice("Continue", "continue")
BACK = Choice("Back", "back")

__all__ = ["Choice", "Prompt", "CONTINUE", "BACK"]
