from __future__ import annotations
from enum import Enum
from typing import Optional, Tuple
from .tilemap import TileMap

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def parse(cls, name: str) -> "Direction":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown direction '{name}'") from None

def next_position(pos: Tuple[int, int], direction: Direction, tilemap: TileMap) -> Optional[Tuple[int, int]]:
    """Target square for a step, or None when it would leave the map."""
    dx, dy = direction.value
    nx, ny = pos[0] + dx, pos[1] + dy
    if not tilemap.in_bounds(nx, ny):
        return None
    return nx, ny

__all__ = ["Direction", "next_position"]
