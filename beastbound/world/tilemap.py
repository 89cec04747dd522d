from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

MAP_WIDTH = 20
MAP_HEIGHT = 15
START_POSITION: Tuple[int, int] = (5, 6)

class TileKind(Enum):
    GROUND = 0
    GRASS = 1
    WATER = 2
    REST = 3

@dataclass
class TileMap:
    width: int
    height: int
    tiles: List[List[TileKind]]  # row-major, tiles[y][x]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def kind_at(self, x: int, y: int) -> TileKind:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) is off the map")
        return self.tiles[y][x]

def default_map() -> TileMap:
    """The village outskirts: a band of tall grass, a stream and the rest hut."""
    rows: List[List[TileKind]] = []
    for y in range(MAP_HEIGHT):
        row: List[TileKind] = []
        for x in range(MAP_WIDTH):
            kind = TileKind.GROUND
            if 2 < x < 17 and 3 < y < 12:
                kind = TileKind.GRASS
            if x < 3 or x > 16 or y < 2 or y > 12:
                kind = TileKind.GROUND
            if x == 10 and 1 < y < 6:
                kind = TileKind.WATER
            if x == 2 and y == 2:
                kind = TileKind.REST
            row.append(kind)
        rows.append(row)
    return TileMap(MAP_WIDTH, MAP_HEIGHT, rows)

__all__ = ["TileKind", "TileMap", "default_map", "START_POSITION", "MAP_WIDTH", "MAP_HEIGHT"]
