"""
Rich renderables for the map, the battle HUD and prompt panels.
Pure functions of game state; nothing here mutates the context.
"""
from __future__ import annotations
from typing import Tuple

from rich.box import ROUNDED
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from beastbound.battle.models import Creature
from beastbound.battle.session import BattleSession
from beastbound.game.prompts import Prompt
from beastbound.world.tilemap import TileKind, TileMap

TILE_GLYPHS = {
    TileKind.GROUND: (".", "grey50"),
    TileKind.GRASS: ('"', "green"),
    TileKind.WATER: ("~", "blue"),
    TileKind.REST: ("R", "bold yellow"),
}
PLAYER_GLYPH = ("@", "bold bright_white")

def hp_color(hp: int, max_hp: int) -> str:
    ratio = hp / max_hp if max_hp else 0.0
    if ratio > 0.5:
        return "green"
    if ratio > 0.25:
        return "yellow"
    return "red"

def hp_bar(creature: Creature, width: int = 20) -> Text:
    filled = (creature.hp * width) // creature.max_hp
    bar = Text()
    bar.append("█" * filled, style=hp_color(creature.hp, creature.max_hp))
    bar.append("░" * (width - filled), style="grey30")
    bar.append(f" {creature.hp}/{creature.max_hp}")
    return bar

def creature_plate(creature: Creature, title: str) -> Panel:
    head = Text()
    head.append("■ ", style=creature.color)
    head.append(f"{creature.name} Lv.{creature.level}", style="bold")
    return Panel(Group(head, hp_bar(creature)), title=title, box=ROUNDED, width=36)

def battle_view(session: BattleSession) -> Group:
    return Group(
        creature_plate(session.foe, session.foe_label),
        creature_plate(session.player, "You"),
    )

def map_view(tilemap: TileMap, position: Tuple[int, int]) -> Panel:
    text = Text()
    for y in range(tilemap.height):
        for x in range(tilemap.width):
            if (x, y) == position:
                glyph, style = PLAYER_GLYPH
            else:
                glyph, style = TILE_GLYPHS[tilemap.kind_at(x, y)]
            text.append(glyph, style=style)
        text.append("\n")
    text.rstrip()
    return Panel(text, title="Verdant Outskirts", box=ROUNDED, expand=False)

def party_table(members) -> Table:
    table = Table(box=ROUNDED, show_header=True, title="Party")
    table.add_column("#", justify="right")
    table.add_column("Beast")
    table.add_column("Lv", justify="right")
    table.add_column("HP")
    for idx, b in enumerate(members):
        table.add_row(str(idx), b.name, str(b.level), hp_bar(b, width=10))
    return table

def prompt_panel(prompt: Prompt) -> Panel:
    return Panel(prompt.message or "...", box=ROUNDED, style="bright_white")
