"""Terminal front end: renders prompts and forwards key presses.

All game rules live in GameContext; this loop only draws, waits out the
enemy-turn delay and hands choices back.
"""
from __future__ import annotations
import time

from rich.console import Console

from beastbound.core.logging import logger
from beastbound.data.catalog import validate_catalog
from beastbound.game.context import GameContext
from beastbound.game.prompts import Choice
from beastbound.system.settings import Settings
from beastbound.ui.keys import Key, read_key, direction_for
from beastbound.ui.menu_nav import select_menu
from beastbound.ui.render import battle_view, map_view, party_table, prompt_panel

MAP_FOOTER = "Arrows/WASD to walk • Q or Esc to save and quit"

def draw(ctx: GameContext, console: Console):
    if ctx.mode == "battle" and ctx.battle is not None:
        console.print(battle_view(ctx.battle.session))
    elif ctx.mode == "map":
        console.print(map_view(ctx.map, ctx.position))
        console.print(party_table(ctx.party))
    if ctx.prompt is not None and ctx.prompt.message:
        console.print(prompt_panel(ctx.prompt))

def wait_for_enemy(ctx: GameContext, console: Console):
    """Block input while a deferred enemy turn is pending."""
    while ctx.scheduler.pending:
        console.clear()
        draw(ctx, console)
        time.sleep(ctx.scheduler.time_until_next() or 0.0)
        ctx.pump()

def title_menu(console: Console) -> str:
    """Continue or new game when a save exists. Esc means continue."""
    choice = select_menu("BEASTBOUND", [Choice("Continue", "continue"), Choice("New game", "new")], console)
    if choice != "new":
        return "continue"
    confirm = select_menu("Delete your save and start over?", [Choice("No", "no"), Choice("Yes", "yes")], console)
    return "new" if confirm == "yes" else "continue"

def run():
    settings = Settings.load()
    if not settings.path.exists():
        # leave an editable copy of the defaults
        settings.save()
    settings.apply_log_level()
    validate_catalog()
    ctx = GameContext(settings)
    console = Console()
    if ctx.store.exists() and title_menu(console) == "new":
        ctx.new_game()
    else:
        ctx.boot()
    try:
        while True:
            wait_for_enemy(ctx, console)
            prompt = ctx.prompt
            if prompt is not None and prompt.accepts_input:
                value = select_menu("BEASTBOUND", prompt.choices, console,
                                    header=lambda: draw(ctx, console))
                if value is None:
                    # Esc on a dismissible notice just closes it
                    if prompt.find("continue"):
                        ctx.handle("continue")
                    elif ctx.mode == "battle" and prompt.find("back"):
                        ctx.handle("back")
                    continue
                ctx.handle(value)
                continue
            console.clear()
            draw(ctx, console)
            console.print(MAP_FOOTER, style="dim")
            ev = read_key()
            if ev.key == Key.ESC:
                break
            direction = direction_for(ev.key)
            if direction is not None:
                ctx.step(direction)
    finally:
        if ctx.party.members:
            ctx.save()
        logger.info("GameExit", mode=ctx.mode)
