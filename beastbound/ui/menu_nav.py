"""
Vertical menu navigation over prompt choices, drawn with Rich.
"""
from __future__ import annotations
from typing import Callable, List, Optional

from rich.align import Align
from rich.box import ROUNDED
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from beastbound.game.prompts import Choice
from .keys import Key, read_key

FOOTER = "↑/↓ or W/S to move • Enter to select • Esc to cancel"

class Menu:
    def __init__(self, title: str, items: List[Choice], console: Console,
                 allow_escape: bool = True,
                 footer: Optional[str] = FOOTER,
                 header: Optional[Callable[[], None]] = None):
        self.title = title
        self.items = list(items)
        self.console = console
        self.allow_escape = allow_escape
        self.footer = footer
        self.header = header
        self.index = 0

    def move(self, delta: int):
        if self.items:
            self.index = (self.index + delta) % len(self.items)

    def table(self) -> Table:
        menu_table = Table(title=self.title, box=ROUNDED, show_header=False, width=60)
        menu_table.add_column("Option", justify="left")
        for i, item in enumerate(self.items):
            if i == self.index:
                menu_table.add_row(f"[bold cyan]► {item.label}[/bold cyan]")
            else:
                menu_table.add_row(f"  {item.label}")
        return menu_table

    def render(self):
        self.console.clear()
        if self.header:
            self.header()
        self.console.print(Align.center(self.table()))
        if self.footer:
            self.console.print(Panel(self.footer, style="dim", box=ROUNDED))

    def run(self) -> Optional[str]:
        while True:
            self.render()
            ev = read_key()
            if ev.key == Key.UP:
                self.move(-1)
            elif ev.key == Key.DOWN:
                self.move(1)
            elif ev.key == Key.ENTER:
                return self.items[self.index].value
            elif ev.key == Key.ESC and self.allow_escape:
                return None

def select_menu(title: str, choices: List[Choice], console: Console,
                header: Optional[Callable[[], None]] = None) -> Optional[str]:
    return Menu(title, choices, console, header=header).run()
