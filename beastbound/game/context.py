from __future__ import annotations
import random
from typing import Any, Callable, Dict, List, Literal, Optional, Tuple

from beastbound.battle.factory import create_from_species
from beastbound.battle.machine import BattleMachine, Outcome
from beastbound.battle.models import Creature
from beastbound.battle.party import Party
from beastbound.battle.scheduler import TurnScheduler
from beastbound.battle.session import BattleSession
from beastbound.core.errors import CatalogError
from beastbound.core.logging import logger
from beastbound.data.catalog import get_move, get_species, starters
from beastbound.system.save import SaveStore
from beastbound.system.settings import Settings
from beastbound.world.encounters import EncounterGenerator, FIXED_FOE
from beastbound.world.movement import Direction, next_position
from beastbound.world.tilemap import TileKind, TileMap, default_map, START_POSITION
from .prompts import Choice, Prompt

Mode = Literal["starter", "map", "battle"]

class GameContext:
    """Owns one game: mode, position, party and the active battle (if any).

    Inputs arrive through ``step`` (directional requests) and ``handle``
    (menu values). Output goes to prompt and redraw listeners.
    """

    def __init__(self, settings: Settings, rng: Optional[random.Random] = None, *,
                 store: Optional[SaveStore] = None,
                 scheduler: Optional[TurnScheduler] = None,
                 tilemap: Optional[TileMap] = None):
        self.settings = settings
        self.rng = rng or random.Random(settings.resolve_seed())
        self.store = store or SaveStore(settings.save_dir())
        self.scheduler = scheduler or TurnScheduler()
        self.map = tilemap or default_map()
        self.encounters = EncounterGenerator(self.rng)
        self.mode: Mode = "starter"
        self.position: Tuple[int, int] = START_POSITION
        self.party = Party(on_change=self._autosave)
        self.battle: Optional[BattleMachine] = None
        self.last_battle: Optional[BattleMachine] = None
        self.prompt: Optional[Prompt] = None
        self._prompt_listeners: List[Callable[[Prompt], None]] = []
        self._redraw_listeners: List[Callable[[Mode], None]] = []
        self._autosave_suspended = False

    # --- Presentation hooks ---
    def on_prompt(self, fn: Callable[[Prompt], None]):
        self._prompt_listeners.append(fn)

    def on_redraw(self, fn: Callable[[Mode], None]):
        self._redraw_listeners.append(fn)

    def _emit(self, prompt: Prompt):
        self.prompt = prompt
        for fn in self._prompt_listeners:
            fn(prompt)

    def _redraw(self):
        for fn in self._redraw_listeners:
            fn(self.mode)

    # --- Persistence ---
    def _autosave(self):
        if self._autosave_suspended or not self.settings.data.autosave:
            return
        self.save()

    def suspend_autosave(self):
        self._autosave_suspended = True

    def resume_autosave(self, flush: bool = True):
        was = self._autosave_suspended
        self._autosave_suspended = False
        if flush and was:
            self._autosave()

    def save(self):
        self.store.write(self.snapshot())

    def snapshot(self) -> Dict[str, Any]:
        session = self.battle.session if self.battle and not self.battle.over else None
        state = self.mode
        if state == "battle" and session is None:
            state = "map"
        return {
            "state": state,
            "player": {"x": self.position[0], "y": self.position[1], "party": self.party.to_list()},
            "wild": session.foe.to_dict() if session and session.is_wild else None,
            "battle": session.to_dict() if session else None,
        }

    def restore(self, blob: Dict[str, Any]) -> bool:
        """Adopt a saved blob. Returns False (leaving state untouched) if it
        does not describe a consistent game."""
        try:
            player = blob["player"]
            members = [Creature.from_dict(c) for c in player["party"]]
            pos = (int(player["x"]), int(player["y"]))
            if not self.map.in_bounds(*pos):
                raise ValueError(f"position {pos} is off the map")
            session = None
            if blob.get("state") == "battle" and blob.get("battle") and members:
                session = BattleSession.from_dict(blob["battle"])
            for c in members + ([session.player, session.foe] if session else []):
                for mk in c.moves:
                    get_move(mk)
            party = Party(members, on_change=self._autosave)
        except (KeyError, TypeError, ValueError, CatalogError) as e:
            logger.warn("SaveRestoreFailed", error=str(e))
            return False
        self.party = party
        self.position = pos
        self.battle = None
        if session is not None:
            self.mode = "battle"
            self.battle = self._machine(session)
        else:
            self.mode = "map" if members else "starter"
        return True

    def boot(self):
        """Load the save (if any) and put the game into a playable mode."""
        blob = self.store.read()
        if blob is None or not self.restore(blob):
            logger.info("NewGame")
        else:
            logger.info("GameLoaded", mode=self.mode, party=len(self.party))
        if self.battle is not None:
            self.battle.resume()
        elif self.party.members:
            self.mode = "map"
            self._redraw()
        else:
            self.ensure_starter()

    def new_game(self):
        """Delete the save and start over at starter selection."""
        if self.battle is not None:
            self.battle.abandon()
        had_save = self.store.clear()
        self.party = Party(on_change=self._autosave)
        self.position = START_POSITION
        self.battle = None
        self.last_battle = None
        logger.info("NewGame", replaced_save=had_save)
        self.ensure_starter()

    # --- Starter selection ---
    def ensure_starter(self) -> bool:
        if self.party.members:
            return False
        self.mode = "starter"
        choices = [Choice(get_species(sid).name, f"starter:{sid}") for sid in starters()]
        self._emit(Prompt("Choose your first companion:", choices))
        self._redraw()
        return True

    def choose_starter(self, species_id: str) -> bool:
        if self.mode != "starter" or self.party.members or species_id not in starters():
            logger.debug("StarterRejected", species=species_id, mode=self.mode)
            return False
        beast = create_from_species(species_id, self.rng)
        self.suspend_autosave()
        self.party.add_starter(beast)
        self.mode = "map"
        self.resume_autosave()
        self._redraw()
        self._emit(Prompt(f"You chose {beast.name}!", [Choice("Let's go", "continue")]))
        return True

    # --- Overworld ---
    def step(self, direction: Direction | str) -> bool:
        if self.mode != "map":
            logger.debug("StepRejected", mode=self.mode)
            return False
        if isinstance(direction, str):
            direction = Direction.parse(direction)
        target = next_position(self.position, direction, self.map)
        if target is None:
            return False
        self.position = target
        tile = self.map.kind_at(*target)
        if tile is TileKind.GRASS:
            foe = self.encounters.maybe_encounter(tile)
            if foe is not None:
                self.start_battle(foe, wild=True)
                return True
        elif tile is TileKind.REST:
            self.party.heal_all()
            self._emit(Prompt("You rest at the village. Your party is restored.", [Choice("Nice", "continue")]))
        self._autosave()
        self._redraw()
        return True

    # --- Battle ---
    def _machine(self, session: BattleSession) -> BattleMachine:
        return BattleMachine(
            session, self.party,
            rng=self.rng,
            scheduler=self.scheduler,
            enemy_delay_s=self.settings.enemy_delay_s,
            prompt_cb=self._emit,
            redraw_cb=self._redraw,
            change_cb=self._autosave,
            end_cb=self._on_battle_end,
        )

    def start_battle(self, foe: Creature, *, wild: bool = True) -> bool:
        if self.mode == "battle" or not self.party.has_living():
            logger.debug("BattleStartRejected", mode=self.mode, party=len(self.party))
            return False
        session = BattleSession.begin(self.party, foe, is_wild=wild)
        self.battle = self._machine(session)
        self.mode = "battle"
        self._autosave()
        intro = f"A wild {foe.name} appeared!" if wild else f"{foe.name} blocks your path!"
        self.battle.start(intro)
        return True

    def start_fixed_battle(self, species_id: str = FIXED_FOE) -> bool:
        if self.mode == "battle" or not self.party.has_living():
            return False
        return self.start_battle(self.encounters.fixed_encounter(species_id), wild=False)

    def _on_battle_end(self, outcome: Outcome):
        self.last_battle = self.battle
        self.battle = None
        self.mode = "map"
        self._autosave()
        self._redraw()

    def pump(self, now: Optional[float] = None) -> int:
        """Run deferred battle work that has come due."""
        return self.scheduler.run_due(now)

    # --- Input dispatch ---
    def handle(self, value: str) -> bool:
        if value == "continue":
            if self.prompt is not None and self.prompt.find("continue"):
                self.prompt = None
                return True
            return False
        if value.startswith("starter:"):
            return self.choose_starter(value[len("starter:"):])
        if self.mode == "battle" and self.battle is not None:
            return self.battle.handle(value)
        logger.debug("InputRejected", value=value, mode=self.mode)
        return False

__all__ = ["GameContext", "Mode"]
