"""Battle state machine for one encounter.

Owns a BattleSession for its lifetime and sequences the turn loop:

    AWAITING_CHOICE --fight/bind/swap/run--> RESOLVING_PLAYER
    RESOLVING_PLAYER --foe fainted / captured / fled--> BATTLE_OVER
    RESOLVING_PLAYER --otherwise--> RESOLVING_ENEMY (deferred call pending)
    RESOLVING_ENEMY --player fainted, no reserve--> BATTLE_OVER
    RESOLVING_ENEMY --otherwise--> AWAITING_CHOICE

Player operations return True when accepted and False when they were
ignored because the machine was not waiting for a choice (or the choice was
invalid). Rejections never touch state.
"""
from __future__ import annotations
import random
from enum import Enum
from typing import Callable, List, Literal, Optional

from beastbound.core.logging import logger
from beastbound.data.catalog import get_move
from beastbound.game.prompts import Choice, Prompt, CONTINUE, BACK
from .capture import attempt_bind, flee_success
from .mechanics import accuracy_check, damage_roll, heal_roll, ENEMY_POWER_PENALTY
from .party import Party
from .scheduler import TurnScheduler, ScheduledCall
from .session import BattleSession, Actor

ENEMY_TURN_DELAY_S = 0.25

Outcome = Literal["PLAYER_WIN", "CAPTURED", "ESCAPED", "RETREAT"]

class BattlePhase(Enum):
    AWAITING_CHOICE = "awaiting-player-choice"
    RESOLVING_PLAYER = "resolving-player-move"
    RESOLVING_ENEMY = "resolving-enemy-move"
    BATTLE_OVER = "battle-over"

ACTION_MENU = [
    Choice("Fight", "fight"),
    Choice("Bind", "bind"),
    Choice("Swap", "swap"),
    Choice("Run", "run"),
]

class BattleMachine:
    def __init__(self, session: BattleSession, party: Party, *,
                 rng: Optional[random.Random] = None,
                 scheduler: Optional[TurnScheduler] = None,
                 enemy_delay_s: float = ENEMY_TURN_DELAY_S,
                 prompt_cb: Optional[Callable[[Prompt], None]] = None,
                 redraw_cb: Optional[Callable[[], None]] = None,
                 change_cb: Optional[Callable[[], None]] = None,
                 end_cb: Optional[Callable[[Outcome], None]] = None):
        self.session = session
        self.party = party
        self.rng = rng or random.Random()
        self.scheduler = scheduler or TurnScheduler()
        self.enemy_delay_s = enemy_delay_s
        self.prompt_cb = prompt_cb
        self.redraw_cb = redraw_cb
        self.change_cb = change_cb
        self.end_cb = end_cb
        self.phase = BattlePhase.AWAITING_CHOICE
        self.outcome: Optional[Outcome] = None
        self.prompt: Prompt = Prompt("")
        self._pending: Optional[ScheduledCall] = None
        self._messages: List[str] = []

    # ------------------------------------------------------------------
    # Plumbing
    # ------------------------------------------------------------------
    @property
    def over(self) -> bool:
        return self.phase is BattlePhase.BATTLE_OVER

    @property
    def enemy_turn_pending(self) -> bool:
        return self._pending is not None and self._pending.active

    def _say(self, actor: Actor, text: str):
        self.session.record(actor, text)
        self._messages.append(text)

    def _emit(self, question: Optional[str], choices: List[Choice]):
        lines = self._messages + ([question] if question else [])
        self._messages = []
        self.prompt = Prompt("\n".join(lines), list(choices))
        if self.prompt_cb:
            self.prompt_cb(self.prompt)

    def _redraw(self):
        if self.redraw_cb:
            self.redraw_cb()

    def _changed(self):
        if self.change_cb:
            self.change_cb()

    def _accepting(self, op: str) -> bool:
        if self.phase is BattlePhase.AWAITING_CHOICE:
            return True
        logger.debug("BattleActionRejected", op=op, phase=self.phase.value)
        return False

    # ------------------------------------------------------------------
    # Menus
    # ------------------------------------------------------------------
    def start(self, intro: Optional[str] = None):
        if intro:
            self._say("system", intro)
        logger.info("BattleStart", foe=self.session.foe.species_id, level=self.session.foe.level,
                    wild=self.session.is_wild)
        self._redraw()
        self.open_menu()

    def resume(self):
        """Pick a restored session back up where it was saved."""
        self._redraw()
        if self.session.turn_owner == "enemy":
            self._schedule_enemy_turn()
        else:
            self.open_menu()

    def open_menu(self) -> bool:
        if not self._accepting("open_menu"):
            return False
        self._emit("What will you do?", ACTION_MENU)
        return True

    def open_moves(self) -> bool:
        if not self._accepting("open_moves"):
            return False
        choices = [Choice(get_move(mk).name, f"move:{mk}") for mk in self.session.player.moves]
        self._emit("Choose a move.", choices + [BACK])
        return True

    def open_bind(self) -> bool:
        if not self._accepting("open_bind"):
            return False
        if not self.session.is_wild:
            self._emit(f"You can't bind {self.session.foe.name}!", [BACK])
            return False
        self._emit("Throw a Binding Shard?", [Choice("Yes", "bind:yes"), Choice("No", "back")])
        return True

    def open_swap(self) -> bool:
        if not self._accepting("open_swap"):
            return False
        choices = []
        for idx, b in enumerate(self.party):
            if idx == 0:
                me = self.session.player
                label = f"• {me.name} ({me.hp}/{me.max_hp})"
            else:
                label = f"{b.name} ({b.hp}/{b.max_hp})"
            choices.append(Choice(label, f"swap:{idx}"))
        self._emit("Swap beasts:", choices + [BACK])
        return True

    def handle(self, value: str) -> bool:
        """Dispatch a menu value produced by one of this machine's prompts."""
        if value == "back":
            return self.open_menu()
        if value == "fight":
            return self.open_moves()
        if value == "bind":
            return self.open_bind()
        if value == "bind:yes":
            return self.confirm_bind()
        if value == "swap":
            return self.open_swap()
        if value == "run":
            return self.run()
        if value.startswith("move:"):
            return self.choose_move(value[len("move:"):])
        if value.startswith("swap:"):
            try:
                idx = int(value[len("swap:"):])
            except ValueError:
                logger.debug("BattleActionRejected", op="swap", value=value)
                return False
            return self.choose_swap(idx)
        logger.debug("BattleActionRejected", op="handle", value=value)
        return False

    # ------------------------------------------------------------------
    # Player actions
    # ------------------------------------------------------------------
    def choose_move(self, move_key: str) -> bool:
        if not self._accepting("choose_move"):
            return False
        user = self.session.player
        foe = self.session.foe
        if move_key not in user.moves:
            logger.debug("BattleActionRejected", op="choose_move", move=move_key)
            return False
        move = get_move(move_key)
        self.phase = BattlePhase.RESOLVING_PLAYER
        if not accuracy_check(self.rng, move.accuracy):
            self._say("player", f"{user.name}'s {move.name} missed!")
        elif move.kind == "attack":
            dmg = damage_roll(self.rng, move.power, user.level)
            foe.take_damage(dmg)
            self._say("player", f"{user.name} used {move.name}! It dealt {dmg} damage.")
        else:
            amount = heal_roll(self.rng, move.power)
            user.restore(amount)
            self._say("player", f"{user.name} used {move.name}! Restored {amount} HP.")
        self._redraw()
        if foe.fainted:
            self._victory()
        else:
            self._schedule_enemy_turn()
        return True

    def confirm_bind(self) -> bool:
        if not self._accepting("bind"):
            return False
        if not self.session.is_wild:
            self._emit(f"You can't bind {self.session.foe.name}!", [BACK])
            return False
        foe = self.session.foe
        self.phase = BattlePhase.RESOLVING_PLAYER
        result = attempt_bind(self.rng, foe.hp, foe.max_hp, party_full=self.party.is_full())
        logger.info("BindAttempt", foe=foe.species_id, chance=f"{result.chance:.2f}",
                    success=result.success, party_full=result.party_full)
        if result.success:
            # battle must read as over before the party autosaves
            self.phase = BattlePhase.BATTLE_OVER
            self.party.sync_active_hp(self.session.player.hp)
            self.party.try_capture(foe)
            self._say("player", f"Got it! {foe.name} joined your party.")
            self._end("CAPTURED")
        else:
            self._say("player", "It broke free!")
            self._redraw()
            self._schedule_enemy_turn()
        return True

    def choose_swap(self, index: int) -> bool:
        if not self._accepting("swap"):
            return False
        if not 0 <= index < len(self.party):
            logger.debug("BattleActionRejected", op="swap", index=index)
            return False
        if index == 0:
            self._emit("Already in battle.", [BACK])
            return False
        target = self.party[index]
        if target.fainted:
            self._emit(f"{target.name} has no strength left to battle.", [BACK])
            return False
        self.phase = BattlePhase.RESOLVING_PLAYER
        self.party.sync_active_hp(self.session.player.hp)
        self.party.swap(0, index)
        self.session.player = self.party.active().clone()
        self._say("player", f"Go, {self.session.player.name}!")
        self._redraw()
        self._schedule_enemy_turn()
        return True

    def run(self) -> bool:
        if not self._accepting("run"):
            return False
        self.phase = BattlePhase.RESOLVING_PLAYER
        if flee_success(self.rng):
            self.party.sync_active_hp(self.session.player.hp)
            self._say("player", "You fled successfully.")
            self._end("ESCAPED")
        else:
            self._say("player", "Couldn't get away!")
            self._schedule_enemy_turn()
        return True

    # ------------------------------------------------------------------
    # Enemy turn
    # ------------------------------------------------------------------
    def _schedule_enemy_turn(self):
        self.phase = BattlePhase.RESOLVING_ENEMY
        self.session.turn_owner = "enemy"
        self._changed()
        # no choices while the enemy turn is pending
        self._emit(None, [])
        self._pending = self.scheduler.call_later(self.enemy_delay_s, self.enemy_turn)

    def enemy_turn(self) -> bool:
        if self.phase is not BattlePhase.RESOLVING_ENEMY:
            logger.debug("EnemyTurnIgnored", phase=self.phase.value)
            return False
        self._pending = None
        foe = self.session.foe
        me = self.session.player
        label = self.session.foe_label
        move = get_move(self.rng.choice(foe.moves))
        if not accuracy_check(self.rng, move.accuracy):
            self._say("enemy", f"{label} missed!")
        elif move.kind == "attack":
            dmg = damage_roll(self.rng, move.power - ENEMY_POWER_PENALTY, foe.level)
            me.take_damage(dmg)
            self._say("enemy", f"{label} used {move.name}! You took {dmg} damage.")
            self._redraw()
            if me.fainted:
                self._defeat()
                return True
        else:
            amount = heal_roll(self.rng, move.power)
            foe.restore(amount)
            self._say("enemy", f"{label} used {move.name}! It restored {amount} HP.")
            self._redraw()
        self.session.turn_owner = "player"
        self.phase = BattlePhase.AWAITING_CHOICE
        self._changed()
        self.open_menu()
        return True

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def _victory(self):
        me = self.session.player
        self._say("system", f"{self.session.foe_label} fainted! {me.name} feels stronger.")
        self.party.sync_active_hp(me.hp)
        self._end("PLAYER_WIN")

    def _defeat(self):
        me = self.session.player
        self._say("system", f"{me.name} fainted!")
        self.party.sync_active_hp(me.hp)
        idx = self.party.first_living_reserve()
        if idx is not None:
            self.party.swap(0, idx)
            self.session.player = self.party.active().clone()
            self.session.turn_owner = "player"
            self._say("system", f"Go, {self.session.player.name}!")
            self.phase = BattlePhase.AWAITING_CHOICE
            self._changed()
            self._redraw()
            self.open_menu()
            return
        self.phase = BattlePhase.BATTLE_OVER
        self.party.apply_wipe_recovery()
        self._say("system", "You stagger back to the village to recover...")
        self._end("RETREAT")

    def abandon(self):
        """Drop the battle without an outcome (new game over a live battle)."""
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.phase = BattlePhase.BATTLE_OVER

    def _end(self, outcome: Outcome):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self.phase = BattlePhase.BATTLE_OVER
        self.outcome = outcome
        logger.info("BattleEnd", outcome=outcome, foe=self.session.foe.species_id)
        self._emit(None, [CONTINUE])
        if self.end_cb:
            self.end_cb(outcome)

__all__ = ["BattleMachine", "BattlePhase", "Outcome", "ACTION_MENU", "ENEMY_TURN_DELAY_S"]
