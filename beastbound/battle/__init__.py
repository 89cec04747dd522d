"""
Battle package: creature model, probability model, party roster and the
per-encounter state machine.
"""
from .models import Creature
from .party import Party
from .session import BattleSession
from .machine import BattleMachine, BattlePhase
from .scheduler import TurnScheduler
__all__ = ["Creature", "Party", "BattleSession", "BattleMachine", "BattlePhase", "TurnScheduler"]
