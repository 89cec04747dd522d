"""Deferred calls for the enemy turn.

Everything runs on the host's thread: callbacks fire only from ``run_due`` or
``flush``. Entries are kept in a min-heap ordered by due time, with a sequence
number keeping insertion order for equal times.
"""
from __future__ import annotations
import heapq
import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

@dataclass
class ScheduledCall:
    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    done: bool = field(default=False, compare=False)

    def __lt__(self, other: "ScheduledCall") -> bool:
        if self.due != other.due:
            return self.due < other.due
        return self.seq < other.seq

    def cancel(self) -> bool:
        if self.done or self.cancelled:
            return False
        self.cancelled = True
        return True

    @property
    def active(self) -> bool:
        return not (self.done or self.cancelled)

class TurnScheduler:
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._queue: List[ScheduledCall] = []
        self._seq = 0

    def call_later(self, delay_s: float, callback: Callable[[], None]) -> ScheduledCall:
        self._seq += 1
        entry = ScheduledCall(self.clock() + max(0.0, delay_s), self._seq, callback)
        heapq.heappush(self._queue, entry)
        return entry

    def _prune(self):
        while self._queue and not self._queue[0].active:
            heapq.heappop(self._queue)

    @property
    def pending(self) -> bool:
        self._prune()
        return bool(self._queue)

    def next_due(self) -> Optional[float]:
        self._prune()
        return self._queue[0].due if self._queue else None

    def time_until_next(self) -> Optional[float]:
        due = self.next_due()
        if due is None:
            return None
        return max(0.0, due - self.clock())

    def _run(self, entry: ScheduledCall):
        entry.done = True
        entry.callback()

    def run_due(self, now: Optional[float] = None) -> int:
        """Run every call whose due time has passed. Returns how many ran."""
        now = self.clock() if now is None else now
        ran = 0
        while True:
            self._prune()
            if not self._queue or self._queue[0].due > now:
                return ran
            self._run(heapq.heappop(self._queue))
            ran += 1

    def flush(self) -> int:
        """Run everything pending regardless of due time, including calls
        scheduled by the callbacks themselves."""
        ran = 0
        while True:
            self._prune()
            if not self._queue:
                return ran
            self._run(heapq.heappop(self._queue))
            ran += 1

__all__ = ["TurnScheduler", "ScheduledCall"]
