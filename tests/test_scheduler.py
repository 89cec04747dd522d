from beastbound.battle.scheduler import TurnScheduler


class Clock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def test_runs_only_when_due():
    clock = Clock()
    sched = TurnScheduler(clock)
    fired = []
    sched.call_later(0.25, lambda: fired.append("enemy"))
    assert sched.pending
    assert sched.time_until_next() == 0.25
    assert sched.run_due() == 0
    clock.now += 0.25
    assert sched.run_due() == 1
    assert fired == ["enemy"]
    assert not sched.pending


def test_cancel_and_order():
    sched = TurnScheduler(Clock())
    fired = []
    a = sched.call_later(0.5, lambda: fired.append("a"))
    sched.call_later(0.1, lambda: fired.append("b"))
    sched.call_later(0.1, lambda: fired.append("c"))
    assert a.cancel()
    assert not a.cancel()
    assert sched.flush() == 2
    assert fired == ["b", "c"]
    assert not a.active


def test_flush_runs_follow_up_calls():
    sched = TurnScheduler(Clock())
    fired = []
    def first():
        fired.append(1)
        sched.call_later(0.25, lambda: fired.append(2))
    sched.call_later(0.25, first)
    assert sched.flush() == 2
    assert fired == [1, 2]
