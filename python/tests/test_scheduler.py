"""Scheduler test suite — virtual clock ordering and cancellation."""

from __future__ import annotations

from backend.engine.scheduler import ManualScheduler, MonotonicScheduler


# -- helpers ------------------------------------------------------------------


class _FakeClock:
    def __init__(self) -> None:
        self.t = 100.0

    def __call__(self) -> float:
        return self.t


# -- ManualScheduler ----------------------------------------------------------


def test_callbacks_fire_in_due_order() -> None:
    scheduler = ManualScheduler()
    fired: list[str] = []
    scheduler.call_later(700, lambda: fired.append("collapse"))
    scheduler.call_later(500, lambda: fired.append("shake"))
    scheduler.call_later(3000, lambda: fired.append("near-miss"))

    assert scheduler.advance(600) == 1
    assert fired == ["shake"]
    assert scheduler.pending == 2

    assert scheduler.advance(3000) == 2
    assert fired == ["shake", "collapse", "near-miss"]
    assert scheduler.now == 3600


def test_ties_fire_in_scheduling_order() -> None:
    scheduler = ManualScheduler()
    fired: list[int] = []
    for n in range(3):
        scheduler.call_later(100, lambda n=n: fired.append(n))
    scheduler.advance(100)
    assert fired == [0, 1, 2]


def test_cancelled_callback_never_fires() -> None:
    scheduler = ManualScheduler()
    fired: list[int] = []
    handle = scheduler.call_later(10, lambda: fired.append(1))
    handle.cancel()

    assert scheduler.pending == 0
    assert scheduler.advance(50) == 0
    assert fired == []
    assert not handle.active


def test_callback_can_schedule_more_work_in_same_advance() -> None:
    scheduler = ManualScheduler()
    fired: list[int] = []

    def first() -> None:
        fired.append(scheduler.now)
        scheduler.call_later(200, lambda: fired.append(scheduler.now))

    scheduler.call_later(100, first)
    scheduler.advance(500)
    assert fired == [100, 300]


def test_next_due_and_run_all() -> None:
    scheduler = ManualScheduler()
    assert scheduler.next_due() is None

    scheduler.call_later(700, lambda: None)
    scheduler.call_later(3000, lambda: None)
    assert scheduler.next_due() == 700

    assert scheduler.run_all() == 2
    assert scheduler.now == 3000
    assert scheduler.pending == 0


def test_negative_delay_fires_on_next_advance() -> None:
    scheduler = ManualScheduler(now=50)
    fired: list[int] = []
    scheduler.call_later(-10, lambda: fired.append(scheduler.now))
    scheduler.advance(0)
    assert fired == [50]


# -- MonotonicScheduler -------------------------------------------------------


def test_monotonic_poll_follows_clock() -> None:
    clock = _FakeClock()
    scheduler = MonotonicScheduler(clock=clock)
    fired: list[str] = []
    scheduler.call_later(500, lambda: fired.append("shake"))

    clock.t += 0.4
    assert scheduler.poll() == 0
    clock.t += 0.1
    assert scheduler.poll() == 1
    assert fired == ["shake"]


def test_monotonic_delay_counts_from_wall_time() -> None:
    clock = _FakeClock()
    scheduler = MonotonicScheduler(clock=clock)
    fired: list[str] = []

    clock.t += 2.0  # nobody polled
    scheduler.call_later(700, lambda: fired.append("collapse"))

    clock.t += 0.5
    assert scheduler.poll() == 0
    clock.t += 0.2
    assert scheduler.poll() == 1
