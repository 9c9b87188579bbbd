from __future__ import annotations

import random
from datetime import datetime, timedelta

from src.punchclock.punchclock.core.enums import PunchKind, SessionState
from src.punchclock.punchclock.punches.model import PunchRecord
from src.punchclock.punchclock.worktime import reconstruct_sessions
from src.punchclock.punchclock.worktime.state import SessionMachine


def _full_day(punch):
    return [
        punch("ENTRY", 2026, 2, 4, 8, 55),
        punch("BREAK_START", 2026, 2, 4, 12, 0),
        punch("BREAK_END", 2026, 2, 4, 13, 0),
        punch("EXIT", 2026, 2, 4, 17, 5),
    ]


def test_full_day_worked_and_break(punch, fixed_now):
    totals = reconstruct_sessions(_full_day(punch), fixed_now)

    assert totals.worked_minutes == 550
    assert totals.break_minutes == 60


def test_empty_input_is_zero(fixed_now):
    totals = reconstruct_sessions([], fixed_now)

    assert totals.worked_minutes == 0
    assert totals.break_minutes == 0


def test_open_session_runs_until_now():
    t0 = datetime(2026, 2, 4, 9, 0)
    records = [PunchRecord(kind=PunchKind.ENTRY, timestamp=t0)]

    totals = reconstruct_sessions(records, t0 + timedelta(minutes=120))

    assert totals.worked_minutes == 120
    assert totals.break_minutes == 0


def test_open_break_runs_until_now(punch):
    records = [punch("ENTRY", 2026, 2, 4, 8, 0), punch("BREAK_START", 2026, 2, 4, 12, 0)]

    totals = reconstruct_sessions(records, datetime(2026, 2, 4, 12, 30))

    assert totals.worked_minutes == 240
    assert totals.break_minutes == 30


def test_unmatched_break_end_is_ignored(punch, fixed_now):
    totals = reconstruct_sessions([punch("BREAK_END", 2026, 2, 4, 10, 0)], fixed_now)

    assert totals.worked_minutes == 0
    assert totals.break_minutes == 0


def test_exit_without_entry_is_ignored(punch, fixed_now):
    totals = reconstruct_sessions([punch("EXIT", 2026, 2, 4, 17, 0)], fixed_now)

    assert totals.worked_minutes == 0


def test_break_start_without_entry_is_ignored(punch, fixed_now):
    records = [punch("BREAK_START", 2026, 2, 4, 12, 0), punch("BREAK_END", 2026, 2, 4, 13, 0)]

    totals = reconstruct_sessions(records, fixed_now)

    assert totals.worked_minutes == 0
    assert totals.break_minutes == 0


def test_second_entry_restarts_session(punch, fixed_now):
    records = [
        punch("ENTRY", 2026, 2, 4, 8, 0),
        punch("ENTRY", 2026, 2, 4, 9, 0),
        punch("EXIT", 2026, 2, 4, 10, 0),
    ]

    assert reconstruct_sessions(records, fixed_now).worked_minutes == 60


def test_entry_during_break_leaves_break_open(punch, fixed_now):
    records = [
        punch("ENTRY", 2026, 2, 4, 8, 0),
        punch("BREAK_START", 2026, 2, 4, 12, 0),
        punch("ENTRY", 2026, 2, 4, 12, 30),
        punch("EXIT", 2026, 2, 4, 17, 0),
    ]

    totals = reconstruct_sessions(records, fixed_now)

    assert totals.worked_minutes == 240 + 270
    # break never closed, accrues until 18:00
    assert totals.break_minutes == 360


def test_fractional_minutes_are_kept(punch, fixed_now):
    records = [punch("ENTRY", 2026, 2, 4, 8, 0, 0), punch("EXIT", 2026, 2, 4, 8, 0, 30)]

    assert reconstruct_sessions(records, fixed_now).worked_minutes == 0.5


def test_now_before_open_entry_clamps_to_zero(punch):
    records = [punch("ENTRY", 2026, 2, 4, 10, 0)]

    assert reconstruct_sessions(records, datetime(2026, 2, 4, 9, 0)).worked_minutes == 0


def test_input_order_does_not_matter(punch, fixed_now):
    records = _full_day(punch) + [punch("ENTRY", 2026, 2, 4, 17, 5), punch("EXIT", 2026, 2, 4, 17, 5)]
    expected = reconstruct_sessions(records, fixed_now)

    rng = random.Random(7)
    for _ in range(10):
        shuffled = list(records)
        rng.shuffle(shuffled)
        assert reconstruct_sessions(shuffled, fixed_now) == expected
    assert reconstruct_sessions(records, fixed_now) == expected


def test_machine_states(punch):
    machine = SessionMachine()
    assert machine.state == SessionState.IDLE

    machine.feed(punch("ENTRY", 2026, 2, 4, 8, 0))
    assert machine.state == SessionState.WORKING

    step = machine.feed(punch("BREAK_START", 2026, 2, 4, 12, 0))
    assert machine.state == SessionState.ON_BREAK
    assert step.worked_minutes == 240
    assert step.closed_entry

    step = machine.feed(punch("BREAK_START", 2026, 2, 4, 12, 10))
    assert step.ignored

    machine.feed(punch("BREAK_END", 2026, 2, 4, 13, 0))
    assert machine.state == SessionState.WORKING

    machine.feed(punch("EXIT", 2026, 2, 4, 17, 0))
    assert machine.state == SessionState.IDLE
