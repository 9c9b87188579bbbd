from __future__ import annotations

from datetime import datetime
from typing import Iterable

from ..punches.model import PunchRecord
from .model import SessionTotals
from .state import walk


def reconstruct_sessions(records: Iterable[PunchRecord], now: datetime) -> SessionTotals:
    """Worked and break minutes of one subject-day.

    Records may come in any order. A session or break still open after the
    last punch runs until ``now``. Never raises: unmatched punches are
    skipped and the totals reflect whatever intervals could be closed.
    """
    machine, steps = walk(records)

    worked = sum(s.worked_minutes for s in steps)
    brk = sum(s.break_minutes for s in steps)

    open_worked, open_break = machine.finish(now)
    return SessionTotals(worked_minutes=worked + open_worked, break_minutes=brk + open_break)
