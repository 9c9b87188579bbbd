"""Punch walk shared by the reconstructor and the timing evaluator.

Transitions (anything not listed is a no-op and the punch is ignored)::

    any state  --ENTRY-->        entry marker := ts   (an open break stays open)
    WORKING    --BREAK_START-->  close worked interval, ON_BREAK
    ON_BREAK   --BREAK_END-->    close break interval, entry marker := ts
    WORKING    --EXIT-->         close worked interval

``WORKING`` means an entry marker is open, ``ON_BREAK`` that a break marker is
open. Both markers can be open at once after an ENTRY punched during a break;
the state then reads ``ON_BREAK``, but BREAK_START and EXIT still close the
entry marker.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import minutes_between
from ..core.enums import PunchKind, SessionState
from ..punches.model import PunchRecord

logger = logging.getLogger(__name__)

_KIND_ORDER = {
    PunchKind.ENTRY: 0,
    PunchKind.BREAK_START: 1,
    PunchKind.BREAK_END: 2,
    PunchKind.EXIT: 3,
}


def sort_punches(records: Iterable[PunchRecord]) -> list[PunchRecord]:
    """Chronological order; equal timestamps are ordered by kind."""
    return sorted(records, key=lambda r: (r.timestamp, _KIND_ORDER.get(r.kind, len(_KIND_ORDER))))


@dataclass(frozen=True)
class Step:
    """What a single punch did to the walk."""

    record: PunchRecord
    worked_minutes: float = 0.0
    break_minutes: float = 0.0
    closed_entry: bool = False
    ignored: bool = False


class SessionMachine:
    def __init__(self) -> None:
        self.open_entry: Optional[datetime] = None
        self.open_break: Optional[datetime] = None

    @property
    def state(self) -> SessionState:
        if self.open_break is not None:
            return SessionState.ON_BREAK
        if self.open_entry is not None:
            return SessionState.WORKING
        return SessionState.IDLE

    def feed(self, record: PunchRecord) -> Step:
        handler = {
            PunchKind.ENTRY: self._on_entry,
            PunchKind.BREAK_START: self._on_break_start,
            PunchKind.BREAK_END: self._on_break_end,
            PunchKind.EXIT: self._on_exit,
        }.get(record.kind)
        if handler is None:
            logger.debug("Ignoring punch of unknown kind %r at %s", record.kind, record.timestamp)
            return Step(record=record, ignored=True)

        step = handler(record)
        if step.ignored:
            logger.debug("Ignoring %s at %s in state %s", record.kind, record.timestamp, self.state.value)
        return step

    def finish(self, now: datetime) -> tuple[float, float]:
        """Minutes still accruing at ``now`` as (worked, break)."""
        worked = max(minutes_between(self.open_entry, now), 0.0) if self.open_entry else 0.0
        brk = max(minutes_between(self.open_break, now), 0.0) if self.open_break else 0.0
        return worked, brk

    def _on_entry(self, record: PunchRecord) -> Step:
        self.open_entry = record.timestamp
        return Step(record=record)

    def _on_break_start(self, record: PunchRecord) -> Step:
        if self.open_entry is None:
            return Step(record=record, ignored=True)
        worked = minutes_between(self.open_entry, record.timestamp)
        self.open_entry = None
        self.open_break = record.timestamp
        return Step(record=record, worked_minutes=worked, closed_entry=True)

    def _on_break_end(self, record: PunchRecord) -> Step:
        if self.open_break is None:
            return Step(record=record, ignored=True)
        brk = minutes_between(self.open_break, record.timestamp)
        self.open_break = None
        self.open_entry = record.timestamp
        return Step(record=record, break_minutes=brk)

    def _on_exit(self, record: PunchRecord) -> Step:
        if self.open_entry is None:
            return Step(record=record, ignored=True)
        worked = minutes_between(self.open_entry, record.timestamp)
        self.open_entry = None
        return Step(record=record, worked_minutes=worked, closed_entry=True)


def walk(records: Iterable[PunchRecord]) -> tuple[SessionMachine, list[Step]]:
    machine = SessionMachine()
    steps = [machine.feed(r) for r in sort_punches(records)]
    return machine, steps
