from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import minute_of_day
from ..core.constants import MINUTES_PER_DAY
from ..core.enums import OvernightPolicy, PunchKind
from ..punches.model import PunchRecord
from ..schedules.model import ScheduleDescriptor
from .model import TimingTotals
from .state import walk


def late_minutes_for(minute: int, schedule: ScheduleDescriptor, overnight: OvernightPolicy = OvernightPolicy.WRAP) -> int:
    """Lateness of one entry at ``minute`` (minute of day)."""
    if schedule.is_overnight and overnight == OvernightPolicy.WRAP:
        offset = (minute - schedule.entry_minute) % MINUTES_PER_DAY
        # past the shift span it is an early arrival for the next shift
        return offset if offset < schedule.span_minutes else 0
    return max(minute - schedule.entry_minute, 0)


def extra_minutes_for(minute: int, schedule: ScheduleDescriptor, overnight: OvernightPolicy = OvernightPolicy.WRAP) -> int:
    """Overtime of one exit at ``minute`` (minute of day)."""
    if schedule.is_overnight and overnight == OvernightPolicy.WRAP:
        offset = (minute - schedule.exit_minute) % MINUTES_PER_DAY
        return offset if offset < MINUTES_PER_DAY - schedule.span_minutes else 0
    return max(minute - schedule.exit_minute, 0)


def evaluate_timing(
    records: Iterable[PunchRecord],
    schedule: ScheduleDescriptor,
    *,
    overnight: OvernightPolicy = OvernightPolicy.WRAP,
) -> TimingTotals:
    """Late and extra minutes of one subject-day against ``schedule``.

    Every ENTRY is checked, so late returns from a break add up. An EXIT
    only counts as overtime when it actually closes an open session.
    """
    _, steps = walk(records)

    late = 0
    extra = 0
    for step in steps:
        minute = minute_of_day(step.record.timestamp)
        if step.record.kind == PunchKind.ENTRY:
            late += late_minutes_for(minute, schedule, overnight)
        elif step.record.kind == PunchKind.EXIT and step.closed_entry:
            extra += extra_minutes_for(minute, schedule, overnight)

    return TimingTotals(late_minutes=late, extra_minutes=extra)
