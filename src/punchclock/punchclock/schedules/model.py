from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from ..core.constants import DEFAULT_BREAK_MINUTES, DEFAULT_ENTRY_TIME, DEFAULT_EXIT_TIME, MINUTES_PER_DAY


@dataclass(frozen=True)
class ScheduleDescriptor:
    """Expected daily schedule of a subject (already resolved)."""

    entry_time: time
    exit_time: time
    break_minutes: int = 0

    @property
    def entry_minute(self) -> int:
        return self.entry_time.hour * 60 + self.entry_time.minute

    @property
    def exit_minute(self) -> int:
        return self.exit_time.hour * 60 + self.exit_time.minute

    @property
    def is_overnight(self) -> bool:
        return self.exit_minute < self.entry_minute

    @property
    def span_minutes(self) -> int:
        """Minutes from entry to exit, wrapping past midnight."""
        return (self.exit_minute - self.entry_minute) % MINUTES_PER_DAY

    @property
    def expected_work_minutes(self) -> int:
        return max(self.span_minutes - int(self.break_minutes), 0)


@dataclass(frozen=True)
class ScheduleGroup:
    """Nhóm lịch làm việc (shift group) dùng chung cho nhiều nhân viên."""

    group_id: int
    name: str
    schedule: ScheduleDescriptor


@dataclass(frozen=True)
class CustomSchedule:
    """Per-user override; only used when both entry and exit are set."""

    user_id: int
    entry_time: Optional[time] = None
    exit_time: Optional[time] = None
    break_minutes: Optional[int] = None


DEFAULT_SCHEDULE = ScheduleDescriptor(
    entry_time=time.fromisoformat(DEFAULT_ENTRY_TIME),
    exit_time=time.fromisoformat(DEFAULT_EXIT_TIME),
    break_minutes=DEFAULT_BREAK_MINUTES,
)
