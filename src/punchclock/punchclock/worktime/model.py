from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class SessionTotals:
    worked_minutes: float = 0.0
    break_minutes: float = 0.0


@dataclass(frozen=True)
class TimingTotals:
    late_minutes: int = 0
    extra_minutes: int = 0


@dataclass(frozen=True)
class DayAggregate:
    """Kết quả tổng hợp của một ngày làm việc (tính lại mỗi lần truy vấn)."""

    work_date: date
    worked_minutes: float = 0.0
    break_minutes: float = 0.0
    late_minutes: int = 0
    extra_minutes: int = 0
    has_punches: bool = False
    is_absence: bool = False

    @property
    def worked_hours(self) -> float:
        return self.worked_minutes / 60


@dataclass(frozen=True)
class PeriodSummary:
    total_hours: float
    total_late_minutes: int
    total_extra_minutes: int
    total_absences: int
    expected_hours: float
    completion_percentage: float


@dataclass(frozen=True)
class ChartSeries:
    """Parallel per-day arrays for the weekly/monthly charts."""

    labels: list[str] = field(default_factory=list)
    hours: list[float] = field(default_factory=list)
    late_minutes: list[int] = field(default_factory=list)
    extra_minutes: list[int] = field(default_factory=list)
    absences: list[int] = field(default_factory=list)
