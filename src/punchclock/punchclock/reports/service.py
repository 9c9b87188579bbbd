from __future__ import annotations

import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import minutes_to_hhmm, now_local, period_range, sunday_on_or_before
from ..common.validators import require_date_range, require_month, require_report_year
from ..core.constants import DEFAULT_EXPECTED_HOURS_PER_DAY
from ..core.enums import OvernightPolicy, PunchKind, ReportPeriod
from ..core.exceptions import ValidationError
from ..punches.repository import PunchRepository
from ..schedules.model import ScheduleDescriptor
from ..schedules.service import ScheduleService
from ..worktime import (
    ChartSeries,
    PeriodSummary,
    group_by_day,
    monthly_series,
    reconstruct_sessions,
    summarize_period,
    weekly_series,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReportSettings:
    expected_hours_per_day: float = DEFAULT_EXPECTED_HOURS_PER_DAY
    expected_hours_from_schedule: bool = False
    overnight: OvernightPolicy = OvernightPolicy.WRAP


class AttendanceReportService:
    """Fetch punches and schedule for a user, then run the worktime engine."""

    def __init__(
        self,
        punches: PunchRepository,
        schedules: ScheduleService,
        *,
        settings: Optional[ReportSettings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._punches = punches
        self._schedules = schedules
        self._settings = settings or ReportSettings()
        self._clock = clock or now_local

    @property
    def settings(self) -> ReportSettings:
        return self._settings

    def _expected_minutes_per_day(self, schedule: ScheduleDescriptor) -> float:
        if self._settings.expected_hours_from_schedule:
            return float(schedule.expected_work_minutes)
        return float(self._settings.expected_hours_per_day) * 60

    def _fetch(self, user_id: int, start: date, end: date):
        # unbounded: a truncated range would turn its latest days into absences
        records = self._punches.list_for_user(user_id, start, end, limit=None)
        logger.debug("Fetched %s punches for user %s (%s..%s)", len(records), user_id, start, end)
        return records

    def summary_for_range(self, user_id: int, *, start: date, end: date) -> PeriodSummary:
        require_date_range(start, end)
        schedule = self._schedules.resolve(user_id)
        records = self._fetch(user_id, start, end)
        return summarize_period(
            records,
            start,
            end,
            self._clock(),
            schedule,
            expected_minutes_per_day=self._expected_minutes_per_day(schedule),
            overnight=self._settings.overnight,
        )

    def period_summary(self, user_id: int, period: ReportPeriod | str, *, today: Optional[date] = None) -> PeriodSummary:
        try:
            period = ReportPeriod(period)
        except ValueError as e:
            raise ValidationError(f"Unknown period: {period!r}") from e

        today = today or self._clock().date()
        start, end = period_range(period, today)
        return self.summary_for_range(user_id, start=start, end=end)

    def weekly_chart(self, user_id: int, *, week_start: Optional[date] = None) -> ChartSeries:
        week_start = week_start or sunday_on_or_before(self._clock().date())
        require_report_year(week_start.year)
        end = week_start + timedelta(days=6)
        schedule = self._schedules.resolve(user_id)
        records = self._fetch(user_id, week_start, end)
        return weekly_series(records, week_start, self._clock(), schedule, overnight=self._settings.overnight)

    def monthly_chart(self, user_id: int, *, year: int, month: int) -> ChartSeries:
        year, month = require_month(year, month)
        last_day = calendar.monthrange(year, month)[1]
        schedule = self._schedules.resolve(user_id)
        records = self._fetch(user_id, date(year, month, 1), date(year, month, last_day))
        return monthly_series(records, year, month, self._clock(), schedule, overnight=self._settings.overnight)

    def time_entries_report(self, user_id: int, *, year: int, month: int) -> list[dict]:
        """Per-day rows of a month for the time-entries table (days with punches only)."""
        year, month = require_month(year, month)
        last_day = calendar.monthrange(year, month)[1]
        schedule = self._schedules.resolve(user_id)
        records = self._fetch(user_id, date(year, month, 1), date(year, month, last_day))
        now = self._clock()

        rows: list[dict] = []
        by_day = group_by_day(records)
        for work_date in sorted(by_day):
            day_records = sorted(by_day[work_date], key=lambda r: r.timestamp)
            # a past day left open only counts its closed intervals
            day_now = now if work_date == now.date() else day_records[-1].timestamp
            totals = reconstruct_sessions(day_records, day_now)
            balance = totals.worked_minutes - schedule.expected_work_minutes

            def first(kind: PunchKind) -> Optional[str]:
                hit = next((r for r in day_records if r.kind == kind), None)
                return hit.timestamp.strftime("%H:%M") if hit else None

            rows.append(
                {
                    "id": work_date.strftime("%Y-%m-%d"),
                    "date": work_date.strftime("%d/%m/%Y"),
                    "clock_in": first(PunchKind.ENTRY),
                    "break_start": first(PunchKind.BREAK_START),
                    "break_end": first(PunchKind.BREAK_END),
                    "clock_out": first(PunchKind.EXIT),
                    "total_worked": minutes_to_hhmm(totals.worked_minutes),
                    "total_break": minutes_to_hhmm(totals.break_minutes),
                    "balance": minutes_to_hhmm(balance),
                }
            )
        return rows
