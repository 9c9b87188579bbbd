from __future__ import annotations

import calendar
from collections import defaultdict
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import is_working_day, iter_days, working_days_in_range
from ..core.constants import DEFAULT_EXPECTED_HOURS_PER_DAY
from ..core.enums import OvernightPolicy
from ..punches.model import PunchRecord
from ..schedules.model import DEFAULT_SCHEDULE, ScheduleDescriptor
from .evaluator import evaluate_timing
from .model import ChartSeries, DayAggregate, PeriodSummary
from .reconstructor import reconstruct_sessions

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def group_by_day(records: Iterable[PunchRecord]) -> dict[date, list[PunchRecord]]:
    by_day: dict[date, list[PunchRecord]] = defaultdict(list)
    for r in records:
        by_day[r.work_date].append(r)
    return dict(by_day)


def evaluate_day(
    work_date: date,
    records: Sequence[PunchRecord],
    now: datetime,
    schedule: ScheduleDescriptor = DEFAULT_SCHEDULE,
    *,
    overnight: OvernightPolicy = OvernightPolicy.WRAP,
) -> DayAggregate:
    if not records:
        return DayAggregate(work_date=work_date, is_absence=is_working_day(work_date))

    sessions = reconstruct_sessions(records, now)
    timing = evaluate_timing(records, schedule, overnight=overnight)
    return DayAggregate(
        work_date=work_date,
        worked_minutes=sessions.worked_minutes,
        break_minutes=sessions.break_minutes,
        late_minutes=timing.late_minutes,
        extra_minutes=timing.extra_minutes,
        has_punches=True,
    )


def daily_breakdown(
    records: Iterable[PunchRecord],
    start_date: date,
    end_date: date,
    now: datetime,
    schedule: ScheduleDescriptor = DEFAULT_SCHEDULE,
    *,
    overnight: OvernightPolicy = OvernightPolicy.WRAP,
) -> list[DayAggregate]:
    """One DayAggregate per calendar day of [start_date, end_date].

    Punches dated outside the range are ignored.
    """
    by_day = group_by_day(records)
    return [
        evaluate_day(d, by_day.get(d, []), now, schedule, overnight=overnight)
        for d in iter_days(start_date, end_date)
    ]


def summarize_period(
    records: Iterable[PunchRecord],
    start_date: date,
    end_date: date,
    now: datetime,
    schedule: ScheduleDescriptor = DEFAULT_SCHEDULE,
    *,
    expected_minutes_per_day: Optional[float] = None,
    overnight: OvernightPolicy = OvernightPolicy.WRAP,
) -> PeriodSummary:
    """Totals of a subject over [start_date, end_date].

    Expected hours are 8 per working day unless ``expected_minutes_per_day``
    is given (e.g. ``schedule.expected_work_minutes``).
    """
    days = daily_breakdown(records, start_date, end_date, now, schedule, overnight=overnight)

    total_hours = sum(d.worked_hours for d in days if d.has_punches)
    total_late = sum(d.late_minutes for d in days)
    total_extra = sum(d.extra_minutes for d in days)
    total_absences = sum(1 for d in days if d.is_absence)

    if expected_minutes_per_day is None:
        per_day_hours = float(DEFAULT_EXPECTED_HOURS_PER_DAY)
    else:
        per_day_hours = float(expected_minutes_per_day) / 60
    expected_hours = working_days_in_range(start_date, end_date) * per_day_hours

    completion = (total_hours / expected_hours) * 100 if expected_hours > 0 else 0.0

    return PeriodSummary(
        total_hours=total_hours,
        total_late_minutes=total_late,
        total_extra_minutes=total_extra,
        total_absences=total_absences,
        expected_hours=expected_hours,
        completion_percentage=completion,
    )


def _series(days: Sequence[DayAggregate], size: int, index_of, label_of) -> ChartSeries:
    labels = [""] * size
    hours = [0.0] * size
    late = [0] * size
    extra = [0] * size
    absences = [0] * size

    for d in days:
        i = index_of(d.work_date)
        labels[i] = label_of(d.work_date)
        if d.has_punches:
            hours[i] = round(d.worked_hours, 2)
            late[i] = d.late_minutes
            extra[i] = d.extra_minutes
        elif d.is_absence:
            absences[i] = 1

    return ChartSeries(labels=labels, hours=hours, late_minutes=late, extra_minutes=extra, absences=absences)


def weekly_series(
    records: Iterable[PunchRecord],
    week_start: date,
    now: datetime,
    schedule: ScheduleDescriptor = DEFAULT_SCHEDULE,
    *,
    overnight: OvernightPolicy = OvernightPolicy.WRAP,
) -> ChartSeries:
    """Seven buckets indexed by day of week, Sunday first."""
    days = daily_breakdown(records, week_start, week_start + timedelta(days=6), now, schedule, overnight=overnight)
    return _series(
        days,
        7,
        index_of=lambda d: (d.weekday() + 1) % 7,
        label_of=lambda d: WEEKDAY_LABELS[(d.weekday() + 1) % 7],
    )


def monthly_series(
    records: Iterable[PunchRecord],
    year: int,
    month: int,
    now: datetime,
    schedule: ScheduleDescriptor = DEFAULT_SCHEDULE,
    *,
    overnight: OvernightPolicy = OvernightPolicy.WRAP,
) -> ChartSeries:
    """One bucket per day of the month (index 0 is the 1st)."""
    days_in_month = calendar.monthrange(year, month)[1]
    start = date(year, month, 1)
    days = daily_breakdown(records, start, date(year, month, days_in_month), now, schedule, overnight=overnight)
    return _series(
        days,
        days_in_month,
        index_of=lambda d: d.day - 1,
        label_of=lambda d: d.strftime("%Y-%m-%d"),
    )
