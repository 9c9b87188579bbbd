from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.punchclock.punchclock.schedules.model import DEFAULT_SCHEDULE, ScheduleDescriptor
from src.punchclock.punchclock.worktime import daily_breakdown, monthly_series, summarize_period, weekly_series

# Feb 2026: the 1st is a Sunday, the 7th a Saturday.
SUNDAY = date(2026, 2, 1)
MONDAY = date(2026, 2, 2)
WEDNESDAY = date(2026, 2, 4)
FRIDAY = date(2026, 2, 6)
SATURDAY = date(2026, 2, 7)


def _day(punch, d: date, entry=(8, 0), exit=(16, 0)):
    return [
        punch("ENTRY", d.year, d.month, d.day, *entry),
        punch("EXIT", d.year, d.month, d.day, *exit),
    ]


def test_empty_period_counts_weekday_absences(fixed_now):
    summary = summarize_period([], SUNDAY, SATURDAY, fixed_now)

    assert summary.total_hours == 0
    assert summary.total_absences == 5
    assert summary.expected_hours == 40
    assert summary.completion_percentage == 0


def test_saturday_is_never_an_absence(fixed_now):
    summary = summarize_period([], SATURDAY, SATURDAY, fixed_now)

    assert summary.total_absences == 0
    assert summary.expected_hours == 0
    assert summary.completion_percentage == 0


def test_wednesday_without_punches_is_an_absence(fixed_now):
    assert summarize_period([], WEDNESDAY, WEDNESDAY, fixed_now).total_absences == 1


def test_full_week_is_complete(punch, fixed_now):
    records = []
    for day in range(2, 7):
        records += _day(punch, date(2026, 2, day))

    summary = summarize_period(records, SUNDAY, SATURDAY, fixed_now)

    assert summary.total_hours == 40
    assert summary.total_absences == 0
    assert summary.completion_percentage == 100
    assert summary.total_late_minutes == 0


def test_missing_day_lowers_completion(punch, fixed_now):
    records = []
    for day in (2, 3, 5, 6):
        records += _day(punch, date(2026, 2, day))

    summary = summarize_period(records, MONDAY, FRIDAY, fixed_now)

    assert summary.total_hours == 32
    assert summary.total_absences == 1
    assert summary.completion_percentage == pytest.approx(80)


def test_late_and_extra_are_summed_across_days(punch, fixed_now):
    records = _day(punch, MONDAY, entry=(8, 10), exit=(17, 20)) + _day(
        punch, date(2026, 2, 3), entry=(8, 5), exit=(17, 0)
    )

    summary = summarize_period(records, MONDAY, date(2026, 2, 3), fixed_now, DEFAULT_SCHEDULE)

    assert summary.total_late_minutes == 15
    assert summary.total_extra_minutes == 20


def test_expected_minutes_override(fixed_now):
    short = ScheduleDescriptor(entry_time=time(9, 0), exit_time=time(15, 0), break_minutes=0)

    summary = summarize_period(
        [], MONDAY, FRIDAY, fixed_now, short, expected_minutes_per_day=short.expected_work_minutes
    )

    assert summary.expected_hours == 30


def test_punches_outside_range_are_ignored(punch, fixed_now):
    records = _day(punch, date(2026, 2, 10))

    summary = summarize_period(records, MONDAY, FRIDAY, fixed_now)

    assert summary.total_hours == 0
    assert summary.total_absences == 5


def test_weekend_work_counts_hours_not_absence(punch, fixed_now):
    summary = summarize_period(_day(punch, SATURDAY), SATURDAY, SATURDAY, fixed_now)

    assert summary.total_hours == 8
    assert summary.total_absences == 0
    assert summary.completion_percentage == 0


def test_open_session_today_uses_now(punch, fixed_now):
    records = [punch("ENTRY", 2026, 2, 4, 16, 0)]

    summary = summarize_period(records, WEDNESDAY, WEDNESDAY, fixed_now)

    assert summary.total_hours == 2
    assert summary.completion_percentage == pytest.approx(25)


def test_summary_is_deterministic(punch, fixed_now):
    records = _day(punch, MONDAY, entry=(8, 10), exit=(17, 20))

    first = summarize_period(records, SUNDAY, SATURDAY, fixed_now)
    second = summarize_period(list(reversed(records)), SUNDAY, SATURDAY, fixed_now)

    assert first == second


def test_daily_breakdown_covers_every_day(punch, fixed_now):
    days = daily_breakdown(_day(punch, MONDAY), SUNDAY, SATURDAY, fixed_now)

    assert [d.work_date for d in days] == [date(2026, 2, n) for n in range(1, 8)]
    assert days[1].has_punches and days[1].worked_hours == 8
    assert [d.is_absence for d in days] == [False, False, True, True, True, True, False]


def test_weekly_series_indexes_by_weekday(punch, fixed_now):
    series = weekly_series(_day(punch, MONDAY, exit=(12, 30)), SUNDAY, fixed_now)

    assert series.labels[0] == "Sun"
    assert series.hours[1] == 4.5
    assert series.absences == [0, 0, 1, 1, 1, 1, 0]


def test_monthly_series_has_one_bucket_per_day(punch, fixed_now):
    series = monthly_series(_day(punch, MONDAY), 2026, 2, fixed_now)

    assert len(series.hours) == 28
    assert series.labels[0] == "2026-02-01"
    assert series.hours[1] == 8
    assert series.absences[0] == 0
    assert series.absences[2] == 1
