from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator

from ..core.enums import ReportPeriod
from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid date: {value!r}") from e


def parse_wall_clock(value: str) -> time:
    """Parse an ``HH:MM`` wall-clock string (seconds are accepted and kept)."""
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(str(value).strip(), fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time of day: {value!r}")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def minute_of_day(value: datetime | time) -> int:
    """Minutes since midnight, seconds truncated."""
    return value.hour * 60 + value.minute


def minutes_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 60


def minutes_to_hhmm(minutes: float) -> str:
    """Format minutes as a signed, zero padded ``HH:MM`` string."""
    total = int(round(abs(minutes)))
    sign = "-" if minutes < 0 and total else ""
    return f"{sign}{total // 60:02d}:{total % 60:02d}"


def iter_days(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def is_working_day(day: date) -> bool:
    """Monday to Friday. There is no holiday calendar."""
    return day.weekday() < 5


def working_days_in_range(start: date, end: date) -> int:
    return sum(1 for d in iter_days(start, end) if is_working_day(d))


def sunday_on_or_before(day: date) -> date:
    # weekday(): Monday=0 .. Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def period_range(period: ReportPeriod, today: date) -> tuple[date, date]:
    """Date range of a summary period ending today (inclusive)."""
    if period == ReportPeriod.WEEK:
        return sunday_on_or_before(today), today
    if period == ReportPeriod.MONTH:
        return today.replace(day=1), today
    if period == ReportPeriod.YEAR:
        return date(today.year, 1, 1), today
    raise ValidationError(f"Unknown period: {period!r}")
