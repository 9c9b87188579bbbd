from __future__ import annotations

from datetime import date

from ..core.constants import MAX_REPORT_SPAN_DAYS, MAX_REPORT_YEAR, MIN_REPORT_YEAR
from ..core.exceptions import ValidationError


def require_report_year(year: int) -> int:
    if not MIN_REPORT_YEAR <= int(year) <= MAX_REPORT_YEAR:
        raise ValidationError(f"Year must be between {MIN_REPORT_YEAR} and {MAX_REPORT_YEAR}")
    return int(year)


def require_date_range(start: date, end: date) -> tuple[date, date]:
    if start > end:
        raise ValidationError("Start date must not be after end date")
    require_report_year(start.year)
    require_report_year(end.year)
    if (end - start).days + 1 > MAX_REPORT_SPAN_DAYS:
        raise ValidationError(f"Date range must not exceed {MAX_REPORT_SPAN_DAYS} days")
    return start, end


def require_non_negative(value: int, field_name: str) -> int:
    if value is None or int(value) < 0:
        raise ValidationError(f"{field_name} must be >= 0")
    return int(value)


def require_month(year: int, month: int) -> tuple[int, int]:
    if not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return require_report_year(year), int(month)
