from __future__ import annotations

from enum import Enum


class PunchKind(str, Enum):
    """Loại chấm công (punch) ghi nhận từ máy chấm công."""

    ENTRY = "ENTRY"
    BREAK_START = "BREAK_START"
    BREAK_END = "BREAK_END"
    EXIT = "EXIT"


class SessionState(str, Enum):
    """Tagged state of the session reconstruction walk."""

    IDLE = "IDLE"
    WORKING = "WORKING"
    ON_BREAK = "ON_BREAK"


class OvernightPolicy(str, Enum):
    """How lateness/overtime is measured when exit_time < entry_time."""

    WRAP = "WRAP"
    NAIVE = "NAIVE"


class ReportPeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
