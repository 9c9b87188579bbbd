from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_ENTRY_TIME,
    DEFAULT_EXIT_TIME,
    DEFAULT_EXPECTED_HOURS_PER_DAY,
)
from .core.enums import OvernightPolicy
from .core.exceptions import ValidationError
from .punches.memory_repository import InMemoryPunchRepository
from .punches.repository import PunchRepository
from .reports.service import AttendanceReportService, ReportSettings
from .schedules.memory_repository import InMemoryScheduleRepository
from .schedules.repository import ScheduleRepository
from .schedules.service import ScheduleService, build_descriptor


@dataclass(frozen=True)
class Container:
    punches_repo: PunchRepository
    schedules_repo: ScheduleRepository

    schedule_service: ScheduleService
    report_service: AttendanceReportService


def build_container(
    *,
    report_config: dict,
    punches_repo: Optional[PunchRepository] = None,
    schedules_repo: Optional[ScheduleRepository] = None,
) -> Container:
    """Wire services from a settings dict.

    Repositories default to the in-memory ones; the punch-capture and
    scheduling services plug their own in here.
    """
    try:
        overnight = OvernightPolicy(str(report_config.get("overnight_policy", OvernightPolicy.WRAP.value)).upper())
    except ValueError as e:
        raise ValidationError(f"Unknown overnight policy: {report_config.get('overnight_policy')!r}") from e

    settings = ReportSettings(
        expected_hours_per_day=float(report_config.get("expected_hours_per_day", DEFAULT_EXPECTED_HOURS_PER_DAY)),
        expected_hours_from_schedule=bool(report_config.get("expected_hours_from_schedule", False)),
        overnight=overnight,
    )
    default_schedule = build_descriptor(
        report_config.get("default_entry_time", DEFAULT_ENTRY_TIME),
        report_config.get("default_exit_time", DEFAULT_EXIT_TIME),
        int(report_config.get("default_break_minutes", DEFAULT_BREAK_MINUTES)),
    )

    punches_repo = punches_repo or InMemoryPunchRepository()
    schedules_repo = schedules_repo or InMemoryScheduleRepository()

    schedule_service = ScheduleService(schedules_repo, default=default_schedule)
    report_service = AttendanceReportService(punches_repo, schedule_service, settings=settings)

    return Container(
        punches_repo=punches_repo,
        schedules_repo=schedules_repo,
        schedule_service=schedule_service,
        report_service=report_service,
    )
