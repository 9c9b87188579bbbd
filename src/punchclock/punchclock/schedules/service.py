from __future__ import annotations

import logging
from datetime import time
from typing import Optional

from ..common.datetime_utils import parse_wall_clock
from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_BREAK_MINUTES
from .model import DEFAULT_SCHEDULE, ScheduleDescriptor
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)


def build_descriptor(entry_time: str | time, exit_time: str | time, break_minutes: int = 0) -> ScheduleDescriptor:
    """Validate raw schedule fields (``HH:MM`` strings or ``time``)."""
    entry_t = entry_time if isinstance(entry_time, time) else parse_wall_clock(entry_time)
    exit_t = exit_time if isinstance(exit_time, time) else parse_wall_clock(exit_time)
    return ScheduleDescriptor(
        entry_time=entry_t,
        exit_time=exit_t,
        break_minutes=require_non_negative(break_minutes, "break_minutes"),
    )


class ScheduleService:
    """Resolve the schedule that applies to a user.

    Precedence: assigned schedule group, then the user's own entry/exit,
    then the service default.
    """

    def __init__(self, schedules: ScheduleRepository, *, default: Optional[ScheduleDescriptor] = None):
        self._schedules = schedules
        self._default = default or DEFAULT_SCHEDULE

    def resolve(self, user_id: int) -> ScheduleDescriptor:
        group = self._schedules.get_group_for_user(user_id=int(user_id))
        if group:
            return group.schedule

        custom = self._schedules.get_custom_for_user(user_id=int(user_id))
        if custom and custom.entry_time and custom.exit_time:
            brk = custom.break_minutes if custom.break_minutes is not None else DEFAULT_BREAK_MINUTES
            return build_descriptor(custom.entry_time, custom.exit_time, brk)

        logger.debug("No schedule for user %s, using default", user_id)
        return self._default
