from __future__ import annotations

from typing import Optional, Protocol

from .model import CustomSchedule, ScheduleGroup


class ScheduleRepository(Protocol):
    def get_group_for_user(self, *, user_id: int) -> Optional[ScheduleGroup]:
        raise NotImplementedError

    def get_custom_for_user(self, *, user_id: int) -> Optional[CustomSchedule]:
        raise NotImplementedError
