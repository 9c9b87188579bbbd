from __future__ import annotations

from typing import Optional

from .model import CustomSchedule, ScheduleGroup


class InMemoryScheduleRepository:
    def __init__(
        self,
        *,
        groups_by_user: Optional[dict[int, ScheduleGroup]] = None,
        custom_by_user: Optional[dict[int, CustomSchedule]] = None,
    ):
        self._groups_by_user = dict(groups_by_user or {})
        self._custom_by_user = dict(custom_by_user or {})

    def get_group_for_user(self, *, user_id: int) -> Optional[ScheduleGroup]:
        return self._groups_by_user.get(int(user_id))

    def get_custom_for_user(self, *, user_id: int) -> Optional[CustomSchedule]:
        return self._custom_by_user.get(int(user_id))
