from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from .model import PunchRecord, StoredPunch


class InMemoryPunchRepository:
    """Process-local punch store used by the dev server and tests.

    Persistence is owned by the punch-capture service; this keeps the
    report side runnable without it.
    """

    def __init__(self, punches: Iterable[StoredPunch] = ()):
        self._punches: list[StoredPunch] = list(punches)

    def add(self, *, user_id: int, record: PunchRecord) -> None:
        self._punches.append(StoredPunch(user_id=int(user_id), record=record))

    def list_for_user(
        self,
        user_id: int,
        start: date,
        end: date,
        *,
        limit: Optional[int] = None,
    ) -> Sequence[PunchRecord]:
        items = [
            p.record
            for p in self._punches
            if p.user_id == int(user_id) and start <= p.record.work_date <= end
        ]
        items.sort(key=lambda r: r.timestamp)
        if limit is not None:
            items = items[: int(limit)]
        return items
