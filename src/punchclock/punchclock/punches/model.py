from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.enums import PunchKind


@dataclass(frozen=True)
class PunchRecord:
    """Thực thể miền (domain): Một lần chấm công."""

    kind: PunchKind
    timestamp: datetime

    @property
    def work_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class StoredPunch:
    """Punch as kept by a repository (owner attached)."""

    user_id: int
    record: PunchRecord
