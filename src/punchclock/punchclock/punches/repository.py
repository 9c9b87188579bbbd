from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import PunchRecord


class PunchRepository(Protocol):
    def list_for_user(
        self,
        user_id: int,
        start: date,
        end: date,
        *,
        limit: Optional[int] = None,
    ) -> Sequence[PunchRecord]:
        """Punches of one user whose calendar date lies in [start, end]."""

        raise NotImplementedError
