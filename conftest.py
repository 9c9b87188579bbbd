from __future__ import annotations

from datetime import datetime

import pytest

from src.punchclock.punchclock.core.enums import PunchKind
from src.punchclock.punchclock.punches.model import PunchRecord


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday evening
    return datetime(2026, 2, 4, 18, 0, 0)


@pytest.fixture
def punch():
    """Build a PunchRecord from a kind name and ``datetime`` args."""

    def _make(kind: str, *args) -> PunchRecord:
        return PunchRecord(kind=PunchKind(kind), timestamp=datetime(*args))

    return _make
