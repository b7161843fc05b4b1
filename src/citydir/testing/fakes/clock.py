"""Testing fakes – FakeClock factory."""
from __future__ import annotations

from datetime import UTC, datetime

from citydir.kernel.time import FrozenClock


def FakeClock(fixed: datetime | None = None) -> FrozenClock:
    """Return a ``FrozenClock`` pinned to Wednesday 2025-11-12 10:00 UTC unless *fixed* is given."""
    return FrozenClock(fixed or datetime(2025, 11, 12, 10, 0, tzinfo=UTC))


__all__ = ["FakeClock"]
