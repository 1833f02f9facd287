"""SLA deadline and breach-status computations for department queues."""
from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from src.core.entities import SLA_BREACHED, SLA_OK, SLA_WARNING

DEFAULT_WARNING_HOURS = 4.0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SLACalculator:
    """Derive deadlines from department SLA hours and classify time remaining.

    The calculator never raises for numeric SLA input: zero, negative or NaN hours
    produce a deadline equal to the creation time, i.e. the complaint is already due.
    Infinite or out-of-range hours saturate to ``datetime.max`` and are never due.
    """

    def __init__(
        self,
        warning_hours: float = DEFAULT_WARNING_HOURS,
        now_provider: Callable[[], datetime] | None = None,
    ) -> None:
        self._warning_window = timedelta(hours=warning_hours)
        self._now_provider = now_provider or _utc_now

    def now(self) -> datetime:
        return self._now_provider()

    def calculate_deadline(self, created_at: datetime, sla_hours: float) -> datetime:
        hours = float(sla_hours)
        if math.isnan(hours) or hours <= 0:
            return created_at
        if math.isinf(hours):
            return datetime.max.replace(tzinfo=created_at.tzinfo)
        try:
            return created_at + timedelta(hours=hours)
        except OverflowError:
            return datetime.max.replace(tzinfo=created_at.tzinfo)

    def get_status(self, deadline: datetime, now: Optional[datetime] = None) -> str:
        """Return ``breached``, ``warning`` or ``ok`` for ``deadline`` at ``now``.

        Breach is strictly after the deadline; warning is strictly less than the
        warning window remaining, so exactly four hours left is still ``ok``.
        """

        current = self._resolve_now(deadline, now)
        if current > deadline:
            return SLA_BREACHED
        if deadline - current < self._warning_window:
            return SLA_WARNING
        return SLA_OK

    def is_breached(self, deadline: datetime, now: Optional[datetime] = None) -> bool:
        return self._resolve_now(deadline, now) > deadline

    def hours_remaining(self, deadline: datetime, now: Optional[datetime] = None) -> float:
        """Hours left until ``deadline``; negative once it has passed."""

        remaining = deadline - self._resolve_now(deadline, now)
        return remaining.total_seconds() / 3600

    def _resolve_now(self, deadline: datetime, now: Optional[datetime]) -> datetime:
        current = now or self._now_provider()
        # Naive timestamps are read as UTC.
        if deadline.tzinfo is None and current.tzinfo is not None:
            current = current.astimezone(timezone.utc).replace(tzinfo=None)
        elif deadline.tzinfo is not None and current.tzinfo is None:
            current = current.replace(tzinfo=timezone.utc)
        return current


__all__ = ["DEFAULT_WARNING_HOURS", "SLACalculator"]
