"""Cached "total time computed" figure for the landing page.

The total is the sum of ``compute_ms`` over every row of ``metering_logs``.
The landing page is rendered often, so the figure is cached for a coarse
time-to-live (ten minutes by default); it only ever grows, so a few minutes
of staleness is harmless.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
import time
from contextlib import closing
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional, Union

DEFAULT_TTL = 600.0

_TOTAL_QUERY = "SELECT COALESCE(SUM(compute_ms), 0) AS total FROM metering_logs"

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Entry:
    total_ms: int
    fetched_at: float


class TotalComputeCache:
    """Thread-safe cache of the summed compute time, in milliseconds."""

    def __init__(self, ttl: Union[float, timedelta] = DEFAULT_TTL) -> None:
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        self.ttl = float(ttl)
        self._entry: Optional[_Entry] = None
        self._lock = threading.Lock()

    def get(self, db: Any) -> int:
        """Return the cached total, refreshing it from ``db`` once it is stale.

        A failing query never raises: the last good value is returned, or 0
        when nothing has been fetched yet.
        """
        with self._lock:
            entry = self._entry
            if entry is not None and time.monotonic() - entry.fetched_at < self.ttl:
                return entry.total_ms

            try:
                total_ms = _query_total(db)
            except sqlite3.Error as exc:
                log.warning("total compute query failed: %s", exc)
                return entry.total_ms if entry is not None else 0

            self._entry = _Entry(total_ms, time.monotonic())
            return total_ms


def _query_total(db: Any) -> int:
    with closing(db.cursor()) as cursor:
        cursor.execute(_TOTAL_QUERY)
        row = cursor.fetchone()
    if row is None:
        return 0
    value = row[0]
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def humanize_ms(ms: int) -> str:
    """Render a millisecond count in the largest unit of which it holds at least one."""
    if ms <= 0:
        return "0 seconds"
    secs = ms // 1000
    mins = secs // 60
    hours = mins // 60
    days = hours // 24

    if days >= 1:
        return f"{hours / 24.0:.1f} days"
    if hours >= 1:
        return f"{mins / 60.0:.1f} hours"
    if mins >= 1:
        return f"{secs / 60.0:.1f} minutes"
    return f"{secs} seconds"