"""Document ID generation and timestamping."""

import itertools
import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ...config import ID_STRATEGIES
from ...error_handler import validate_choice


class UuidIdGenerator:
    """Random 128-bit identifiers as 32 hex characters."""

    def __call__(self) -> str:
        return uuid.uuid4().hex


class TimestampIdGenerator:
    """Millisecond timestamp IDs with a per-generator sequence suffix.

    The suffix keeps IDs unique when several are issued within the same
    millisecond: ``1700000000000-0``, ``1700000000000-1``, ...
    """

    def __init__(self, time_source: Callable[[], float] = time.time):
        self._time_source = time_source
        self._last_ms: Optional[int] = None
        self._sequence = itertools.count()

    def __call__(self) -> str:
        ms = round(self._time_source() * 1000)
        # A clock that steps backwards keeps counting on the last millisecond
        if self._last_ms is None or ms > self._last_ms:
            self._last_ms = ms
            self._sequence = itertools.count()
        return f"{self._last_ms}-{next(self._sequence)}"


def make_id_generator(strategy: str) -> Callable[[], str]:
    """Build the ID generator named by the ``ID_STRATEGY`` setting."""
    validate_choice(strategy, ID_STRATEGIES, "ID strategy")
    if strategy == "timestamp":
        return TimestampIdGenerator()
    return UuidIdGenerator()


class MonotonicClock:
    """Naive UTC timestamps that strictly increase between calls."""

    def __init__(self, time_source: Optional[Callable[[], datetime]] = None):
        self._time_source = time_source or (lambda: datetime.now(timezone.utc).replace(tzinfo=None))
        self._last: Optional[datetime] = None

    def now(self) -> datetime:
        current = self._time_source()
        if self._last is not None and current <= self._last:
            current = self._last + timedelta(microseconds=1)
        self._last = current
        return current
