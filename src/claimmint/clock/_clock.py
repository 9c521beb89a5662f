from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Return the current wall-clock time in UTC."""
    return datetime.now(timezone.utc)


class FixedClock:
    """
    Clock that always returns the same instant.

    Example:
    ```
        clock = FixedClock(datetime(2025, 8, 1, tzinfo=timezone.utc))
        MaxAge(timedelta(minutes=5), clock=clock)
    ```
    """

    def __init__(self, instant: datetime) -> None:
        self.instant = instant

    def __call__(self) -> datetime:
        return self.instant

    def advance(self, delta: timedelta) -> None:
        self.instant = self.instant + delta


class SkewedClock:
    """
    Wraps a clock and reports a time `leeway` behind it.

    Validating against a skewed clock accepts tokens for `leeway` after
    their expiry, which is how clock skew between issuer and verifier is
    tolerated.
    """

    def __init__(self, clock: Clock, leeway: timedelta) -> None:
        self._clock = clock
        self._leeway = leeway

    def __call__(self) -> datetime:
        return self._clock() - self._leeway
