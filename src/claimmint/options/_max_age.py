from __future__ import annotations

from datetime import timedelta

from claimmint.clock import Clock, system_clock
from claimmint.schema import ClaimMap, Claims

MIN_MAX_AGE = timedelta(seconds=1)


class MaxAge:
    """
    Sign option setting the "exp" and "iat" claims from a lifetime.

    Durations of one second or less are ignored. When applied, both claims
    are always overwritten.

    Example:
    ```
        claims = apply_sign_options(
            Claims(subject="user@example.com"),
            MaxAge(timedelta(minutes=15)),
        )
    ```
    """

    def __init__(self, max_age: timedelta, clock: Clock = system_clock) -> None:
        self.max_age = max_age
        self._clock = clock

    def apply_claims(self, dest: Claims) -> None:
        if self.max_age <= MIN_MAX_AGE:
            return
        now = self._clock()
        dest.expiry = int((now + self.max_age).timestamp())
        dest.issued_at = int(now.timestamp())


def max_age_map(
    max_age: timedelta,
    claims: ClaimMap | None,
    clock: Clock = system_clock,
) -> None:
    """
    Set "exp" and "iat" on a map of claims from a lifetime.

    Nothing happens if `claims` is None, the lifetime is one second or less,
    or the map already has an "exp" value.
    """
    if claims is None:
        return

    if max_age <= MIN_MAX_AGE:
        return

    now = clock()
    if claims.get("exp") is None:
        claims["exp"] = int((now + max_age).timestamp())
        claims["iat"] = int(now.timestamp())
