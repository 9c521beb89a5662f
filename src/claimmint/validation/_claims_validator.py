from __future__ import annotations

import math
from datetime import datetime

from claimmint.clock import Clock, system_clock
from claimmint.exceptions import (
    TemporalClaimError,
    TokenExpiredError,
    TokenIssuedInFutureError,
    TokenNotValidYetError,
)
from claimmint.logging import get_logger
from claimmint.schema import Claims

logger = get_logger()


def validate_claims(now: datetime, claims: Claims) -> None:
    """
    Check the time-bound claims against `now`.

    `now` is rounded down to whole seconds. Checks run in the order "nbf",
    "iat", "exp" and the first failure is raised. Both boundaries are
    inclusive and absent claims are skipped. No leeway is applied here;
    use a SkewedClock for that.
    """
    timestamp = math.floor(now.timestamp())

    if claims.not_before > 0 and timestamp < claims.not_before:
        raise TokenNotValidYetError()

    if claims.issued_at > 0 and timestamp < claims.issued_at:
        raise TokenIssuedInFutureError()

    if claims.expiry > 0 and timestamp > claims.expiry:
        raise TokenExpiredError()


class ClaimsValidator:
    """Validates time-bound claims against a clock."""

    def __init__(self, clock: Clock = system_clock) -> None:
        self._clock = clock

    def validate(self, claims: Claims) -> None:
        now = self._clock()
        try:
            validate_claims(now, claims)
        except TemporalClaimError as error:
            logger.debug(
                "Rejected token claims",
                error=str(error),
                now=int(now.timestamp()),
                nbf=claims.not_before,
                iat=claims.issued_at,
                exp=claims.expiry,
                jti=claims.token_id,
            )
            raise
