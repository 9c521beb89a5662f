from __future__ import annotations

import json
import secrets
from typing import Any

from jwt import InvalidAudienceError, InvalidIssuerError

from claimmint.clock import Clock, system_clock
from claimmint.encoding import merge_claims
from claimmint.exceptions import InvalidClaimsError
from claimmint.logging import get_logger
from claimmint.options import MaxAge, SignOption, apply_sign_options
from claimmint.schema import ClaimMap, Claims
from claimmint.settings import TokenSettings
from claimmint.stores import KeyStore
from claimmint.validation import ClaimsValidator

logger = get_logger()


def _widen(claims: Claims, leeway: int) -> Claims:
    """Return a copy of `claims` whose validity window is `leeway` wider."""
    widened = Claims(
        token_id=claims.token_id,
        issuer=claims.issuer,
        subject=claims.subject,
        audience=list(claims.audience),
    )
    if claims.not_before > 0:
        widened.not_before = max(1, claims.not_before - leeway)
    if claims.issued_at > 0:
        widened.issued_at = max(1, claims.issued_at - leeway)
    if claims.expiry > 0:
        widened.expiry = claims.expiry + leeway
    return widened


class TokenService:
    """
    High-level API to issue and verify limited-time tokens.
    """

    def __init__(
        self,
        key_store: KeyStore,
        settings: TokenSettings,
        clock: Clock = system_clock,
    ) -> None:
        self.key_store = key_store
        self.settings = settings
        self._clock = clock
        self._validator = ClaimsValidator(clock)

    def issue(self, claims: ClaimMap | None = None, *options: SignOption) -> str:
        """
        Sign a token carrying the standard claims and the `claims` map.

        "iss", "aud", "jti", "iat" and "exp" come from the settings; `options`
        are applied after them in order, so a Claims option can override
        them. Keys in `claims` are appended as-is and win over the standard
        claims on decode if they share a name.
        """
        standard = Claims(
            token_id=secrets.token_urlsafe(24),
            issuer=self.settings.issuer,
            audience=[self.settings.audience] if self.settings.audience else [],
        )
        apply_sign_options(
            MaxAge(self.settings.max_age, clock=self._clock),
            *options,
            dest=standard,
        )

        payload = merge_claims(standard, claims)
        token = self.key_store.sign(payload)
        logger.info(
            "Issued token",
            jti=standard.token_id,
            sub=standard.subject or None,
            exp=standard.expiry,
            kid=self.key_store.active_key_id,
        )
        return token

    def verify(self, token: str) -> dict[str, Any]:
        """
        Verify signature, lifetime, issuer and audience.
        Returns decoded claims if valid; raises InvalidTokenError on failure.

        The lifetime check accepts tokens `clock_skew_leeway` seconds before
        "nbf"/"iat" and after "exp".
        """
        raw = self.key_store.verify(token)
        try:
            payload = json.loads(raw)
        except ValueError as error:
            raise InvalidClaimsError("Token payload is not valid JSON") from error
        if not isinstance(payload, dict):
            raise InvalidClaimsError("Token payload is not a JSON object")

        claims = Claims.from_dict(payload)
        self._validator.validate(_widen(claims, self.settings.clock_skew_leeway))

        if claims.issuer != self.settings.issuer:
            raise InvalidIssuerError("Invalid issuer")

        if self.settings.audience not in claims.audience:
            raise InvalidAudienceError("Audience doesn't match")

        logger.debug("Verified token", jti=claims.token_id, sub=claims.subject)
        return payload
