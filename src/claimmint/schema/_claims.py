from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping

from claimmint.exceptions import InvalidClaimsError
from claimmint.schema._claim_dict import ClaimDict


@dataclass
class Claims:
    """
    Standard JWT claims carried in a token payload.

    A field holding its zero value (``0`` or less for times, an empty string
    or list otherwise) is absent: it is not validated, not encoded and never
    overwrites a destination value in `apply_claims`.

    Claims also behaves as a sign option, so it can be passed next to
    `MaxAge` when issuing a token.

    Attributes:
        not_before (int): "nbf", epoch seconds from which the token is valid.
        issued_at (int): "iat", epoch seconds at which the token was issued.
        expiry (int): "exp", epoch seconds after which the token is invalid.
        token_id (str): "jti", unique identifier of the token.
        issuer (str): "iss", the party that issued the token.
        subject (str): "sub", the party the token is about.
        audience (list[str]): "aud", the intended recipients.
    """

    not_before: int = 0
    issued_at: int = 0
    expiry: int = 0
    token_id: str = ""
    issuer: str = ""
    subject: str = ""
    audience: list[str] = field(default_factory=list)

    def apply_claims(self, dest: Claims) -> None:
        """Copy every present field onto `dest`."""
        if self.not_before > 0:
            dest.not_before = self.not_before

        if self.issued_at > 0:
            dest.issued_at = self.issued_at

        if self.expiry > 0:
            dest.expiry = self.expiry

        if self.token_id:
            dest.token_id = self.token_id

        if self.issuer:
            dest.issuer = self.issuer

        if self.subject:
            dest.subject = self.subject

        if self.audience:
            dest.audience = list(self.audience)

    def to_dict(self) -> ClaimDict:
        """Return the present fields keyed by their registered claim names."""
        claims: ClaimDict = {}
        if self.not_before > 0:
            claims["nbf"] = self.not_before
        if self.issued_at > 0:
            claims["iat"] = self.issued_at
        if self.expiry > 0:
            claims["exp"] = self.expiry
        if self.token_id:
            claims["jti"] = self.token_id
        if self.issuer:
            claims["iss"] = self.issuer
        if self.subject:
            claims["sub"] = self.subject
        if self.audience:
            claims["aud"] = list(self.audience)
        return claims

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> Claims:
        """
        Build claims from a decoded token payload.

        Keys other than the registered claims are ignored. Raises
        InvalidClaimsError if a registered claim has the wrong type.
        """
        return cls(
            not_before=_numeric_claim(payload, "nbf"),
            issued_at=_numeric_claim(payload, "iat"),
            expiry=_numeric_claim(payload, "exp"),
            token_id=_string_claim(payload, "jti"),
            issuer=_string_claim(payload, "iss"),
            subject=_string_claim(payload, "sub"),
            audience=_audience_claim(payload),
        )


def _numeric_claim(payload: Mapping[str, Any], name: str) -> int:
    value = payload.get(name)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidClaimsError(f"The '{name}' claim must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidClaimsError(f"The '{name}' claim must be a finite number")
    return int(value)


def _string_claim(payload: Mapping[str, Any], name: str) -> str:
    value = payload.get(name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidClaimsError(f"The '{name}' claim must be a string")
    return value


def _audience_claim(payload: Mapping[str, Any]) -> list[str]:
    value = payload.get("aud")
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise InvalidClaimsError("The 'aud' claim must be a string or a list of strings")
