"""Temporal claim validation and claim-set composition for signed tokens."""

from claimmint.clock import Clock, FixedClock, SkewedClock, system_clock
from claimmint.encoding import marshal, merge_claims
from claimmint.exceptions import (
    ClaimEncodingError,
    InvalidClaimsError,
    InvalidTokenError,
    TemporalClaimError,
    TokenConfigurationError,
    TokenExpiredError,
    TokenIssuedInFutureError,
    TokenNotValidYetError,
)
from claimmint.options import (
    MaxAge,
    SignOption,
    SignOptionFunc,
    apply_sign_options,
    max_age_map,
)
from claimmint.schema import ClaimDict, ClaimMap, Claims
from claimmint.validation import ClaimsValidator, validate_claims

__all__ = [
    "ClaimDict",
    "ClaimEncodingError",
    "ClaimMap",
    "Claims",
    "ClaimsValidator",
    "Clock",
    "FixedClock",
    "InvalidClaimsError",
    "InvalidTokenError",
    "MaxAge",
    "SignOption",
    "SignOptionFunc",
    "SkewedClock",
    "TemporalClaimError",
    "TokenConfigurationError",
    "TokenExpiredError",
    "TokenIssuedInFutureError",
    "TokenNotValidYetError",
    "apply_sign_options",
    "marshal",
    "max_age_map",
    "merge_claims",
    "system_clock",
    "validate_claims",
]
