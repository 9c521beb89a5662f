from jwt import InvalidTokenError
from ._claim_errors import (
    ClaimEncodingError,
    InvalidClaimsError,
    TemporalClaimError,
    TokenExpiredError,
    TokenIssuedInFutureError,
    TokenNotValidYetError,
)
from ._token_configuration_error import TokenConfigurationError

__all__ = [
    "ClaimEncodingError",
    "InvalidClaimsError",
    "InvalidTokenError",
    "TemporalClaimError",
    "TokenConfigurationError",
    "TokenExpiredError",
    "TokenIssuedInFutureError",
    "TokenNotValidYetError",
]
