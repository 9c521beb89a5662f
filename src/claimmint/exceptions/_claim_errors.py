from jwt import ExpiredSignatureError, ImmatureSignatureError, InvalidTokenError


class TemporalClaimError(InvalidTokenError):
    """A time-bound claim does not permit the token to be used now."""


class TokenNotValidYetError(TemporalClaimError, ImmatureSignatureError):
    """The current time precedes the "nbf" claim."""

    def __init__(self, message: str = "token not valid yet") -> None:
        super().__init__(message)


class TokenIssuedInFutureError(TemporalClaimError, ImmatureSignatureError):
    """The current time precedes the "iat" claim."""

    def __init__(self, message: str = "token issued in the future") -> None:
        super().__init__(message)


class TokenExpiredError(TemporalClaimError, ExpiredSignatureError):
    """The current time is past the "exp" claim."""

    def __init__(self, message: str = "token expired") -> None:
        super().__init__(message)


class InvalidClaimsError(InvalidTokenError):
    """A decoded payload carries a standard claim of the wrong type."""


class ClaimEncodingError(Exception):
    """Claims could not be encoded to a JSON object."""
