from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from os import environ

from claimmint.exceptions import TokenConfigurationError


@dataclass(frozen=True)
class TokenSettings:
    """
    Settings for token issuing and verification.

    Attributes:
        issuer (str): The entity that issues the token ("iss").
        audience (str): The intended recipient of the token ("aud").
        max_age (timedelta): The duration for which the token is valid.
        clock_skew_leeway (int): Allowed clock skew in seconds (default: 10).

    Example:
    ```
        settings = TokenSettings(
            issuer="my-app",
            audience="my-service",
            max_age=timedelta(minutes=15)
        )
    ```
    """

    issuer: str
    audience: str
    max_age: timedelta
    clock_skew_leeway: int = 10

    @property
    def leeway(self) -> timedelta:
        return timedelta(seconds=self.clock_skew_leeway)

    @classmethod
    def from_environ(cls) -> TokenSettings:
        """
        Read settings from the environment:
        - CLAIMMINT_ISSUER, CLAIMMINT_AUDIENCE, CLAIMMINT_MAX_AGE_SECONDS (required)
        - CLAIMMINT_CLOCK_SKEW_LEEWAY (optional, seconds)
        """
        missing = [
            name
            for name in (
                "CLAIMMINT_ISSUER",
                "CLAIMMINT_AUDIENCE",
                "CLAIMMINT_MAX_AGE_SECONDS",
            )
            if not environ.get(name)
        ]
        if missing:
            raise TokenConfigurationError(
                f"Missing environment variables: {', '.join(missing)}"
            )

        try:
            max_age = timedelta(seconds=int(environ["CLAIMMINT_MAX_AGE_SECONDS"]))
            leeway = int(environ.get("CLAIMMINT_CLOCK_SKEW_LEEWAY", "10"))
        except ValueError as error:
            raise TokenConfigurationError(
                "CLAIMMINT_MAX_AGE_SECONDS and CLAIMMINT_CLOCK_SKEW_LEEWAY "
                "must be whole numbers of seconds"
            ) from error

        return cls(
            issuer=environ["CLAIMMINT_ISSUER"],
            audience=environ["CLAIMMINT_AUDIENCE"],
            max_age=max_age,
            clock_skew_leeway=leeway,
        )
