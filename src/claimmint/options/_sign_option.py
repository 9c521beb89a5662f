from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from claimmint.schema import Claims


@runtime_checkable
class SignOption(Protocol):
    """Anything that can be applied onto the claims of a token being issued."""

    def apply_claims(self, dest: Claims) -> None: ...


class SignOptionFunc:
    """Adapts a plain function taking the destination claims to a SignOption."""

    def __init__(self, func: Callable[[Claims], None]) -> None:
        self._func = func

    def apply_claims(self, dest: Claims) -> None:
        self._func(dest)


def apply_sign_options(*options: SignOption, dest: Claims | None = None) -> Claims:
    """Apply `options` in order onto `dest` (or fresh claims) and return it."""
    claims = dest if dest is not None else Claims()
    for option in options:
        option.apply_claims(claims)
    return claims
