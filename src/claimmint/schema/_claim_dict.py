from typing import Any, TypedDict

ClaimMap = dict[str, Any]


class ClaimDict(TypedDict, total=False):
    nbf: int
    iat: int
    exp: int
    jti: str
    iss: str
    sub: str
    aud: list[str]
