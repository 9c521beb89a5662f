from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Mapping

from claimmint.exceptions import ClaimEncodingError
from claimmint.logging import get_logger
from claimmint.schema import Claims

logger = get_logger()


def _encode_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return int(value.timestamp())
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def marshal(claims: Claims | Mapping[str, Any] | None) -> bytes:
    """
    Encode claims as compact JSON object text.

    The output is always either empty or a single object starting with
    ``{`` and ending with ``}`` with no surrounding whitespace; merge_claims
    splices on those two bytes. None, an empty mapping and Claims without
    any present field encode to ``b""``.

    Raises ClaimEncodingError if the value is not Claims or a mapping, or if
    a value inside it cannot be encoded.
    """
    if claims is None:
        return b""

    if isinstance(claims, Claims):
        payload: Mapping[str, Any] = claims.to_dict()
    elif isinstance(claims, Mapping):
        payload = claims
    else:
        raise ClaimEncodingError(
            f"Cannot encode claims of type {type(claims).__name__}"
        )

    if not payload:
        return b""

    try:
        text = json.dumps(
            dict(payload),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_default,
        )
        return text.encode("utf-8")
    except (TypeError, ValueError) as error:
        raise ClaimEncodingError(f"Cannot encode claims: {error}") from error


def merge_claims(
    claims: Claims | Mapping[str, Any] | None,
    other: Claims | Mapping[str, Any] | None,
) -> bytes:
    """
    Return one JSON object holding the top-level keys of both arguments.

    The encoded texts are spliced together without decoding them again, so
    keys present on both sides appear twice in the result and the one from
    `other` wins when it is decoded.

    Example:
    ```
        payload = merge_claims(
            Claims(issuer="my-app", expiry=1754006400),
            {"role": "admin"},
        )
        # b'{"exp":1754006400,"iss":"my-app","role":"admin"}'
    ```
    """
    try:
        claims_bytes = marshal(claims)
        other_bytes = marshal(other)
    except ClaimEncodingError as error:
        logger.warning("Failed to encode claims", error=str(error))
        raise

    if not other_bytes:
        return claims_bytes

    if not claims_bytes:
        return other_bytes

    return claims_bytes[:-1] + b"," + other_bytes[1:]
