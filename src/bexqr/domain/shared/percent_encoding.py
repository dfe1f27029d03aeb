"""Percent-encoding helpers shared by the validators and the URI codec."""

from __future__ import annotations

import re
from urllib.parse import quote, unquote

from ..errors import MalformedEncodingError

# Upper bound on decode passes; real inputs carry one or two encoding layers.
MAX_DECODE_PASSES = 16

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _decode_once(value: str) -> str:
    if _MALFORMED_ESCAPE.search(value):
        raise MalformedEncodingError(f"malformed percent escape in {value!r}")
    try:
        return unquote(value, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedEncodingError(
            f"percent escapes in {value!r} are not valid UTF-8"
        ) from e


def fully_decode(value: str) -> str:
    """Percent-decode ``value`` until a pass no longer changes it.

    Multiply-encoded input (``Hello%2520Bex``) collapses to its plain form
    (``Hello Bex``). The result is stable, so applying the function twice
    yields the same string as applying it once.

    Raises:
        MalformedEncodingError: If a ``%`` is not followed by two hex digits,
            the escapes do not form valid UTF-8, or the value has not
            stabilized after ``MAX_DECODE_PASSES`` passes.
    """
    current = value
    for _ in range(MAX_DECODE_PASSES):
        decoded = _decode_once(current)
        if decoded == current:
            return current
        current = decoded
    raise MalformedEncodingError(
        f"value did not stabilize after {MAX_DECODE_PASSES} decode passes"
    )


def percent_encode(value: str, safe: str = "") -> str:
    """Percent-encode ``value`` as UTF-8, leaving only unreserved and ``safe`` characters."""
    return quote(value, safe=safe, encoding="utf-8")
