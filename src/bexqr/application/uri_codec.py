"""ARK payment URI codec.

Wire format::

    ark:<address>[?amount=<num>][&label=<text>][&vendorField=<percent-encoded text>]

Parameters appear only when set, always in that order.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from ..domain.entities import DecodedPaymentRequest, PaymentRequest
from ..domain.errors import NotLoadedError
from ..domain.shared.numbers import format_number, to_number
from ..domain.shared.percent_encoding import fully_decode, percent_encode
from ..domain.validators import VENDOR_FIELD_MAX_LENGTH

logger = logging.getLogger(__name__)

SCHEME = "ark"

# Decoding accepts "A"/"D" prefixed addresses besides the "B" ones we emit.
URI_PATTERN = re.compile(
    r"ark:([AaBbDd][0-9A-Za-z]{33})([-A-Za-z0-9+&@#/%=~_|$?!:,.]*)"
)
_QUERY_TOKEN = re.compile(r"([^?=&]+)(=([^&]*))?")

# URI characters a label may carry verbatim; query delimiters and "%" are escaped.
_LABEL_SAFE = "+@/|$!:,"


def encode_uri(request: PaymentRequest) -> str:
    """Serialize a validated payment request into its canonical URI.

    The vendor field is fully decoded and then percent-encoded with every
    reserved character escaped; the label keeps URI-safe characters as-is.

    Raises:
        NotLoadedError: If ``request`` is not a validated ``PaymentRequest``.
    """
    if not isinstance(request, PaymentRequest):
        raise NotLoadedError(
            "payment request not loaded; build it with PaymentRequest.from_object"
        )

    params = []
    if request.amount is not None:
        params.append(f"amount={format_number(request.amount)}")
    if request.label is not None:
        params.append(f"label={percent_encode(request.label, safe=_LABEL_SAFE)}")
    if request.vendor_field is not None:
        vendor_field = percent_encode(fully_decode(request.vendor_field))
        params.append(f"vendorField={vendor_field}")

    suffix = f"?{'&'.join(params)}" if params else ""
    return f"{SCHEME}:{request.address}{suffix}"


def match_uri(uri: Any) -> Optional[re.Match[str]]:
    """Return the full match of ``uri`` (address group 1, suffix group 2), if any."""
    if not isinstance(uri, str):
        return None
    return URI_PATTERN.fullmatch(uri)


def matches(uri: Any) -> bool:
    """Tell whether ``uri`` is a structurally valid payment URI."""
    return match_uri(uri) is not None


def parse_query(suffix: str) -> dict[str, Optional[str]]:
    """Split a query-like suffix into raw key/value pairs.

    A key without ``=`` maps to ``None``; the last duplicate key wins.
    """
    query: dict[str, Optional[str]] = {}
    for token in _QUERY_TOKEN.finditer(suffix):
        query[token.group(1)] = token.group(3)
    return query


def decode_uri(uri: Any) -> Optional[DecodedPaymentRequest]:
    """Recover the payment fields from ``uri``.

    Returns ``None`` instead of raising when the URI does not match, or when a
    recognized field cannot be converted (non-numeric amount, malformed
    percent escapes, vendor field over its length bound). Unrecognized keys
    are dropped; an ``address`` query key never overrides the URI address.
    """
    match = match_uri(uri)
    if match is None:
        logger.debug("Rejected non-matching payment URI %r", uri)
        return None

    query = parse_query(match.group(2))
    raw_amount = query.get("amount")
    raw_label = query.get("label")
    raw_vendor_field = query.get("vendorField")

    try:
        amount = to_number(raw_amount) if raw_amount else None
        label = fully_decode(raw_label) if raw_label else None
        vendor_field = fully_decode(raw_vendor_field) if raw_vendor_field else None
    except ValueError as e:
        logger.debug("Rejected payment URI %r: %s", uri, e)
        return None

    if vendor_field is not None and len(vendor_field) > VENDOR_FIELD_MAX_LENGTH:
        logger.debug("Rejected payment URI %r: vendorField too long", uri)
        return None

    return DecodedPaymentRequest(
        address=match.group(1),
        amount=amount,
        label=label,
        vendor_field=vendor_field,
    )
