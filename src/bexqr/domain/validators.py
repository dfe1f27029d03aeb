"""Pure validation functions for payment request fields.

Each validator checks a single field and raises the matching
``PaymentFieldError`` subclass; none of them has side effects. Callers run
them before committing to encode or render.
"""

from __future__ import annotations

import math
import re
from typing import Any

from .errors import (
    InvalidAddressError,
    InvalidAmountError,
    InvalidLabelError,
    InvalidShowLogoError,
    InvalidSizeError,
    InvalidVendorFieldError,
    MalformedEncodingError,
)
from .shared.numbers import to_number
from .shared.percent_encoding import fully_decode

# Recipient addresses emitted by this package: one "B" and 33 alphanumerics.
ADDRESS_PATTERN = re.compile(r"[Bb][0-9A-Za-z]{33}")

VENDOR_FIELD_MAX_LENGTH = 64
LOGO_MIN_SIZE = 150

# Rendered codes are square, so this bounds the image to 16 megapixels.
MIN_SIZE = 1
MAX_SIZE = 4096


def validate_address(address: Any) -> None:
    """Validate the recipient address.

    Raises:
        InvalidAddressError: If the address is empty or does not match
            ``ADDRESS_PATTERN``.
    """
    if not address:
        raise InvalidAddressError("address: required")
    if not isinstance(address, str) or not ADDRESS_PATTERN.fullmatch(address):
        raise InvalidAddressError("address: not valid ark recipient")


def validate_amount(amount: Any) -> None:
    """Validate that the amount, when present, is a finite number.

    Raises:
        InvalidAmountError: If the amount cannot be represented as a number.
    """
    if amount is None:
        return
    try:
        to_number(amount)
    except ValueError as e:
        raise InvalidAmountError("amount: invalid amount") from e


def validate_label(label: Any) -> None:
    """Validate that the label, when present, is decodable text.

    Raises:
        InvalidLabelError: If the label is not a string or holds malformed
            percent escapes.
    """
    if label is None:
        return
    if not isinstance(label, str):
        raise InvalidLabelError("label: must be a string")
    try:
        fully_decode(label)
    except MalformedEncodingError as e:
        raise InvalidLabelError(f"label: {e}") from e


def validate_vendor_field(vendor_field: Any) -> None:
    """Validate the vendor field against its decoded length bound.

    Raises:
        InvalidVendorFieldError: If the value is not a string, cannot be fully
            decoded, or decodes to more than ``VENDOR_FIELD_MAX_LENGTH``
            characters.
    """
    if vendor_field is None:
        return
    if not isinstance(vendor_field, str):
        raise InvalidVendorFieldError("vendorField: must be a UTF-8 encoded string")
    try:
        decoded = fully_decode(vendor_field)
    except MalformedEncodingError as e:
        raise InvalidVendorFieldError(f"vendorField: {e}") from e
    if len(decoded) > VENDOR_FIELD_MAX_LENGTH:
        raise InvalidVendorFieldError(
            f"vendorField: enter no more than {VENDOR_FIELD_MAX_LENGTH} characters"
        )


def validate_size(size: Any) -> None:
    """Validate the render size.

    Raises:
        InvalidSizeError: If the size is not a finite number, or is outside
            ``MIN_SIZE``..``MAX_SIZE`` pixels.
    """
    if isinstance(size, bool) or not isinstance(size, (int, float)):
        raise InvalidSizeError("size: must be a number")
    if not math.isfinite(size):
        raise InvalidSizeError("size: must be a number")
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise InvalidSizeError(
            f"size: must be between {MIN_SIZE} and {MAX_SIZE} pixels"
        )


def validate_show_logo(show_logo: Any, size: Any) -> None:
    """Validate the logo flag together with the size it is rendered at.

    Raises:
        InvalidShowLogoError: If the flag is not a boolean, or the logo is
            requested with a size that is not a number or is below
            ``LOGO_MIN_SIZE``.
    """
    if not isinstance(show_logo, bool):
        raise InvalidShowLogoError("show-logo: must be a boolean")
    if not show_logo:
        return
    numeric = isinstance(size, (int, float)) and not isinstance(size, bool)
    if not numeric or not size >= LOGO_MIN_SIZE:
        raise InvalidShowLogoError(
            "show-logo: to display the logo the size must be "
            f"at least {LOGO_MIN_SIZE}"
        )


def validate_payment_fields(
    address: Any,
    amount: Any,
    label: Any,
    vendor_field: Any,
    size: Any,
    show_logo: Any,
) -> None:
    """Run every field validator, failing on the first violation."""
    validate_address(address)
    validate_amount(amount)
    validate_label(label)
    validate_vendor_field(vendor_field)
    validate_size(size)
    validate_show_logo(show_logo, size)
