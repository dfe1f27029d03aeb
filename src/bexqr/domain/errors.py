"""Domain-specific exceptions."""

from __future__ import annotations


class BexQRError(Exception):
    """Base class for every error raised by this package."""


class PaymentFieldError(BexQRError, ValueError):
    """Raised when a payment request field violates its format rules."""


class InvalidAddressError(PaymentFieldError):
    """Raised when the recipient address is missing or malformed."""


class InvalidAmountError(PaymentFieldError):
    """Raised when the amount cannot be represented as a number."""


class InvalidLabelError(PaymentFieldError):
    """Raised when the label is not text."""


class InvalidVendorFieldError(PaymentFieldError):
    """Raised when the vendor field is not text or is too long once decoded."""


class InvalidSizeError(PaymentFieldError):
    """Raised when the render size is not numeric."""


class InvalidShowLogoError(PaymentFieldError):
    """Raised when the logo flag is not a boolean or the size is too small for it."""


class MalformedEncodingError(BexQRError, ValueError):
    """Raised when a percent-encoded string cannot be fully decoded."""


class NotLoadedError(BexQRError):
    """Raised when encoding is attempted without a validated payment request."""


class RenderUnavailableError(BexQRError):
    """Raised when the QR image renderer cannot produce the requested output."""


class QRCapacityError(RenderUnavailableError):
    """Raised when a payment URI is too long for the largest QR code version."""
