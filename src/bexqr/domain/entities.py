"""Payment request value object."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .shared.numbers import Number, to_number
from .shared.percent_encoding import fully_decode
from .validators import validate_payment_fields

DEFAULT_SIZE = 100

# Wire (camelCase) names accepted alongside the Python attribute names.
_FIELD_ALIASES = {
    "vendorField": "vendor_field",
    "showLogo": "show_logo",
}


def _blank_to_none(value: Any) -> Any:
    return None if value == "" else value


@dataclass(frozen=True)
class PaymentRequest:
    """A validated ARK payment request plus its QR render hints.

    Construction runs every field validator, so an instance always holds a
    valid address and a vendor field within its decoded length bound. Text
    fields are stored fully percent-decoded and numeric text amounts are
    stored as numbers. Empty strings count as absent fields.
    """

    address: str
    amount: Optional[Number] = None
    label: Optional[str] = None
    vendor_field: Optional[str] = None
    size: int = DEFAULT_SIZE
    show_logo: bool = False

    def __post_init__(self) -> None:
        amount = _blank_to_none(self.amount)
        label = _blank_to_none(self.label)
        vendor_field = _blank_to_none(self.vendor_field)

        validate_payment_fields(
            address=self.address,
            amount=amount,
            label=label,
            vendor_field=vendor_field,
            size=self.size,
            show_logo=self.show_logo,
        )

        object.__setattr__(
            self, "amount", to_number(amount) if amount is not None else None
        )
        object.__setattr__(
            self, "label", fully_decode(label) if label is not None else None
        )
        object.__setattr__(
            self,
            "vendor_field",
            fully_decode(vendor_field) if vendor_field is not None else None,
        )

    @classmethod
    def from_object(cls, data: Mapping[str, Any]) -> "PaymentRequest":
        """Build a request from a loose mapping of wire or Python field names.

        A missing or ``None`` size falls back to ``DEFAULT_SIZE`` and a missing
        logo flag to ``False``.
        """
        fields = {_FIELD_ALIASES.get(key, key): value for key, value in data.items()}
        size = fields.get("size")
        show_logo = fields.get("show_logo")
        return cls(
            address=fields.get("address"),
            amount=fields.get("amount"),
            label=fields.get("label"),
            vendor_field=fields.get("vendor_field"),
            size=DEFAULT_SIZE if size is None else size,
            show_logo=False if show_logo is None else show_logo,
        )

    def to_object(self) -> dict[str, Any]:
        """Return the fields keyed by their wire names."""
        return {
            "address": self.address,
            "amount": self.amount,
            "label": self.label,
            "vendorField": self.vendor_field,
            "size": self.size,
            "showLogo": self.show_logo,
        }

    def with_fields(self, **changes: Any) -> "PaymentRequest":
        """Return a copy with ``changes`` applied; validation runs again."""
        return replace(self, **changes)


@dataclass(frozen=True)
class DecodedPaymentRequest:
    """Fields recovered from a payment URI.

    The decoder accepts more address prefixes than the encoder emits, so this
    value is not re-validated against the encoder's address rules. Use
    ``to_payment_request`` to validate it (and its render hints) for
    re-encoding or rendering.
    """

    address: str
    amount: Optional[Number] = None
    label: Optional[str] = None
    vendor_field: Optional[str] = None

    def to_object(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "amount": self.amount,
            "label": self.label,
            "vendorField": self.vendor_field,
        }

    def to_payment_request(
        self, size: int = DEFAULT_SIZE, show_logo: bool = False
    ) -> PaymentRequest:
        return PaymentRequest(
            address=self.address,
            amount=self.amount,
            label=self.label,
            vendor_field=self.vendor_field,
            size=size,
            show_logo=show_logo,
        )
