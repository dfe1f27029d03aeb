"""Data Transfer Objects for the payment QR application layer."""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..domain.qr_renderer import DEFAULT_MIME


class PaymentRequestDTO(BaseModel):
    """DTO carrying payment request fields as supplied by a caller.

    Fields are passed through untyped: the domain validators decide what is
    valid, so a bad value fails with its field error rather than being coerced.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "address": "BQQsQfMLneMx4AjvCUvgX3CRSi1wJHdf1j",
                "amount": 5,
                "label": "Coffee",
                "vendorField": "Hello!",
                "size": 200,
                "showLogo": False,
            }
        },
    )

    address: Any = None
    amount: Any = None
    label: Any = None
    vendor_field: Any = Field(None, alias="vendorField")
    size: Any = None
    show_logo: Any = Field(None, alias="showLogo")

    def to_object(self) -> dict[str, Any]:
        """Return the fields keyed by their wire names."""
        return self.model_dump(by_alias=True)


class RenderRequestDTO(PaymentRequestDTO):
    """DTO for rendering a payment request as a QR image."""

    mime: str = DEFAULT_MIME


class PaymentURIDTO(BaseModel):
    """DTO carrying a raw payment URI."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"uri": "ark:BQQsQfMLneMx4AjvCUvgX3CRSi1wJHdf1j?amount=10"}
        }
    )

    uri: str


class EncodedURIDTO(BaseModel):
    """DTO for returning an encoded payment URI."""

    uri: str


class DecodedFieldsDTO(BaseModel):
    """DTO for the payment fields recovered from a URI."""

    model_config = ConfigDict(populate_by_name=True)

    address: str
    amount: Optional[Union[int, float]] = None
    label: Optional[str] = None
    vendor_field: Optional[str] = Field(None, alias="vendorField")


class DecodedURIDTO(BaseModel):
    """DTO for returning a decode result; ``request`` is null when nothing decodes."""

    matches: bool
    request: Optional[DecodedFieldsDTO] = None


class URIMatchDTO(BaseModel):
    matches: bool


class QRDataURLDTO(BaseModel):
    """DTO for returning a rendered QR code as a data URL."""

    uri: str
    mime: str
    data_url: str
