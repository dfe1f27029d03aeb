"""Use cases for encoding, decoding and rendering payment QR codes."""

from __future__ import annotations

from ...domain.entities import PaymentRequest
from ...domain.qr_renderer import QRImageRenderer
from ..dtos import (
    DecodedFieldsDTO,
    DecodedURIDTO,
    EncodedURIDTO,
    PaymentRequestDTO,
    QRDataURLDTO,
    RenderRequestDTO,
    URIMatchDTO,
)
from ..uri_codec import decode_uri, encode_uri, matches


class PaymentQRService:
    """Service for payment URI and QR image operations.

    Holds no per-request state: every call validates the fields it is given,
    so a caller updating a field simply calls again with the new values.
    """

    def __init__(self, renderer: QRImageRenderer):
        self.renderer = renderer

    def build_request(self, dto: PaymentRequestDTO) -> PaymentRequest:
        """Validate the DTO fields into a payment request."""
        return PaymentRequest.from_object(dto.to_object())

    def encode(self, dto: PaymentRequestDTO) -> EncodedURIDTO:
        """Encode payment fields into their canonical URI."""
        request = self.build_request(dto)
        return EncodedURIDTO(uri=encode_uri(request))

    def decode(self, uri: str) -> DecodedURIDTO:
        """Decode a payment URI; a non-matching URI yields no request."""
        decoded = decode_uri(uri)
        if decoded is None:
            return DecodedURIDTO(matches=matches(uri), request=None)
        return DecodedURIDTO(
            matches=True,
            request=DecodedFieldsDTO(**decoded.to_object()),
        )

    def matches(self, uri: str) -> URIMatchDTO:
        return URIMatchDTO(matches=matches(uri))

    def render_image(self, dto: RenderRequestDTO) -> bytes:
        """Render the payment URI for ``dto`` as image bytes."""
        request = self.build_request(dto)
        return self.renderer.render(
            encode_uri(request),
            size=request.size,
            show_logo=request.show_logo,
            mime=dto.mime,
        )

    def render_data_url(self, dto: RenderRequestDTO) -> QRDataURLDTO:
        """Render the payment URI for ``dto`` as a ``data:`` URL."""
        request = self.build_request(dto)
        uri = encode_uri(request)
        data_url = self.renderer.data_url(
            uri,
            size=request.size,
            show_logo=request.show_logo,
            mime=dto.mime,
        )
        return QRDataURLDTO(uri=uri, mime=dto.mime, data_url=data_url)
