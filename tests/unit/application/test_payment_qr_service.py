"""Unit tests for the payment QR service."""

from unittest.mock import MagicMock

import pytest

from bexqr.application.dtos import PaymentRequestDTO, RenderRequestDTO
from bexqr.application.use_cases.payment_qr import PaymentQRService
from bexqr.domain.errors import InvalidAddressError, InvalidShowLogoError
from bexqr.domain.qr_renderer import QRImageRenderer

ADDRESS = "BQQsQfMLneMx4AjvCUvgX3CRSi1wJHdf1j"


class FakeRenderer(QRImageRenderer):
    """Renderer double that records its calls and returns fixed bytes."""

    def __init__(self) -> None:
        self.calls: list[dict] = []

    def render(self, uri, size=100, show_logo=False, mime="image/png") -> bytes:
        self.calls.append(
            {"uri": uri, "size": size, "show_logo": show_logo, "mime": mime}
        )
        return b"image-bytes"


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def service(renderer: FakeRenderer) -> PaymentQRService:
    return PaymentQRService(renderer)


class TestEncode:
    """Test PaymentQRService.encode."""

    def test_encode_from_wire_names(self, service: PaymentQRService) -> None:
        dto = PaymentRequestDTO.model_validate(
            {"address": ADDRESS, "amount": 5, "vendorField": "Hello!"}
        )

        result = service.encode(dto)

        assert result.uri == f"ark:{ADDRESS}?amount=5&vendorField=Hello%21"

    def test_encode_invalid_address(self, service: PaymentQRService) -> None:
        with pytest.raises(InvalidAddressError):
            service.encode(PaymentRequestDTO(address="nope"))

    def test_encode_validates_render_hints(self, service: PaymentQRService) -> None:
        dto = PaymentRequestDTO.model_validate(
            {"address": ADDRESS, "size": 100, "showLogo": True}
        )
        with pytest.raises(InvalidShowLogoError):
            service.encode(dto)


class TestDecode:
    """Test PaymentQRService.decode and matches."""

    def test_decode_match(self, service: PaymentQRService) -> None:
        result = service.decode(f"ark:{ADDRESS}?amount=10&label=Coffee%20shop")

        assert result.matches is True
        assert result.request.address == ADDRESS
        assert result.request.amount == 10
        assert result.request.label == "Coffee shop"
        assert result.request.vendor_field is None

    def test_decode_no_match(self, service: PaymentQRService) -> None:
        result = service.decode("bad:xyz")

        assert result.matches is False
        assert result.request is None

    def test_decode_matching_but_unconvertible(self, service: PaymentQRService) -> None:
        result = service.decode(f"ark:{ADDRESS}?amount=ten")

        assert result.matches is True
        assert result.request is None

    def test_decode_serializes_wire_names(self, service: PaymentQRService) -> None:
        result = service.decode(f"ark:{ADDRESS}?vendorField=memo")
        assert result.model_dump(by_alias=True)["request"]["vendorField"] == "memo"

    def test_matches(self, service: PaymentQRService) -> None:
        assert service.matches(f"ark:{ADDRESS}").matches is True
        assert service.matches("bad:xyz").matches is False


class TestRender:
    """Test PaymentQRService rendering."""

    def test_render_image_passes_hints(
        self, service: PaymentQRService, renderer: FakeRenderer
    ) -> None:
        dto = RenderRequestDTO.model_validate(
            {"address": ADDRESS, "amount": 1, "size": 300, "showLogo": True}
        )

        assert service.render_image(dto) == b"image-bytes"
        assert renderer.calls == [
            {
                "uri": f"ark:{ADDRESS}?amount=1",
                "size": 300,
                "show_logo": True,
                "mime": "image/png",
            }
        ]

    def test_render_data_url(
        self, service: PaymentQRService, renderer: FakeRenderer
    ) -> None:
        dto = RenderRequestDTO.model_validate(
            {"address": ADDRESS, "mime": "image/jpeg"}
        )

        result = service.render_data_url(dto)

        assert result.uri == f"ark:{ADDRESS}"
        assert result.mime == "image/jpeg"
        assert result.data_url == "data:image/jpeg;base64,aW1hZ2UtYnl0ZXM="
        assert renderer.calls[0]["mime"] == "image/jpeg"

    def test_render_rejects_invalid_fields_before_rendering(self) -> None:
        renderer = MagicMock(spec=QRImageRenderer)
        service = PaymentQRService(renderer)

        with pytest.raises(InvalidAddressError):
            service.render_image(RenderRequestDTO(address=None))
        renderer.render.assert_not_called()
