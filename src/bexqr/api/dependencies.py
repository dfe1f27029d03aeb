"""FastAPI dependencies for the payment QR API."""

from __future__ import annotations

from fastapi import Depends

from ..application.use_cases.payment_qr import PaymentQRService
from ..domain.qr_renderer import QRImageRenderer
from ..env import Settings, get_settings
from ..infrastructure.qr_renderer_impl import QRCodeRenderer


def get_qr_renderer(settings: Settings = Depends(get_settings)) -> QRImageRenderer:
    """Get QR image renderer."""
    return QRCodeRenderer(border=settings.qr_border)


def get_payment_qr_service(
    renderer: QRImageRenderer = Depends(get_qr_renderer),
) -> PaymentQRService:
    """Get payment QR service."""
    return PaymentQRService(renderer)
