"""QR image API routes."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Response, status
from prometheus_client import Counter, Histogram

from ...application.dtos import QRDataURLDTO, RenderRequestDTO
from ...application.use_cases.payment_qr import PaymentQRService
from ...domain.errors import QRCapacityError, RenderUnavailableError
from ..dependencies import get_payment_qr_service

router = APIRouter(prefix="/qr", tags=["qr"])

logger = logging.getLogger(__name__)


qr_renders_total = Counter(
    "qr_renders_total",
    "Total QR render requests processed",
    ["status"],
)

qr_render_duration_seconds = Histogram(
    "qr_render_duration_seconds",
    "Wall time to render a QR code",
    ["status"],
)


def _observe(outcome: str, start_time: float) -> None:
    qr_renders_total.labels(status=outcome).inc()
    qr_render_duration_seconds.labels(status=outcome).observe(
        time.perf_counter() - start_time
    )


def _client_error(e: Exception, start_time: float) -> HTTPException:
    """Map a client-side render failure to its HTTP error."""
    _observe("client_error", start_time)
    if isinstance(e, QRCapacityError):
        code = status.HTTP_422_UNPROCESSABLE_ENTITY
    elif isinstance(e, RenderUnavailableError):
        code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=str(e))


@router.post(
    "/image",
    response_class=Response,
    responses={200: {"content": {"image/png": {}, "image/jpeg": {}}}},
)
async def render_qr_image(
    render_data: RenderRequestDTO,
    service: PaymentQRService = Depends(get_payment_qr_service),
) -> Response:
    """Render the payment URI for the given fields as an image."""
    start_time = time.perf_counter()
    try:
        image = service.render_image(render_data)
        _observe("success", start_time)
        return Response(content=image, media_type=render_data.mime)
    except (ValueError, RenderUnavailableError) as e:
        raise _client_error(e, start_time)
    except Exception as e:
        _observe("server_error", start_time)
        logger.exception("Failed to render QR image")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to render QR image: {str(e)}",
        )


@router.post("/data-url", response_model=QRDataURLDTO)
async def render_qr_data_url(
    render_data: RenderRequestDTO,
    service: PaymentQRService = Depends(get_payment_qr_service),
) -> QRDataURLDTO:
    """Render the payment URI for the given fields as a ``data:`` URL."""
    start_time = time.perf_counter()
    try:
        result = service.render_data_url(render_data)
        _observe("success", start_time)
        return result
    except (ValueError, RenderUnavailableError) as e:
        raise _client_error(e, start_time)
    except Exception as e:
        _observe("server_error", start_time)
        logger.exception("Failed to render QR data URL")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to render QR data URL: {str(e)}",
        )
