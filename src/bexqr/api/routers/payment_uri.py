"""Payment URI API routes."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, status
from prometheus_client import Counter, Histogram

from ...application.dtos import (
    DecodedURIDTO,
    EncodedURIDTO,
    PaymentRequestDTO,
    PaymentURIDTO,
    URIMatchDTO,
)
from ...application.use_cases.payment_qr import PaymentQRService
from ..dependencies import get_payment_qr_service

router = APIRouter(prefix="/uri", tags=["uri"])

logger = logging.getLogger(__name__)


uri_requests_total = Counter(
    "uri_requests_total",
    "Total payment URI requests processed",
    ["operation", "status"],
)

uri_request_duration_seconds = Histogram(
    "uri_request_duration_seconds",
    "Wall time to process a payment URI request",
    ["operation", "status"],
)


def _observe(operation: str, outcome: str, start_time: float) -> None:
    uri_requests_total.labels(operation=operation, status=outcome).inc()
    uri_request_duration_seconds.labels(operation=operation, status=outcome).observe(
        time.perf_counter() - start_time
    )


@router.post(
    "/encode",
    response_model=EncodedURIDTO,
    status_code=status.HTTP_201_CREATED,
)
async def encode_payment_uri(
    payment_data: PaymentRequestDTO,
    service: PaymentQRService = Depends(get_payment_qr_service),
) -> EncodedURIDTO:
    """Validate payment fields and encode them into a payment URI."""
    start_time = time.perf_counter()
    try:
        result = service.encode(payment_data)
        _observe("encode", "success", start_time)
        return result
    except ValueError as e:
        _observe("encode", "client_error", start_time)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        _observe("encode", "server_error", start_time)
        logger.exception("Failed to encode payment URI")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to encode payment URI: {str(e)}",
        )


@router.post("/decode", response_model=DecodedURIDTO)
async def decode_payment_uri(
    payload: PaymentURIDTO,
    service: PaymentQRService = Depends(get_payment_qr_service),
) -> DecodedURIDTO:
    """Decode a payment URI; non-matching URIs return ``request: null``."""
    start_time = time.perf_counter()
    try:
        result = service.decode(payload.uri)
        _observe("decode", "success", start_time)
        return result
    except Exception as e:
        _observe("decode", "server_error", start_time)
        logger.exception("Failed to decode payment URI")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to decode payment URI: {str(e)}",
        )


@router.post("/matches", response_model=URIMatchDTO)
async def match_payment_uri(
    payload: PaymentURIDTO,
    service: PaymentQRService = Depends(get_payment_qr_service),
) -> URIMatchDTO:
    start_time = time.perf_counter()
    result = service.matches(payload.uri)
    _observe("matches", "success", start_time)
    return result
