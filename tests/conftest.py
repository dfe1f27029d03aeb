"""Shared pytest fixtures for payment QR tests."""

from __future__ import annotations

import pytest

from bexqr.domain.entities import PaymentRequest

VALID_ADDRESS = "BQQsQfMLneMx4AjvCUvgX3CRSi1wJHdf1j"


@pytest.fixture
def valid_address() -> str:
    """A recipient address accepted by the encoder."""
    return VALID_ADDRESS


@pytest.fixture
def full_request(valid_address: str) -> PaymentRequest:
    """A payment request with every optional field set."""
    return PaymentRequest(
        address=valid_address,
        amount=12.5,
        label="Coffee shop",
        vendor_field="Hello Bex!",
        size=200,
        show_logo=True,
    )
