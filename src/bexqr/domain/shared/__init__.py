"""Shared domain utilities.

This package is domain-accessible and should not depend on application code.
"""

from .percent_encoding import MAX_DECODE_PASSES, fully_decode, percent_encode

__all__ = ["MAX_DECODE_PASSES", "fully_decode", "percent_encode"]
