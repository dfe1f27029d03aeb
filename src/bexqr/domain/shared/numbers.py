"""Conversions between payment amounts and their textual URI form."""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any, Union

Number = Union[int, float]

_INTEGER = re.compile(r"[+-]?[0-9]+")
# ASCII decimal or exponent notation; no "_" separators, "inf" or "nan".
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def to_number(value: Any) -> Number:
    """Convert ``value`` to an ``int`` or finite ``float``.

    Integral text (``"10"``) becomes an ``int``; other numeric text goes
    through ``float``. Booleans are not numbers here.

    Raises:
        ValueError: If ``value`` does not represent a finite number.
    """
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not a number")
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        try:
            if value == value.to_integral_value():
                return int(value)
        except (InvalidOperation, OverflowError) as e:
            raise ValueError(f"{value!r} is not a finite number") from e
        number = float(value)
    elif isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if _INTEGER.fullmatch(text):
            return int(text)
        if not _DECIMAL.fullmatch(text):
            raise ValueError(f"{value!r} is not a number")
        number = float(text)
    else:
        raise ValueError(f"{value!r} is not a number")

    if not math.isfinite(number):
        raise ValueError(f"{value!r} is not a finite number")
    return number


def format_number(value: Number) -> str:
    """Default string form of an amount: integral floats drop their ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
