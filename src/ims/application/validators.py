"""Checks applied to raw UI input before it reaches the domain.

Trimming, emptiness, the id pattern and number parsing only.  Range rules
(negative price, non-positive quantity) are left to the domain.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

_PRODUCT_ID_PATTERN = re.compile(r"[A-Za-z0-9]+")


class InputError(Exception):
    """Raw input could not be turned into a value the domain understands."""


def require_text(raw: str | None, field: str) -> str:
    value = (raw or "").strip()
    if not value:
        raise InputError(f"{field} is required")
    return value


def parse_product_id(raw: str | None) -> str:
    value = require_text(raw, "Product ID")
    if not _PRODUCT_ID_PATTERN.fullmatch(value):
        raise InputError(
            f"Product ID '{value}' must contain only letters and digits"
        )
    return value


def parse_price(raw: str | None) -> Decimal:
    value = require_text(raw, "Price")
    try:
        price = Decimal(value)
    except InvalidOperation as exc:
        raise InputError(f"Price '{value}' is not a number") from exc
    if not price.is_finite():
        raise InputError(f"Price '{value}' is not a number")
    return price


def parse_int(raw: str | None, field: str) -> int:
    value = require_text(raw, field)
    try:
        return int(value, 10)
    except ValueError as exc:
        raise InputError(f"{field} '{value}' is not a whole number") from exc


def parse_stock(raw: str | None) -> int:
    return parse_int(raw, "Stock")


def parse_quantity(raw: str | None) -> int:
    return parse_int(raw, "Quantity")
