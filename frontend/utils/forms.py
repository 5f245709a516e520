"""
Client-side form validation. Invalid input never reaches the backend.
"""
import math
from typing import Any


class FormError(ValueError):
    """User input rejected before submission."""


def _text(raw: Any) -> str:
    return raw.strip() if isinstance(raw, str) else ""


def validate_account_name(raw: Any) -> str:
    name = _text(raw)
    if not name:
        raise FormError("Account name is required")
    return name


def parse_quantity(raw: Any) -> int:
    """Coerce form input to a positive whole number of shares."""
    if raw is None or isinstance(raw, bool):
        raise FormError("Quantity is required")
    try:
        value = float(str(raw).strip())
    except ValueError:
        raise FormError("Quantity must be a number")
    if not math.isfinite(value):
        raise FormError("Quantity must be a number")
    if not value.is_integer():
        raise FormError("Quantity must be a whole number")
    if value <= 0:
        raise FormError("Quantity must be positive")
    return int(value)


def validate_holding(symbol: Any, name: Any, quantity: Any) -> tuple[str, str, int]:
    symbol, name = _text(symbol), _text(name)
    if not symbol:
        raise FormError("Symbol is required")
    if not name:
        raise FormError("Name is required")
    return symbol, name, parse_quantity(quantity)
