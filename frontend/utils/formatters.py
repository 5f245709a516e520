"""
Centralized formatting utilities for the holdings UI.
"""
from datetime import datetime, timezone
from typing import Optional


def format_timestamp_ms(value: Optional[int], fmt: str = "%Y-%m-%d") -> str:
    """Format a milliseconds-since-epoch timestamp (UTC) for display."""
    try:
        if value is None:
            return "-"
        dt = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        return dt.strftime(fmt)
    except (TypeError, ValueError, OverflowError, OSError):
        return "-"


def format_quantity(value: Optional[int]) -> str:
    """Format a share count with thousands separators."""
    if value is None:
        return "-"
    return f"{value:,}"


def format_holding_count(count: int) -> str:
    return "1 holding" if count == 1 else f"{count} holdings"


def display_name(identity) -> str:
    """Readable name for an identity: display name, else email."""
    if identity is None:
        return ""
    return identity.display_name or identity.email
