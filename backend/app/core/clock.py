"""
Timestamps as stored on account and holding records.
"""
import time


def now_ms() -> int:
    """Current time in whole milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000
