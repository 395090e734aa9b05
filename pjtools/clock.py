"""Formatting of an uptime counter into a clock string."""

from __future__ import annotations

__all__ = ["get_time"]

_COUNTER_MASK = 0xFFFFFFFF


def get_time(
    time_ms: int,
    day: bool = False,
    hour: bool = True,
    minute: bool = True,
    second: bool = True,
) -> str:
    """Format a 32-bit millisecond counter as ``D.HH:MM:SS``, showing chosen fields."""
    total = (int(time_ms) & _COUNTER_MASK) // 1000
    seconds = total % 60
    total //= 60
    minutes = total % 60
    total //= 60
    hours = total % 24
    days = (total // 24) & 0xFF

    fields = [
        f"{value:02d}"
        for value, shown in ((hours, hour), (minutes, minute), (seconds, second))
        if shown
    ]
    clock = ":".join(fields)
    if not day:
        return clock
    return f"{days}.{clock}" if clock else str(days)