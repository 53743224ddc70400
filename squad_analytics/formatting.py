"""
Display formatting for durations.
"""

import math

from squad_analytics.errors import InvalidInput


def format_time(seconds: float) -> str:
    """
    Format a duration in seconds as zero-padded HH:MM:SS.

    Sub-second precision is truncated. Hours are padded to at least two
    digits and may grow wider.
    """
    if seconds is None or not math.isfinite(seconds) or seconds < 0:
        raise InvalidInput(f"Duration must be a non-negative number of seconds, got {seconds!r}")

    whole = math.floor(seconds)
    hours = whole // 3600
    minutes = (whole // 60) % 60
    secs = whole % 60

    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
