"""Human-readable formatting of raw OS quantities."""

import math


BYTES_PER_KIB = 1024
SECONDS_PER_HOUR = 3600


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up.

    ``round()`` rounds halves to even (``round(2.5) == 2``); reported sizes
    and durations round ``2.5`` to ``3``.
    """
    return math.floor(value + 0.5)


def format_gigabytes(num_bytes: int) -> str:
    """Format a byte count as whole gigabytes, e.g. ``17179869184 -> "16 GB"``."""
    gigabytes = num_bytes / BYTES_PER_KIB / BYTES_PER_KIB / BYTES_PER_KIB
    return f"{round_half_up(gigabytes)} GB"


def format_hours(seconds: float) -> str:
    """Format a duration in seconds as whole hours, e.g. ``5400 -> "2 hours"``."""
    return f"{round_half_up(seconds / SECONDS_PER_HOUR)} hours"
