"""Measuring windows — pure functions over New York hours.

CBDR:   14:00–20:00 EST
Asian:  19:00–24:00 EST
Flout:  15:00–24:00 EST
"""

from rangeforge.engine.policy import get_method_policy

# (start, end) in New York hours; start inclusive, end exclusive.
METHOD_WINDOWS: dict[str, tuple[int, int]] = {
    "cbdr": (14, 20),
    "asian": (19, 24),
    "flout": (15, 24),
}


def is_in_window(ny_hour: int, method: str) -> bool:
    """Return True if *ny_hour* (0–23) falls inside *method*'s window.

    Raises:
        InvalidInput: If *method* is unknown.
    """
    get_method_policy(method)
    start, end = METHOD_WINDOWS[method]
    return start <= ny_hour < end


def window_label(method: str) -> str:
    """Human-readable window, e.g. ``"2:00 PM-8:00 PM EST"``."""
    get_method_policy(method)
    start, end = METHOD_WINDOWS[method]
    return f"{_clock(start)}-{_clock(end)} EST"


def _clock(hour: int) -> str:
    hour %= 24
    suffix = "AM" if hour < 12 else "PM"
    display = hour % 12 or 12
    return f"{display}:00 {suffix}"
