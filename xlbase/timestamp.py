"""Wall-clock timestamps in microseconds and their local-time renderings."""

from __future__ import annotations

import time

MICROSECONDS_PER_SECOND = 1_000_000


def now() -> int:
    """Return the current time as microseconds since the epoch."""
    return time.time_ns() // 1000


def format_time(show_micro: bool = True, when: int | None = None) -> str:
    """Render a microsecond timestamp (default: now) as ``YYYYMMDD-HH:MM:SS[.uuuuuu]``."""
    if when is None:
        when = now()
    seconds, micros = divmod(when, MICROSECONDS_PER_SECOND)
    tm = time.localtime(seconds)
    text = (
        f"{tm.tm_year:4d}{tm.tm_mon:02d}{tm.tm_mday:02d}-"
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}"
    )
    if show_micro:
        text += f".{micros:06d}"
    return text


def user_format(fmt: str, when: int | None = None) -> str:
    """Render a microsecond timestamp (default: now) in local time with a strftime format."""
    if when is None:
        when = now()
    return time.strftime(fmt, time.localtime(when // MICROSECONDS_PER_SECOND))