"""Pure time utility helpers: timestamp parsing and millisecond formatting."""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

from xclips.errors import TimestampParseError


_SECONDS_RE = re.compile(r"(\d+)\.?(\d{1,3})?", re.ASCII)
_MINUTES_SECONDS_RE = re.compile(r"(\d+):(\d{2})\.?(\d{1,3})?", re.ASCII)
_HOURS_MINUTES_SECONDS_RE = re.compile(r"(\d+):(\d{2}):(\d{2})\.?(\d{1,3})?", re.ASCII)


class Timestamp(NamedTuple):
    """A point in the source media, ordered by ``(seconds, milliseconds)``."""

    seconds: int
    milliseconds: int

    @property
    def total_milliseconds(self) -> int:
        return self.seconds * 1000 + self.milliseconds

    def __str__(self) -> str:
        return format_offset(self.total_milliseconds)


def _fraction_to_ms(fraction: Optional[str]) -> int:
    # "5" -> 500, "05" -> 50, "005" -> 5
    if not fraction:
        return 0
    return int(fraction) * 10 ** (3 - len(fraction))


def parse_timestamp(text: str) -> Timestamp:
    """Parse ``SS[.fff]``, ``MM:SS[.fff]`` or ``HH:MM:SS[.fff]`` into a Timestamp.

    Formats are tried in that order and the first full match wins. The
    leading field may be any unsigned integer (``"75:00"`` is 4500 seconds);
    the fractional part is scaled by its length, so ``"1.5"`` is 500 ms and
    ``"1.005"`` is 5 ms. Raises ``TimestampParseError`` otherwise.
    """
    match = _SECONDS_RE.fullmatch(text)
    if match:
        return Timestamp(int(match.group(1)), _fraction_to_ms(match.group(2)))

    match = _MINUTES_SECONDS_RE.fullmatch(text)
    if match:
        minutes, seconds = int(match.group(1)), int(match.group(2))
        return Timestamp(60 * minutes + seconds, _fraction_to_ms(match.group(3)))

    match = _HOURS_MINUTES_SECONDS_RE.fullmatch(text)
    if match:
        hours, minutes, seconds = (int(match.group(i)) for i in (1, 2, 3))
        return Timestamp(
            3600 * hours + 60 * minutes + seconds,
            _fraction_to_ms(match.group(4)),
        )

    raise TimestampParseError(f"not a valid timestamp: {text!r}")


def format_offset(total_ms: int) -> str:
    """Format milliseconds as ``<seconds>.<mmm>``, the form ffmpeg gets for -ss/-t."""
    return f"{total_ms // 1000}.{total_ms % 1000:03d}"


def format_seconds(total_ms: int) -> str:
    """Format a duration in milliseconds as ``HH:MM:SS.mmm``.

    Keeps the sign for negative values.
    """
    sign = '-' if total_ms < 0 else ''
    ms = abs(total_ms)
    hours = ms // 3_600_000
    minutes = (ms % 3_600_000) // 60_000
    secs = (ms % 60_000) // 1000
    millis = ms % 1000
    return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}.{millis:03d}"
