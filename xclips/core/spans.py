"""Pure span parsers and the sorting half of span collection.

These functions avoid side effects and are designed for unit testing.
"""
from __future__ import annotations

import re
from typing import Iterable, List, NamedTuple

from xclips.errors import SpanParseError, TimestampParseError
from .timeutils import Timestamp, parse_timestamp


# Greedy: splits on the last dash.
_SPAN_RE = re.compile(r"(.*)-(.*)", re.DOTALL | re.ASCII)


class Span(NamedTuple):
    """An extraction window, ordered by ``(start, end)``. Always ``start <= end``."""

    start: Timestamp
    end: Timestamp

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


def parse_span(text: str) -> Span:
    """Parse ``"<start>-<end>"`` into a Span.

    Raises ``SpanParseError`` if there is no dash, if either side is not a
    valid timestamp, or if the end comes before the start.
    """
    match = _SPAN_RE.fullmatch(text)
    if match is None:
        raise SpanParseError("doesn't contain a dash")
    try:
        start = parse_timestamp(match.group(1))
        end = parse_timestamp(match.group(2))
    except TimestampParseError as e:
        raise SpanParseError(str(e)) from e
    if start > end:
        raise SpanParseError("end is before start")
    return Span(start, end)


def parse_spans(values: Iterable[str]) -> List[Span]:
    """Parse each value as a span, in order, naming the first offending value."""
    spans: List[Span] = []
    for value in values:
        try:
            spans.append(parse_span(value))
        except SpanParseError as e:
            raise SpanParseError(f"cannot parse {value} as a time span ({e})") from e
    return spans


def sort_spans(*groups: Iterable[Span]) -> List[Span]:
    """Concatenate span groups in order and sort them by start, then end.

    No deduplication or overlap resolution takes place.
    """
    combined: List[Span] = []
    for group in groups:
        combined.extend(group)
    return sorted(combined)
