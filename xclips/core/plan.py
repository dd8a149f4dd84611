"""Per-clip extraction plan: output filename, seek offset and duration."""
from __future__ import annotations

from typing import List, NamedTuple, Sequence

from .naming import output_filenames
from .spans import Span
from .timeutils import format_offset


class ClipPlan(NamedTuple):
    span: Span
    output_filename: str
    seek: str
    duration: str


def clip_seek(span: Span) -> str:
    return format_offset(span.start.total_milliseconds)


def clip_duration_ms(span: Span) -> int:
    """Duration handed to ffmpeg's ``-t``, in milliseconds.

    Computed as ``end_ms - start.seconds * 1000 + start.milliseconds``: the
    start's millisecond part is added back rather than subtracted, so spans
    starting off a whole second run ``2 * start.milliseconds`` longer than the span.
    """
    end_ms = span.end.seconds * 1000 + span.end.milliseconds
    return end_ms - span.start.seconds * 1000 + span.start.milliseconds


def plan_clips(spans: Sequence[Span], base_path: str) -> List[ClipPlan]:
    """Build one plan row per span, in the given (sorted) order.

    The output name is derived from ``base_path`` even when there are no
    spans, so a base without an extension always fails.
    """
    names = output_filenames(base_path, len(spans))
    return [
        ClipPlan(span, name, clip_seek(span), format_offset(clip_duration_ms(span)))
        for span, name in zip(spans, names)
    ]
