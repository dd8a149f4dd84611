"""
Core utilities and domain helpers for xclips.

This package hosts pure, side-effect-free logic: timestamp and span
parsing, span ordering, output naming and clip planning.
"""

__all__ = [
    "Timestamp",
    "parse_timestamp",
    "format_offset",
    "format_seconds",
    "Span",
    "parse_span",
    "parse_spans",
    "sort_spans",
    "split_extension",
    "log10_ceil",
    "output_filenames",
    "ClipPlan",
    "clip_seek",
    "clip_duration_ms",
    "plan_clips",
]

from .timeutils import Timestamp, parse_timestamp, format_offset, format_seconds
from .spans import Span, parse_span, parse_spans, sort_spans
from .naming import split_extension, log10_ceil, output_filenames
from .plan import ClipPlan, clip_seek, clip_duration_ms, plan_clips
