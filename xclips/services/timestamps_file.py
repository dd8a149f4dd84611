"""Timestamps file reading.

File I/O is isolated here so span parsing stays pure and the CLI can be
tested with in-memory values.
"""
from __future__ import annotations

import logging
from typing import List

from xclips.core import Span, parse_span
from xclips.errors import SpanParseError, TimestampsFileError


logger = logging.getLogger(__name__)


def read_spans_file(path: str) -> List[Span]:
    """Read one span per line from ``path``, in file order.

    Every line must be a valid span; blank lines are rejected like any
    other malformed line. The file is closed before this returns.
    """
    logger.info("Reading timestamps file: %s", path)
    try:
        f = open(path, 'r', encoding='utf-8')
    except OSError as e:
        logger.error("Failed to open %s: %s", path, e)
        raise TimestampsFileError(f"cannot open file: {path}") from e

    spans: List[Span] = []
    with f:
        try:
            for line in f:
                line = line.rstrip('\n')
                try:
                    spans.append(parse_span(line))
                except SpanParseError as e:
                    raise SpanParseError(f"cannot parse {line} as a time span ({e})") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read %s: %s", path, e)
            raise TimestampsFileError(f"error reading file: {path}") from e

    logger.debug("Read %d span(s) from %s", len(spans), path)
    return spans
