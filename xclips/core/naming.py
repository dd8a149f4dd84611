"""Output filename derivation for extracted clips."""
from __future__ import annotations

import os
from typing import List, Tuple

from xclips.errors import NamingError


CLIP_SUFFIX = "_clip"


def split_extension(path: str) -> Tuple[str, str]:
    """Split ``path`` at the last ``.`` of its filename into ``(stem, extension)``.

    The stem keeps any directory part. Raises ``NamingError`` when the
    filename has no dot at all.
    """
    filename = os.path.basename(path)
    if '.' not in filename:
        raise NamingError("output filename does not have a file extension")
    stem, _, ext = path.rpartition('.')
    return stem, ext


def log10_ceil(n: int) -> int:
    """Digits used to pad clip indices for ``n`` clips.

    Starts at one digit and adds one per division by ten while ``n > 10``,
    so 10 clips get width 1 and 11 clips get width 2.
    """
    digits = 1
    while n > 10:
        n //= 10
        digits += 1
    return digits


def output_filenames(base_path: str, count: int) -> List[str]:
    """Return one output filename per clip, in clip order.

    A single clip becomes ``<stem>_clip.<ext>``; several become
    ``<stem>_clip<index>.<ext>`` with zero-padded, 0-based indices.
    """
    stem, ext = split_extension(base_path)
    if count == 1:
        return [f"{stem}{CLIP_SUFFIX}.{ext}"]
    width = log10_ceil(count)
    return [f"{stem}{CLIP_SUFFIX}{i:0{width}d}.{ext}" for i in range(count)]
