"""ffmpeg invocation for clip extraction.

Process I/O is isolated here to keep the CLI/test flows clean and mockable.
"""
from __future__ import annotations

import logging
import shlex
import subprocess
from typing import List

from xclips.errors import FfmpegError


logger = logging.getLogger(__name__)

DEFAULT_BINARY = "ffmpeg"
DEFAULT_CODEC = "copy"


def build_command(input_file: str, seek: str, duration: str, output_file: str,
                  binary: str = DEFAULT_BINARY, codec: str = DEFAULT_CODEC) -> List[str]:
    """Return the argument vector that cuts one clip without re-encoding."""
    return [binary, "-ss", seek, "-i", input_file, "-t", duration, "-c", codec, output_file]


def run_ffmpeg(command: List[str]) -> None:
    """Run ``command`` synchronously, letting ffmpeg's own output pass through.

    Raises ``FfmpegError`` if the process cannot be spawned or exits with a
    non-zero status.
    """
    logger.info("Running: %s", " ".join(shlex.quote(p) for p in command))
    try:
        result = subprocess.run(command)
    except OSError as e:
        logger.error("Failed to spawn %s: %s", command[0], e)
        raise FfmpegError(f"failed to spawn {command[0]}") from e
    if result.returncode != 0:
        logger.error("%s exited with status %d", command[0], result.returncode)
        raise FfmpegError(f"{command[0]} command returned non-zero exit status")
    logger.debug("%s finished: %s", command[0], command[-1])
