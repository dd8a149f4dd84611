"""Service layer modules (file and process I/O).

Includes the timestamps-file reader and the ffmpeg runner.
"""

__all__ = [
    "timestamps_file",
    "ffmpeg",
]
