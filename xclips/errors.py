"""Custom exceptions raised across the core and service layers.

Every fatal condition is an ``XclipsError``; the CLI maps them to exit code 1.
"""


class XclipsError(Exception):
    """Base class for all fatal xclips errors."""


class InputError(XclipsError, ValueError):
    """Raised when timestamp or span text is malformed."""


class TimestampParseError(InputError):
    """Raised when a token matches none of the timestamp formats."""


class SpanParseError(InputError):
    """Raised when a span is missing its dash, has a bad side, or runs backwards."""


class TimestampsFileError(XclipsError, OSError):
    """Raised when the timestamps file cannot be opened or read."""


class NamingError(XclipsError):
    """Raised when an output filename cannot be derived."""


class FfmpegError(XclipsError):
    """Raised when ffmpeg cannot be spawned or exits with a non-zero status."""


class ConfigError(XclipsError):
    """Raised when the YAML configuration file cannot be loaded."""
