"""
Cut clips out of a media file at human-readable time spans using ffmpeg.
"""

__version__ = "0.1.0"
