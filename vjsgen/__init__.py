"""Package manifest generation for video.js plugin projects."""

__version__ = "0.3.0"
