"""Dominant colours of NASA's Astronomy Picture of the Day."""

__version__ = "0.1.0"
