"""Errors raised by the colour extraction core."""

from __future__ import annotations


class QuantizationError(ValueError):
    """Base class for invalid input handed to the colour extraction core."""


class MalformedBufferError(QuantizationError):
    """Raised when a pixel buffer is not a sequence of 8-bit RGB triples."""


class EmptyInputError(QuantizationError):
    """Raised when there are no pixels left to cluster."""
