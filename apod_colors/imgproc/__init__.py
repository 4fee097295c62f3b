"""Pixel sampling, colour quantisation and formatting."""

from .errors import EmptyInputError, MalformedBufferError, QuantizationError
from .formatter import format_as_hex, to_hex
from .quantizer import DominantColor, QuantizationConfig, extract_dominant_colors
from .sampler import sample_pixels

__all__ = [
    "DominantColor",
    "EmptyInputError",
    "MalformedBufferError",
    "QuantizationConfig",
    "QuantizationError",
    "extract_dominant_colors",
    "format_as_hex",
    "sample_pixels",
    "to_hex",
]
