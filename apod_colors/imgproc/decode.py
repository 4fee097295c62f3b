"""Decode downloaded image bytes into a flat RGB pixel buffer."""

from __future__ import annotations

from io import BytesIO

from PIL import Image, UnidentifiedImageError


class ImageDecodeError(ValueError):
    """Raised when downloaded bytes cannot be read as a raster image."""


def decode_image(data: bytes) -> bytes:
    """Return row-major RGB bytes for ``data``; alpha and palettes are flattened."""

    if not data:
        raise ImageDecodeError("Image payload is empty.")

    try:
        with Image.open(BytesIO(data)) as img:
            return img.convert("RGB").tobytes()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        raise ImageDecodeError(f"Unable to decode image: {exc}") from exc
