"""Pixel buffer normalisation and uniform stride subsampling."""

from __future__ import annotations

from typing import Sequence

from .errors import MalformedBufferError

Pixel = tuple[int, int, int]

DEFAULT_SAMPLE_CAP = 10_000


def _as_bytes(buffer: bytes | bytearray | memoryview | Sequence[int]) -> bytes:
    if len(buffer) % 3:
        raise MalformedBufferError(
            f"Pixel buffer length {len(buffer)} is not a multiple of 3.",
        )
    try:
        return bytes(buffer)
    except (TypeError, ValueError) as exc:
        raise MalformedBufferError("Pixel channels must be integers in range 0-255.") from exc


def sample_pixels(
    buffer: bytes | bytearray | memoryview | Sequence[int],
    max_samples: int = DEFAULT_SAMPLE_CAP,
) -> list[Pixel]:
    """Return at most ``max_samples`` pixels picked at a uniform stride.

    ``buffer`` is a flat, row-major RGB buffer. Buffers holding no more than
    ``max_samples`` pixels are returned whole, in order. Larger buffers are
    reduced to exactly ``max_samples`` pixels with index ``i * n // max_samples``
    so the result depends only on the input.
    """

    if max_samples < 1:
        raise ValueError("max_samples must be a positive integer.")

    data = _as_bytes(buffer)
    total = len(data) // 3
    if total <= max_samples:
        indices = range(total)
    else:
        indices = (i * total // max_samples for i in range(max_samples))

    pixels: list[Pixel] = []
    for index in indices:
        offset = index * 3
        pixels.append((data[offset], data[offset + 1], data[offset + 2]))
    return pixels
