"""Hex formatting for dominant colours."""

from __future__ import annotations

from typing import Iterable

from .quantizer import DominantColor


def to_hex(color: DominantColor | tuple[int, int, int]) -> str:
    """Return ``RRGGBB`` in upper case, e.g. ``(15, 0, 255) -> "0F00FF"``."""

    red, green, blue = color.rgb if isinstance(color, DominantColor) else color
    return f"{red:02X}{green:02X}{blue:02X}"


def format_as_hex(colors: Iterable[DominantColor | tuple[int, int, int]]) -> list[str]:
    """Format every colour with :func:`to_hex`, keeping the input order."""

    return [to_hex(color) for color in colors]
