"""Print the dominant colours of a local image file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from apod_colors.imgproc import QuantizationConfig, QuantizationError, extract_dominant_colors, to_hex
from apod_colors.imgproc.decode import ImageDecodeError, decode_image


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="Image file to analyse.")
    parser.add_argument("--max-colors", type=int, default=5)
    parser.add_argument("--sample-cap", type=int, default=10_000)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    config = QuantizationConfig(max_colors=args.max_colors, sample_cap=args.sample_cap)
    try:
        colors = extract_dominant_colors(decode_image(args.path.read_bytes()), config)
    except (OSError, ImageDecodeError, QuantizationError) as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    for color in colors:
        print(f"{to_hex(color)}  {color.weight:6.1%}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
