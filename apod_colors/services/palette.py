"""Resolve the picture of the day and extract its dominant colours."""

from __future__ import annotations

import asyncio
import logging

from apod_colors.config.settings import Settings
from apod_colors.imgproc.decode import decode_image
from apod_colors.imgproc.formatter import format_as_hex
from apod_colors.imgproc.quantizer import QuantizationConfig, extract_dominant_colors
from apod_colors.nasa.apod_client import ApodClient, ApodMetadata

logger = logging.getLogger(__name__)


def _palette_from_bytes(data: bytes, config: QuantizationConfig) -> list[str]:
    buffer = decode_image(data)
    return format_as_hex(extract_dominant_colors(buffer, config))


class PaletteService:
    """Glue between the APOD client and the colour extraction core."""

    def __init__(self, settings: Settings, client: ApodClient) -> None:
        self._settings = settings
        self._client = client
        self._config = QuantizationConfig(
            max_colors=settings.palette_max_colors,
            sample_cap=settings.palette_sample_cap,
        )

    def resolve_image_url(self, metadata: ApodMetadata) -> str:
        """Use the APOD image, or the fallback when today's media is not an image."""

        if metadata.is_image:
            return metadata.url
        logger.info(
            "APOD media type is %r, using fallback image %s",
            metadata.media_type,
            self._settings.fallback_image_url,
        )
        return self._settings.fallback_image_url

    async def extract_palette(self) -> list[str]:
        """Return the dominant colours of today's picture as hex codes."""

        metadata = await self._client.fetch_picture_of_the_day()
        image_url = self.resolve_image_url(metadata)
        data = await self._client.download_image(image_url)
        return await asyncio.to_thread(_palette_from_bytes, data, self._config)
