"""Async wrapper around the APOD metadata endpoint and image downloads."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from apod_colors.config.settings import Settings


class ApodRequestError(RuntimeError):
    """Raised when the APOD API or the image host cannot serve a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


logger = logging.getLogger(__name__)


class ApodMetadata(BaseModel):
    """Subset of the APOD payload describing one day's media."""

    copyright: str | None = None
    date: str
    explanation: str
    hdurl: str | None = None
    media_type: str
    service_version: str
    title: str
    url: str

    @property
    def is_image(self) -> bool:
        return self.media_type == "image"


class ApodClient:
    """Fetches APOD metadata and raw image bytes over a shared HTTP session."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not settings.nasa_api_key:
            raise RuntimeError("NASA API key is not configured.")

        self._settings = settings
        self._client = httpx.AsyncClient(
            timeout=settings.request_timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""

        await self._client.aclose()

    async def _get(self, url: str, *, params: dict[str, Any] | None = None) -> httpx.Response:
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
            return response
        except httpx.TimeoutException as exc:
            raise ApodRequestError(f"Timed out waiting for {url}") from exc
        except httpx.HTTPStatusError as exc:
            raise ApodRequestError(
                f"{url} returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise ApodRequestError(f"Request failed: {exc}") from exc

    async def fetch_picture_of_the_day(self) -> ApodMetadata:
        """Return today's APOD metadata."""

        response = await self._get(
            self._settings.apod_base_url,
            params={"api_key": self._settings.nasa_api_key},
        )
        try:
            return ApodMetadata.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Unexpected APOD payload: %s", response.text[:500])
            raise ApodRequestError("APOD API returned an invalid payload.") from exc

    async def download_image(self, url: str) -> bytes:
        """Return the raw bytes served at ``url``."""

        response = await self._get(url)
        logger.info("Downloaded %d bytes from %s", len(response.content), url)
        return response.content

    async def ping(self) -> bool:
        """Return ``True`` when the APOD endpoint answers successfully."""

        try:
            await self.fetch_picture_of_the_day()
        except ApodRequestError as exc:
            logger.warning("APOD ping failed: %s", exc)
            return False
        return True
