"""FastAPI entrypoint and HTTP routes."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel

from apod_colors.config.settings import Settings
from apod_colors.metrics.prometheus_exporter import (
    palette_extraction_seconds,
    palette_requests_total,
)
from apod_colors.nasa.apod_client import ApodClient
from apod_colors.services.palette import PaletteService

logger = logging.getLogger(__name__)


class PaletteSuccess(BaseModel):
    code: int = 200
    success: bool = True
    message: str = "Dominant colors extracted!"
    colors: list[str]


class PaletteFailure(BaseModel):
    code: int = 500
    success: bool = False
    message: str = "Error fetching picture of the day"
    error: str


def create_app(settings: Settings, client: ApodClient | None = None) -> FastAPI:
    """Initialise the FastAPI application.

    ``client`` replaces the APOD client built from ``settings``; it is closed on
    shutdown either way.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        apod_client = client or ApodClient(settings)
        app.state.palette_service = PaletteService(settings, apod_client)
        try:
            yield
        finally:
            await apod_client.close()

    app = FastAPI(
        title="APOD Colors API",
        version="0.1.0",
        docs_url="/docs" if settings.environment != "production" else None,
        redoc_url="/redoc" if settings.environment != "production" else None,
        lifespan=lifespan,
    )

    @app.get("/", tags=["palette"])
    async def dominant_colors(request: Request) -> JSONResponse:
        """Dominant colours of today's Astronomy Picture of the Day."""

        service: PaletteService = request.app.state.palette_service
        try:
            with palette_extraction_seconds.time():
                colors = await service.extract_palette()
        except Exception as exc:
            logger.error("Error fetching picture of the day: %s", exc, exc_info=True)
            palette_requests_total.labels(outcome="error").inc()
            body = PaletteFailure(error=str(exc) or exc.__class__.__name__)
            return JSONResponse(status_code=500, content=body.model_dump())

        palette_requests_total.labels(outcome="success").inc()
        return JSONResponse(status_code=200, content=PaletteSuccess(colors=colors).model_dump())

    @app.get("/health", tags=["system"])
    async def health_check() -> dict[str, str]:
        """Simple health endpoint used for readiness probes."""

        return {"status": "ok"}

    @app.get("/metrics", tags=["system"])
    async def metrics() -> Response:
        """Prometheus scrape endpoint."""

        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    return app
