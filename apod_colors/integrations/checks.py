"""Connectivity checks for upstream services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable

from apod_colors.config.settings import Settings
from apod_colors.nasa.apod_client import ApodClient


@dataclass(slots=True)
class IntegrationCheckResult:
    """Structured result describing the integration check outcome."""

    name: str
    success: bool
    message: str


async def _run_check(
    name: str,
    factory: Callable[[], Awaitable[bool]],
    success_message: str,
) -> IntegrationCheckResult:
    try:
        result = await factory()
    except Exception as exc:
        return IntegrationCheckResult(name=name, success=False, message=str(exc))

    if result:
        return IntegrationCheckResult(name=name, success=True, message=success_message)
    return IntegrationCheckResult(
        name=name,
        success=False,
        message="Service responded with non-success status.",
    )


async def check_nasa_apod(settings: Settings) -> IntegrationCheckResult:
    """Ping the APOD API and return the result."""

    async def _ping() -> bool:
        client = ApodClient(settings)
        try:
            return await client.ping()
        finally:
            await client.close()

    return await _run_check(
        name="NASA APOD",
        factory=_ping,
        success_message="APOD API is reachable.",
    )


async def run_all_checks(settings: Settings) -> list[IntegrationCheckResult]:
    """Execute every integration check in turn."""

    return [await check_nasa_apod(settings)]
