"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from apod_colors.imgproc.quantizer import QuantizationConfig

logger = logging.getLogger(__name__)

_HOSTS = {
    "development": "127.0.0.1",
    "production": "0.0.0.0",
}


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing or invalid."""


def _load_env_file(path: str = ".env") -> None:
    """Populate os.environ from the provided .env file if it exists."""

    env_path = Path(path)
    if not env_path.exists():
        return

    for line in env_path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        os.environ.setdefault(key.strip(), value.strip())


@dataclass(frozen=True, slots=True)
class Settings:
    """Process-wide settings, built once at startup and passed explicitly."""

    nasa_api_key: str
    port: int = 8080
    environment: str = "development"
    host: str = "127.0.0.1"
    log_level: str = "INFO"

    apod_base_url: str = "https://api.nasa.gov/planetary/apod"
    fallback_image_url: str = "https://i.imgur.com/68jyjZT.jpg"
    request_timeout: float = 30.0

    palette_max_colors: int = 5
    palette_sample_cap: int = 10_000


def resolve_host(environment: str) -> str:
    """Map the deployment environment onto the address the server binds to."""

    host = _HOSTS.get(environment)
    if host is None:
        logger.warning("Invalid environment type %r. Defaulting to 127.0.0.1", environment)
        return _HOSTS["development"]
    return host


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}.") from exc


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}.") from exc


def _build_settings() -> Settings:
    _load_env_file()

    api_key = os.getenv("NASA_API_KEY", "").strip()
    if not api_key:
        raise ConfigurationError("NASA_API_KEY is not configured.")

    port = _int_env("PORT", 8080)
    if not 0 < port < 65536:
        raise ConfigurationError(f"Invalid port number: {port}")

    max_colors = _int_env("PALETTE_MAX_COLORS", 5)
    sample_cap = _int_env("PALETTE_SAMPLE_CAP", 10_000)
    try:
        QuantizationConfig(max_colors=max_colors, sample_cap=sample_cap)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid palette settings: {exc}") from exc

    environment = os.getenv("ENVIRONMENT", "development")
    return Settings(
        nasa_api_key=api_key,
        port=port,
        environment=environment,
        host=resolve_host(environment),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        apod_base_url=os.getenv("APOD_BASE_URL", "https://api.nasa.gov/planetary/apod"),
        fallback_image_url=os.getenv("APOD_FALLBACK_IMAGE_URL", "https://i.imgur.com/68jyjZT.jpg"),
        request_timeout=_float_env("REQUEST_TIMEOUT", 30.0),
        palette_max_colors=max_colors,
        palette_sample_cap=sample_cap,
    )


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid re-reading configuration."""

    return _build_settings()
