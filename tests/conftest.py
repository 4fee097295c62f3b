"""Shared fixtures for the test-suite."""

from __future__ import annotations

import pytest

from apod_colors.config.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        nasa_api_key="test-nasa-key",
        apod_base_url="https://apod.test/planetary/apod",
        fallback_image_url="https://images.test/fallback.jpg",
        request_timeout=5.0,
    )
