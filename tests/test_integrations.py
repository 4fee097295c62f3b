"""Tests for external integration connectivity helpers."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import pytest
import pytest_mock

from apod_colors.config.settings import Settings, get_settings
from apod_colors.integrations import check_nasa_apod, run_all_checks
from scripts.check_integrations import collect_results


@pytest.mark.asyncio
async def test_check_nasa_apod_success(settings: Settings, mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("apod_colors.integrations.checks.ApodClient", autospec=True)
    instance = client_mock.return_value
    instance.ping = mocker.AsyncMock(return_value=True)
    instance.close = mocker.AsyncMock(return_value=None)

    result = await check_nasa_apod(settings)

    assert result.success
    client_mock.assert_called_once_with(settings)
    instance.ping.assert_awaited_once()
    instance.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_run_all_checks_reports_failure(settings: Settings, mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("apod_colors.integrations.checks.ApodClient", autospec=True)
    instance = client_mock.return_value
    instance.ping = mocker.AsyncMock(return_value=False)
    instance.close = mocker.AsyncMock(return_value=None)

    results = await run_all_checks(settings)

    assert len(results) == 1
    assert not results[0].success
    assert "non-success" in results[0].message.lower()


@pytest.mark.asyncio
async def test_missing_api_key_is_reported_as_failure(settings: Settings) -> None:
    result = await check_nasa_apod(replace(settings, nasa_api_key=""))

    assert not result.success
    assert "not configured" in result.message


def test_script_reports_configuration_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NASA_API_KEY", raising=False)
    get_settings.cache_clear()
    try:
        results = collect_results()
    finally:
        get_settings.cache_clear()

    assert [(result.name, result.success) for result in results] == [("Configuration", False)]
    assert "NASA_API_KEY" in results[0].message
