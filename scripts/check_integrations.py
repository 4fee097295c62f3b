"""Check that the configured upstream services are reachable."""

from __future__ import annotations

import asyncio
import sys
from typing import Iterable

from apod_colors.config.settings import ConfigurationError, get_settings
from apod_colors.integrations import IntegrationCheckResult, run_all_checks


def _format_result(result: IntegrationCheckResult) -> str:
    status = "✅" if result.success else "❌"
    return f"{status} {result.name}: {result.message}"


def collect_results() -> list[IntegrationCheckResult]:
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        return [IntegrationCheckResult(name="Configuration", success=False, message=str(exc))]
    return asyncio.run(run_all_checks(settings))


def print_results(results: Iterable[IntegrationCheckResult]) -> None:
    for result in results:
        print(_format_result(result))


def main() -> int:
    results = collect_results()
    print_results(results)
    return 0 if all(result.success for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
