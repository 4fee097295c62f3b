"""Integration check helpers."""

from .checks import (
    IntegrationCheckResult,
    check_nasa_apod,
    run_all_checks,
)

__all__ = [
    "IntegrationCheckResult",
    "check_nasa_apod",
    "run_all_checks",
]
