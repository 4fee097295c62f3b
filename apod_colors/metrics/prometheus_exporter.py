"""Prometheus exporter helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram


palette_requests_total = Counter(
    "palette_requests_total",
    "Total number of dominant colour requests by outcome.",
    ["outcome"],
)

palette_extraction_seconds = Histogram(
    "palette_extraction_seconds",
    "Time spent fetching, decoding and quantising the picture of the day.",
)
