"""Median-cut colour quantisation over the RGB cube."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, Sequence

from .errors import EmptyInputError
from .sampler import DEFAULT_SAMPLE_CAP, Pixel, sample_pixels

DEFAULT_MAX_COLORS = 5
MAX_PALETTE_SIZE = 16


@dataclass(frozen=True, slots=True)
class QuantizationConfig:
    """Tunables for a single extraction call."""

    max_colors: int = DEFAULT_MAX_COLORS
    sample_cap: int = DEFAULT_SAMPLE_CAP

    def __post_init__(self) -> None:
        if not 1 <= self.max_colors <= MAX_PALETTE_SIZE:
            raise ValueError(f"max_colors must be between 1 and {MAX_PALETTE_SIZE}.")
        if self.sample_cap < 1:
            raise ValueError("sample_cap must be a positive integer.")


@dataclass(frozen=True, slots=True)
class DominantColor:
    """Representative colour of one cluster and the share of samples it holds."""

    red: int
    green: int
    blue: int
    population: int
    weight: float

    @property
    def rgb(self) -> Pixel:
        return (self.red, self.green, self.blue)


class _Cluster:
    """Distinct colours with their sample counts, plus running channel sums."""

    __slots__ = ("entries", "population", "_sums", "_squares")

    def __init__(self, entries: list[tuple[Pixel, int]]) -> None:
        self.entries = entries
        self.population = sum(count for _, count in entries)
        self._sums = [0, 0, 0]
        self._squares = [0, 0, 0]
        for color, count in entries:
            for channel in range(3):
                value = color[channel]
                self._sums[channel] += value * count
                self._squares[channel] += value * value * count

    @property
    def splittable(self) -> bool:
        return len(self.entries) > 1

    def _scaled_variance(self, channel: int) -> int:
        # population ** 2 times the variance, exact in integers
        total = self._sums[channel]
        return self.population * self._squares[channel] - total * total

    def widest_channel(self) -> int:
        """Channel with the greatest variance; ties resolve to R, then G, then B."""

        scaled = [self._scaled_variance(channel) for channel in range(3)]
        return scaled.index(max(scaled))

    def spread(self) -> Fraction:
        """Variance along the widest channel."""

        return Fraction(self._scaled_variance(self.widest_channel()), self.population**2)

    def split(self) -> tuple[_Cluster, _Cluster]:
        """Cut at the median value of the widest channel.

        Colours sharing the median value land on the same side, so a distinct
        colour never ends up in two clusters.
        """

        channel = self.widest_channel()
        ordered = sorted(self.entries, key=lambda entry: (entry[0][channel], entry[0]))

        position = self.population // 2
        seen = 0
        median = ordered[-1][0][channel]
        for color, count in ordered:
            seen += count
            if seen > position:
                median = color[channel]
                break

        lower = [entry for entry in ordered if entry[0][channel] < median]
        if not lower:
            lower = [entry for entry in ordered if entry[0][channel] <= median]
        upper = ordered[len(lower):]
        return _Cluster(lower), _Cluster(upper)

    def mean(self) -> Pixel:
        """Per-channel mean, rounded half up."""

        population = self.population
        red, green, blue = ((2 * total + population) // (2 * population) for total in self._sums)
        return (red, green, blue)


def _dominance_key(color: DominantColor) -> tuple[int, int, Pixel]:
    return (-color.population, sum(color.rgb), color.rgb)


def quantize(samples: Iterable[Pixel], max_colors: int = DEFAULT_MAX_COLORS) -> list[DominantColor]:
    """Reduce ``samples`` to at most ``max_colors`` representative colours.

    The result is ordered most dominant first. Equal populations are ordered
    by the lower channel sum, then by the ``(R, G, B)`` tuple, so the output is
    fully determined by the input.
    """

    if max_colors < 1:
        raise ValueError("max_colors must be a positive integer.")

    histogram = Counter(samples)
    if not histogram:
        raise EmptyInputError("No pixels available for quantization.")

    clusters = [_Cluster(sorted(histogram.items()))]
    while len(clusters) < max_colors:
        candidates = [cluster for cluster in clusters if cluster.splittable]
        if not candidates:
            break
        target = max(candidates, key=_Cluster.spread)
        index = clusters.index(target)
        clusters[index:index + 1] = target.split()

    total = sum(cluster.population for cluster in clusters)
    colors = []
    for cluster in clusters:
        red, green, blue = cluster.mean()
        colors.append(
            DominantColor(
                red=red,
                green=green,
                blue=blue,
                population=cluster.population,
                weight=cluster.population / total,
            )
        )
    return sorted(colors, key=_dominance_key)


def extract_dominant_colors(
    buffer: bytes | bytearray | memoryview | Sequence[int],
    config: QuantizationConfig | None = None,
) -> list[DominantColor]:
    """Sample a flat RGB buffer and return its dominant colours.

    Raises :class:`MalformedBufferError` when the buffer is not made of RGB
    triples and :class:`EmptyInputError` when it holds no pixels.
    """

    config = config or QuantizationConfig()
    samples = sample_pixels(buffer, config.sample_cap)
    if not samples:
        raise EmptyInputError("Pixel buffer is empty.")
    return quantize(samples, config.max_colors)
