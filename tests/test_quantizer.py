"""Tests for median-cut dominant colour extraction."""

from __future__ import annotations

import random

import pytest

from apod_colors.imgproc import (
    EmptyInputError,
    MalformedBufferError,
    QuantizationConfig,
    extract_dominant_colors,
    format_as_hex,
)


def _buffer(groups: list[tuple[tuple[int, int, int], int]]) -> bytes:
    return bytes(channel for color, count in groups for _ in range(count) for channel in color)


def _random_buffer(seed: int, pixels: int = 500) -> bytes:
    rng = random.Random(seed)
    return bytes(rng.randrange(256) for _ in range(pixels * 3))


def test_single_colour_yields_one_dominant_colour() -> None:
    colors = extract_dominant_colors(_buffer([((10, 20, 30), 100)]))

    assert len(colors) == 1
    assert colors[0].rgb == (10, 20, 30)
    assert colors[0].population == 100
    assert colors[0].weight == 1.0
    assert format_as_hex(colors) == ["0A141E"]


def test_empty_buffer_fails() -> None:
    with pytest.raises(EmptyInputError):
        extract_dominant_colors(b"")


def test_malformed_buffer_fails() -> None:
    with pytest.raises(MalformedBufferError):
        extract_dominant_colors(bytes(5))


def test_equal_groups_are_ordered_by_channel_sum_then_rgb() -> None:
    buffer = _buffer([((255, 0, 0), 50), ((0, 0, 255), 50)])

    colors = extract_dominant_colors(buffer, QuantizationConfig(max_colors=5))

    assert [color.rgb for color in colors] == [(0, 0, 255), (255, 0, 0)]
    assert [color.weight for color in colors] == [0.5, 0.5]


def test_larger_population_comes_first() -> None:
    buffer = _buffer([((0, 0, 255), 30), ((255, 0, 0), 70)])

    colors = extract_dominant_colors(buffer)

    assert format_as_hex(colors) == ["FF0000", "0000FF"]
    assert [color.population for color in colors] == [70, 30]


def test_lower_channel_sum_breaks_population_tie() -> None:
    buffer = _buffer([((200, 200, 200), 10), ((10, 10, 10), 10)])

    colors = extract_dominant_colors(buffer)

    assert [color.rgb for color in colors] == [(10, 10, 10), (200, 200, 200)]


def test_fewer_distinct_colours_than_bound_are_not_padded() -> None:
    buffer = _buffer([((255, 0, 0), 5), ((0, 255, 0), 3), ((0, 0, 255), 1)])

    colors = extract_dominant_colors(buffer, QuantizationConfig(max_colors=5))

    assert [color.rgb for color in colors] == [(255, 0, 0), (0, 255, 0), (0, 0, 255)]


def test_result_is_bounded_by_max_colors() -> None:
    buffer = _buffer([((level, level, level), 3) for level in range(0, 200, 10)])

    colors = extract_dominant_colors(buffer, QuantizationConfig(max_colors=4))

    assert len(colors) == 4
    assert len({color.rgb for color in colors}) == 4
    assert sum(color.population for color in colors) == 60


def test_identical_colours_stay_in_one_cluster() -> None:
    buffer = _buffer([((0, 0, 0), 3), ((0, 0, 100), 1)])

    colors = extract_dominant_colors(buffer, QuantizationConfig(max_colors=3))

    assert [(color.rgb, color.population) for color in colors] == [
        ((0, 0, 0), 3),
        ((0, 0, 100), 1),
    ]


def test_mean_rounds_half_up() -> None:
    buffer = _buffer([((0, 0, 0), 1), ((1, 1, 1), 1)])

    colors = extract_dominant_colors(buffer, QuantizationConfig(max_colors=1))

    assert colors[0].rgb == (1, 1, 1)


def test_sample_cap_limits_population() -> None:
    buffer = _buffer([((120, 60, 30), 1000)])

    colors = extract_dominant_colors(buffer, QuantizationConfig(sample_cap=10))

    assert colors[0].population == 10


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_colour_count_stays_within_bounds(seed: int) -> None:
    buffer = _random_buffer(seed)
    distinct = len({tuple(buffer[i:i + 3]) for i in range(0, len(buffer), 3)})

    colors = extract_dominant_colors(buffer, QuantizationConfig(max_colors=8))

    assert 1 <= len(colors) <= min(8, distinct)
    assert sum(color.weight for color in colors) == pytest.approx(1.0)


def test_repeated_runs_are_identical() -> None:
    buffer = _random_buffer(1234, pixels=2000)
    config = QuantizationConfig(max_colors=6, sample_cap=750)

    assert extract_dominant_colors(buffer, config) == extract_dominant_colors(buffer, config)


@pytest.mark.parametrize("kwargs", [{"max_colors": 0}, {"max_colors": 17}, {"sample_cap": 0}])
def test_invalid_config_is_rejected(kwargs: dict[str, int]) -> None:
    with pytest.raises(ValueError):
        QuantizationConfig(**kwargs)
