"""Tests for the scale resolver."""

import math

import pytest

from streak_grid.scale import MIN_SCALE_FACTOR, resolve_scale

_DERIVED = (
    "dot_radius",
    "row_band_height",
    "title_font_size",
    "month_font_size",
    "day_label_font_size",
    "value_font_size",
    "stroke_width",
)

_FLOORS = {
    "dot_radius": 8.0,
    "title_font_size": 12.0,
    "month_font_size": 10.0,
    "day_label_font_size": 8.0,
    "value_font_size": 6.0,
    "stroke_width": 1.0,
}


def test_reference_size_is_unit_scale():
    s = resolve_scale(500, 500)

    assert s.scale_factor == 1.0
    assert s.dot_radius == 16.0
    assert s.row_band_height == 80.0
    assert s.title_font_size == 20.0
    assert s.month_font_size == 16.0
    assert s.day_label_font_size == 14.0
    assert s.value_font_size == 12.0
    assert s.stroke_width == 3.0


def test_half_size_hits_floors():
    s = resolve_scale(250, 250)

    assert s.scale_factor == pytest.approx(0.5)
    assert s.dot_radius == 8.0
    assert s.title_font_size == 12.0
    assert s.month_font_size == 10.0
    assert s.day_label_font_size == 8.0
    assert s.value_font_size == 6.0
    assert s.stroke_width == pytest.approx(1.5)
    assert s.row_band_height == pytest.approx(40.0)


def test_uses_smaller_side():
    s = resolve_scale(800, 300)

    assert s.scale_factor == pytest.approx(0.6)
    assert s.actual_width == 800
    assert s.actual_height == 300


def test_custom_reference_space():
    s = resolve_scale(300, 300, reference_width=600, reference_height=400)

    assert s.scale_factor == pytest.approx(0.75)
    assert s.reference_width == 600
    assert s.reference_height == 400


def test_large_container_scales_up():
    s = resolve_scale(1000, 1000)

    assert s.scale_factor == pytest.approx(2.0)
    assert s.dot_radius == pytest.approx(32.0)
    assert s.title_font_size == pytest.approx(40.0)
    assert s.row_band_height == pytest.approx(160.0)


def test_small_container_uses_raw_factor():
    s = resolve_scale(25, 25)

    assert s.scale_factor == pytest.approx(0.05)
    assert s.row_band_height == pytest.approx(4.0)
    assert s.dot_radius == 8.0
    assert s.stroke_width == 1.0


@pytest.mark.parametrize(
    "width,height",
    [(0, 500), (500, 0), (-10, 400), (-1, -1), (math.nan, 500), (500, math.nan), (math.inf, math.inf)],
)
def test_degenerate_sizes_fall_back(width, height):
    s = resolve_scale(width, height)

    assert s.scale_factor == MIN_SCALE_FACTOR
    for name in _DERIVED:
        value = getattr(s, name)
        assert math.isfinite(value)
        assert value > 0
    for name, floor in _FLOORS.items():
        assert getattr(s, name) >= floor


def test_monotonic_in_container_size():
    sizes = [10, 50, 100, 200, 249, 250, 333, 400, 499, 500, 750, 1000]
    contexts = [resolve_scale(v, v) for v in sizes]

    for small, big in zip(contexts, contexts[1:]):
        assert big.scale_factor >= small.scale_factor
        for name in _DERIVED:
            assert getattr(big, name) >= getattr(small, name)
    for ctx in contexts:
        for name, floor in _FLOORS.items():
            assert getattr(ctx, name) >= floor


def test_idempotent():
    assert resolve_scale(321, 456) == resolve_scale(321, 456)


@pytest.mark.parametrize("ref", [0, -500, math.nan])
def test_bad_reference_size(ref):
    with pytest.raises(ValueError, match="reference_width"):
        resolve_scale(500, 500, reference_width=ref)
