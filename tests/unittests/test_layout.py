import pytest

from logobaker.api.layout import (
    bottom_right_placement,
    center_offset,
    overlay_geometry,
    row_layout,
    row_positions,
)


def test_overlay_geometry_uses_longer_side():
    assert overlay_geometry(1000, 600, 0.2, 0.05) == pytest.approx((200, 50))
    assert overlay_geometry(600, 1000, 0.2, 0.05) == pytest.approx((200, 50))


@pytest.mark.parametrize(
    "w, h, wm, mm",
    [(1000, 600, 0.2, 0.05), (1003, 77, 0.2, 0.15), (333, 999, 0.123, 0.071), (1, 1, 0.5, 0.5)],
)
def test_overlay_geometry_is_scale_consistent(w, h, wm, mm):
    width, margin = overlay_geometry(w, h, wm, mm)
    width2, margin2 = overlay_geometry(w * 2, h * 2, wm, mm)
    assert width2 == width * 2
    assert margin2 == margin * 2


@pytest.mark.parametrize(
    "canvas, overlay, margin",
    [((1000, 600), (200, 100), 50), ((640, 480), (64, 10), 0), ((100, 100), (300, 300), 20)],
)
def test_bottom_right_placement_insets_by_margin(canvas, overlay, margin):
    point = bottom_right_placement(canvas[0], canvas[1], overlay[0], overlay[1], margin)
    assert point.x + overlay[0] + margin == canvas[0]
    assert point.y + overlay[1] + margin == canvas[1]


def test_bottom_right_placement_can_be_negative():
    point = bottom_right_placement(100, 100, 300, 300, 20)
    assert point == (-220, -220)


@pytest.mark.parametrize(
    "outer, inner, expected",
    [(100, 50, 25), (101, 50, 25), (50, 50, 0), (50, 101, -25), (0, 3, -1), (3, 0, 1)],
)
def test_center_offset_truncates_toward_zero(outer, inner, expected):
    assert center_offset(outer, inner) == expected


def test_row_layout_start_and_advance():
    # row width = 40 * 3 + 20 = 140
    assert row_layout(400, 3, 40, 20) == 130
    assert row_positions(400, 3, 40, 20) == [130, 190, 250]


def test_row_positions_empty_row():
    assert row_positions(400, 0, 40, 20) == []


def test_layout_is_deterministic():
    results = {row_layout(1201, 7, 33, 9) for _ in range(5)}
    assert len(results) == 1
