# tests/test_geometry.py
"""
Deterministic tests for the frame path builder: exact output for a two-notch
frame, closure, containment, no-notch reduction, radius rules, parsing and
flattening.
"""

from __future__ import annotations

import math

import pytest

from flowframe.core.geometry import (
    build_frame_path,
    corner_radius,
    find_notch,
    flatten_path,
    notch_bounds,
    notch_corner_radius,
    parse_path_d,
    path_to_d,
    path_to_polygon,
    polygon_bounds,
    rounded_rect_path,
)
from flowframe.core.types import Corner, Notch, PathCommand

TWO_NOTCHES = [
    Notch(Corner.TOP_LEFT, 280, 80),
    Notch(Corner.BOTTOM_RIGHT, 240, 80),
]


def test_two_notch_path_exact() -> None:
    d = build_frame_path(1000, 600, 60, TWO_NOTCHES)
    assert d == (
        "M 316 0 L 940 0 Q 1000 0 1000 60 "
        "L 1000 460 Q 1000 520 940 520 L 796 520 Q 760 520 760 556 L 760 564 Q 760 600 724 600 "
        "L 60 600 Q 0 600 0 540 "
        "L 0 140 Q 0 80 60 80 L 244 80 Q 280 80 280 44 L 280 36 Q 280 0 316 0 Z"
    )


def test_two_notch_path_curve_count() -> None:
    commands = parse_path_d(build_frame_path(1000, 600, 60, TWO_NOTCHES))
    # Two notched corners (3 curves each) plus two plain rounded corners.
    assert sum(1 for c in commands if c.op == "Q") == 8
    plain_corners = {(1000, 60), (0, 540)}
    assert plain_corners <= {c.end for c in commands if c.op == "Q"}


@pytest.mark.parametrize("corners", [
    (),
    (Corner.TOP_LEFT,),
    (Corner.TOP_RIGHT,),
    (Corner.BOTTOM_RIGHT,),
    (Corner.BOTTOM_LEFT,),
    (Corner.TOP_LEFT, Corner.BOTTOM_RIGHT),
    (Corner.TOP_RIGHT, Corner.BOTTOM_LEFT),
    (Corner.TOP_LEFT, Corner.TOP_RIGHT, Corner.BOTTOM_LEFT),
    tuple(Corner),
])
def test_path_closes_at_start(corners: tuple[Corner, ...]) -> None:
    notches = [Notch(c, 200, 90) for c in corners]
    commands = parse_path_d(build_frame_path(900, 700, 70, notches))
    assert commands[0].op == "M"
    assert commands[-1].op == "Z"
    assert commands[-2].end == commands[0].end


@pytest.mark.parametrize("corners", [(Corner.TOP_RIGHT,), (Corner.BOTTOM_LEFT,), tuple(Corner)])
def test_path_coordinates_inside_bounds(corners: tuple[Corner, ...]) -> None:
    w, h = 640.0, 360.0
    notches = [Notch(c, 150, 60) for c in corners]
    for cmd in parse_path_d(build_frame_path(w, h, 36, notches)):
        for x, y in cmd.points:
            assert 0 <= x <= w
            assert 0 <= y <= h


def test_no_notches_equals_rounded_rect() -> None:
    assert build_frame_path(500, 300, 30, []) == rounded_rect_path(500, 300, 30)


def test_notch_radius_uses_frame_radius_when_notch_is_large() -> None:
    assert notch_corner_radius(Notch(Corner.TOP_LEFT, 300, 200), 60) == 60


def test_notch_radius_shrinks_for_small_notch() -> None:
    n = Notch(Corner.TOP_LEFT, 10, 10)
    r = notch_corner_radius(n, 60)
    assert r == math.floor(5 * 0.9)
    assert r <= min(n.width, n.height) / 2


def test_corner_radius_ratio_and_cap() -> None:
    assert corner_radius(750) == pytest.approx(75)
    # Capped at half the narrower side.
    assert corner_radius(750, width=100) == pytest.approx(50)


def test_find_notch_first_match_wins() -> None:
    a = Notch(Corner.TOP_LEFT, 100, 50)
    b = Notch(Corner.TOP_LEFT, 300, 90)
    assert find_notch([a, b], Corner.TOP_LEFT) is a
    assert find_notch([a], Corner.BOTTOM_LEFT) is None


def test_notch_bounds_per_corner() -> None:
    assert notch_bounds(Notch(Corner.TOP_LEFT, 100, 50), 400, 300) == (0.0, 0.0, 100, 50)
    assert notch_bounds(Notch(Corner.BOTTOM_RIGHT, 100, 50), 400, 300) == (300, 250, 400, 300)


def test_fractional_coordinates_formatted() -> None:
    d = build_frame_path(100.5, 80.25, 8.025, [])
    assert d.startswith("M 8.025 0 L 92.475 0")
    assert ".0 " not in d


def test_parse_path_round_trips_d() -> None:
    d = build_frame_path(1000, 600, 60, TWO_NOTCHES)
    assert path_to_d(parse_path_d(d)) == d


def test_parse_path_implicit_lineto() -> None:
    commands = parse_path_d("M 0 0 10 0 10 10 Z")
    assert [c.op for c in commands] == ["M", "L", "L", "Z"]


@pytest.mark.parametrize("d", ["m 0 0 l 10 0 z", "M 0 0 C 1 1 2 2 3 3 Z", "M 0 0 Q 1"])
def test_parse_path_rejects_unsupported(d: str) -> None:
    with pytest.raises(ValueError):
        parse_path_d(d)


def test_flatten_samples_quadratic() -> None:
    commands = [
        PathCommand("M", ((0.0, 0.0),)),
        PathCommand("Q", ((10.0, 0.0), (10.0, 10.0))),
        PathCommand("Z"),
    ]
    xy = flatten_path(commands, samples_per_curve=4)
    assert xy.shape == (5, 2)
    assert tuple(xy[-1]) == (10.0, 10.0)


def test_frame_polygon_area_and_bounds() -> None:
    poly = path_to_polygon(build_frame_path(1000, 600, 60, TWO_NOTCHES))
    assert poly.is_valid
    rect_area = 1000 * 600
    cut = 280 * 80 + 240 * 80
    assert poly.area < rect_area - cut
    assert polygon_bounds(poly) == pytest.approx((0, 0, 1000, 600))
