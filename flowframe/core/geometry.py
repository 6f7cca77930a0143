# flowframe/core/geometry.py
"""
Frame geometry: corner radius rules, notched rounded-rectangle path builder,
path parsing, and flattening to a shapely polygon for validation and preview.

The path is one clockwise contour starting on the top edge. Each notched
corner emits three quadratic curves (enter notch, leave notch, frame step
corner); each plain corner emits one.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Sequence

import numpy as np
from shapely.geometry import Polygon
from shapely.geometry.base import BaseGeometry

from flowframe.core.config import (
    CORNER_RADIUS_RATIO,
    CURVE_SAMPLES,
    NOTCH_RADIUS_SAFETY,
    PATH_DECIMALS,
)
from flowframe.core.types import Corner, Notch, PathCommand


def corner_radius(shape_height: float, width: float | None = None) -> float:
    """Frame corner radius: 10% of shape height, capped at half the smaller side."""
    r = shape_height * CORNER_RADIUS_RATIO
    limit = min(shape_height, width) / 2.0 if width is not None else shape_height / 2.0
    return max(0.0, min(r, limit))


def notch_corner_radius(notch: Notch, main_radius: float) -> float:
    """
    Radius for the two curves bounding a notch. Matches the frame radius when the
    notch is large enough; otherwise shrinks to 90% of half its smaller side so the
    curves never overlap.
    """
    max_possible = min(notch.width, notch.height) / 2.0
    return float(min(main_radius, math.floor(max_possible * NOTCH_RADIUS_SAFETY)))


def find_notch(notches: Iterable[Notch], corner: Corner) -> Notch | None:
    """First notch at corner. Duplicate corners are a caller error; later ones are ignored."""
    for notch in notches:
        if notch.corner == corner:
            return notch
    return None


def notch_bounds(notch: Notch, width: float, height: float) -> tuple[float, float, float, float]:
    """Return (minx, miny, maxx, maxy) of the rectangle a notch removes from the frame."""
    x0 = 0.0 if notch.corner.is_left else width - notch.width
    y0 = 0.0 if notch.corner.is_top else height - notch.height
    return (x0, y0, x0 + notch.width, y0 + notch.height)


class _PathBuilder:
    """Accumulates absolute path commands."""

    def __init__(self) -> None:
        self.commands: list[PathCommand] = []

    def move(self, x: float, y: float) -> None:
        self.commands.append(PathCommand("M", ((x, y),)))

    def line(self, x: float, y: float) -> None:
        self.commands.append(PathCommand("L", ((x, y),)))

    def quad(self, cx: float, cy: float, x: float, y: float) -> None:
        self.commands.append(PathCommand("Q", ((cx, cy), (x, y))))

    def close(self) -> None:
        self.commands.append(PathCommand("Z"))


def frame_path_commands(
    width: float,
    height: float,
    radius: float,
    notches: Sequence[Notch],
) -> list[PathCommand]:
    """Command list for the notched frame. See build_frame_path."""
    w, h, r = float(width), float(height), float(radius)
    tl = find_notch(notches, Corner.TOP_LEFT)
    tr = find_notch(notches, Corner.TOP_RIGHT)
    br = find_notch(notches, Corner.BOTTOM_RIGHT)
    bl = find_notch(notches, Corner.BOTTOM_LEFT)

    nr_tl = notch_corner_radius(tl, r) if tl else 0.0
    nr_tr = notch_corner_radius(tr, r) if tr else 0.0
    nr_br = notch_corner_radius(br, r) if br else 0.0
    nr_bl = notch_corner_radius(bl, r) if bl else 0.0

    p = _PathBuilder()

    # Start where the top-left corner (or its notch exit curve) ends.
    if tl:
        p.move(tl.width + nr_tl, 0.0)
    else:
        p.move(r, 0.0)

    # Top edge, ending in the top-right corner.
    if tr:
        x = w - tr.width
        p.line(x - nr_tr, 0.0)
        p.quad(x, 0.0, x, nr_tr)
        p.line(x, tr.height - nr_tr)
        p.quad(x, tr.height, x + nr_tr, tr.height)
        p.line(w - r, tr.height)
        p.quad(w, tr.height, w, tr.height + r)
    else:
        p.line(w - r, 0.0)
        p.quad(w, 0.0, w, r)

    # Right edge, ending in the bottom-right corner.
    if br:
        x = w - br.width
        y = h - br.height
        p.line(w, y - r)
        p.quad(w, y, w - r, y)
        p.line(x + nr_br, y)
        p.quad(x, y, x, y + nr_br)
        p.line(x, h - nr_br)
        p.quad(x, h, x - nr_br, h)
    else:
        p.line(w, h - r)
        p.quad(w, h, w - r, h)

    # Bottom edge, ending in the bottom-left corner.
    if bl:
        x = bl.width
        y = h - bl.height
        p.line(x + nr_bl, h)
        p.quad(x, h, x, h - nr_bl)
        p.line(x, y + nr_bl)
        p.quad(x, y, x - nr_bl, y)
        p.line(r, y)
        p.quad(0.0, y, 0.0, y - r)
    else:
        p.line(r, h)
        p.quad(0.0, h, 0.0, h - r)

    # Left edge, ending in the top-left corner.
    if tl:
        x = tl.width
        y = tl.height
        p.line(0.0, y + r)
        p.quad(0.0, y, r, y)
        p.line(x - nr_tl, y)
        p.quad(x, y, x, y - nr_tl)
        p.line(x, nr_tl)
        p.quad(x, 0.0, x + nr_tl, 0.0)
    else:
        p.line(0.0, r)
        p.quad(0.0, 0.0, r, 0.0)

    p.close()
    return p.commands


def build_frame_path(
    width: float,
    height: float,
    corner_radius: float,
    notches: Sequence[Notch],
) -> str:
    """
    Closed SVG path (absolute M/L/Q/Z) for a rounded rectangle with rectangular
    cutouts at the notched corners. No validation of notch placement is done;
    with no notches this equals rounded_rect_path(width, height, corner_radius).
    """
    return path_to_d(frame_path_commands(width, height, corner_radius, notches))


def rounded_rect_path(width: float, height: float, radius: float) -> str:
    """Plain rounded rectangle, same start point and winding as build_frame_path."""
    w, h, r = float(width), float(height), float(radius)
    p = _PathBuilder()
    p.move(r, 0.0)
    p.line(w - r, 0.0)
    p.quad(w, 0.0, w, r)
    p.line(w, h - r)
    p.quad(w, h, w - r, h)
    p.line(r, h)
    p.quad(0.0, h, 0.0, h - r)
    p.line(0.0, r)
    p.quad(0.0, 0.0, r, 0.0)
    p.close()
    return path_to_d(p.commands)


def _fmt(v: float) -> str:
    s = f"{v:.{PATH_DECIMALS}f}".rstrip("0").rstrip(".")
    return "0" if s in ("", "-0") else s


def path_to_d(commands: Sequence[PathCommand]) -> str:
    """Format commands as an SVG path d string."""
    parts: list[str] = []
    for cmd in commands:
        coords = " ".join(f"{_fmt(x)} {_fmt(y)}" for x, y in cmd.points)
        parts.append(f"{cmd.op} {coords}" if coords else cmd.op)
    return " ".join(parts)


_TOKEN_RE = re.compile(r"[MLQZ]|[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_ARITY = {"M": 1, "L": 1, "Q": 2, "Z": 0}


def parse_path_d(d: str) -> list[PathCommand]:
    """
    Parse an absolute M/L/Q/Z path back into commands.
    Raises ValueError on relative or unsupported commands.
    """
    if _TOKEN_RE.sub(" ", d).strip(" ,\t\r\n"):
        raise ValueError(f"Unsupported path syntax: {d[:40]!r}")
    tokens = _TOKEN_RE.findall(d)
    commands: list[PathCommand] = []
    i = 0
    op: str | None = None
    while i < len(tokens):
        tok = tokens[i]
        if tok in _ARITY:
            op = tok
            i += 1
            if op == "Z":
                commands.append(PathCommand("Z"))
                continue
        elif op is None or op == "Z":
            raise ValueError(f"Coordinate without command at token {i}")
        elif op == "M":
            # Extra coordinate pairs after a moveto are implicit linetos.
            op = "L"
        n = _ARITY[op] * 2
        nums = tokens[i:i + n]
        if len(nums) < n or any(t in _ARITY for t in nums):
            raise ValueError(f"Truncated {op} command at token {i}")
        vals = [float(t) for t in nums]
        points = tuple((vals[k], vals[k + 1]) for k in range(0, n, 2))
        commands.append(PathCommand(op, points))  # type: ignore[arg-type]
        i += n
    return commands


def flatten_path(
    commands: Sequence[PathCommand],
    samples_per_curve: int = CURVE_SAMPLES,
) -> np.ndarray:
    """Vertices of the path as an (N, 2) array; quadratic curves are sampled."""
    pts: list[tuple[float, float]] = []
    cur: tuple[float, float] | None = None
    start: tuple[float, float] | None = None
    t = np.linspace(0.0, 1.0, max(1, samples_per_curve) + 1)[1:]
    for cmd in commands:
        if cmd.op == "M":
            cur = start = cmd.points[0]
            pts.append(cur)
        elif cmd.op == "L":
            cur = cmd.points[0]
            pts.append(cur)
        elif cmd.op == "Q":
            p0 = np.array(cur if cur is not None else cmd.points[0])
            c = np.array(cmd.points[0])
            p1 = np.array(cmd.points[1])
            mt = (1.0 - t)[:, None]
            tt = t[:, None]
            curve = mt * mt * p0 + 2.0 * mt * tt * c + tt * tt * p1
            pts.extend((float(x), float(y)) for x, y in curve)
            cur = cmd.points[1]
        elif cmd.op == "Z":
            cur = start
    if not pts:
        return np.zeros((0, 2))
    return np.asarray(pts, dtype=float)


def path_to_polygon(
    path: str | Sequence[PathCommand],
    samples_per_curve: int = CURVE_SAMPLES,
) -> Polygon:
    """
    Shapely polygon for a single-contour path. Invalid rings are returned as-is
    so callers can detect self-intersection.
    """
    commands = parse_path_d(path) if isinstance(path, str) else list(path)
    xy = flatten_path(commands, samples_per_curve)
    if xy.shape[0] < 3:
        return Polygon()
    return Polygon(xy)


def polygon_bounds(geom: BaseGeometry) -> tuple[float, float, float, float]:
    """Return (minx, miny, maxx, maxy)."""
    if geom is None or geom.is_empty:
        return (0.0, 0.0, 0.0, 0.0)
    b = geom.bounds
    return (b[0], b[1], b[2], b[3])
