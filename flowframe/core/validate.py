# flowframe/core/validate.py
"""
Validate a frame path: closed, inside its bounds, and a clean (non
self-intersecting) polygon. Return (ok, problems). The geometry engine itself
does not check its inputs; this runs on the caller side after composition.
"""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from shapely.geometry import box
from shapely.validation import explain_validity

from flowframe.core.config import CONTAINMENT_TOLERANCE
from flowframe.core.geometry import notch_bounds, parse_path_d, path_to_polygon
from flowframe.core.types import Corner, Notch


def validate_frame_path(
    path_d: str,
    width: float,
    height: float,
    tolerance: float = CONTAINMENT_TOLERANCE,
) -> tuple[bool, list[str]]:
    """
    True if the path is one closed contour with every coordinate (control points
    included) inside [0, width] x [0, height], and its flattened polygon is valid.
    """
    try:
        commands = parse_path_d(path_d)
    except ValueError as e:
        return False, [str(e)]

    problems: list[str] = []
    if not commands or commands[0].op != "M":
        problems.append("Path does not start with a moveto.")
    if not commands or commands[-1].op != "Z":
        problems.append("Path is not closed.")
    if sum(1 for c in commands if c.op == "M") > 1:
        problems.append("Path has more than one contour.")

    outside = [
        (x, y)
        for cmd in commands
        for x, y in cmd.points
        if not (-tolerance <= x <= width + tolerance and -tolerance <= y <= height + tolerance)
    ]
    if outside:
        problems.append(f"{len(outside)} coordinate(s) outside frame bounds, first at {outside[0]}.")

    poly = path_to_polygon(commands)
    if poly.is_empty:
        problems.append("Frame outline has no area.")
    elif not poly.is_valid:
        problems.append(f"Frame outline is not a simple shape: {explain_validity(poly)}.")
    elif poly.area <= 0:
        problems.append("Frame outline has no area.")
    return not problems, problems


def overlapping_notches(
    notches: Sequence[Notch],
    width: float,
    height: float,
) -> list[tuple[Corner, Corner]]:
    """Pairs of corners whose notch rectangles overlap inside the frame."""
    boxes = [(n.corner, box(*notch_bounds(n, width, height))) for n in notches]
    out: list[tuple[Corner, Corner]] = []
    for (ca, a), (cb, b) in combinations(boxes, 2):
        if a.intersection(b).area > 0:
            out.append((ca, cb))
    return out
