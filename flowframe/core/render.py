# flowframe/core/render.py
"""
Matplotlib PNG rendering: preview.png (what the SVG shows) and debug.png
(frame outline, notch rectangles, path vertices).
"""

from __future__ import annotations

import logging
import warnings
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import FancyBboxPatch, PathPatch, Rectangle
from matplotlib.path import Path as MplPath

from flowframe.core.config import PILL_ICON_GAP, PREVIEW_DPI
from flowframe.core.geometry import notch_bounds, parse_path_d
from flowframe.core.tokens import PALETTE, frame_fill_for, pill_text_color, text_color_for
from flowframe.core.types import FrameLayout, TextBlock

logger = logging.getLogger(__name__)


def frame_mpl_path(path_d: str, offset_x: float = 0.0, offset_y: float = 0.0) -> MplPath:
    """Matplotlib path for an M/L/Q/Z string; Q segments become CURVE3."""
    verts: list[tuple[float, float]] = []
    codes: list[int] = []
    start = (0.0, 0.0)
    for cmd in parse_path_d(path_d):
        pts = [(x + offset_x, y + offset_y) for x, y in cmd.points]
        if cmd.op == "M":
            start = pts[0]
            verts.append(pts[0])
            codes.append(MplPath.MOVETO)
        elif cmd.op == "L":
            verts.append(pts[0])
            codes.append(MplPath.LINETO)
        elif cmd.op == "Q":
            verts.extend(pts)
            codes.extend([MplPath.CURVE3, MplPath.CURVE3])
        elif cmd.op == "Z":
            verts.append(start)
            codes.append(MplPath.CLOSEPOLY)
    return MplPath(np.asarray(verts, dtype=float), codes)


def _px_to_pt(px: float, dpi: int, scale: int = 1) -> float:
    """Canvas px to font points; one canvas px is scale output px."""
    return px * scale * 72.0 / dpi


def _new_fig(width_px: int, height_px: int, dpi: int, scale: int = 1) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(figsize=(width_px * scale / dpi, height_px * scale / dpi), dpi=dpi, constrained_layout=False)
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.set_xlim(0, width_px)
    ax.set_ylim(height_px, 0)  # SVG y-down
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    return fig, ax


def _save(fig: plt.Figure, output_path: str | Path, dpi: int) -> Path | None:
    out = Path(output_path)
    try:
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
            fig.savefig(out, dpi=dpi, facecolor="white")
    except OSError:
        logger.exception("Could not write PNG to %s", out)
        return None
    finally:
        plt.close(fig)
    return out


def _draw_text_block(
    ax: plt.Axes, block: TextBlock, ox: float, oy: float, color: str, dpi: int, scale: int,
) -> None:
    lines = [line for line in block.layout.lines if line]
    for i, line in enumerate(lines):
        ax.text(
            ox + block.x, oy + block.y + i * block.line_height, line,
            fontsize=_px_to_pt(block.layout.font_size, dpi, scale),
            fontstyle=block.face.style or "normal",
            fontweight=block.face.weight,
            ha="left", va="top",
            color=color,
        )


def render_preview(
    layout: FrameLayout,
    output_path: str | Path,
    scale: int = 1,
    dpi: int = PREVIEW_DPI,
) -> Path | None:
    """Flat-colour preview of the composed frame. scale multiplies output resolution."""
    fig, ax = _new_fig(layout.canvas_width, layout.canvas_height, dpi, scale)
    ax.add_patch(Rectangle(
        (0, 0), layout.canvas_width, layout.canvas_height,
        facecolor=PALETTE[layout.background], edgecolor="none",
    ))
    ox, oy = layout.offset_x, layout.offset_y
    ax.add_patch(PathPatch(
        frame_mpl_path(layout.path_d, ox, oy),
        facecolor=frame_fill_for(layout.background), edgecolor="none",
    ))
    for box in layout.content:
        if box.kind == "pill":
            ax.add_patch(FancyBboxPatch(
                (ox + box.x, oy + box.y), box.width, box.height,
                boxstyle=f"round,pad=0,rounding_size={box.height / 2.0}",
                facecolor=PALETTE.get(box.color, PALETTE["DARK_TEAL"]), edgecolor="none",
            ))
            label_x = ox + box.x + box.padding + (box.icon_size + PILL_ICON_GAP if box.icon != "NONE" else 0.0)
            ax.text(
                label_x, oy + box.y + box.height / 2.0, box.text,
                fontsize=_px_to_pt(box.font_size, dpi, scale),
                fontweight="semibold", ha="left", va="center",
                color=pill_text_color(layout.background),
            )
        else:
            ax.text(
                ox + box.x, oy + box.y + box.height / 2.0, box.text,
                fontsize=_px_to_pt(box.height * 0.8, dpi, scale),
                fontweight="bold", ha="left", va="center",
                color=text_color_for(layout.background),
            )
    color = text_color_for(layout.background)
    for block in (layout.headline, layout.subhead):
        _draw_text_block(ax, block, ox, oy, color, dpi, scale)
    return _save(fig, output_path, dpi)


def render_debug(
    layout: FrameLayout,
    output_path: str | Path,
    scale: int = 1,
    dpi: int = PREVIEW_DPI,
) -> Path | None:
    """Frame outline, notch rectangles (dashed), content boxes and path vertices."""
    fig, ax = _new_fig(layout.canvas_width, layout.canvas_height, dpi, scale)
    ox, oy = layout.offset_x, layout.offset_y
    ax.add_patch(PathPatch(
        frame_mpl_path(layout.path_d, ox, oy),
        facecolor="lightblue", edgecolor="navy", linewidth=1, alpha=0.5,
    ))
    for n in layout.notches:
        x0, y0, x1, y1 = notch_bounds(n, layout.frame.width, layout.frame.height)
        ax.add_patch(Rectangle(
            (ox + x0, oy + y0), x1 - x0, y1 - y0,
            facecolor="none", edgecolor="orange", linestyle="--", linewidth=1,
        ))
    for box in layout.content:
        ax.add_patch(Rectangle(
            (ox + box.x, oy + box.y), box.width, box.height,
            facecolor="none", edgecolor="green", linewidth=1,
        ))
    ends = [cmd.end for cmd in parse_path_d(layout.path_d) if cmd.end is not None]
    if ends:
        xy = np.asarray(ends, dtype=float)
        ax.scatter(xy[:, 0] + ox, xy[:, 1] + oy, s=8, color="red", zorder=5)
    text_top = oy + layout.frame.height
    ax.add_patch(Rectangle(
        (ox, text_top), layout.frame.width, layout.text_area_height,
        facecolor="none", edgecolor="gray", linestyle=":", linewidth=1,
    ))
    return _save(fig, output_path, dpi)
