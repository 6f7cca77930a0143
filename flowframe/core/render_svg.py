# flowframe/core/render_svg.py
"""
Export a composed frame as a self-contained SVG: background, clipped frame fill,
pills, logo wordmark, headline and subhead.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from flowframe.core.config import PILL_ICON_GAP
from flowframe.core.tokens import PALETTE, frame_fill_for, pill_text_color, text_color_for
from flowframe.core.types import ContentBox, FrameConfig, FrameLayout, TextBlock

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
CLIP_ID = "frame-clip"

ICON_STROKE = "1.24761"

# Icon artwork in its own viewBox: (viewBox, height factor, circles (cy, r), outline path).
ICON_ART: dict[str, tuple[str, float, tuple[tuple[str, str], ...], str | None]] = {
    "LOCATION_PIN": ("0 0 28 28", 1.0, (("14", "1.3762"), ("14", "5.3762")), None),
    "EVENT_PIN": (
        "0 0 28 34",
        1.2,
        (("11.5", "1.45541"),),
        "M14 7.624C16.105 7.624 17.951 9.3361 17.9512 11.3662C17.9512 11.8228 17.713 12.5943 "
        "17.2754 13.5762C16.851 14.5285 16.2817 15.5891 15.708 16.5869C15.1355 17.5828 14.5644 "
        "18.5055 14.1416 19.1826C14.0925 19.2613 14.0452 19.3369 14 19.4092C13.9548 19.3369 "
        "13.9075 19.2613 13.8584 19.1826C13.4357 18.5055 12.8655 17.5827 12.293 16.5869C11.7193 "
        "15.589 11.1491 14.5285 10.7246 13.5762C10.287 12.5943 10.0498 11.8228 10.0498 "
        "11.3662C10.05 9.3362 11.8952 7.6242 14 7.624Z",
    ),
}


def _num(v: float) -> str:
    return f"{v:.2f}".rstrip("0").rstrip(".")


def _add_icon(parent: ET.Element, box: ContentBox, color: str) -> None:
    """Nested <svg> with the icon artwork, icon_size wide, top-aligned to the centred icon box."""
    art = ICON_ART.get(box.icon)
    if art is None:
        return
    view_box, height_factor, circles, outline = art
    icon = ET.SubElement(parent, "svg", {
        "class": "icon",
        "data-icon": box.icon,
        "x": _num(box.x + box.padding),
        "y": _num(box.y + box.height / 2.0 - box.icon_size / 2.0),
        "width": _num(box.icon_size),
        "height": _num(box.icon_size * height_factor),
        "viewBox": view_box,
        "fill": "none",
    })
    for cy, r in circles:
        ET.SubElement(icon, "circle", {
            "cx": "14", "cy": cy, "r": r, "stroke": color, "stroke-width": ICON_STROKE,
        })
    if outline:
        ET.SubElement(icon, "path", {"d": outline, "stroke": color, "stroke-width": ICON_STROKE})


def _add_pill(parent: ET.Element, box: ContentBox, background: str) -> None:
    g = ET.SubElement(parent, "g", {"class": "pill", "data-corner": box.corner.value})
    ET.SubElement(g, "rect", {
        "x": _num(box.x),
        "y": _num(box.y),
        "width": _num(box.width),
        "height": _num(box.height),
        "rx": _num(box.height / 2.0),
        "fill": PALETTE.get(box.color, PALETTE["DARK_TEAL"]),
    })
    color = pill_text_color(background)
    label_x = box.x + box.padding
    if box.icon != "NONE":
        _add_icon(g, box, color)
        label_x += box.icon_size + PILL_ICON_GAP
    label = ET.SubElement(g, "text", {
        "x": _num(label_x),
        "y": _num(box.y + box.height / 2.0),
        "dominant-baseline": "central",
        "font-family": "sans-serif",
        "font-weight": "600",
        "font-size": _num(box.font_size),
        "fill": color,
    })
    label.text = box.text


def _add_logo(parent: ET.Element, box: ContentBox, background: str) -> None:
    logo = ET.SubElement(parent, "text", {
        "class": "logo",
        "x": _num(box.x),
        "y": _num(box.y + box.height / 2.0),
        "dominant-baseline": "central",
        "textLength": _num(box.width),
        "lengthAdjust": "spacingAndGlyphs",
        "font-family": "sans-serif",
        "font-weight": "700",
        "font-size": _num(box.height * 0.8),
        "fill": text_color_for(background),
    })
    logo.text = box.text


def _add_text_block(parent: ET.Element, block: TextBlock, color: str) -> None:
    lines = [line for line in block.layout.lines if line]
    if not lines:
        return
    attrs = {
        "class": block.role,
        "font-family": block.face.family,
        "font-size": _num(block.layout.font_size),
        "font-weight": str(block.face.weight),
        "fill": color,
    }
    if block.face.style:
        attrs["font-style"] = block.face.style
    text = ET.SubElement(parent, "text", attrs)
    for i, line in enumerate(lines):
        tspan = ET.SubElement(text, "tspan", {
            "x": _num(block.x),
            "y": _num(block.y + i * block.line_height + block.layout.font_size),
        })
        tspan.text = line


def frame_svg_tree(layout: FrameLayout, config: FrameConfig) -> ET.Element:
    """Build the SVG element tree in canvas coordinates."""
    w, h = layout.canvas_width, layout.canvas_height
    root = ET.Element("svg", {
        "xmlns": SVG_NS,
        "xmlns:xlink": XLINK_NS,
        "width": str(w),
        "height": str(h),
        "viewBox": f"0 0 {w} {h}",
    })
    ET.SubElement(root, "rect", {
        "x": "0", "y": "0", "width": str(w), "height": str(h),
        "fill": PALETTE[layout.background],
    })
    defs = ET.SubElement(root, "defs")
    clip = ET.SubElement(defs, "clipPath", {"id": CLIP_ID})
    ET.SubElement(clip, "path", {"d": layout.path_d})

    g = ET.SubElement(root, "g", {
        "transform": f"translate({_num(layout.offset_x)} {_num(layout.offset_y)})",
    })
    if config.image_path:
        ET.SubElement(g, "image", {
            "href": config.image_path,
            "xlink:href": config.image_path,
            "x": "0",
            "y": "0",
            "width": _num(layout.frame.width),
            "height": _num(layout.frame.height),
            "preserveAspectRatio": "xMidYMid slice",
            "clip-path": f"url(#{CLIP_ID})",
        })
    else:
        ET.SubElement(g, "path", {
            "d": layout.path_d,
            "fill": frame_fill_for(layout.background),
        })

    for box in layout.content:
        if box.kind == "pill":
            _add_pill(g, box, layout.background)
        else:
            _add_logo(g, box, layout.background)

    color = text_color_for(layout.background)
    _add_text_block(g, layout.headline, color)
    _add_text_block(g, layout.subhead, color)
    return root


def export_frame_svg(
    layout: FrameLayout,
    config: FrameConfig,
    out_path: str | Path,
) -> Path | None:
    """Write frame.svg. Returns the path, or None if the file could not be written."""
    root = frame_svg_tree(layout, config)
    out = Path(out_path)
    try:
        out_str = ET.tostring(root, encoding="unicode", method="xml")
        out.write_text('<?xml version="1.0" encoding="UTF-8"?>\n' + out_str, encoding="utf-8")
    except OSError:
        logger.exception("Could not write SVG to %s", out)
        return None
    return out
