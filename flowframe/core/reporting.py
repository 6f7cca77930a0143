# flowframe/core/reporting.py
"""
Create reports/<run_name>/ and write layout.json (fixed schema) and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from flowframe.core.config import (
    CORNER_RADIUS_RATIO,
    DEFAULT_FONT_FAMILY,
    HEADLINE_SUBHEAD_GAP,
    MAX_NOTCHES,
    NOTCH_RADIUS_SAFETY,
    PATH_DECIMALS,
    REPORTS_DIR,
    SHAPE_HEIGHT_RATIO,
    SHAPE_TEXT_GAP,
    TEXT_AREA_PADDING,
)
from flowframe.core.io import frame_config_to_dict
from flowframe.core.types import FrameConfig, FrameLayout, TextBlock

SCHEMA_VERSION = "1.0"


def _text_block_to_dict(block: TextBlock) -> dict:
    return {
        "x": block.x,
        "y": block.y,
        "max_width": block.max_width,
        "line_height": block.line_height,
        "font_family": block.face.family,
        "font_weight": block.face.weight,
        "font_style": block.face.style,
        "font_size": block.layout.font_size,
        "lines": list(block.layout.lines),
        "fallback": block.layout.fallback,
    }


def layout_to_dict(layout: FrameLayout) -> dict:
    """Exact structure for layout.json."""
    return {
        "schema_version": SCHEMA_VERSION,
        "canvas": {
            "width": layout.canvas_width,
            "height": layout.canvas_height,
            "output_size": layout.output_size,
            "background": layout.background,
        },
        "frame": {
            "x": layout.offset_x,
            "y": layout.offset_y,
            "width": layout.frame.width,
            "height": layout.frame.height,
            "corner_radius": layout.frame.corner_radius,
            "path_d": layout.path_d,
        },
        "notches": [
            {"corner": n.corner.value, "width": n.width, "height": n.height}
            for n in layout.notches
        ],
        "content": [
            {
                "kind": c.kind,
                "corner": c.corner.value,
                "x": c.x,
                "y": c.y,
                "width": c.width,
                "height": c.height,
                "text": c.text,
                "icon": c.icon,
                "color": c.color,
                "font_size": c.font_size,
                "padding": c.padding,
                "icon_size": c.icon_size,
            }
            for c in layout.content
        ],
        "text": {
            "area_height": layout.text_area_height,
            "headline": _text_block_to_dict(layout.headline),
            "subhead": _text_block_to_dict(layout.subhead),
        },
        "warnings": list(layout.warnings),
    }


def run_metadata_dict(
    run_name: str,
    config_source: str,
    layout: FrameLayout,
    frame_config: FrameConfig | None = None,
) -> dict:
    """Timestamp, input config and tunables snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "config_source": config_source,
        "output_size": layout.output_size,
        "canvas": {"width": layout.canvas_width, "height": layout.canvas_height},
        "config": {
            "SHAPE_HEIGHT_RATIO": SHAPE_HEIGHT_RATIO,
            "CORNER_RADIUS_RATIO": CORNER_RADIUS_RATIO,
            "NOTCH_RADIUS_SAFETY": NOTCH_RADIUS_SAFETY,
            "MAX_NOTCHES": MAX_NOTCHES,
            "PATH_DECIMALS": PATH_DECIMALS,
            "TEXT_AREA_PADDING": TEXT_AREA_PADDING,
            "SHAPE_TEXT_GAP": SHAPE_TEXT_GAP,
            "HEADLINE_SUBHEAD_GAP": HEADLINE_SUBHEAD_GAP,
            "DEFAULT_FONT_FAMILY": DEFAULT_FONT_FAMILY,
        },
        "frame_config": frame_config_to_dict(frame_config) if frame_config is not None else None,
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_layout_json(report_dir: Path, layout: FrameLayout) -> Path:
    """Write layout.json to report_dir. Returns path to file."""
    path = report_dir / "layout.json"
    path.write_text(json.dumps(layout_to_dict(layout), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    config_source: str,
    layout: FrameLayout,
    frame_config: FrameConfig | None = None,
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, config_source, layout, frame_config)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
