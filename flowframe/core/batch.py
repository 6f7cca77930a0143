# flowframe/core/batch.py
"""
Multi-size batch mode: lay out one config at every output preset.
Output: <output_dir>/batch_<run_name>/index.csv and cases/<preset>/ with layout, SVG, images.
"""

from __future__ import annotations

import csv
import logging
import time
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from flowframe.core.layout import compose_frame
from flowframe.core.render import render_debug, render_preview
from flowframe.core.render_svg import export_frame_svg
from flowframe.core.reporting import ensure_report_dir, write_layout_json, write_run_metadata_json
from flowframe.core.text_metrics import measure_text_width
from flowframe.core.tokens import OUTPUT_SIZES
from flowframe.core.types import FrameConfig, Measure

logger = logging.getLogger(__name__)

INDEX_FIELDS = [
    "case_id",
    "output_size",
    "width",
    "height",
    "status",
    "notches",
    "headline_font_size",
    "headline_lines",
    "subhead_font_size",
    "subhead_lines",
    "warnings_count",
    "duration_ms",
]


def config_for_preset(config: FrameConfig, preset: str) -> FrameConfig:
    """Same content at another output preset."""
    key = preset.strip().upper()
    if key not in OUTPUT_SIZES:
        raise ValueError(f"Unknown output size {preset!r}; expected one of {', '.join(OUTPUT_SIZES)}")
    size = OUTPUT_SIZES[key]
    return replace(config, width=size.width, height=size.height, output_size=key)


def run_batch(
    config: FrameConfig,
    run_name: str,
    presets: Sequence[str] | None = None,
    repo_root: Path | None = None,
    output_dir: str | None = None,
    render_png: bool = True,
    config_source: str = "default",
    measure: Measure = measure_text_width,
) -> Path:
    """
    Compose config at each preset (all presets when None).
    Returns report directory containing index.csv and cases/<preset>/.
    """
    root = repo_root or Path.cwd().resolve()
    cases = [config_for_preset(config, p) for p in (presets or list(OUTPUT_SIZES))]
    batch_dir = ensure_report_dir(root, f"batch_{run_name}", output_dir=output_dir)
    cases_dir = batch_dir / "cases"
    cases_dir.mkdir(parents=True, exist_ok=True)

    rows: list[dict] = []
    for case in cases:
        case_id = case.output_size.lower()
        case_dir = cases_dir / case_id
        case_dir.mkdir(parents=True, exist_ok=True)
        t0 = time.perf_counter()
        row = {
            "case_id": case_id,
            "output_size": case.output_size,
            "width": case.width,
            "height": case.height,
        }
        try:
            layout = compose_frame(case, measure=measure)
        except ValueError as e:
            logger.warning("Case %s failed: %s", case_id, e)
            row.update({
                "status": "error", "notches": 0,
                "headline_font_size": "", "headline_lines": "",
                "subhead_font_size": "", "subhead_lines": "",
                "warnings_count": 0,
                "duration_ms": int((time.perf_counter() - t0) * 1000),
            })
            rows.append(row)
            continue
        write_layout_json(case_dir, layout)
        export_frame_svg(layout, case, case_dir / "frame.svg")
        write_run_metadata_json(case_dir, run_name, config_source, layout, case)
        if render_png:
            render_preview(layout, case_dir / "preview.png")
            render_debug(layout, case_dir / "debug.png")
        row.update({
            "status": "degraded" if layout.warnings else "ok",
            "notches": len(layout.notches),
            "headline_font_size": layout.headline.layout.font_size,
            "headline_lines": len(layout.headline.layout.lines),
            "subhead_font_size": layout.subhead.layout.font_size,
            "subhead_lines": len(layout.subhead.layout.lines),
            "warnings_count": len(layout.warnings),
            "duration_ms": int((time.perf_counter() - t0) * 1000),
        })
        rows.append(row)

    index_path = batch_dir / "index.csv"
    with open(index_path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=INDEX_FIELDS)
        w.writeheader()
        w.writerows(rows)
    logger.info("Batch %s: %d case(s) written to %s", run_name, len(rows), batch_dir)
    return batch_dir
