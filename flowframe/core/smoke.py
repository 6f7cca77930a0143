# flowframe/core/smoke.py
"""
Single entrypoint to verify composition end-to-end: layout + SVG + PNG for the
default config. Does not run on import.
"""

from __future__ import annotations

import logging
from pathlib import Path

from flowframe.core.config import LOG_LEVEL
from flowframe.core.io import default_frame_config
from flowframe.core.layout import compose_frame
from flowframe.core.render import render_debug, render_preview
from flowframe.core.render_svg import export_frame_svg
from flowframe.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)


def main() -> None:
    """Compose and export the default config with run_name='smoke'."""
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    repo_root = Path.cwd().resolve()
    config = default_frame_config()
    layout = compose_frame(config)

    report_dir = ensure_report_dir(repo_root, "smoke")
    write_layout_json(report_dir, layout)
    write_run_metadata_json(report_dir, "smoke", "default", layout, config)
    export_frame_svg(layout, config, report_dir / "frame.svg")
    render_preview(layout, report_dir / "preview.png")
    render_debug(layout, report_dir / "debug.png")


if __name__ == "__main__":
    main()
