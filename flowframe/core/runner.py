# flowframe/core/runner.py
"""
CLI entrypoint: load a frame config (or the default), compose, export
layout.json, frame.svg and PNG previews.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from flowframe.core.config import LOG_LEVEL, REPORTS_DIR
from flowframe.core.io import default_frame_config, load_frame_config
from flowframe.core.layout import compose_frame
from flowframe.core.render import render_debug, render_preview
from flowframe.core.render_svg import export_frame_svg
from flowframe.core.reporting import (
    ensure_report_dir,
    write_layout_json,
    write_run_metadata_json,
)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Compose a notched frame layout and export it.")
    p.add_argument("--config", type=str, default=None, help="Frame config JSON (repo-relative); default sample if omitted")
    p.add_argument("--output-size", type=str, default=None, dest="output_size", help="Output preset, e.g. FACEBOOK_POST")
    p.add_argument("--headline", type=str, default=None, help="Override headline text")
    p.add_argument("--subhead", type=str, default=None, help="Override subhead text")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument(
        "--batch", type=str, nargs="?", const="all", default=None,
        help="Batch mode: comma-separated presets, or no value for every preset",
    )
    p.add_argument("--no-png", action="store_false", dest="render_png", help="Skip PNG previews")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()

    if args.config:
        config = load_frame_config(args.config, repo_root=repo_root)
        config_source = args.config
    else:
        config = default_frame_config()
        config_source = "default"
    config = config.with_text(headline=args.headline, subhead=args.subhead)

    if args.batch:
        from flowframe.core.batch import run_batch
        presets = None if args.batch.strip().lower() == "all" else [s for s in args.batch.split(",") if s.strip()]
        out = run_batch(
            config,
            run_name=args.run_name,
            presets=presets,
            repo_root=repo_root,
            output_dir=args.output_dir,
            render_png=args.render_png,
            config_source=config_source,
        )
        print(out / "index.csv")
        return

    if args.output_size:
        from flowframe.core.batch import config_for_preset
        config = config_for_preset(config, args.output_size)

    layout = compose_frame(config)
    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    outputs = [
        write_layout_json(report_dir, layout),
        write_run_metadata_json(report_dir, args.run_name, config_source, layout, config),
        export_frame_svg(layout, config, report_dir / "frame.svg"),
    ]
    if args.render_png:
        outputs.append(render_preview(layout, report_dir / "preview.png"))
        outputs.append(render_debug(layout, report_dir / "debug.png"))

    for p in outputs:
        if p is not None:
            print(p)
    for w in layout.warnings:
        print("Warning:", w)


if __name__ == "__main__":
    main()
