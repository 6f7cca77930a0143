# tests/test_batch.py
"""
Batch mode: lay out the default config at a few presets under tmp_path and
assert index.csv and per-case files exist.
"""

from __future__ import annotations

import csv
from pathlib import Path

import pytest

from flowframe.core.batch import config_for_preset, run_batch
from flowframe.core.io import default_frame_config
from flowframe.core.text_metrics import FixedWidthMeasure


def test_batch_produces_index_csv(tmp_path: Path) -> None:
    report_dir = run_batch(
        default_frame_config(),
        run_name="test_batch",
        presets=["EMAIL_HEADER", "instagram_square"],
        repo_root=tmp_path,
        render_png=False,
        measure=FixedWidthMeasure(),
    )
    index_csv = report_dir / "index.csv"
    assert index_csv.exists()
    with open(index_csv, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["case_id"] for r in rows] == ["email_header", "instagram_square"]
    assert all(r["status"] in ("ok", "degraded") for r in rows)
    for row in rows:
        case_dir = report_dir / "cases" / row["case_id"]
        assert (case_dir / "layout.json").exists()
        assert (case_dir / "frame.svg").exists()
        assert (case_dir / "run_metadata.json").exists()
        assert not (case_dir / "preview.png").exists()


def test_batch_all_presets_by_default(tmp_path: Path) -> None:
    report_dir = run_batch(
        default_frame_config(),
        run_name="all",
        repo_root=tmp_path,
        output_dir="out",
        render_png=False,
        measure=FixedWidthMeasure(),
    )
    assert report_dir == (tmp_path / "out").resolve() / "batch_all"
    rows = (report_dir / "index.csv").read_text(encoding="utf-8").strip().split("\n")
    assert len(rows) == 1 + 6


def test_config_for_preset() -> None:
    config = config_for_preset(default_frame_config(), "web_banner")
    assert (config.width, config.height, config.output_size) == (1920, 600, "WEB_BANNER")
    with pytest.raises(ValueError):
        config_for_preset(default_frame_config(), "BILLBOARD")
