# tests/test_runner.py
"""
CLI end to end under tmp_path with PNG rendering disabled.
"""

from __future__ import annotations

import json
from pathlib import Path

from flowframe.core.runner import main


def test_cli_single_layout(tmp_path: Path) -> None:
    main([
        "--repo-root", str(tmp_path),
        "--run-name", "cli",
        "--output-size", "TWITTER_POST",
        "--headline", "Hello frame",
        "--no-png",
    ])
    report_dir = tmp_path / "reports" / "cli"
    data = json.loads((report_dir / "layout.json").read_text(encoding="utf-8"))
    assert (data["canvas"]["width"], data["canvas"]["height"]) == (1200, 675)
    assert data["text"]["headline"]["lines"] == ["Hello frame"]
    assert (report_dir / "frame.svg").exists()
    assert not (report_dir / "preview.png").exists()


def test_cli_config_file_and_batch(tmp_path: Path) -> None:
    (tmp_path / "frame.json").write_text(json.dumps({
        "output_size": "EMAIL_HEADER",
        "headline": "Batch me",
        "pills": [{"corner": "bottom-left", "text": "Live", "icon": "LOCATION_PIN"}],
    }), encoding="utf-8")
    main([
        "--repo-root", str(tmp_path),
        "--config", "frame.json",
        "--run-name", "b",
        "--batch", "EMAIL_HEADER,WEB_BANNER",
        "--no-png",
    ])
    index = tmp_path / "reports" / "batch_b" / "index.csv"
    assert index.exists()
    assert len(index.read_text(encoding="utf-8").strip().split("\n")) == 3
