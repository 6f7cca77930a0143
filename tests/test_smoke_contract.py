# tests/test_smoke_contract.py
"""
Validate FrameLayout serializes to the layout.json shape; required keys exist.
Smoke test: compose the default config, export SVG, and check the output parses.
Deterministic, uses FixedWidthMeasure.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from dataclasses import replace
from pathlib import Path

import pytest

from flowframe.core.io import default_frame_config, parse_frame_config
from flowframe.core.layout import compose_frame
from flowframe.core.render_svg import export_frame_svg
from flowframe.core.reporting import (
    SCHEMA_VERSION,
    ensure_report_dir,
    layout_to_dict,
    write_layout_json,
    write_run_metadata_json,
)
from flowframe.core.text_metrics import FixedWidthMeasure
from flowframe.core.types import Corner, LogoConfig

SVG = "{http://www.w3.org/2000/svg}"

REQUIRED_KEYS = [
    "schema_version",
    ("canvas", "width"),
    ("canvas", "height"),
    ("canvas", "background"),
    ("frame", "path_d"),
    ("frame", "corner_radius"),
    "notches",
    "content",
    ("text", "headline"),
    ("text", "subhead"),
    "warnings",
]


@pytest.fixture
def layout_and_config():
    config = default_frame_config()
    return compose_frame(config, measure=FixedWidthMeasure()), config


def test_layout_dict_has_required_keys(layout_and_config) -> None:
    layout, _ = layout_and_config
    d = layout_to_dict(layout)
    for key in REQUIRED_KEYS:
        if isinstance(key, tuple):
            assert key[1] in d[key[0]], f"missing {key}"
        else:
            assert key in d, f"missing {key}"
    assert d["schema_version"] == SCHEMA_VERSION
    assert d["notches"][0]["corner"] == "top-left"
    assert isinstance(d["text"]["headline"]["lines"], list)


def test_layout_dict_is_json_serializable(layout_and_config) -> None:
    layout, _ = layout_and_config
    text = json.dumps(layout_to_dict(layout))
    assert json.loads(text)["frame"]["path_d"] == layout.path_d


def test_write_reports(tmp_path: Path, layout_and_config) -> None:
    layout, config = layout_and_config
    report_dir = ensure_report_dir(tmp_path, "contract")
    layout_path = write_layout_json(report_dir, layout)
    meta_path = write_run_metadata_json(report_dir, "contract", "default", layout, config)
    assert json.loads(layout_path.read_text(encoding="utf-8"))["schema_version"] == SCHEMA_VERSION
    meta = json.loads(meta_path.read_text(encoding="utf-8"))
    assert meta["run_name"] == "contract"
    assert meta["frame_config"]["output_size"] == "INSTAGRAM_SQUARE"


def test_svg_export_parses(tmp_path: Path, layout_and_config) -> None:
    layout, config = layout_and_config
    out = export_frame_svg(layout, config, tmp_path / "frame.svg")
    assert out is not None and out.exists()
    root = ET.parse(out).getroot()
    assert root.tag == f"{SVG}svg"
    assert root.get("viewBox") == "0 0 1080 1080"
    clip_paths = root.findall(f".//{SVG}clipPath/{SVG}path")
    assert clip_paths and clip_paths[0].get("d") == layout.path_d
    pills = root.findall(f".//{SVG}g[@class='pill']")
    assert len(pills) == 2
    headline = root.find(f".//{SVG}text[@class='headline']")
    assert headline is not None
    tspans = headline.findall(f"{SVG}tspan")
    assert [t.text for t in tspans] == [line for line in layout.headline.layout.lines if line]


def test_svg_export_with_image_and_logo(tmp_path: Path) -> None:
    config = replace(
        default_frame_config(),
        image_path="photo.jpg",
        logo=LogoConfig(enabled=True, corner=Corner.TOP_RIGHT),
    )
    layout = compose_frame(config, measure=FixedWidthMeasure())
    out = export_frame_svg(layout, config, tmp_path / "frame.svg")
    root = ET.parse(out).getroot()
    image = root.find(f".//{SVG}image")
    assert image is not None
    assert image.get("clip-path") == "url(#frame-clip)"
    logo = root.find(f".//{SVG}text[@class='logo']")
    assert logo is not None and logo.text == "FLOW"


def test_svg_export_write_failure_returns_none(tmp_path: Path, layout_and_config) -> None:
    layout, config = layout_and_config
    assert export_frame_svg(layout, config, tmp_path / "missing" / "frame.svg") is None


def test_svg_skips_blank_text(tmp_path: Path) -> None:
    config = default_frame_config().with_text(subhead="")
    layout = compose_frame(config, measure=FixedWidthMeasure())
    root = ET.parse(export_frame_svg(layout, config, tmp_path / "frame.svg")).getroot()
    assert root.find(f".//{SVG}text[@class='subhead']") is None


def _pill_label_fills(tmp_path: Path, background: str, pill_color: str) -> dict[str, str]:
    config = parse_frame_config({
        "background": background,
        "pills": [
            {"corner": "top-left", "text": "In-person event", "icon": "EVENT_PIN", "color": pill_color},
            {"corner": "bottom-right", "text": "Virtual session", "icon": "LOCATION_PIN", "color": pill_color},
        ],
    })
    layout = compose_frame(config, measure=FixedWidthMeasure())
    root = ET.parse(export_frame_svg(layout, config, tmp_path / f"{background}.svg")).getroot()
    return {
        pill.find(f"{SVG}text").text: pill.find(f"{SVG}text").get("fill")
        for pill in root.findall(f".//{SVG}g[@class='pill']")
    }


@pytest.mark.parametrize(
    "background, pill_color, expected",
    [
        ("BEIGE", "DARK_TEAL", "#8CDB1F"),
        ("TEAL", "DARK_TEAL", "#8CDB1F"),
        ("DARK_TEAL", "MINT", "#FFFFFF"),
        ("DARK_TEAL", "DARK_TEAL", "#FFFFFF"),
    ],
)
def test_pill_label_color_follows_background(
    tmp_path: Path, background: str, pill_color: str, expected: str,
) -> None:
    fills = _pill_label_fills(tmp_path, background, pill_color)
    assert fills == {"In-person event": expected, "Virtual session": expected}


def test_pill_icons_use_badge_artwork(tmp_path: Path, layout_and_config) -> None:
    layout, config = layout_and_config
    root = ET.parse(export_frame_svg(layout, config, tmp_path / "frame.svg")).getroot()
    icons = {i.get("data-icon"): i for i in root.findall(f".//{SVG}g[@class='pill']/{SVG}svg")}
    assert set(icons) == {"EVENT_PIN", "LOCATION_PIN"}

    pin = icons["LOCATION_PIN"]
    assert pin.get("viewBox") == "0 0 28 28"
    assert [c.get("r") for c in pin.findall(f"{SVG}circle")] == ["1.3762", "5.3762"]
    assert pin.find(f"{SVG}path") is None

    event = icons["EVENT_PIN"]
    assert event.get("viewBox") == "0 0 28 34"
    assert float(event.get("height")) == pytest.approx(float(event.get("width")) * 1.2, abs=0.01)
    assert len(event.findall(f"{SVG}circle")) == 1
    assert event.find(f"{SVG}path").get("d").startswith("M14 7.624C")

    # Lime strokes on the BEIGE default, sized to the pill icon and seated at its padding.
    tl = layout.content[0]
    assert {c.get("stroke") for c in event.iter() if c.get("stroke")} == {"#8CDB1F"}
    assert float(event.get("width")) == pytest.approx(tl.icon_size)
    assert float(event.get("x")) == pytest.approx(tl.x + tl.padding)
