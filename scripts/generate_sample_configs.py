#!/usr/bin/env python3
"""
Generate sample frame config JSON files for manual and batch testing.

Categories:
- one config per output preset (default two pills)
- one config per notch combination (single pill at each corner, pill + logo, three hosts)
- long-copy configs that exercise the text fallbacks
"""

from __future__ import annotations

import json
from itertools import combinations
from pathlib import Path

from flowframe.core.config import MAX_NOTCHES
from flowframe.core.io import parse_frame_config
from flowframe.core.tokens import BACKGROUND_COLORS, OUTPUT_SIZES
from flowframe.core.types import Corner

# Output directory
OUTPUT_DIR = Path(__file__).parent.parent / "docs" / "assets" / "sample_configs"

PILL_TEXTS = ("In-person event", "Virtual session", "Webinar", "Register now")
ICONS_CYCLE = ("EVENT_PIN", "LOCATION_PIN", "NONE", "EVENT_PIN")


def save_config(filename: str, data: dict) -> None:
    """Validate and save a config to JSON."""
    parse_frame_config(data)
    path = OUTPUT_DIR / filename
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    print(f"Created: {path.name}")


def base_config(output_size: str, background: str = "BEIGE") -> dict:
    return {
        "output_size": output_size,
        "background": background,
        "headline": "IMP supplies for clinical trials: GMP & GDP",
        "subhead": "Secondary copy line here",
        "pills": [],
        "logo": {"enabled": False},
    }


def pill(corner: Corner, i: int) -> dict:
    return {
        "corner": corner.value,
        "text": PILL_TEXTS[i % len(PILL_TEXTS)],
        "icon": ICONS_CYCLE[i % len(ICONS_CYCLE)],
        "color": "DARK_TEAL",
    }


def generate_presets() -> None:
    for i, key in enumerate(OUTPUT_SIZES):
        data = base_config(key, BACKGROUND_COLORS[i % len(BACKGROUND_COLORS)])
        data["pills"] = [pill(Corner.TOP_LEFT, 0), pill(Corner.BOTTOM_RIGHT, 1)]
        save_config(f"preset_{key.lower()}.json", data)


def generate_corner_combinations() -> None:
    corners = list(Corner)
    for n in range(1, MAX_NOTCHES + 1):
        for combo in combinations(corners, n):
            data = base_config("INSTAGRAM_SQUARE")
            data["pills"] = [pill(c, i) for i, c in enumerate(combo)]
            name = "_".join(c.value.replace("-", "") for c in combo)
            save_config(f"pills_{name}.json", data)
    for corner in corners:
        others = [c for c in corners if c != corner]
        data = base_config("INSTAGRAM_SQUARE", "DARK_TEAL")
        data["pills"] = [pill(others[0], 0)]
        data["logo"] = {"enabled": True, "corner": corner.value}
        save_config(f"logo_{corner.value.replace('-', '')}.json", data)


def generate_long_copy() -> None:
    data = base_config("EMAIL_HEADER")
    data["headline"] = "Pharmaceutical cold chain logistics for investigational medicinal products worldwide"
    data["subhead"] = "Temperature controlled storage, labelling, distribution and returns management " * 3
    data["pills"] = [pill(Corner.TOP_LEFT, 0)]
    save_config("long_copy_email.json", data)

    data = base_config("INSTAGRAM_SQUARE")
    data["headline"] = "Supercalifragilisticexpialidocious-antidisestablishmentarianism"
    data["pills"] = [{"corner": "top-left", "text": "An unusually long pill label that will not fit", "icon": "EVENT_PIN"}]
    save_config("long_word.json", data)


def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    generate_presets()
    generate_corner_combinations()
    generate_long_copy()


if __name__ == "__main__":
    main()
