# flowframe/core/tokens.py
"""
Design tokens: output presets, palette, icons, text rules and font faces.
Immutable structs handed to the engines; nothing here is mutated at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from flowframe.core.config import DEFAULT_FONT_FAMILY, PILL_FONT_WEIGHT
from flowframe.core.types import FontFace, TextRules


@dataclass(frozen=True)
class OutputSize:
    width: int
    height: int
    label: str


OUTPUT_SIZES: Mapping[str, OutputSize] = MappingProxyType({
    "INSTAGRAM_SQUARE": OutputSize(1080, 1080, "Instagram Square"),
    "INSTAGRAM_STORY": OutputSize(1080, 1920, "Instagram Story"),
    "FACEBOOK_POST": OutputSize(1200, 630, "Facebook Post"),
    "TWITTER_POST": OutputSize(1200, 675, "Twitter Post"),
    "EMAIL_HEADER": OutputSize(600, 400, "Email Header"),
    "WEB_BANNER": OutputSize(1920, 600, "Web Banner"),
})

# ----- Colors -----
PALETTE: Mapping[str, str] = MappingProxyType({
    "DARK_TEAL": "#004041",
    "BEIGE": "#EFEBE2",
    "TEAL": "#00BB8E",
    "MINT": "#CBEB9F",
    "SEAFOAM": "#BFEBE1",
    "LIME_GREEN": "#8CDB1F",
    "WHITE": "#FFFFFF",
    "BLACK": "#000000",
})

BACKGROUND_COLORS: tuple[str, ...] = ("DARK_TEAL", "BEIGE", "TEAL", "MINT", "SEAFOAM")
"""Palette keys a frame background (and pill fill) may use."""

ICONS: tuple[str, ...] = ("NONE", "EVENT_PIN", "LOCATION_PIN")

# ----- Typography -----
HEADLINE_RULES = TextRules(base_size=48, min_size=34, line_height=54, max_lines=2, max_chars=113)
SUBHEAD_RULES = TextRules(base_size=28, min_size=22, line_height=34, max_lines=2, max_chars=178)
PILL_LABEL_RULES = TextRules(base_size=28, min_size=14, line_height=34, max_lines=1, max_chars=40)

HEADLINE_FACE = FontFace(family="Georgia", weight=400, style="italic")
BODY_FACE = FontFace(family=DEFAULT_FONT_FAMILY, weight=400)
PILL_FACE = FontFace(family=DEFAULT_FONT_FAMILY, weight=PILL_FONT_WEIGHT)

# ----- Logo -----
LOGO_ASPECT: float = 131.0 / 42.0
"""Wordmark width / height."""


def text_color_for(background: str) -> str:
    """Headline/subhead and logo color for a background key."""
    return PALETTE["WHITE"] if background == "DARK_TEAL" else PALETTE["DARK_TEAL"]


def pill_text_color(background: str) -> str:
    """Pill label and icon color; white on the dark background, lime otherwise."""
    return PALETTE["WHITE"] if background == "DARK_TEAL" else PALETTE["LIME_GREEN"]


def frame_fill_for(background: str) -> str:
    """Placeholder frame fill when no image is given; teal unless that is the background."""
    return PALETTE["DARK_TEAL"] if background == "TEAL" else PALETTE["TEAL"]
