# flowframe/core/config.py
"""
Central configuration for frame layout.
All tunable scalars live here; style tables live in flowframe.core.tokens.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Canvas -----
DEFAULT_OUTPUT_SIZE: str = "INSTAGRAM_SQUARE"
"""Output preset used when a config names none."""

SHAPE_HEIGHT_RATIO: float = 0.75
"""Shape takes 75% of the inner height; the text area takes the rest."""

# ----- Frame geometry -----
CORNER_RADIUS_RATIO: float = 0.10
"""Frame corner radius = shape height * ratio. Never user-set."""

NOTCH_RADIUS_SAFETY: float = 0.9
"""Notch radius is at most this fraction of half the notch's smaller side."""

MAX_NOTCHES: int = 3
"""Product ceiling on simultaneous notches (pills + logo). Enforced at config load."""

PATH_DECIMALS: int = 4
"""Decimals written for path coordinates; trailing zeros are stripped."""

CURVE_SAMPLES: int = 8
"""Points sampled per quadratic segment when flattening a path to a polygon."""

CONTAINMENT_TOLERANCE: float = 1e-6
"""Tolerance (px) for in-bounds checks on path coordinates."""

# ----- Text area -----
TEXT_AREA_PADDING: float = 24.0
"""Horizontal padding (px) on each side of the headline/subhead block."""

SHAPE_TEXT_GAP: float = 24.0
"""Vertical gap (px) between the bottom of the shape and the headline."""

HEADLINE_SUBHEAD_GAP: float = 8.0
"""Vertical gap (px) between the last headline line and the subhead."""

# ----- Pills -----
PILL_ICON_GAP: float = 4.0
"""Gap (px) between pill icon and label."""

PILL_FONT_WEIGHT: int = 600

PILL_MAX_WIDTH_RATIO: float = 0.45
"""A pill (with its notch gap) may take at most this share of the shape width."""

# ----- Measurement -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"

FIXED_WIDTH_CHAR_EM: float = 0.55
"""Per-character advance (em) for the fixed-width measurement estimator."""

# ----- Rendering -----
PREVIEW_DPI: int = 100

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Root log level for the CLI entrypoints. Set env LOG_LEVEL=DEBUG to see fit fallbacks."""
