# flowframe/core/text_metrics.py
"""
Measure text width in px using Pillow. 1 px = 1 layout unit.
Provides the default Measure for the fit engine plus a fixed-width estimator
for callers without font files.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from functools import lru_cache

from flowframe.core.config import FIXED_WIDTH_CHAR_EM
from flowframe.core.types import FontSpec

_font_warning_emitted: set[str] = set()


def _font_candidates(family: str, weight: int, style: str | None) -> list[str]:
    """Font file names to try, most specific first."""
    compact = family.replace(" ", "")
    bold = weight >= 600
    italic = style in ("italic", "oblique")
    if bold and italic:
        suffixes = ["-BoldItalic", "-BoldOblique", "z"]
    elif bold:
        suffixes = ["-Bold", "bd"]
    elif italic:
        suffixes = ["-Italic", "-Oblique", "i"]
    else:
        suffixes = []
    names: list[str] = []
    for stem in (family, compact, compact.lower()):
        names.extend(f"{stem}{suffix}.ttf" for suffix in suffixes)
        names.append(f"{stem}.ttf")
    names += ["DejaVuSans.ttf", "arial.ttf", "Arial.ttf"]
    return list(dict.fromkeys(names))


@lru_cache(maxsize=256)
def _load_font(font_family: str, size: int, weight: int, style: str | None):
    """Load PIL font; fallback to Pillow's default with a one-time warning."""
    from PIL import ImageFont

    for name in _font_candidates(font_family, weight, style):
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    if font_family not in _font_warning_emitted:
        _font_warning_emitted.add(font_family)
        warnings.warn(f"Font not found: {font_family!r}; using default.", UserWarning)
    return ImageFont.load_default(size=size)


def measure_text_width(font: FontSpec, text: str) -> float:
    """
    Advance width of text in px at font.size.
    Fonts are loaded at the nearest integer size and the result is rescaled.
    """
    if not text:
        return 0.0
    size = max(1, int(round(font.size)))
    pil_font = _load_font(font.family, size, font.weight, font.style)
    size_used = getattr(pil_font, "size", size)
    scale = font.size / max(1.0, float(size_used))
    return float(pil_font.getlength(text)) * scale


@dataclass(frozen=True)
class FixedWidthMeasure:
    """Degenerate Measure: every character advances char_em * font size."""
    char_em: float = FIXED_WIDTH_CHAR_EM

    def __call__(self, font: FontSpec, text: str) -> float:
        return len(text) * font.size * self.char_em
