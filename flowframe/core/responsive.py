# flowframe/core/responsive.py
"""
Width breakpoints -> size token bundle, and text rule scaling for a bundle.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from flowframe.core.types import TextRules


@dataclass(frozen=True)
class SizeTokens:
    """Working sizes (px) for one breakpoint."""
    padding: float
    pill_font_size: float
    pill_padding: float
    icon_size: float
    title_font_size: float
    description_font_size: float
    notch_gap: float
    logo_height: float


# Email header: smaller pills, tighter notch gap.
EMAIL_TOKENS = SizeTokens(
    padding=24,
    pill_font_size=14,
    pill_padding=8,
    icon_size=14,
    title_font_size=18,
    description_font_size=14,
    notch_gap=8,
    logo_height=24,
)

# Social and banner sizes (all wider than 600px).
SOCIAL_TOKENS = SizeTokens(
    padding=40,
    pill_font_size=28,
    pill_padding=12,
    icon_size=28,
    title_font_size=28,
    description_font_size=18,
    notch_gap=12,
    logo_height=42,
)

BREAKPOINTS: tuple[tuple[float, SizeTokens], ...] = (
    (600.0, EMAIL_TOKENS),
    (math.inf, SOCIAL_TOKENS),
)
"""(max_width, tokens) pairs, evaluated low to high; first match wins."""


def select_size_tokens(
    width: float,
    table: tuple[tuple[float, SizeTokens], ...] = BREAKPOINTS,
) -> SizeTokens:
    """Token bundle for an output width. Widths past the last bound use the last entry."""
    for max_width, tokens in table:
        if width <= max_width:
            return tokens
    return table[-1][1]


def scale_text_rules(rules: TextRules, factor: float) -> TextRules:
    """
    Scale sizes and line height by factor, rounded to whole px.
    max_lines and max_chars are unchanged; factor 1 returns rules as-is.
    """
    if factor == 1.0:
        return rules
    base = max(1, round(rules.base_size * factor))
    minimum = min(base, max(1, round(rules.min_size * factor)))
    return replace(
        rules,
        base_size=base,
        min_size=minimum,
        line_height=max(1, round(rules.line_height * factor)),
    )
