# tests/test_responsive.py
"""
Breakpoint lookup and text rule scaling.
"""

from __future__ import annotations

import math

import pytest

from flowframe.core.responsive import (
    BREAKPOINTS,
    EMAIL_TOKENS,
    SOCIAL_TOKENS,
    SizeTokens,
    scale_text_rules,
    select_size_tokens,
)
from flowframe.core.tokens import HEADLINE_RULES, OUTPUT_SIZES


@pytest.mark.parametrize("width,expected", [
    (1, EMAIL_TOKENS),
    (600, EMAIL_TOKENS),
    (601, SOCIAL_TOKENS),
    (1080, SOCIAL_TOKENS),
    (1920, SOCIAL_TOKENS),
])
def test_select_size_tokens(width: float, expected: SizeTokens) -> None:
    assert select_size_tokens(width) is expected


def test_every_preset_has_tokens() -> None:
    for key, size in OUTPUT_SIZES.items():
        tokens = select_size_tokens(size.width)
        expected = EMAIL_TOKENS if key == "EMAIL_HEADER" else SOCIAL_TOKENS
        assert tokens is expected


def test_first_match_wins_in_custom_table() -> None:
    small = SizeTokens(10, 10, 4, 10, 12, 10, 4, 12)
    table = ((300.0, small), (300.0, EMAIL_TOKENS), (math.inf, SOCIAL_TOKENS))
    assert select_size_tokens(300, table) is small


def test_width_past_last_bound_uses_last_entry() -> None:
    table = ((600.0, EMAIL_TOKENS), (1200.0, SOCIAL_TOKENS))
    assert select_size_tokens(5000, table) is SOCIAL_TOKENS


def test_breakpoints_sorted_low_to_high() -> None:
    bounds = [b for b, _ in BREAKPOINTS]
    assert bounds == sorted(bounds)


def test_scale_text_rules_identity() -> None:
    assert scale_text_rules(HEADLINE_RULES, 1.0) is HEADLINE_RULES


def test_scale_text_rules_half() -> None:
    scaled = scale_text_rules(HEADLINE_RULES, 0.5)
    assert scaled.base_size == 24
    assert scaled.min_size == 17
    assert scaled.line_height == 27
    assert scaled.max_lines == HEADLINE_RULES.max_lines
    assert scaled.max_chars == HEADLINE_RULES.max_chars
