# flowframe/core/text_fit.py
"""
Text fitting: pick the largest font size and line breaks that satisfy a role's
TextRules for a given max width.

Size search runs from base_size down to min_size in unit steps and keeps the
first size that lays out within max_lines. Two-line roles use a balanced
word-boundary split; other roles use greedy word wrap. When nothing fits the
result degrades (forced character split, or truncated lines) instead of raising.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator

from flowframe.core.types import FontFace, FontSpec, Measure, TextLayout, TextRules

logger = logging.getLogger(__name__)


def _candidate_sizes(rules: TextRules) -> Iterator[float]:
    size = rules.base_size
    while size >= rules.min_size:
        yield size
        size -= 1


def clamp_text(text: str, rules: TextRules) -> str:
    """Hard character ceiling applied before any layout attempt."""
    return text[: rules.max_chars]


def split_two_lines(
    text: str,
    max_width: float,
    font: FontSpec,
    measure: Measure,
) -> list[str] | None:
    """
    One line if it fits, else the best word-boundary split into two lines.
    Best = smallest leftover (max_width - longer line), then smallest difference
    between the two lines. None when a word is too wide or no split fits.
    """
    words = text.split()
    if not words:
        return [""]
    if any(measure(font, word) > max_width for word in words):
        return None

    full = " ".join(words)
    if measure(font, full) <= max_width:
        return [full]

    best: tuple[str, str] | None = None
    best_leftover = math.inf
    best_balance = math.inf
    for i in range(len(words) - 1):
        line1 = " ".join(words[: i + 1])
        line2 = " ".join(words[i + 1:])
        w1 = measure(font, line1)
        w2 = measure(font, line2)
        if w1 > max_width or w2 > max_width:
            continue
        leftover = max_width - max(w1, w2)
        balance = abs(w1 - w2)
        if leftover < best_leftover or (leftover == best_leftover and balance < best_balance):
            best_leftover = leftover
            best_balance = balance
            best = (line1, line2)

    return list(best) if best is not None else None


def break_two_lines_by_char(
    text: str,
    max_width: float,
    font: FontSpec,
    measure: Measure,
) -> list[str]:
    """
    Forced two-line split ignoring word boundaries. Each line keeps at least one
    character; one space at the break is skipped; overflow past line 2 is dropped.
    """
    line1 = ""
    line2 = ""
    on_second = False
    for ch in text:
        if not on_second:
            candidate = line1 + ch
            if not line1 or measure(font, candidate) <= max_width:
                line1 = candidate
                continue
            on_second = True
            if ch == " ":
                continue
        candidate = line2 + ch
        if not line2 or measure(font, candidate) <= max_width:
            line2 = candidate
        else:
            break
    return [line1.rstrip(), line2.rstrip()]


def wrap_lines(
    text: str,
    max_width: float,
    font: FontSpec,
    measure: Measure,
) -> list[str]:
    """Greedy word wrap; words wider than max_width are broken by character."""
    words = text.split()
    if not words:
        return [""]
    lines: list[str] = []
    current = ""
    for word in words:
        if measure(font, word) > max_width:
            if current:
                lines.append(current)
                current = ""
            segment = ""
            for ch in word:
                candidate = segment + ch
                if not segment or measure(font, candidate) <= max_width:
                    segment = candidate
                else:
                    lines.append(segment)
                    segment = ch
            current = segment
            continue

        candidate = f"{current} {word}" if current else word
        if not current or measure(font, candidate) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word

    if current:
        lines.append(current)
    return lines


def fit_text(
    text: str,
    max_width: float,
    rules: TextRules,
    face: FontFace,
    measure: Measure,
) -> TextLayout:
    """
    Fit text to rules. Never raises for valid rules; check TextLayout.fallback
    to detect degraded output.
    """
    clamped = clamp_text(text, rules)

    if rules.max_lines == 2:
        for size in _candidate_sizes(rules):
            lines = split_two_lines(clamped, max_width, face.at(size), measure)
            if lines is not None:
                return TextLayout(font_size=size, lines=tuple(lines))
        logger.debug(
            "No word split fits %.1fpx between %s and %s; forcing character split",
            max_width, rules.base_size, rules.min_size,
        )
        forced = break_two_lines_by_char(clamped, max_width, face.at(rules.min_size), measure)
        return TextLayout(font_size=rules.min_size, lines=tuple(forced), fallback="char_split")

    for size in _candidate_sizes(rules):
        lines = wrap_lines(clamped, max_width, face.at(size), measure)
        if len(lines) <= rules.max_lines:
            return TextLayout(font_size=size, lines=tuple(lines))
    lines = wrap_lines(clamped, max_width, face.at(rules.min_size), measure)
    logger.debug(
        "Wrapped to %d lines at min size %s; keeping first %d",
        len(lines), rules.min_size, rules.max_lines,
    )
    return TextLayout(
        font_size=rules.min_size,
        lines=tuple(lines[: rules.max_lines]),
        fallback="truncated",
    )
