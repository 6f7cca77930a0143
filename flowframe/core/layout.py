# flowframe/core/layout.py
"""
Frame composition: config -> size tokens -> measured pill/logo content ->
notches -> frame path -> fitted headline and subhead.

Two phases, no feedback loop: content is measured once through the injected
Measure, then the fixed sizes drive the geometry and text engines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from flowframe.core.config import (
    HEADLINE_SUBHEAD_GAP,
    PILL_ICON_GAP,
    PILL_MAX_WIDTH_RATIO,
    SHAPE_HEIGHT_RATIO,
    SHAPE_TEXT_GAP,
    TEXT_AREA_PADDING,
)
from flowframe.core.error_codes import (
    NOTCH_OVERFLOW,
    PATH_INVALID,
    TEXT_CHAR_SPLIT,
    TEXT_CLAMPED,
    TEXT_TRUNCATED,
    user_message,
)
from flowframe.core.geometry import build_frame_path, corner_radius
from flowframe.core.responsive import (
    BREAKPOINTS,
    SOCIAL_TOKENS,
    SizeTokens,
    scale_text_rules,
    select_size_tokens,
)
from flowframe.core.text_fit import fit_text
from flowframe.core.text_metrics import measure_text_width
from flowframe.core.tokens import (
    BODY_FACE,
    HEADLINE_FACE,
    HEADLINE_RULES,
    LOGO_ASPECT,
    PILL_FACE,
    PILL_LABEL_RULES,
    SUBHEAD_RULES,
)
from flowframe.core.types import (
    ContentBox,
    ContentKind,
    Corner,
    FontFace,
    Frame,
    FrameConfig,
    FrameLayout,
    Measure,
    Notch,
    TextBlock,
    TextLayout,
    TextRules,
)
from flowframe.core.validate import overlapping_notches, validate_frame_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentSize:
    """Measured pill or logo before it is seated in a notch."""
    kind: ContentKind
    corner: Corner
    width: float
    height: float
    text: str = ""
    icon: str = "NONE"
    color: str = ""
    font_size: float = 0.0
    padding: float = 0.0
    icon_size: float = 0.0


def _text_warnings(role: str, text: str, rules: TextRules, layout: TextLayout) -> list[str]:
    out: list[str] = []
    if len(text) > rules.max_chars:
        out.append(f"{role}: {user_message(TEXT_CLAMPED)}")
    lossy = {"char_split": TEXT_CHAR_SPLIT, "truncated": TEXT_TRUNCATED}.get(layout.fallback or "")
    if lossy:
        out.append(f'{role}: {user_message(lossy)} Showing "{layout.text}".')
    return out


def measure_content(
    config: FrameConfig,
    tokens: SizeTokens,
    shape_width: float,
    measure: Measure,
    warnings: list[str] | None = None,
) -> list[ContentSize]:
    """
    Phase 1: intrinsic size of every enabled pill and the logo.
    Pill labels are fitted on one line within PILL_MAX_WIDTH_RATIO of the shape width.
    """
    out: list[ContentSize] = []
    rules = scale_text_rules(PILL_LABEL_RULES, tokens.pill_font_size / PILL_LABEL_RULES.base_size)
    pill_height = max(tokens.pill_font_size, tokens.icon_size) + 2 * tokens.pill_padding
    for pill in config.pills:
        if not pill.enabled:
            continue
        icon_w = tokens.icon_size + PILL_ICON_GAP if pill.icon != "NONE" else 0.0
        label_max = shape_width * PILL_MAX_WIDTH_RATIO - 2 * tokens.notch_gap - 2 * tokens.pill_padding - icon_w
        fitted = fit_text(pill.text, max(1.0, label_max), rules, PILL_FACE, measure)
        label = fitted.lines[0] if fitted.lines else ""
        if warnings is not None:
            warnings.extend(_text_warnings(f"pill {pill.corner.value}", pill.text, rules, fitted))
        text_w = measure(PILL_FACE.at(fitted.font_size), label)
        out.append(ContentSize(
            kind="pill",
            corner=pill.corner,
            width=2 * tokens.pill_padding + icon_w + text_w,
            height=pill_height,
            text=label,
            icon=pill.icon,
            color=pill.color,
            font_size=fitted.font_size,
            padding=tokens.pill_padding,
            icon_size=tokens.icon_size if pill.icon != "NONE" else 0.0,
        ))
    if config.logo.enabled:
        h = tokens.logo_height
        out.append(ContentSize(
            kind="logo",
            corner=config.logo.corner,
            width=h * LOGO_ASPECT,
            height=h,
            text=config.logo.wordmark,
        ))
    return out


def derive_notches(contents: list[ContentSize], notch_gap: float) -> list[Notch]:
    """Phase 2: one notch per content item; all notches share the tallest height."""
    if not contents:
        return []
    uniform_height = max(c.height for c in contents) + 2 * notch_gap
    return [Notch(corner=c.corner, width=c.width + 2 * notch_gap, height=uniform_height) for c in contents]


def place_content(
    contents: list[ContentSize],
    notches: list[Notch],
    shape_width: float,
    shape_height: float,
    notch_gap: float,
) -> list[ContentBox]:
    """Seat each item notch_gap from the outer edge, centred vertically in its notch."""
    boxes: list[ContentBox] = []
    for c, n in zip(contents, notches):
        gap_y = (n.height - c.height) / 2.0
        x = notch_gap if c.corner.is_left else shape_width - n.width + notch_gap
        y = gap_y if c.corner.is_top else shape_height - n.height + gap_y
        boxes.append(ContentBox(
            kind=c.kind,
            corner=c.corner,
            x=x,
            y=y,
            width=c.width,
            height=c.height,
            text=c.text,
            icon=c.icon,
            color=c.color,
            font_size=c.font_size,
            padding=c.padding,
            icon_size=c.icon_size,
        ))
    return boxes


def _fit_block(
    role: str,
    text: str,
    rules: TextRules,
    face: FontFace,
    x: float,
    y: float,
    max_width: float,
    measure: Measure,
    warnings: list[str],
) -> TextBlock:
    fitted = fit_text(text, max_width, rules, face, measure)
    warnings.extend(_text_warnings(role, text, rules, fitted))
    return TextBlock(
        role=role,
        x=x,
        y=y,
        max_width=max_width,
        line_height=rules.line_height,
        face=face,
        layout=fitted,
    )


def compose_frame(
    config: FrameConfig,
    measure: Measure = measure_text_width,
    table: tuple[tuple[float, SizeTokens], ...] = BREAKPOINTS,
) -> FrameLayout:
    """
    Full layout for one config. Raises ValueError only when the output size
    leaves no room inside the padding; text and notch problems become warnings.
    """
    tokens = select_size_tokens(config.width, table)
    padding = tokens.padding
    inner_w = config.width - 2 * padding
    inner_h = config.height - 2 * padding
    if inner_w <= 0 or inner_h <= 0:
        raise ValueError(f"Output size {config.width}x{config.height} is too small for {padding}px padding.")
    shape_h = inner_h * SHAPE_HEIGHT_RATIO
    radius = corner_radius(shape_h, inner_w)
    warnings: list[str] = []

    contents = measure_content(config, tokens, inner_w, measure, warnings)
    notches = derive_notches(contents, tokens.notch_gap)
    boxes = place_content(contents, notches, inner_w, shape_h, tokens.notch_gap)
    path_d = build_frame_path(inner_w, shape_h, radius, notches)

    if overlapping_notches(notches, inner_w, shape_h):
        warnings.append(user_message(NOTCH_OVERFLOW))
    ok, problems = validate_frame_path(path_d, inner_w, shape_h)
    if not ok:
        logger.warning("Frame path failed validation: %s", "; ".join(problems))
        warnings.append(user_message(PATH_INVALID))

    text_w = inner_w - 2 * TEXT_AREA_PADDING
    headline_rules = scale_text_rules(HEADLINE_RULES, tokens.title_font_size / SOCIAL_TOKENS.title_font_size)
    subhead_rules = scale_text_rules(
        SUBHEAD_RULES, tokens.description_font_size / SOCIAL_TOKENS.description_font_size
    )
    headline = _fit_block(
        "headline", config.headline, headline_rules, HEADLINE_FACE,
        TEXT_AREA_PADDING, shape_h + SHAPE_TEXT_GAP, text_w, measure, warnings,
    )
    n_headline = sum(1 for line in headline.layout.lines if line)
    subhead = _fit_block(
        "subhead", config.subhead, subhead_rules, BODY_FACE,
        TEXT_AREA_PADDING, headline.y + headline.line_height * n_headline + HEADLINE_SUBHEAD_GAP,
        text_w, measure, warnings,
    )

    logger.info(
        "Composed %dx%d frame: %d notch(es), headline %spx x %d line(s), subhead %spx x %d line(s)",
        config.width, config.height, len(notches),
        headline.layout.font_size, len(headline.layout.lines),
        subhead.layout.font_size, len(subhead.layout.lines),
    )
    return FrameLayout(
        canvas_width=config.width,
        canvas_height=config.height,
        offset_x=padding,
        offset_y=padding,
        frame=Frame(width=inner_w, height=shape_h, corner_radius=radius),
        notches=notches,
        path_d=path_d,
        content=boxes,
        headline=headline,
        subhead=subhead,
        text_area_height=inner_h - shape_h,
        background=config.background,
        output_size=config.output_size,
        warnings=warnings,
    )
