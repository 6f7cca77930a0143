# flowframe/core/io.py
"""
Load and validate frame configs from JSON.
Output size is a preset key or an explicit {"width", "height"} object.
Notch placement rules (one host per corner, at most MAX_NOTCHES) are enforced
here so the geometry engine can stay unchecked.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from flowframe.core.config import DEFAULT_OUTPUT_SIZE, MAX_NOTCHES
from flowframe.core.tokens import BACKGROUND_COLORS, ICONS, OUTPUT_SIZES
from flowframe.core.types import Corner, FrameConfig, LogoConfig, PillConfig


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def parse_corner(value: Any) -> Corner:
    """Accept 'top-left', 'TOP_LEFT' or a Corner."""
    if isinstance(value, Corner):
        return value
    s = str(value).strip()
    try:
        return Corner(s.lower().replace("_", "-"))
    except ValueError:
        raise ValueError(f"Unknown corner: {value!r}") from None


def _parse_color(value: Any, what: str) -> str:
    key = str(value).strip().upper()
    if key not in BACKGROUND_COLORS:
        raise ValueError(f"Unknown {what} color {value!r}; expected one of {', '.join(BACKGROUND_COLORS)}")
    return key


def _parse_output_size(value: Any) -> tuple[int, int, str | None]:
    if value is None:
        value = DEFAULT_OUTPUT_SIZE
    if isinstance(value, str):
        key = value.strip().upper()
        if key not in OUTPUT_SIZES:
            raise ValueError(f"Unknown output size {value!r}; expected one of {', '.join(OUTPUT_SIZES)}")
        preset = OUTPUT_SIZES[key]
        return preset.width, preset.height, key
    if isinstance(value, dict):
        try:
            width = int(value["width"])
            height = int(value["height"])
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Output size needs integer width and height: {value!r}") from None
        if width <= 0 or height <= 0:
            raise ValueError(f"Output size must be positive, got {width}x{height}")
        return width, height, None
    raise ValueError(f"Output size must be a preset name or an object: {value!r}")


def _parse_pill(data: dict[str, Any]) -> PillConfig:
    icon = str(data.get("icon", "NONE")).strip().upper()
    if icon not in ICONS:
        raise ValueError(f"Unknown icon {data.get('icon')!r}; expected one of {', '.join(ICONS)}")
    return PillConfig(
        corner=parse_corner(data.get("corner", Corner.TOP_LEFT)),
        text=str(data.get("text", "")),
        icon=icon,
        color=_parse_color(data.get("color", "DARK_TEAL"), "pill"),
        enabled=bool(data.get("enabled", True)),
    )


def check_notch_hosts(pills: tuple[PillConfig, ...], logo: LogoConfig) -> None:
    """Raise ValueError if enabled pills/logo share a corner or exceed MAX_NOTCHES."""
    corners = [p.corner for p in pills if p.enabled]
    if logo.enabled:
        corners.append(logo.corner)
    seen: set[Corner] = set()
    for corner in corners:
        if corner in seen:
            raise ValueError(f"More than one pill or logo at corner {corner.value!r}")
        seen.add(corner)
    if len(corners) > MAX_NOTCHES:
        raise ValueError(f"At most {MAX_NOTCHES} notches are allowed, got {len(corners)}")


def parse_frame_config(data: dict[str, Any]) -> FrameConfig:
    """Build a validated FrameConfig from a decoded JSON object."""
    if not isinstance(data, dict):
        raise ValueError("Frame config must be a JSON object.")
    width, height, output_size = _parse_output_size(data.get("output_size"))
    pills = tuple(_parse_pill(p) for p in data.get("pills", []) or [])
    logo_data = data.get("logo") or {}
    logo = LogoConfig(
        enabled=bool(logo_data.get("enabled", False)),
        corner=parse_corner(logo_data.get("corner", Corner.TOP_RIGHT)),
        wordmark=str(logo_data.get("wordmark", "FLOW")),
    )
    check_notch_hosts(pills, logo)
    image_path = data.get("image_path")
    return FrameConfig(
        width=width,
        height=height,
        background=_parse_color(data.get("background", "BEIGE"), "background"),
        headline=str(data.get("headline", "")),
        subhead=str(data.get("subhead", "")),
        pills=pills,
        logo=logo,
        output_size=output_size,
        image_path=str(image_path) if image_path else None,
    )


def load_frame_config(path: str | Path, repo_root: Path | None = None) -> FrameConfig:
    """Read and validate a JSON frame config file."""
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Config file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Config file is not valid JSON: {resolved}: {e}") from e
    return parse_frame_config(data)


def default_frame_config(output_size: str = DEFAULT_OUTPUT_SIZE) -> FrameConfig:
    """Two pills (top-left, bottom-right), no logo, sample copy."""
    return parse_frame_config({
        "output_size": output_size,
        "background": "BEIGE",
        "headline": "IMP supplies for clinical trials: GMP & GDP",
        "subhead": "Secondary copy line here",
        "pills": [
            {"corner": "top-left", "text": "In-person event", "icon": "EVENT_PIN", "color": "DARK_TEAL"},
            {"corner": "bottom-right", "text": "Virtual session", "icon": "LOCATION_PIN", "color": "DARK_TEAL"},
        ],
        "logo": {"enabled": False},
    })


def frame_config_to_dict(config: FrameConfig) -> dict[str, Any]:
    """JSON-ready form accepted by parse_frame_config."""
    output_size: Any = config.output_size or {"width": config.width, "height": config.height}
    return {
        "output_size": output_size,
        "background": config.background,
        "headline": config.headline,
        "subhead": config.subhead,
        "pills": [
            {"corner": p.corner.value, "text": p.text, "icon": p.icon, "color": p.color, "enabled": p.enabled}
            for p in config.pills
        ],
        "logo": {"enabled": config.logo.enabled, "corner": config.logo.corner.value, "wordmark": config.logo.wordmark},
        "image_path": config.image_path,
    }
