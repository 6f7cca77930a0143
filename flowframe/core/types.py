# flowframe/core/types.py
"""
Dataclasses for frame input config, geometry primitives, text layout and
the composed frame layout. Serialized shape is defined in reporting.layout_to_dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Callable, Literal


class Corner(str, Enum):
    """Frame corner a notch (and the pill or logo it seats) is attached to."""
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_RIGHT = "bottom-right"
    BOTTOM_LEFT = "bottom-left"

    @property
    def is_top(self) -> bool:
        return self in (Corner.TOP_LEFT, Corner.TOP_RIGHT)

    @property
    def is_left(self) -> bool:
        return self in (Corner.TOP_LEFT, Corner.BOTTOM_LEFT)


PathOp = Literal["M", "L", "Q", "Z"]
FitFallback = Literal["char_split", "truncated"]


@dataclass(frozen=True)
class Notch:
    """Rectangular indentation cut into one frame corner."""
    corner: Corner
    width: float
    height: float


@dataclass(frozen=True)
class Frame:
    """Frame bounds; corner_radius is always derived from the shape height."""
    width: float
    height: float
    corner_radius: float


@dataclass(frozen=True)
class PathCommand:
    """One absolute path command. Q carries (control, end); M/L carry one point; Z none."""
    op: PathOp
    points: tuple[tuple[float, float], ...] = ()

    @property
    def end(self) -> tuple[float, float] | None:
        return self.points[-1] if self.points else None


@dataclass(frozen=True)
class TextRules:
    """Size search bounds and caps for one text role (headline, subhead, pill label)."""
    base_size: float
    min_size: float
    line_height: float
    max_lines: int
    max_chars: int

    def __post_init__(self) -> None:
        if self.min_size <= 0:
            raise ValueError(f"min_size must be > 0, got {self.min_size}")
        if self.min_size > self.base_size:
            raise ValueError(f"min_size {self.min_size} exceeds base_size {self.base_size}")
        if self.max_lines < 1:
            raise ValueError(f"max_lines must be >= 1, got {self.max_lines}")
        if self.max_chars < 0:
            raise ValueError(f"max_chars must be >= 0, got {self.max_chars}")


@dataclass(frozen=True)
class FontSpec:
    """Font at a concrete size, as handed to a Measure."""
    family: str
    size: float
    weight: int = 400
    style: str | None = None


@dataclass(frozen=True)
class FontFace:
    """Size-less font descriptor; the fit engine picks the size."""
    family: str
    weight: int = 400
    style: str | None = None

    def at(self, size: float) -> FontSpec:
        return FontSpec(family=self.family, size=size, weight=self.weight, style=self.style)


Measure = Callable[[FontSpec, str], float]
"""Width of a string rendered in the given font, in layout units (px)."""


@dataclass(frozen=True)
class TextLayout:
    """Fit engine output. fallback is set when a lossy fallback produced the lines."""
    font_size: float
    lines: tuple[str, ...]
    fallback: FitFallback | None = None

    @property
    def text(self) -> str:
        return " ".join(line for line in self.lines if line)


# ----- Input config -----

@dataclass(frozen=True)
class PillConfig:
    """Badge seated in a corner notch."""
    corner: Corner
    text: str
    icon: str = "NONE"
    color: str = "DARK_TEAL"
    enabled: bool = True


@dataclass(frozen=True)
class LogoConfig:
    enabled: bool = False
    corner: Corner = Corner.TOP_RIGHT
    wordmark: str = "FLOW"


@dataclass(frozen=True)
class FrameConfig:
    """Everything the layout needs from the outside world. Built by flowframe.core.io."""
    width: int
    height: int
    background: str
    headline: str
    subhead: str
    pills: tuple[PillConfig, ...] = ()
    logo: LogoConfig = field(default_factory=LogoConfig)
    output_size: str | None = None
    image_path: str | None = None

    def with_text(self, headline: str | None = None, subhead: str | None = None) -> FrameConfig:
        return replace(
            self,
            headline=self.headline if headline is None else headline,
            subhead=self.subhead if subhead is None else subhead,
        )


# ----- Composed layout -----

ContentKind = Literal["pill", "logo"]


@dataclass(frozen=True)
class ContentBox:
    """A pill or logo positioned inside its notch (shape coordinates)."""
    kind: ContentKind
    corner: Corner
    x: float
    y: float
    width: float
    height: float
    text: str = ""
    icon: str = "NONE"
    color: str = ""
    font_size: float = 0.0
    padding: float = 0.0
    icon_size: float = 0.0


@dataclass(frozen=True)
class TextBlock:
    """A fitted text role placed in the text area (shape coordinates)."""
    role: str
    x: float
    y: float
    max_width: float
    line_height: float
    face: FontFace
    layout: TextLayout


@dataclass
class FrameLayout:
    """
    Full composition output: canvas, frame path, positioned content and text.
    Shape coordinates are relative to (offset_x, offset_y) on the canvas.
    """
    canvas_width: int
    canvas_height: int
    offset_x: float
    offset_y: float
    frame: Frame
    notches: list[Notch]
    path_d: str
    content: list[ContentBox]
    headline: TextBlock
    subhead: TextBlock
    text_area_height: float
    background: str
    output_size: str | None = None
    warnings: list[str] = field(default_factory=list)
