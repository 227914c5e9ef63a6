# thumbnail_studio/features/text_preview/layout.py
"""
Geometry for the text preview canvas. No drawing happens here.

Anchor offsets follow one rule: a value <= 1 is a fraction of the canvas
dimension, anything larger is an absolute pixel offset.
"""
from typing import NamedTuple, Tuple, Union

from PIL import ImageColor

EDGE_MARGIN = 40

FONT_SIZES = {
    "small": 24,
    "medium": 40,
    "large": 58,
    "xlarge": 80,
}
DEFAULT_FONT_SIZE = FONT_SIZES["medium"]


class Anchor(NamedTuple):
    origin_x: str  # left | center | right
    origin_y: str  # top | center | bottom
    top: float
    left: float


POSITIONS = {
    "top": Anchor("center", "top", EDGE_MARGIN, 0.5),
    "center": Anchor("center", "center", 0.5, 0.5),
    "bottom": Anchor("center", "bottom", 1, 0.5),
    "top-left": Anchor("left", "top", EDGE_MARGIN, EDGE_MARGIN),
    "top-right": Anchor("right", "top", EDGE_MARGIN, 1),
    "bottom-left": Anchor("left", "bottom", 1, EDGE_MARGIN),
    "bottom-right": Anchor("right", "bottom", 1, 1),
}

# Pillow anchor letters for each origin
_PIL_X = {"left": "l", "center": "m", "right": "r"}
_PIL_Y = {"top": "t", "center": "m", "bottom": "b"}

SHADOW_RGBA = (0, 0, 0, round(0.7 * 255))
SHADOW_BLUR = 10
SHADOW_OFFSET = (2, 2)
STROKE_WIDTH = 1
STROKE_ALPHA = round(0.3 * 255)

WHITE = (255, 255, 255)


class Placement(NamedTuple):
    scale: float
    left: int
    top: int
    width: int
    height: int


class TextPlacement(NamedTuple):
    x: float
    y: float
    anchor: str  # Pillow two-letter anchor, e.g. "mm"


def fit_image(image_w: int, image_h: int, canvas_w: int, canvas_h: int) -> Placement:
    """Uniform scale-to-fit, centered on both axes."""
    scale = min(canvas_w / (image_w or 1), canvas_h / (image_h or 1))
    w = max(1, round(image_w * scale))
    h = max(1, round(image_h * scale))
    return Placement(scale, (canvas_w - w) // 2, (canvas_h - h) // 2, w, h)


def resolve_offset(value: Union[int, float], extent: int) -> float:
    return extent * value if value <= 1 else value


def font_size_for(size_class: str) -> int:
    return FONT_SIZES.get(size_class, DEFAULT_FONT_SIZE)


def text_anchor(position: str, canvas_w: int, canvas_h: int) -> TextPlacement:
    a = POSITIONS.get(position, POSITIONS["center"])
    return TextPlacement(
        x=resolve_offset(a.left, canvas_w),
        y=resolve_offset(a.top, canvas_h),
        anchor=_PIL_X[a.origin_x] + _PIL_Y[a.origin_y],
    )


def fill_rgba(color: str) -> Tuple[int, int, int, int]:
    r, g, b = ImageColor.getrgb(color)[:3]
    return r, g, b, 255


def stroke_color(fill: str) -> Tuple[int, int, int, int]:
    """Translucent black around pure white text, translucent white around anything else."""
    if fill_rgba(fill)[:3] == WHITE:
        return 0, 0, 0, STROKE_ALPHA
    return 255, 255, 255, STROKE_ALPHA
