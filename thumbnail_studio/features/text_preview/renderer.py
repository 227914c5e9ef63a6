# thumbnail_studio/features/text_preview/renderer.py
from __future__ import annotations
from typing import Callable, Optional, Tuple

import requests
from PIL import Image, ImageDraw, ImageFilter, ImageFont

from thumbnail_studio.lib.imaging import encode_png_data_url, load_image
from thumbnail_studio.logger import get_logger
from thumbnail_studio.schemas import TextStyle

from .layout import (
    SHADOW_BLUR,
    SHADOW_OFFSET,
    SHADOW_RGBA,
    STROKE_WIDTH,
    fill_rgba,
    fit_image,
    font_size_for,
    stroke_color,
    text_anchor,
)

log = get_logger(__name__)

BACKGROUND = "#1a1a1a"


def load_font(family: Optional[str], size: int) -> ImageFont.FreeTypeFont:
    if family:
        try:
            return ImageFont.truetype(family, size)
        except OSError:
            log.debug(f"font {family!r} not found; using default")
    return ImageFont.load_default(size=size)


class TextOverlayRenderer:
    """
    Composites a base image and a styled text line on a fixed-size canvas.

    Use as a context manager so the surface is released on exit. ``render``
    only redraws when the image URL, text or style changed since the last call.
    """

    def __init__(
        self,
        width: int = 600,
        height: int = 400,
        *,
        image_loader: Callable[[str], Image.Image] = load_image,
    ):
        self.width = width
        self.height = height
        self._load = image_loader
        self._surface: Optional[Image.Image] = Image.new("RGBA", (width, height), BACKGROUND)
        self._last_key: Optional[Tuple[Optional[str], str, str]] = None
        self.render_count = 0

    def __enter__(self) -> "TextOverlayRenderer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._surface is None

    def close(self) -> None:
        if self._surface is not None:
            self._surface.close()
            self._surface = None
        self._last_key = None

    def _require_open(self) -> Image.Image:
        if self._surface is None:
            raise RuntimeError("renderer is closed")
        return self._surface

    def _clear(self) -> Image.Image:
        self._require_open().close()
        self._surface = Image.new("RGBA", (self.width, self.height), BACKGROUND)
        return self._surface

    def render(self, image_url: Optional[str], text: str, text_style: TextStyle) -> Image.Image:
        self._require_open()
        key = (image_url, text, text_style.model_dump_json())
        if key == self._last_key:
            return self._surface

        surface = self._clear()
        if image_url:
            self._draw_image(surface, image_url)
        if text.strip():
            self._draw_text(surface, text, text_style)

        self._last_key = key
        self.render_count += 1
        return surface

    def to_data_url(self) -> str:
        return encode_png_data_url(self._require_open())

    def _draw_image(self, surface: Image.Image, image_url: str) -> None:
        try:
            img = self._load(image_url)
        except (requests.RequestException, OSError, ValueError) as e:
            log.warning(f"preview image could not be loaded: {e}")
            return
        with img:
            p = fit_image(img.width, img.height, self.width, self.height)
            scaled = img.convert("RGBA").resize((p.width, p.height), Image.Resampling.LANCZOS)
            surface.alpha_composite(scaled, dest=(p.left, p.top))

    def _draw_text(self, surface: Image.Image, text: str, style: TextStyle) -> None:
        # Pillow's top/bottom anchors are single-line only
        line = " ".join(text.splitlines())
        font = load_font(style.font, font_size_for(style.font_size))
        x, y, anchor = text_anchor(style.position, self.width, self.height)

        shadow = Image.new("RGBA", surface.size, (0, 0, 0, 0))
        ImageDraw.Draw(shadow).text(
            (x + SHADOW_OFFSET[0], y + SHADOW_OFFSET[1]), line, font=font, fill=SHADOW_RGBA, anchor=anchor
        )
        surface.alpha_composite(shadow.filter(ImageFilter.GaussianBlur(SHADOW_BLUR / 2)))

        layer = Image.new("RGBA", surface.size, (0, 0, 0, 0))
        ImageDraw.Draw(layer).text(
            (x, y),
            line,
            font=font,
            fill=fill_rgba(style.color),
            anchor=anchor,
            stroke_width=STROKE_WIDTH,
            stroke_fill=stroke_color(style.color),
        )
        surface.alpha_composite(layer)
