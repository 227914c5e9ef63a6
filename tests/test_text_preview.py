# tests/test_text_preview.py
import pytest
from PIL import Image, ImageChops

from thumbnail_studio.features.text_preview.layout import (
    STROKE_ALPHA,
    fit_image,
    font_size_for,
    resolve_offset,
    stroke_color,
    text_anchor,
)
from thumbnail_studio.features.text_preview.renderer import TextOverlayRenderer
from thumbnail_studio.schemas import TextStyle
from fakes import png_data_url

BACKGROUND = (26, 26, 26, 255)
RED = (200, 30, 30, 255)


def _red_square(_url):
    return Image.new("RGBA", (300, 300), RED)


def _differs_from_background(img: Image.Image) -> bool:
    # compare colour channels; an RGBA getbbox only looks at alpha
    blank = Image.new("RGB", img.size, BACKGROUND[:3])
    return ImageChops.difference(img.convert("RGB"), blank).getbbox() is not None


def test_center_anchor_is_canvas_midpoint():
    assert text_anchor("center", 600, 400) == (300, 200, "mm")


@pytest.mark.parametrize("size", [(600, 400), (1280, 720), (90, 60)])
def test_top_left_anchor_is_fixed_margin(size):
    x, y, anchor = text_anchor("top-left", *size)
    assert (x, y) == (40, 40)
    assert anchor == "lt"


def test_edge_anchors():
    assert text_anchor("top", 600, 400) == (300, 40, "mt")
    assert text_anchor("bottom", 600, 400) == (300, 400, "mb")
    assert text_anchor("top-right", 600, 400) == (600, 40, "rt")
    assert text_anchor("bottom-left", 600, 400) == (40, 400, "lb")
    assert text_anchor("bottom-right", 600, 400) == (600, 400, "rb")


def test_unknown_position_is_center():
    assert text_anchor("nowhere", 600, 400) == text_anchor("center", 600, 400)


def test_resolve_offset_fraction_vs_pixels():
    assert resolve_offset(0.5, 400) == 200
    assert resolve_offset(1, 600) == 600
    assert resolve_offset(40, 600) == 40


def test_font_sizes():
    assert [font_size_for(k) for k in ("small", "medium", "large", "xlarge")] == [24, 40, 58, 80]
    assert font_size_for("gigantic") == 40


def test_fit_image_preserves_aspect_and_centers():
    p = fit_image(1200, 400, 600, 400)
    assert p.scale == 0.5
    assert (p.width, p.height) == (600, 200)
    assert (p.left, p.top) == (0, 100)

    p = fit_image(300, 300, 600, 400)
    assert (p.width, p.height, p.left, p.top) == (400, 400, 100, 0)


def test_white_text_gets_translucent_black_stroke():
    r, g, b, a = stroke_color("#FFFFFF")
    assert (r, g, b) == (0, 0, 0)
    assert 0 < a < 255
    assert stroke_color("#fff") == (0, 0, 0, STROKE_ALPHA)


def test_colored_text_gets_translucent_white_stroke():
    assert stroke_color("#FF0000") == (255, 255, 255, STROKE_ALPHA)
    assert stroke_color("#000000") == (255, 255, 255, STROKE_ALPHA)


def test_blank_render_is_background_only():
    with TextOverlayRenderer(image_loader=_red_square) as r:
        img = r.render(None, "   ", TextStyle())
        assert img.size == (600, 400)
        assert not _differs_from_background(img)


def test_image_is_scaled_to_fit_and_centered():
    with TextOverlayRenderer(image_loader=_red_square) as r:
        img = r.render("any", "", TextStyle())
        assert img.getpixel((300, 200)) == RED
        assert img.getpixel((50, 200)) == BACKGROUND
        assert img.getpixel((550, 200)) == BACKGROUND


def test_data_url_image_is_decoded():
    with TextOverlayRenderer() as r:
        img = r.render(png_data_url(60, 40, (10, 200, 10)), "", TextStyle())
        assert img.getpixel((300, 200)) == (10, 200, 10, 255)


def test_text_is_drawn_even_when_image_fails():
    def broken(_url):
        raise OSError("cannot identify image file")

    with TextOverlayRenderer(image_loader=broken) as r:
        img = r.render("https://example.com/x.png", "HELLO", TextStyle(color="#FFFF00"))
        assert _differs_from_background(img)


def test_render_is_skipped_when_inputs_unchanged():
    style = TextStyle(font_size="large", position="top")
    with TextOverlayRenderer(image_loader=_red_square) as r:
        first = r.render("img", "Oi", style)
        again = r.render("img", "Oi", TextStyle(font_size="large", position="top"))
        assert again is first
        assert r.render_count == 1

        r.render("img", "Tchau", style)
        assert r.render_count == 2
        r.render("img", "Tchau", TextStyle(font_size="large", position="bottom"))
        assert r.render_count == 3


def test_redraw_clears_previous_state():
    with TextOverlayRenderer(image_loader=_red_square) as r:
        assert _differs_from_background(r.render("img", "", TextStyle()))
        img = r.render(None, "", TextStyle())
        assert not _differs_from_background(img)


def test_closed_renderer_refuses_to_render():
    with TextOverlayRenderer() as r:
        r.render(None, "x", TextStyle())
    assert r.closed
    with pytest.raises(RuntimeError):
        r.render(None, "y", TextStyle())
