# tests/test_variation_prompt.py
import pytest
from pydantic import ValidationError

from thumbnail_studio.features.variations.prompt import (
    CREATIVE_CLOSING,
    CREATIVE_FLAGS,
    INTENSITY_CLAUSES,
    LIGHT_CLOSING,
    LIGHT_FLAGS,
    REFERENCE_CLAUSE,
    STYLE_CLAUSES,
    build_variation_prompt,
)
from thumbnail_studio.features.variations.schemas import GenerateVariationsRequest


def _req(**overrides) -> GenerateVariationsRequest:
    body = {"image": "data:image/png;base64,AAAA", "variationType": "light", "options": {}}
    body.update(overrides)
    return GenerateVariationsRequest.model_validate(body)


def _all_flag_clauses():
    return [c for _, c in LIGHT_FLAGS] + [c for _, c in CREATIVE_FLAGS]


def test_prompt_is_deterministic():
    req = _req(options={"colors": True, "implementText": True}, customText="Oi", imageStyle="anime")
    first = build_variation_prompt(req)
    build_variation_prompt(_req(variationType="creative", options={"redesign": True}))
    assert build_variation_prompt(req) == first


@pytest.mark.parametrize("style", sorted(STYLE_CLAUSES))
@pytest.mark.parametrize("kind", ["light", "creative"])
def test_known_style_clause_appears_once(style, kind):
    prompt = build_variation_prompt(_req(variationType=kind, imageStyle=style))
    assert prompt.count(STYLE_CLAUSES[style]) == 1


def test_style_none_adds_no_style_clause():
    prompt = build_variation_prompt(_req(imageStyle="none", styleIntensity="strong"))
    assert not any(c in prompt for c in STYLE_CLAUSES.values())
    assert not any(c in prompt for c in INTENSITY_CLAUSES.values())


def test_intensity_follows_style_and_accepts_portuguese_keys():
    prompt = build_variation_prompt(_req(imageStyle="watercolor", styleIntensity="forte"))
    assert prompt.startswith(STYLE_CLAUSES["watercolor"] + INTENSITY_CLAUSES["strong"])


def test_intensity_without_style_is_ignored():
    prompt = build_variation_prompt(_req(styleIntensity="subtle"))
    assert INTENSITY_CLAUSES["subtle"] not in prompt


def test_unknown_style_adds_no_style_clause():
    prompt = build_variation_prompt(_req(imageStyle="vaporwave", styleIntensity="strong"))
    assert not any(c in prompt for c in STYLE_CLAUSES.values())
    assert not any(c in prompt for c in INTENSITY_CLAUSES.values())


def test_unknown_intensity_keeps_style_clause_only():
    prompt = build_variation_prompt(_req(imageStyle="Anime", styleIntensity="extreme"))
    assert prompt.startswith(STYLE_CLAUSES["anime"])
    assert not any(c in prompt for c in INTENSITY_CLAUSES.values())


def test_null_options_mean_no_flags():
    req = _req(options=None)
    assert not req.options.flag("colors")
    prompt = build_variation_prompt(req)
    assert not any(c in prompt for c in _all_flag_clauses())


def test_light_with_no_flags_keeps_only_intro_and_closing():
    prompt = build_variation_prompt(_req())
    assert not any(c in prompt for c in _all_flag_clauses())
    assert "Maintain the overall composition and style." in prompt
    assert prompt.endswith(LIGHT_CLOSING)


def test_light_flags_are_independent_and_ordered():
    prompt = build_variation_prompt(_req(options={"background": True, "colors": True}))
    assert "Adjust the color palette slightly. " in prompt
    assert "Subtly change the background. " in prompt
    assert "Modify brightness and contrast. " not in prompt
    assert prompt.index("Adjust the color palette") < prompt.index("Subtly change the background")


def test_string_flags_are_understood():
    prompt = build_variation_prompt(_req(options={"brightness": "true", "text": "false"}))
    assert "Modify brightness and contrast. " in prompt
    assert "Keep text style but slightly adjust it. " not in prompt


def test_reference_clause_only_with_reference_image():
    assert REFERENCE_CLAUSE not in build_variation_prompt(_req())
    assert REFERENCE_CLAUSE in build_variation_prompt(_req(referenceImage="data:image/png;base64,BBBB"))


def test_text_block_quotes_text_and_lists_forbidden_edits():
    prompt = build_variation_prompt(_req(
        options={"implementText": True},
        customText="Promoção 50% OFF",
        textStyle={"fontSize": "large", "color": "#FF0000", "position": "bottom-left", "font": "Impact"},
    ))
    assert '"Promoção 50% OFF"' in prompt
    for rule in ("DO NOT change, modify, or alter ANY letters", "DO NOT translate", "DO NOT fix spelling",
                 "DO NOT rearrange words", "DO NOT duplicate"):
        assert rule in prompt
    assert "- Font: Impact" in prompt
    assert "- Size: 50-65px" in prompt
    assert "- Base Color: #FF0000" in prompt
    assert "- Position: at the bottom left corner" in prompt
    assert prompt.endswith(LIGHT_CLOSING)


def test_text_block_keeps_text_verbatim():
    prompt = build_variation_prompt(_req(options={"implementText": True}, customText="  spaced  "))
    assert '"  spaced  "' in prompt


def test_unknown_size_and_position_fall_back():
    prompt = build_variation_prompt(_req(
        options={"implementText": True},
        customText="Hi",
        textStyle={"fontSize": "huge", "position": "somewhere"},
    ))
    assert "- Size: 35-45px" in prompt
    assert "- Position: at the center" in prompt


def test_text_block_defaults_without_text_style():
    prompt = build_variation_prompt(_req(options={"implementText": True}, customText="Hi"))
    assert "- Font: Modern geometric sans-serif" in prompt
    assert "- Base Color: #FFFFFF" in prompt


def test_text_block_needs_non_blank_text():
    prompt = build_variation_prompt(_req(options={"implementText": True, "addVisuals": True}, customText="   "))
    assert "CRITICAL TEXT PRESERVATION" not in prompt
    assert "BACKGROUND & ICON IMPLEMENTATION" not in prompt


def test_visuals_block_reminds_not_to_touch_text():
    prompt = build_variation_prompt(_req(options={"addVisuals": True}, customText="Top 10"))
    assert 'Text "Top 10" must remain EXACTLY as written' in prompt
    assert "CRITICAL TEXT PRESERVATION" not in prompt


def test_creative_flags_and_closing():
    prompt = build_variation_prompt(_req(
        variationType="creative",
        options={"redesign": True, "platforms": True, "implementText": True},
        customText="ignored here",
    ))
    assert prompt.startswith("Create a creative variation of this thumbnail. ")
    assert "Redesign while keeping the core concept. " in prompt
    assert "Optimize for different social media platforms. " in prompt
    assert "Change the composition significantly. " not in prompt
    assert "CRITICAL TEXT PRESERVATION" not in prompt
    assert prompt.endswith(CREATIVE_CLOSING)


def test_missing_variation_type_is_creative():
    req = GenerateVariationsRequest.model_validate({"image": "x"})
    assert req.variation_type == "creative"


def test_custom_text_is_capped_at_200_chars():
    with pytest.raises(ValidationError):
        _req(customText="x" * 201)


def test_text_style_color_must_be_hex():
    with pytest.raises(ValidationError):
        _req(textStyle={"color": "white"})
