# thumbnail_studio/features/variations/prompt.py
"""
Prompt assembly for image variations.

Pure functions: the same request always yields the same string. Clauses are
appended in a fixed order (style, intensity, reference, kind-specific flags,
text block, visuals block, closing line).
"""
from typing import Optional

from thumbnail_studio.schemas import TextStyle

from .schemas import GenerateVariationsRequest, VariationOptions

STYLE_CLAUSES = {
    "cartoon": "Apply a cartoon/comic book art style with bold outlines, vibrant colors, and simplified shapes. ",
    "3d-realistic": "Transform into a photorealistic 3D render with realistic lighting, materials, and depth. ",
    "pixel-art": "Convert to pixel art style with retro gaming aesthetics, limited color palette, and visible pixels. ",
    "watercolor": "Apply watercolor painting style with soft edges, transparent washes, and artistic brush strokes. ",
    "flat-design": "Use flat design style with solid colors, minimal shadows, and clean geometric shapes. ",
    "cyberpunk": "Apply cyberpunk/neon style with bright neon colors, dark backgrounds, and futuristic elements. ",
    "low-poly": "Transform into low-poly 3D art style with geometric shapes and faceted surfaces. ",
    "anime": "Apply anime/manga art style with large expressive eyes, dynamic lines, and Japanese animation aesthetics. ",
    "sketch": "Convert to pencil sketch style with hand-drawn lines, shading, and artistic imperfections. ",
    "oil-painting": "Apply oil painting style with rich textures, visible brush strokes, and classical painting techniques. ",
}

INTENSITY_CLAUSES = {
    "subtle": (
        "Apply the style subtly and discretely, maintaining most of the original image characteristics "
        "while adding just a hint of the chosen style. "
    ),
    "moderate": (
        "Apply the style in a balanced way, making it clearly visible but still preserving the essence "
        "of the original image. "
    ),
    "strong": (
        "Apply the style strongly and prominently, fully transforming the image into the chosen artistic "
        "style with bold and striking characteristics. "
    ),
}

REFERENCE_CLAUSE = (
    "Use the second image as a style reference for the variations. "
    "Match its visual style, color scheme, composition, and overall aesthetic. "
)

LIGHT_INTRO = "Create a variation of this thumbnail with subtle changes. "
LIGHT_FLAGS = (
    ("colors", "Adjust the color palette slightly. "),
    ("brightness", "Modify brightness and contrast. "),
    ("text", "Keep text style but slightly adjust it. "),
    ("background", "Subtly change the background. "),
)
LIGHT_CLOSING = "\n\nMaintain the overall composition and style. Keep it professional and similar to the original."

CREATIVE_INTRO = "Create a creative variation of this thumbnail. "
CREATIVE_FLAGS = (
    ("redesign", "Redesign while keeping the core concept. "),
    ("composition", "Change the composition significantly. "),
    ("style", "Apply a different artistic style. "),
    ("platforms", "Optimize for different social media platforms. "),
)
CREATIVE_CLOSING = "Be creative but maintain professional quality. Make bold changes while keeping the theme recognizable."

FONT_SIZE_RANGES = {
    "small": "20-30px",
    "medium": "35-45px",
    "large": "50-65px",
    "xlarge": "70-90px",
}
DEFAULT_FONT_SIZE_RANGE = FONT_SIZE_RANGES["medium"]

POSITION_PHRASES = {
    "top": "at the top center",
    "center": "at the center",
    "bottom": "at the bottom center",
    "top-left": "at the top left corner",
    "top-right": "at the top right corner",
    "bottom-left": "at the bottom left corner",
    "bottom-right": "at the bottom right corner",
}
DEFAULT_POSITION_PHRASE = POSITION_PHRASES["center"]

DEFAULT_FONT = "Modern geometric sans-serif"
DEFAULT_TEXT_COLOR = "#FFFFFF"


def style_prefix(image_style: Optional[str], intensity: Optional[str]) -> str:
    if not image_style or image_style == "none" or image_style not in STYLE_CLAUSES:
        return ""
    out = STYLE_CLAUSES[image_style]
    if intensity and intensity in INTENSITY_CLAUSES:
        out += INTENSITY_CLAUSES[intensity]
    return out


def _flag_clauses(options: VariationOptions, table) -> str:
    return "".join(clause for flag, clause in table if options.flag(flag))


def text_preservation_block(custom_text: str, text_style: Optional[TextStyle]) -> str:
    font = (text_style.font if text_style else None) or DEFAULT_FONT
    size = FONT_SIZE_RANGES.get(text_style.font_size, DEFAULT_FONT_SIZE_RANGE) if text_style else DEFAULT_FONT_SIZE_RANGE
    color = text_style.color if text_style else DEFAULT_TEXT_COLOR
    position = POSITION_PHRASES.get(text_style.position, DEFAULT_POSITION_PHRASE) if text_style else DEFAULT_POSITION_PHRASE

    return (
        "\n\nCRITICAL TEXT PRESERVATION - READ CAREFULLY"
        "\n\nEXACT TEXT TO RENDER (EVERY CHARACTER MUST BE IDENTICAL):"
        f"\n\"{custom_text}\""
        "\n\nABSOLUTE RULES - ZERO TOLERANCE:"
        "\n- DO NOT change, modify, or alter ANY letters"
        "\n- DO NOT add extra letters or characters"
        "\n- DO NOT remove or skip any letters"
        "\n- DO NOT duplicate any letters or words"
        "\n- DO NOT replace letters with symbols"
        "\n- DO NOT fix spelling, grammar, or punctuation"
        "\n- DO NOT translate to any language"
        "\n- DO NOT rearrange words or text order"
        "\n\nYOUR ONLY JOB: Copy the text EXACTLY character-by-character and apply ONLY visual styling "
        "(colors, shadows, glows, effects)"
        "\n\nVERIFY: Before generating, confirm every letter matches the original text perfectly"
        "\n\nTYPOGRAPHY STYLING (choose one unique futuristic/elegant approach):"
        "\n- Futuristic: Sleek sans-serif with neon glow, holographic gradients (cyan/magenta/yellow), metallic sheens"
        "\n- Elegant Minimalist: Ultra-clean, refined with golden/platinum accents, marble textures"
        "\n- Tech Premium: Bold with circuit patterns, hexagonal grids, deep blues/electric purples"
        "\n- Luxe Futurism: Glass/metal/crystal materials with transparency, volumetric lighting, particles"
        "\n\nTECHNICAL SPECS:"
        f"\n- Font: {font}"
        f"\n- Size: {size}"
        f"\n- Base Color: {color} with premium styling"
        f"\n- Position: {position}"
        "\n\nVISUAL EFFECTS ONLY:"
        "\n- Shadows, glows, 3D depth"
        "\n- Gradients, metallic reflections, glass effects"
        "\n- Ensure perfect readability with intelligent contrast (light text needs dark backing, dark text needs light backing)"
        "\n- Add subtle animation suggestion: pulsing glow, shimmer effect, or data stream particles"
    )


def visual_accents_block(custom_text: str) -> str:
    return (
        "\n\nBACKGROUND & ICON IMPLEMENTATION - FUTURISTIC ELEGANCE:"
        f"\n\nREMEMBER: Text \"{custom_text}\" must remain EXACTLY as written - no modifications!"
        "\n\nCREATE VISUAL ELEMENTS to complement (not modify) the text:"
        "\n\nBACKGROUND TREATMENTS:"
        "\n- Cyber Depth: Deep space gradients with constellation patterns, nebula, aurora borealis, subtle grids"
        "\n- Tech Luxury: Premium dark (navy/obsidian/midnight) with hexagonal patterns, circuit traces"
        "\n- Holographic Dream: Iridescent color-shifting gradients, transparent geometric shapes"
        "\n- Minimal Premium: Ultra-clean with brushed metal, frosted glass, carbon fiber textures"
        "\n\nICONS & GRAPHICS (2-4 elements):"
        "\n- Conceptually relate to the text theme"
        "\n- Futuristic line art, geometric abstractions, sleek 3D"
        "\n- Neon outlines, glowing edges, metallic/holographic effects"
        "\n- Frame and enhance text, 15-25% text size"
        "\n\nATMOSPHERIC EFFECTS:"
        "\n- Particles (floating dust, digital rain, energy streams, light rays)"
        "\n- Ambient lighting (rim light, backlight, volumetric fog)"
        "\n- Premium colors: cyan/magenta tech, gold/platinum luxury, electric blue/purple"
        "\n\nMAINTAIN: Text as primary focus, visual breathing room, professional cohesion"
    )


def build_variation_prompt(req: GenerateVariationsRequest) -> str:
    prompt = style_prefix(req.image_style, req.style_intensity)

    if req.reference_image:
        prompt += REFERENCE_CLAUSE

    options = req.options
    custom_text = req.custom_text or ""

    if req.variation_type == "light":
        prompt += LIGHT_INTRO
        prompt += _flag_clauses(options, LIGHT_FLAGS)
        if options.flag("implementText") and custom_text.strip():
            prompt += text_preservation_block(custom_text, req.text_style)
        if options.flag("addVisuals") and custom_text.strip():
            prompt += visual_accents_block(custom_text)
        prompt += LIGHT_CLOSING
    else:
        prompt += CREATIVE_INTRO
        prompt += _flag_clauses(options, CREATIVE_FLAGS)
        prompt += CREATIVE_CLOSING

    return prompt
