# thumbnail_studio/features/generate_thumbnail/prompt.py
REFERENCE_CLAUSE = (
    "Use the attached image as a style reference. Match its visual style, color scheme, "
    "composition, and overall aesthetic."
)


def build_thumbnail_prompt(*, prompt: str, has_reference: bool = False) -> str:
    text = (
        f"{prompt.strip()} Create a high-quality, eye-catching thumbnail image. "
        "Make it visually appealing and professional."
    )
    if has_reference:
        text += " " + REFERENCE_CLAUSE
    return text
