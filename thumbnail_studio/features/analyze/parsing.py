# thumbnail_studio/features/analyze/parsing.py
"""
Turn free-form model text into the analysis shapes.

Both parsers always return a well-formed value: strict JSON, then the first
balanced JSON span, then a text heuristic.
"""
from typing import Any, List

from thumbnail_studio.lib.json_tools import extract_json_array, extract_json_object
from thumbnail_studio.logger import get_logger

from .schemas import DetectedElements

log = get_logger(__name__)

MAX_RECOMMENDATIONS = 5
MIN_LINE_LENGTH = 20

_YES = {"sim", "yes", "true", "1", "s", "y"}


def _as_bool(v: Any) -> bool:
    if isinstance(v, str):
        return v.strip().lower() in _YES
    return bool(v)


def _as_colors(v: Any) -> List[str]:
    if isinstance(v, str):
        return [c.strip() for c in v.split(",") if c.strip()]
    if isinstance(v, (list, tuple)):
        return [str(c).strip() for c in v if str(c).strip()]
    return []


def _as_text(v: Any, default: str) -> str:
    if v is None:
        return default
    s = str(v).strip()
    return s or default


def detection_from_keywords(text: str) -> DetectedElements:
    t = (text or "").lower()
    return DetectedElements(
        has_text="sim" in t and "texto" in t,
        has_numbers="números" in t,
        has_icons="ícones" in t or "símbolos" in t,
        has_emojis="emojis" in t,
    )


def parse_detection(text: str) -> DetectedElements:
    data = extract_json_object(text)
    if data is None:
        log.info("Detection response is not JSON; using keyword heuristics")
        return detection_from_keywords(text)

    defaults = DetectedElements()
    return DetectedElements(
        has_text=_as_bool(data.get("hasText")),
        has_numbers=_as_bool(data.get("hasNumbers")),
        has_icons=_as_bool(data.get("hasIcons")),
        has_emojis=_as_bool(data.get("hasEmojis")),
        main_element=_as_text(data.get("mainElement"), defaults.main_element),
        dominant_colors=_as_colors(data.get("dominantColors")),
        style=_as_text(data.get("style"), defaults.style),
    )


def recommendations_from_lines(text: str) -> List[str]:
    lines = [line.strip() for line in (text or "").splitlines()]
    return [line for line in lines if len(line) > MIN_LINE_LENGTH][:MAX_RECOMMENDATIONS]


def parse_recommendations(text: str) -> List[str]:
    """Up to 5 recommendation strings; may be empty (caller supplies the static fallback)."""
    items = extract_json_array(text)
    if items is None:
        log.info("Recommendation response is not a JSON array; splitting by lines")
        return recommendations_from_lines(text)
    out = [str(i).strip() for i in items if i is not None and str(i).strip()]
    return out[:MAX_RECOMMENDATIONS]
