# thumbnail_studio/lib/json_tools.py
import json
import re
from typing import Any, Optional

_FENCE_OPEN = re.compile(r"^```(?:json)?\s*", flags=re.IGNORECASE)
_FENCE_CLOSE = re.compile(r"\s*```$")


def strip_code_fence(text: str) -> str:
    s = text.strip()
    if s.startswith("```"):
        s = _FENCE_OPEN.sub("", s)
        s = _FENCE_CLOSE.sub("", s)
    return s


def find_balanced(text: str, opener: str, closer: str) -> Optional[str]:
    """
    Return the first balanced ``opener ... closer`` span in ``text``.
    Brackets inside JSON string literals are ignored.
    """
    start = text.find(opener)
    while start != -1:
        depth = 0
        in_str = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_str:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_str = False
                continue
            if ch == '"':
                in_str = True
            elif ch == opener:
                depth += 1
            elif ch == closer:
                depth -= 1
                if depth == 0:
                    return text[start:i + 1]
        # unbalanced from this opener; try the next one
        start = text.find(opener, start + 1)
    return None


def _extract(text: str, opener: str, closer: str, kind: type) -> Optional[Any]:
    s = strip_code_fence(text or "")
    try:
        data = json.loads(s)
        if isinstance(data, kind):
            return data
    except ValueError:
        pass

    span = find_balanced(s, opener, closer)
    if span is None:
        return None
    try:
        data = json.loads(span)
    except ValueError:
        return None
    return data if isinstance(data, kind) else None


def extract_json_object(text: str) -> Optional[dict]:
    """Strict parse first, then the first balanced ``{...}`` span. None when neither parses."""
    return _extract(text, "{", "}", dict)


def extract_json_array(text: str) -> Optional[list]:
    """Strict parse first, then the first balanced ``[...]`` span. None when neither parses."""
    return _extract(text, "[", "]", list)
