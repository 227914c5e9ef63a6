# thumbnail_studio/lib/gateway.py
"""
Thin wrapper around the OpenAI-compatible AI gateway.

One shared client; no SDK-level retries (a failed call is surfaced, the user
resubmits). HTTP failures are classified into ``lib.errors`` types here so
callers never see SDK exceptions.
"""
from typing import Any, Dict, List, Optional

from openai import APIConnectionError, APIError, APIStatusError, OpenAI

from thumbnail_studio.config import config
from thumbnail_studio.lib.errors import (
    ConfigurationError,
    UpstreamError,
    UpstreamMalformedResponse,
    classify_upstream_status,
)
from thumbnail_studio.lib.imaging import as_image_url
from thumbnail_studio.logger import get_logger

log = get_logger(__name__)

client = OpenAI(
    # placeholder keeps import working without a key; require_api_key() guards every call site
    api_key=config.gateway_api_key or "unset",
    base_url=config.gateway_base_url,
    max_retries=0,
    timeout=config.gateway_timeout,
)


def require_api_key() -> str:
    if not config.gateway_api_key:
        raise ConfigurationError()
    return config.gateway_api_key


def text_part(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text}


def image_part(image: str) -> Dict[str, Any]:
    return {"type": "image_url", "image_url": {"url": as_image_url(image)}}


def chat(content: List[Dict[str, Any]], *, model: str, modalities: Optional[List[str]] = None):
    """Send one user message; raise a classified error on any non-2xx."""
    kwargs: Dict[str, Any] = {}
    if modalities:
        kwargs["extra_body"] = {"modalities": modalities}
    try:
        return client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": content}],
            **kwargs,
        )
    except APIStatusError as e:
        log.error(f"AI Gateway error: {e.status_code} {e.message}")
        raise classify_upstream_status(e.status_code) from e
    except APIConnectionError as e:
        log.error(f"AI Gateway unreachable: {e}")
        raise UpstreamError(f"AI Gateway error: {e}") from e
    except APIError as e:
        # e.g. an unparseable response body
        log.error(f"AI Gateway returned an unusable response: {e.message}")
        raise UpstreamError(f"AI Gateway error: {e.message}") from e


def _get(obj: Any, key: str) -> Any:
    # SDK models keep unknown fields (like message.images) as plain dicts
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def _first_message(resp: Any) -> Any:
    choices = _get(resp, "choices") or []
    return _get(choices[0], "message") if choices else None


def first_image_url(resp: Any) -> str:
    """choices[0].message.images[0].image_url.url, or UpstreamMalformedResponse."""
    images = _get(_first_message(resp), "images") or []
    url = _get(_get(images[0], "image_url"), "url") if images else None
    if not url:
        raise UpstreamMalformedResponse("No image in response")
    return url


def message_text(resp: Any) -> str:
    return _get(_first_message(resp), "content") or ""
