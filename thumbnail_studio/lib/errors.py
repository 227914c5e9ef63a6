# thumbnail_studio/lib/errors.py
"""
Error taxonomy shared by every handler.

Each error carries the HTTP status it maps to and a user-facing message; the
app-level exception handler turns them into ``{"error": message}`` bodies.
"""
from typing import Optional


class ThumbnailStudioError(Exception):
    status_code: int = 500
    default_message: str = "Unknown error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(ThumbnailStudioError):
    status_code = 500
    default_message = "AI_GATEWAY_API_KEY is not configured"


class InvalidRequestError(ThumbnailStudioError):
    status_code = 400
    default_message = "Invalid request"


class UpstreamRateLimited(ThumbnailStudioError):
    status_code = 429
    default_message = "Limite de requisições excedido. Aguarde alguns instantes."


class UpstreamBillingRequired(ThumbnailStudioError):
    status_code = 402
    default_message = "Créditos insuficientes. Adicione créditos em Settings → Workspace → Usage."


class UpstreamUnavailable(ThumbnailStudioError):
    status_code = 503
    default_message = "Serviço de IA temporariamente indisponível. Tente novamente em alguns instantes."


class UpstreamError(ThumbnailStudioError):
    status_code = 500
    default_message = "AI Gateway error"


class UpstreamMalformedResponse(ThumbnailStudioError):
    """A 2xx response without the image/JSON we asked for. Handled locally, never surfaced."""
    status_code = 502
    default_message = "AI Gateway returned no usable content"


class EmptyResultError(ThumbnailStudioError):
    status_code = 500
    default_message = "Nenhuma variação foi gerada. Tente novamente."


_STATUS_MAP = {
    429: UpstreamRateLimited,
    402: UpstreamBillingRequired,
    503: UpstreamUnavailable,
}


def classify_upstream_status(status: int) -> ThumbnailStudioError:
    """Map a non-2xx gateway status to the matching error instance."""
    cls = _STATUS_MAP.get(status)
    if cls is not None:
        return cls()
    return UpstreamError(f"AI Gateway error: {status}")
