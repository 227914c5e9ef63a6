# thumbnail_studio/config.py
import os
from dataclasses import dataclass
from typing import List, Optional

def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}

def _env_csv(name: str, default: str = "*") -> List[str]:
    raw = os.getenv(name, default)
    return [x.strip() for x in raw.split(",") if x.strip()]

def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)

def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return float(raw)

@dataclass(frozen=True)
class Config:
    # AI gateway (OpenAI-compatible chat completions)
    gateway_api_key: str
    gateway_base_url: str
    image_model: str
    text_model: str
    gateway_timeout: Optional[float]  # None = wait forever
    # Generation
    max_variations: int
    max_workers: int
    # API / CORS
    allowed_origins: List[str]
    # Preview canvas
    preview_width: int
    preview_height: int
    preview_max_image_bytes: int
    # Logging
    log_level: str
    log_prompts: bool

def load_config() -> Config:
    return Config(
        gateway_api_key = os.getenv("AI_GATEWAY_API_KEY", ""),
        gateway_base_url = os.getenv("AI_GATEWAY_BASE_URL", "https://ai.gateway.lovable.dev/v1"),
        image_model = os.getenv("AI_IMAGE_MODEL", "google/gemini-2.5-flash-image"),
        text_model = os.getenv("AI_TEXT_MODEL", "google/gemini-2.5-flash"),
        gateway_timeout = _env_float("AI_GATEWAY_TIMEOUT"),
        max_variations = _env_int("MAX_VARIATIONS", 12),
        max_workers = _env_int("MAX_WORKERS", 1),
        allowed_origins = _env_csv("ALLOWED_ORIGINS", "*"),
        preview_width = _env_int("PREVIEW_WIDTH", 600),
        preview_height = _env_int("PREVIEW_HEIGHT", 400),
        preview_max_image_bytes = _env_int("PREVIEW_MAX_IMAGE_BYTES", 10 * 1024 * 1024),
        log_level = os.getenv("LOG_LEVEL", "INFO"),
        log_prompts = _env_bool("LOG_PROMPTS", False),
    )

# Load once
config = load_config()
