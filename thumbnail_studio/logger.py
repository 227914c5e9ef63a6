# thumbnail_studio/logger.py
import logging
import sys
from typing import Optional
from thumbnail_studio.config import config

_DEFAULT_FMT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "gunicorn.error", "gunicorn.access")
# the openai SDK logs one line per HTTP request through these
_CHATTY_LOGGERS = ("httpx", "httpcore", "openai")
_PROMPT_PREVIEW_CHARS = 2000
_configured = False

def configure_logging(level: Optional[str] = None, fmt: str = _DEFAULT_FMT) -> None:
    """Set up stdout logging once at LOG_LEVEL; gateway transport logs only surface at DEBUG."""
    global _configured
    if _configured:
        return

    level_value = getattr(logging, (level or config.log_level).upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level_value)
    if not root.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(logging.Formatter(fmt))
        root.addHandler(h)
    for h in root.handlers:
        h.setLevel(level_value)
        if not h.formatter:
            h.setFormatter(logging.Formatter(fmt))

    for name in _SERVER_LOGGERS:
        logging.getLogger(name).setLevel(level_value)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(level_value if level_value <= logging.DEBUG else logging.WARNING)

    _configured = True

def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name or __name__)

def log_prompt(logger: logging.Logger, label: str, prompt: str) -> None:
    """Log a generated prompt at DEBUG when LOG_PROMPTS is on; long prompts are cut."""
    if not config.log_prompts:
        return
    shown = prompt if len(prompt) <= _PROMPT_PREVIEW_CHARS else prompt[:_PROMPT_PREVIEW_CHARS] + "..."
    logger.debug(f"{label} prompt ({len(prompt)} chars): {shown}")
