# thumbnail_studio/__init__.py
from .config import config
from .logger import get_logger
from .schemas import TextStyle, Variation, VariationsResponse
from .main import app


__all__ = ["app",
           "config",
           "get_logger",
           "TextStyle",
           "Variation",
           "VariationsResponse",
           ]
