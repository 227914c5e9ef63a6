# thumbnail_studio/features/variations/schemas.py
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from thumbnail_studio.schemas import TextStyle

# Portuguese keys sent by older clients
_INTENSITY_ALIASES = {"sutil": "subtle", "moderado": "moderate", "forte": "strong"}

_TRUTHY = {"1", "true", "yes", "on", "sim"}


class VariationOptions(BaseModel):
    """
    Named flags for a variation kind.
    light: colors, brightness, text, background, implementText, addVisuals
    creative: redesign, composition, style, platforms
    Unknown flags are kept and ignored.
    """
    model_config = ConfigDict(extra="allow")

    def flag(self, name: str) -> bool:
        val = (self.model_extra or {}).get(name)
        if isinstance(val, str):
            return val.strip().lower() in _TRUTHY
        return bool(val)


class GenerateVariationsRequest(BaseModel):
    """
    ``imageStyle`` and ``styleIntensity`` are free strings: unknown values
    simply add no style clause (see prompt.style_prefix).
    """
    model_config = ConfigDict(populate_by_name=True)

    image: Optional[str] = Field(None, description="Base image (data URL, URL or raw base64)")
    reference_image: Optional[str] = Field(None, alias="referenceImage")
    variation_type: Literal["light", "creative"] = Field("creative", alias="variationType")
    options: VariationOptions = Field(default_factory=VariationOptions)
    count: int = Field(1, ge=1)
    custom_text: Optional[str] = Field(None, alias="customText", max_length=200)
    text_style: Optional[TextStyle] = Field(None, alias="textStyle")
    image_style: Optional[str] = Field(None, alias="imageStyle")
    style_intensity: Optional[str] = Field(None, alias="styleIntensity")

    @field_validator("options", mode="before")
    @classmethod
    def _null_options(cls, v):
        return {} if v is None else v

    @field_validator("image_style", mode="before")
    @classmethod
    def _normalize_style(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("style_intensity", mode="before")
    @classmethod
    def _map_intensity_alias(cls, v):
        if isinstance(v, str):
            key = v.strip().lower()
            return _INTENSITY_ALIASES.get(key, key)
        return v
