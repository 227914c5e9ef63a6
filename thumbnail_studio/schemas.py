# thumbnail_studio/schemas.py
import re
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class TextStyle(BaseModel):
    """Styling for overlay text; shared by the variation prompt and the preview renderer."""
    model_config = ConfigDict(populate_by_name=True)

    font_size: str = Field("medium", alias="fontSize", description="small | medium | large | xlarge")
    color: str = Field("#FFFFFF", description="Hex fill color")
    position: str = Field("center", description="top | center | bottom | top-left | top-right | bottom-left | bottom-right")
    font: Optional[str] = Field(None, description="Font family")

    @field_validator("color")
    @classmethod
    def color_must_be_hex(cls, v):
        if not _HEX_COLOR.match(v.strip()):
            raise ValueError("color must be a hex string like #FFFFFF")
        return v.strip()


class Variation(BaseModel):
    id: int = Field(..., ge=1)
    image: str = Field(..., description="Data URL or remote URL of the generated image")


class VariationsResponse(BaseModel):
    variations: List[Variation]
