# thumbnail_studio/features/text_preview/schemas.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from thumbnail_studio.schemas import TextStyle


class TextPreviewRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: Optional[str] = Field(None, alias="imageUrl", description="Data URL or http(s) URL")
    text: str = ""
    text_style: TextStyle = Field(default_factory=TextStyle, alias="textStyle")


class TextPreviewResponse(BaseModel):
    image: str = Field(..., description="PNG data URL")
    width: int
    height: int
