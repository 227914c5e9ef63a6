# thumbnail_studio/features/generate_thumbnail/schemas.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class GenerateThumbnailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # optional here so a missing prompt is reported as a 400 by the service
    prompt: Optional[str] = Field(None, description="What the thumbnail should show")
    count: int = Field(1, ge=1, description="Number of thumbnails to generate")
    creativity: int = Field(50, ge=0, le=100, description="Creativity level 0-100")
    reference_image: Optional[str] = Field(
        None, alias="referenceImage", description="Optional style reference (data URL, URL or raw base64)"
    )
