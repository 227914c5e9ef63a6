# thumbnail_studio/features/analyze/schemas.py
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class AnalyzeThumbnailRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_data: Optional[str] = Field(None, alias="imageData", description="Image as data URL, URL or raw base64")
    question: Optional[str] = Field(None, description="Optional question from the user")


class DetectedElements(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    has_text: bool = Field(False, alias="hasText")
    has_numbers: bool = Field(False, alias="hasNumbers")
    has_icons: bool = Field(False, alias="hasIcons")
    has_emojis: bool = Field(False, alias="hasEmojis")
    main_element: str = Field("Elemento visual", alias="mainElement")
    dominant_colors: List[str] = Field(default_factory=list, alias="dominantColors")
    style: str = "visual"


class AnalysisResult(BaseModel):
    score: int = Field(..., ge=50, le=100)
    analysis: DetectedElements
    recommendations: List[str] = Field(..., min_length=1, max_length=5)


class DegradedAnalysis(BaseModel):
    error: str
    score: int = 75
    recommendations: List[str]
