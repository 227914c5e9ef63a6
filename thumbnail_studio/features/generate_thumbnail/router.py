# thumbnail_studio/features/generate_thumbnail/router.py
from fastapi import APIRouter
from thumbnail_studio.schemas import VariationsResponse
from .schemas import GenerateThumbnailRequest
from .service import generate_thumbnails

router = APIRouter(tags=["generate-thumbnail"])

@router.post("/generate-thumbnail", response_model=VariationsResponse)
def generate_thumbnail_endpoint(req: GenerateThumbnailRequest):
    return generate_thumbnails(req)
