# thumbnail_studio/features/analyze/router.py
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from .schemas import AnalyzeThumbnailRequest
from .service import analyze_thumbnail

router = APIRouter(tags=["analyze"])

@router.post("/analyze-thumbnail")
def analyze_thumbnail_endpoint(req: AnalyzeThumbnailRequest):
    status, payload = analyze_thumbnail(req)
    return JSONResponse(payload.model_dump(by_alias=True), status_code=status)
