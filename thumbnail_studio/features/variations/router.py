# thumbnail_studio/features/variations/router.py
from fastapi import APIRouter
from thumbnail_studio.schemas import VariationsResponse
from .schemas import GenerateVariationsRequest
from .service import generate_variations

router = APIRouter(tags=["variations"])

@router.post("/generate-variations", response_model=VariationsResponse)
def generate_variations_endpoint(req: GenerateVariationsRequest):
    return generate_variations(req)
