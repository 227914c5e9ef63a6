# thumbnail_studio/features/text_preview/router.py
from fastapi import APIRouter
from thumbnail_studio.config import config
from .renderer import TextOverlayRenderer
from .schemas import TextPreviewRequest, TextPreviewResponse

router = APIRouter(tags=["text-preview"])

@router.post("/preview-text", response_model=TextPreviewResponse)
def preview_text_endpoint(req: TextPreviewRequest) -> TextPreviewResponse:
    with TextOverlayRenderer(config.preview_width, config.preview_height) as renderer:
        renderer.render(req.image_url, req.text, req.text_style)
        return TextPreviewResponse(image=renderer.to_data_url(), width=renderer.width, height=renderer.height)
