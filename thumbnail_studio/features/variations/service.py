# thumbnail_studio/features/variations/service.py
from thumbnail_studio.lib import gateway
from thumbnail_studio.lib.batch import check_count, generate_batch
from thumbnail_studio.lib.errors import InvalidRequestError
from thumbnail_studio.logger import get_logger, log_prompt
from thumbnail_studio.schemas import VariationsResponse

from .prompt import build_variation_prompt
from .schemas import GenerateVariationsRequest

log = get_logger(__name__)


def generate_variations(req: GenerateVariationsRequest) -> VariationsResponse:
    if not req.image or not req.image.strip():
        raise InvalidRequestError("Image is required")
    check_count(req.count)
    gateway.require_api_key()

    text_style = req.text_style.model_dump(by_alias=True) if req.text_style else None
    log.info(
        f"Generating variations: type={req.variation_type} count={req.count} "
        f"options={req.options.model_dump()} customText={req.custom_text!r} textStyle={text_style} "
        f"imageStyle={req.image_style} styleIntensity={req.style_intensity} "
        f"hasReference={bool(req.reference_image)}"
    )
    prompt = build_variation_prompt(req)
    log_prompt(log, "variation", prompt)

    variations = generate_batch(
        prompt,
        count=req.count,
        base_image=req.image,
        reference_image=req.reference_image,
    )
    return VariationsResponse(variations=variations)
