# thumbnail_studio/features/generate_thumbnail/service.py
from thumbnail_studio.lib import gateway
from thumbnail_studio.lib.batch import check_count, generate_batch
from thumbnail_studio.lib.errors import InvalidRequestError
from thumbnail_studio.logger import get_logger, log_prompt
from thumbnail_studio.schemas import VariationsResponse

from .prompt import build_thumbnail_prompt
from .schemas import GenerateThumbnailRequest

log = get_logger(__name__)


def generate_thumbnails(req: GenerateThumbnailRequest) -> VariationsResponse:
    if not req.prompt or not req.prompt.strip():
        raise InvalidRequestError("Prompt is required")
    check_count(req.count)
    gateway.require_api_key()

    log.info(
        f"Generating thumbnails: count={req.count} creativity={req.creativity} "
        f"hasReference={bool(req.reference_image)}"
    )
    prompt = build_thumbnail_prompt(prompt=req.prompt, has_reference=bool(req.reference_image))
    log_prompt(log, "thumbnail", prompt)

    variations = generate_batch(
        prompt,
        count=req.count,
        reference_image=req.reference_image,
        label="thumbnail",
    )
    return VariationsResponse(variations=variations)
