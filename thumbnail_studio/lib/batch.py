# thumbnail_studio/lib/batch.py
import concurrent.futures
from typing import Dict, List, Optional

from thumbnail_studio.config import config
from thumbnail_studio.lib import gateway
from thumbnail_studio.lib.errors import EmptyResultError, InvalidRequestError, UpstreamMalformedResponse
from thumbnail_studio.logger import get_logger
from thumbnail_studio.schemas import Variation

log = get_logger(__name__)


def _build_content(
    prompt: str,
    idx: int,
    *,
    base_image: Optional[str],
    reference_image: Optional[str],
) -> List[dict]:
    content = [gateway.text_part(f"{prompt} (Variation {idx})")]
    if base_image:
        content.append(gateway.image_part(base_image))
    if reference_image:
        content.append(gateway.image_part(reference_image))
    return content


def generate_one(
    idx: int,
    prompt: str,
    *,
    base_image: Optional[str] = None,
    reference_image: Optional[str] = None,
    model: Optional[str] = None,
    label: str = "variation",
) -> Optional[Variation]:
    """
    One gateway call for variation ``idx`` (1-based).
    Returns None when the response carries no image; classified HTTP errors propagate.
    """
    content = _build_content(prompt, idx, base_image=base_image, reference_image=reference_image)
    resp = gateway.chat(content, model=model or config.image_model, modalities=["image", "text"])
    log.info(f"Response received for {label} {idx}")
    try:
        url = gateway.first_image_url(resp)
    except UpstreamMalformedResponse:
        log.error(f"No image in response for {label} {idx}")
        return None
    return Variation(id=idx, image=url)


def generate_batch(
    prompt: str,
    *,
    count: int,
    base_image: Optional[str] = None,
    reference_image: Optional[str] = None,
    model: Optional[str] = None,
    max_workers: Optional[int] = None,
    label: str = "variation",
) -> List[Variation]:
    """
    Issue ``count`` gateway calls sharing ``prompt`` and collect the images.

    - ids are the 1-based call index; calls without an image are omitted (no renumbering)
    - a classified upstream error (429/402/503/other) aborts the batch and propagates
    - zero images overall raises EmptyResultError
    With ``max_workers`` > 1 the calls run on a bounded thread pool; pending calls
    are cancelled on the first error and ids keep their call index.
    """
    workers = max_workers if max_workers is not None else config.max_workers
    kwargs = dict(base_image=base_image, reference_image=reference_image, model=model, label=label)

    results: Dict[int, Variation] = {}
    if workers <= 1:
        for i in range(1, count + 1):
            log.info(f"Generating {label} {i}/{count}")
            v = generate_one(i, prompt, **kwargs)
            if v:
                results[i] = v
    else:
        with concurrent.futures.ThreadPoolExecutor(max_workers=min(workers, count)) as ex:
            fut_map = {ex.submit(generate_one, i, prompt, **kwargs): i for i in range(1, count + 1)}
            try:
                for fut in concurrent.futures.as_completed(fut_map):
                    v = fut.result()
                    if v:
                        results[fut_map[fut]] = v
            except Exception:
                for f in fut_map:
                    f.cancel()
                raise

    variations = [results[i] for i in sorted(results)]
    log.info(f"Successfully generated {len(variations)} {label}s")
    if not variations:
        raise EmptyResultError()
    return variations


def check_count(count: int) -> None:
    """Server-side cap on how many calls a single request may trigger."""
    if count > config.max_variations:
        raise InvalidRequestError(f"count must be at most {config.max_variations}")
