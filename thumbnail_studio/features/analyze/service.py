# thumbnail_studio/features/analyze/service.py
"""
Two-stage thumbnail critique: detect elements, then ask for recommendations
conditioned on what was detected. Never raises to the caller; any failure
yields a degraded payload with a fixed score and advice list.
"""
from typing import List, Optional, Tuple, Union

from thumbnail_studio.config import config
from thumbnail_studio.lib import gateway
from thumbnail_studio.lib.errors import InvalidRequestError, ThumbnailStudioError, UpstreamError
from thumbnail_studio.logger import get_logger

from .parsing import parse_detection, parse_recommendations
from .prompt import DETECTION_PROMPT, build_recommendation_prompt
from .schemas import AnalysisResult, AnalyzeThumbnailRequest, DegradedAnalysis, DetectedElements

log = get_logger(__name__)

BASE_SCORE = 70
MIN_SCORE = 50
MAX_SCORE = 100
DEGRADED_SCORE = 75

FALLBACK_RECOMMENDATIONS = [
    "Considere adicionar texto para melhor comunicação",
    "Aumente o contraste entre os elementos principais",
    "Otimize as cores para visualização mobile",
    "Verifique a composição visual dos elementos",
    "Teste a thumbnail em diferentes tamanhos",
]

DEGRADED_RECOMMENDATIONS = [
    "Erro ao processar análise. Tente novamente.",
    "Verifique se a imagem está no formato correto",
    "Considere otimizar o tamanho da imagem",
]


def compute_score(detected: DetectedElements) -> int:
    score = BASE_SCORE
    if detected.has_text:
        score += 5
    if not detected.has_text and not detected.has_numbers:
        # thumbnails usually need text
        score -= 10
    return min(MAX_SCORE, max(MIN_SCORE, score))


def _ask(prompt: str, image: str) -> str:
    resp = gateway.chat(
        [gateway.text_part(prompt), gateway.image_part(image)],
        model=config.text_model,
    )
    return gateway.message_text(resp)


def detect_elements(image: str) -> DetectedElements:
    try:
        text = _ask(DETECTION_PROMPT, image)
    except ThumbnailStudioError as e:
        raise UpstreamError("Erro ao analisar imagem") from e
    log.info(f"Detecção: {text}")
    return parse_detection(text)


def recommend(image: str, detected: DetectedElements, question: Optional[str] = None) -> List[str]:
    prompt = build_recommendation_prompt(detected, question)
    try:
        text = _ask(prompt, image)
    except ThumbnailStudioError as e:
        raise UpstreamError("Erro ao gerar recomendações") from e
    log.info(f"Recomendações: {text}")
    return parse_recommendations(text) or list(FALLBACK_RECOMMENDATIONS)


def run_analysis(req: AnalyzeThumbnailRequest) -> AnalysisResult:
    """Raising variant; used by analyze_thumbnail."""
    if not req.image_data or not req.image_data.strip():
        raise InvalidRequestError("Image data is required")
    gateway.require_api_key()

    log.info("Analisando thumbnail com IA...")
    detected = detect_elements(req.image_data)
    recommendations = recommend(req.image_data, detected, req.question)
    return AnalysisResult(
        score=compute_score(detected),
        analysis=detected,
        recommendations=recommendations,
    )


def analyze_thumbnail(req: AnalyzeThumbnailRequest) -> Tuple[int, Union[AnalysisResult, DegradedAnalysis]]:
    """Returns (http_status, payload)."""
    try:
        return 200, run_analysis(req)
    except Exception as e:
        log.exception("Erro na análise")
        status = e.status_code if isinstance(e, InvalidRequestError) else 500
        message = e.message if isinstance(e, ThumbnailStudioError) else (str(e) or "Erro desconhecido")
        return status, DegradedAnalysis(
            error=message,
            score=DEGRADED_SCORE,
            recommendations=list(DEGRADED_RECOMMENDATIONS),
        )
