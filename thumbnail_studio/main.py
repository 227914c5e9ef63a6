# thumbnail_studio/main.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.datastructures import Headers

from thumbnail_studio.config import config
from thumbnail_studio.features.analyze.router import router as analyze_router
from thumbnail_studio.features.analyze.service import DEGRADED_RECOMMENDATIONS, DEGRADED_SCORE
from thumbnail_studio.features.generate_thumbnail.router import router as generate_thumbnail_router
from thumbnail_studio.features.text_preview.router import router as text_preview_router
from thumbnail_studio.features.variations.router import router as variations_router
from thumbnail_studio.lib.errors import ThumbnailStudioError
from thumbnail_studio.logger import get_logger

log = get_logger(__name__)


class EmptyPreflightCORSMiddleware(CORSMiddleware):
    """Answers accepted preflights with an empty 200 instead of Starlette's "OK" body."""

    def preflight_response(self, request_headers: Headers) -> Response:
        resp = super().preflight_response(request_headers)
        if resp.status_code != 200:
            return resp
        headers = {k: v for k, v in resp.headers.items() if k not in ("content-length", "content-type")}
        return Response(status_code=200, headers=headers)


app = FastAPI(title="Thumbnail Studio API")

app.add_middleware(
    EmptyPreflightCORSMiddleware,
    allow_origins=config.allowed_origins,
    allow_credentials=False,           # keeps the literal "*" in Access-Control-Allow-Origin
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)

app.include_router(generate_thumbnail_router)
app.include_router(variations_router)
app.include_router(analyze_router)
app.include_router(text_preview_router)


@app.exception_handler(ThumbnailStudioError)
async def thumbnail_studio_error_handler(request: Request, exc: ThumbnailStudioError):
    log.error(f"{request.url.path} failed: {exc.message}")
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", "Invalid request body")
    body = {"error": message}
    if request.url.path == "/analyze-thumbnail":
        # analysis responses always carry a score and advice
        body.update(score=DEGRADED_SCORE, recommendations=list(DEGRADED_RECOMMENDATIONS))
    return JSONResponse(body, status_code=400)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception(f"Unhandled error on {request.url.path}")
    # runs outside CORSMiddleware, so the header has to be set here
    headers = {}
    origin = request.headers.get("origin")
    if "*" in config.allowed_origins:
        headers["Access-Control-Allow-Origin"] = "*"
    elif origin in config.allowed_origins:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    return JSONResponse({"error": str(exc) or "Unknown error"}, status_code=500, headers=headers)


@app.options("/{path:path}", include_in_schema=False)
async def preflight(path: str):
    return Response(status_code=200)


@app.get("/health")
async def health():
    return {"status": "ok"}
