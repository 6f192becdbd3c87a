# memberfy/main.py
from __future__ import annotations

import logging
import logging.handlers
import re
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse, PlainTextResponse, Response

from .config import settings, LOG_FORMAT
from .cors import OpenCorsMiddleware
from .pipeline.generate import generate_image, generate_frame_image
from .pipeline.render import load_fallback_png
from .pipeline.types import FrameImage, VariantOut
from .pipeline.variants import VARIANTS, Variant, get_variant, describe

log = logging.getLogger("memberfy")

_FID_RE = re.compile(r"[0-9]+")

def _setup_logging():
    root = logging.getLogger()
    root.setLevel(settings.LOG_LEVEL)
    # файл — только если задан LOG_FILE
    if settings.LOG_FILE is None:
        return
    if any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers):
        return
    settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.handlers.RotatingFileHandler(
        filename=str(settings.LOG_FILE),
        maxBytes=5_000_000, backupCount=3, encoding="utf-8"
    )
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)

_setup_logging()

# ---------------------------------------------------------------------

app = FastAPI(
    title="memberfy",
    default_response_class=ORJSONResponse
)
app.add_middleware(OpenCorsMiddleware)

# ---------------------------------------------------------------------
# Вспомогательные утилиты

def _bad_request() -> ORJSONResponse:
    return ORJSONResponse({"error": "Bad Request"}, status_code=400)

def _not_found() -> ORJSONResponse:
    return ORJSONResponse({"error": "Not Found"}, status_code=404)

def _server_error() -> ORJSONResponse:
    return ORJSONResponse({"error": "Internal Server Error"}, status_code=500)

def _valid_fid(values: List[str]) -> Optional[str]:
    """fid должен прийти ровно один раз и состоять из цифр."""
    if len(values) != 1:
        return None
    fid = values[0].strip()
    return fid if _FID_RE.fullmatch(fid) else None

async def _image_response(variant: Variant, fid: str) -> Response:
    png = await generate_image(fid, variant)
    if png is None:
        fallback = load_fallback_png(settings.FALLBACK_IMAGE_PATH)
        if fallback is not None:
            return Response(content=fallback, media_type="image/png", headers={"X-Memberfy-Fallback": "1"})
        return PlainTextResponse("Image not found", status_code=404)
    return Response(content=png, media_type="image/png")

# ---------------------------------------------------------------------

@app.on_event("startup")
async def on_startup():
    log.info(f"Startup: PROFILE_SEARCH_URL={settings.PROFILE_SEARCH_URL}")
    log.info(f"Startup: AVATAR_PROXY_URL={settings.AVATAR_PROXY_URL} retries={settings.FETCH_RETRIES} backoff={settings.FETCH_BACKOFF_MS}ms")
    log.info(f"Startup: variants={list(VARIANTS)} fallback={settings.FALLBACK_IMAGE_PATH}")

@app.get("/health")
async def health():
    return {"ok": True}

@app.get("/api/variants", response_model=List[VariantOut])
async def list_variants():
    return [describe(v) for v in VARIANTS.values()]

@app.get("/api/{variant_name}/{fid}/frame", response_model=FrameImage)
async def frame_image(variant_name: str, fid: str):
    """JSON для фрейма: src (data-URL или fallback) + ссылка на скачивание."""
    try:
        variant = get_variant(variant_name)
        if variant is None:
            return _not_found()
        fid_ok = _valid_fid([fid])
        if fid_ok is None:
            return _bad_request()
        return await generate_frame_image(fid_ok, variant)
    except Exception as e:
        log.exception(f"[Frame:{variant_name}] error: {e}")
        return _server_error()

@app.get("/api/{variant_name}/{fid}")
async def variant_image_by_path(variant_name: str, fid: str):
    try:
        variant = get_variant(variant_name)
        if variant is None:
            return _not_found()
        fid_ok = _valid_fid([fid])
        if fid_ok is None:
            return _bad_request()
        return await _image_response(variant, fid_ok)
    except Exception as e:
        log.exception(f"[Image:{variant_name}] error: {e}")
        return _server_error()

@app.get("/api/{variant_name}")
async def variant_image_by_query(variant_name: str, request: Request):
    try:
        variant = get_variant(variant_name)
        if variant is None:
            return _not_found()
        fid_ok = _valid_fid(request.query_params.getlist("fid"))
        if fid_ok is None:
            return _bad_request()
        return await _image_response(variant, fid_ok)
    except Exception as e:
        log.exception(f"[Image:{variant_name}] error: {e}")
        return _server_error()
