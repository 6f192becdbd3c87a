# memberfy/pipeline/generate.py
from __future__ import annotations
import asyncio
import base64
import logging
from typing import Optional

import httpx

from ..config import settings
from .fetch import fetch_with_retry
from .palette import decode_rgb, grid_palette
from .profile import fetch_avatar_url, proxied_avatar_url
from .recolor import construct_svg
from .render import svg_to_png
from .types import FrameImage
from .variants import Variant, path_color_indices

log = logging.getLogger("memberfy")


def _make_client() -> httpx.AsyncClient:
    timeout = httpx.Timeout(
        connect=settings.TIMEOUT_SECONDS,
        read=settings.TIMEOUT_SECONDS * 2,
        write=settings.TIMEOUT_SECONDS,
        pool=settings.TIMEOUT_SECONDS,
    )
    return httpx.AsyncClient(timeout=timeout, follow_redirects=True, trust_env=True)

def _recolor_to_png(avatar: bytes, variant: Variant, fid: str) -> bytes:
    """CPU-часть пайплайна: декод -> палитра по сетке -> SVG -> PNG."""
    rgb = decode_rgb(avatar, size=variant.downsample)
    palette = grid_palette(rgb, variant.grid_x, variant.grid_y, method=variant.method)
    svg = construct_svg(palette, path_color_indices(variant), variant, fid)
    return svg_to_png(svg)


async def generate_image(
    fid: str,
    variant: Variant,
    http_client: httpx.AsyncClient | None = None,
) -> Optional[bytes]:
    """
    fid -> профиль -> аватарка (с retry) -> палитра -> PNG.
    Любая ошибка по дороге -> None (вызывающий отдаст 404/fallback).
    """
    log.info(f"[Generate:{variant.name}] fetching profile for fid={fid}")
    if not fid:
        log.error(f"[Generate:{variant.name}] fid is empty")
        return None

    need_to_close = False
    if http_client is None:
        http_client = _make_client()
        need_to_close = True

    try:
        avatar_url = await fetch_avatar_url(http_client, fid)
        if not avatar_url:
            return None

        avatar = await fetch_with_retry(
            http_client,
            proxied_avatar_url(avatar_url),
            retries=settings.FETCH_RETRIES,
            backoff_ms=settings.FETCH_BACKOFF_MS,
        )
        png = await asyncio.to_thread(_recolor_to_png, avatar, variant, fid)
        log.info(f"[Generate:{variant.name}] done fid={fid} bytes={len(png)}")
        return png
    except Exception as e:
        log.error(f"[Generate:{variant.name}] failed fid={fid}: {e.__class__.__name__}: {e}")
        return None
    finally:
        if need_to_close:
            await http_client.aclose()


async def generate_frame_image(
    fid: str,
    variant: Variant,
    http_client: httpx.AsyncClient | None = None,
) -> FrameImage:
    """Картинка для фрейма: data-URL с PNG, либо публичный fallback."""
    png = await generate_image(fid, variant, http_client=http_client)
    if png is None:
        return FrameImage(src=settings.FALLBACK_IMAGE_URL, download_url=settings.FALLBACK_IMAGE_URL)

    encoded = base64.b64encode(png).decode("ascii")
    base = settings.PUBLIC_BASE_URL.rstrip("/")
    return FrameImage(
        src=f"data:image/png;base64,{encoded}",
        download_url=f"{base}/api/{variant.name}/{fid}",
        generated=True,
    )
