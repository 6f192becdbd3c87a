# memberfy/pipeline/fetch.py
from __future__ import annotations
import asyncio
import logging

import httpx

log = logging.getLogger("memberfy.fetch")


class FetchError(RuntimeError):
    def __init__(self, status: int):
        super().__init__(f"Failed to fetch: HTTP status {status}")
        self.status = status


async def fetch_with_retry(client: httpx.AsyncClient, url: str, retries: int = 3, backoff_ms: int = 300) -> bytes:
    """
    GET с экспоненциальным backoff: 429 и любые исключения повторяем
    (не больше retries раз, пауза backoff_ms и дальше x2).
    Когда попытки кончились — пробрасываем последнюю ошибку.
    """
    while True:
        try:
            r = await client.get(url)
            if r.is_success:
                return r.content
            if r.status_code == 429 and retries > 0:
                log.info(f"[Fetch] rate limited, retrying in {backoff_ms}ms url={url}")
                await asyncio.sleep(backoff_ms / 1000)
                retries -= 1
                backoff_ms *= 2
                continue
            raise FetchError(r.status_code)
        except Exception as e:
            log.warning(f"[Fetch] error url={url}: {e}")
            if retries <= 0:
                raise
            log.info(f"[Fetch] retrying... {retries} retries left")
            await asyncio.sleep(backoff_ms / 1000)
            retries -= 1
            backoff_ms *= 2
