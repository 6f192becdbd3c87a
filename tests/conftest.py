# tests/conftest.py
from io import BytesIO
from typing import Callable, Dict, List

import httpx
import numpy as np
import pytest
from PIL import Image

from memberfy.config import settings

AVATAR_URL = "https://i.imgur.com/avatar.png"


def cairo_available() -> bool:
    # libcairo может отсутствовать в системе — тогда рендер-тесты пропускаем
    try:
        import cairosvg  # noqa: F401
        return True
    except (ImportError, OSError):
        return False


def make_image_bytes(rgb: np.ndarray, fmt: str = "PNG") -> bytes:
    buf = BytesIO()
    Image.fromarray(rgb.astype(np.uint8), "RGB").save(buf, fmt)
    return buf.getvalue()


def cells_image(grid: int, cell: int) -> np.ndarray:
    """Картинка grid x grid клеток, у каждой свой цвет (index, 2*index, 255-index)."""
    img = np.zeros((grid * cell, grid * cell, 3), dtype=np.uint8)
    for y in range(grid):
        for x in range(grid):
            i = x + y * grid
            img[y * cell:(y + 1) * cell, x * cell:(x + 1) * cell] = (i, 2 * i, 255 - i)
    return img


@pytest.fixture
def avatar_png() -> bytes:
    return make_image_bytes(cells_image(9, 10))


@pytest.fixture(autouse=True)
def fast_backoff(monkeypatch):
    monkeypatch.setattr(settings, "FETCH_BACKOFF_MS", 0)
    monkeypatch.setattr(settings, "FALLBACK_IMAGE_PATH", None)


@pytest.fixture
def mock_client_factory() -> Callable[..., httpx.AsyncClient]:
    """
    Собирает AsyncClient на MockTransport:
    profiles — ответ Searchcaster, avatar_responses — очередь ответов прокси.
    В client.calls пишем все запрошенные URL.
    """
    def factory(profiles=None, profile_status: int = 200, avatar_responses: List[httpx.Response] | None = None):
        calls: List[str] = []
        queue = list(avatar_responses or [])

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            if request.url.path.endswith("/api/profiles"):
                return httpx.Response(profile_status, json=profiles if profiles is not None else [])
            if queue:
                return queue.pop(0)
            return httpx.Response(404)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client.calls = calls  # type: ignore[attr-defined]
        return client

    return factory


def profile_payload(avatar_url: str | None = AVATAR_URL) -> List[Dict]:
    body = {"username": "alice", "displayName": "Alice"}
    if avatar_url is not None:
        body["avatarUrl"] = avatar_url
    return [{"body": body, "connectedAddress": None}]
