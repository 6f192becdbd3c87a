# tests/test_generate.py
import base64

import httpx
import pytest

from memberfy.config import settings
from memberfy.pipeline import generate as gen
from memberfy.pipeline.variants import get_variant

from conftest import cairo_available, profile_payload

HAT = get_variant("custom_hat")
MEMBER = get_variant("custom_member")


@pytest.fixture
def captured_svg(monkeypatch):
    """Подменяем растеризацию: отдаём SVG как есть, чтобы проверить подстановку."""
    seen = []

    def fake_svg_to_png(svg: str) -> bytes:
        seen.append(svg)
        return b"\x89PNG-fake"

    monkeypatch.setattr(gen, "svg_to_png", fake_svg_to_png)
    return seen


@pytest.mark.asyncio
async def test_hat_pipeline_uses_cell_colors(mock_client_factory, avatar_png, captured_svg):
    client = mock_client_factory(
        profiles=profile_payload(),
        avatar_responses=[httpx.Response(200, content=avatar_png)],
    )
    async with client:
        png = await gen.generate_image("1234", HAT, http_client=client)

    assert png == b"\x89PNG-fake"
    svg = captured_svg[0]
    # клетка (1, 3) -> индекс 28 в тестовой картинке
    assert 'stop-color="rgb(28, 56, 227)"' in svg
    assert 'fill="#855DCD"' in svg
    assert "/image/fetch/" in client.calls[1]
    assert client.calls[1].endswith("avatar.png")

@pytest.mark.asyncio
async def test_member_pipeline_downsamples(mock_client_factory, avatar_png, captured_svg):
    client = mock_client_factory(
        profiles=profile_payload(),
        avatar_responses=[httpx.Response(429), httpx.Response(200, content=avatar_png)],
    )
    async with client:
        png = await gen.generate_image("20001", MEMBER, http_client=client)

    assert png is not None
    assert "COLOR" not in captured_svg[0]
    assert len(client.calls) == 3   # профиль + 429 + успешная попытка

@pytest.mark.asyncio
async def test_no_avatar_url_returns_none(mock_client_factory, captured_svg):
    client = mock_client_factory(profiles=profile_payload(avatar_url=None))
    async with client:
        assert await gen.generate_image("7", HAT, http_client=client) is None
    assert len(client.calls) == 1
    assert captured_svg == []

@pytest.mark.asyncio
async def test_unknown_user_returns_none(mock_client_factory):
    client = mock_client_factory(profiles=[])
    async with client:
        assert await gen.generate_image("7", HAT, http_client=client) is None

@pytest.mark.asyncio
async def test_profile_http_error_returns_none(mock_client_factory):
    client = mock_client_factory(profile_status=500)
    async with client:
        assert await gen.generate_image("7", HAT, http_client=client) is None

@pytest.mark.asyncio
async def test_download_exhausted_returns_none(mock_client_factory):
    client = mock_client_factory(
        profiles=profile_payload(),
        avatar_responses=[httpx.Response(429)] * 10,
    )
    async with client:
        assert await gen.generate_image("7", HAT, http_client=client) is None
    assert len(client.calls) == 1 + settings.FETCH_RETRIES + 1

@pytest.mark.asyncio
async def test_undecodable_avatar_returns_none(mock_client_factory):
    client = mock_client_factory(
        profiles=profile_payload(),
        avatar_responses=[httpx.Response(200, content=b"<html>oops</html>")],
    )
    async with client:
        assert await gen.generate_image("7", HAT, http_client=client) is None

@pytest.mark.asyncio
async def test_empty_fid_skips_network(monkeypatch):
    def no_client():
        raise AssertionError("network must not be touched")

    monkeypatch.setattr(gen, "_make_client", no_client)
    assert await gen.generate_image("", HAT) is None

@pytest.mark.asyncio
async def test_owns_client_when_none_passed(monkeypatch, mock_client_factory):
    client = mock_client_factory(profiles=[])
    monkeypatch.setattr(gen, "_make_client", lambda: client)
    assert await gen.generate_image("7", HAT) is None
    assert client.is_closed

@pytest.mark.asyncio
async def test_frame_image_data_url(mock_client_factory, avatar_png, captured_svg):
    client = mock_client_factory(
        profiles=profile_payload(),
        avatar_responses=[httpx.Response(200, content=avatar_png)],
    )
    async with client:
        frame = await gen.generate_frame_image("99", MEMBER, http_client=client)

    assert frame.generated is True
    assert frame.src == "data:image/png;base64," + base64.b64encode(b"\x89PNG-fake").decode()
    assert frame.download_url == "https://memberfy.vercel.app/api/custom_member/99"

@pytest.mark.asyncio
async def test_frame_image_fallback(mock_client_factory):
    client = mock_client_factory(profiles=[])
    async with client:
        frame = await gen.generate_frame_image("99", MEMBER, http_client=client)
    assert frame.generated is False
    assert frame.src == settings.FALLBACK_IMAGE_URL
    assert frame.download_url == settings.FALLBACK_IMAGE_URL


@pytest.mark.skipif(not cairo_available(), reason="libcairo is not installed")
@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["custom_hat", "custom_member"])
async def test_real_render_produces_png(mock_client_factory, avatar_png, name):
    from io import BytesIO
    from PIL import Image

    variant = get_variant(name)
    client = mock_client_factory(
        profiles=profile_payload(),
        avatar_responses=[httpx.Response(200, content=avatar_png)],
    )
    async with client:
        png = await gen.generate_image("1", variant, http_client=client)

    assert png is not None and png.startswith(b"\x89PNG")
    with Image.open(BytesIO(png)) as im:
        assert im.size == ((1200, 1200) if name == "custom_hat" else (1024, 1024))
