# tests/test_fetch.py
import httpx
import pytest

from memberfy.pipeline.fetch import FetchError, fetch_with_retry

URL = "https://proxy.example/avatar.jpg"


def _client(responses):
    """responses: список Response или Exception, по одному на попытку."""
    attempts = []

    def handler(request: httpx.Request) -> httpx.Response:
        attempts.append(request)
        item = responses[min(len(attempts), len(responses)) - 1]
        if isinstance(item, Exception):
            raise item
        return item

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return client, attempts


@pytest.mark.asyncio
async def test_returns_body_on_success():
    client, attempts = _client([httpx.Response(200, content=b"img")])
    async with client:
        assert await fetch_with_retry(client, URL, backoff_ms=0) == b"img"
    assert len(attempts) == 1

@pytest.mark.asyncio
async def test_retries_rate_limit_then_succeeds():
    client, attempts = _client([httpx.Response(429), httpx.Response(429), httpx.Response(200, content=b"ok")])
    async with client:
        assert await fetch_with_retry(client, URL, retries=3, backoff_ms=0) == b"ok"
    assert len(attempts) == 3

@pytest.mark.asyncio
async def test_stops_after_configured_retries_and_raises_last_error():
    client, attempts = _client([httpx.Response(429)])
    async with client:
        with pytest.raises(FetchError) as ei:
            await fetch_with_retry(client, URL, retries=3, backoff_ms=0)
    assert ei.value.status == 429
    assert len(attempts) == 4

@pytest.mark.asyncio
async def test_transport_errors_are_retried():
    boom = httpx.ConnectError("connection refused")
    client, attempts = _client([boom, httpx.Response(200, content=b"late")])
    async with client:
        assert await fetch_with_retry(client, URL, retries=2, backoff_ms=0) == b"late"
    assert len(attempts) == 2

@pytest.mark.asyncio
async def test_transport_error_reraised_when_exhausted():
    client, attempts = _client([httpx.ConnectError("down")])
    async with client:
        with pytest.raises(httpx.ConnectError):
            await fetch_with_retry(client, URL, retries=1, backoff_ms=0)
    assert len(attempts) == 2

@pytest.mark.asyncio
async def test_zero_retries_means_single_attempt():
    client, attempts = _client([httpx.Response(500)])
    async with client:
        with pytest.raises(FetchError, match="HTTP status 500"):
            await fetch_with_retry(client, URL, retries=0, backoff_ms=0)
    assert len(attempts) == 1

@pytest.mark.asyncio
async def test_backoff_doubles(monkeypatch):
    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr("memberfy.pipeline.fetch.asyncio.sleep", fake_sleep)
    client, _ = _client([httpx.Response(429)])
    async with client:
        with pytest.raises(FetchError):
            await fetch_with_retry(client, URL, retries=3, backoff_ms=300)
    assert delays == [0.3, 0.6, 1.2]
