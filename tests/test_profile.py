# tests/test_profile.py
import pytest

from memberfy.config import settings
from memberfy.pipeline.profile import ProfileLookupError, fetch_avatar_url, proxied_avatar_url

from conftest import AVATAR_URL, profile_payload


@pytest.mark.asyncio
async def test_avatar_url_from_first_profile(mock_client_factory):
    client = mock_client_factory(profiles=profile_payload() + profile_payload("https://other/x.png"))
    async with client:
        assert await fetch_avatar_url(client, "3") == AVATAR_URL
    assert client.calls == [f"{settings.PROFILE_SEARCH_URL}?fid=3"]

@pytest.mark.asyncio
@pytest.mark.parametrize("profiles", [
    [],
    {"error": "not a list"},
    [{}],
    [{"body": None}],
    [{"body": {"avatarUrl": ""}}],
    profile_payload(avatar_url=None),
])
async def test_missing_avatar_returns_none(mock_client_factory, profiles):
    client = mock_client_factory(profiles=profiles)
    async with client:
        assert await fetch_avatar_url(client, "3") is None

@pytest.mark.asyncio
async def test_lookup_http_error_raises(mock_client_factory):
    client = mock_client_factory(profile_status=503)
    async with client:
        with pytest.raises(ProfileLookupError, match="503"):
            await fetch_avatar_url(client, "3")

def test_proxied_avatar_url():
    assert proxied_avatar_url(AVATAR_URL) == settings.AVATAR_PROXY_URL + AVATAR_URL
