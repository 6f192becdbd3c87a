# memberfy/pipeline/profile.py
from __future__ import annotations
import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from ..config import settings
from .types import SearchcasterProfile

log = logging.getLogger("memberfy.profile")


class ProfileLookupError(RuntimeError):
    pass


async def fetch_avatar_url(client: httpx.AsyncClient, fid: str) -> Optional[str]:
    """Ищем профиль по fid в Searchcaster и достаём body.avatarUrl первого результата."""
    log.info(f"[Profile] -> GET {settings.PROFILE_SEARCH_URL} fid={fid}")
    r = await client.get(settings.PROFILE_SEARCH_URL, params={"fid": fid})
    if not r.is_success:
        raise ProfileLookupError(f"Failed to fetch profile for fid {fid}: HTTP status {r.status_code}")

    data = r.json()
    if not isinstance(data, list) or not data:
        log.warning(f"[Profile] user not found fid={fid}")
        return None

    try:
        profile = SearchcasterProfile.model_validate(data[0])
    except ValidationError as e:
        log.warning(f"[Profile] unexpected profile shape fid={fid}: {e}")
        return None

    avatar_url = profile.body.avatarUrl if profile.body else None
    if not avatar_url:
        log.warning(f"[Profile] avatar URL not found fid={fid}")
        return None
    return avatar_url


def proxied_avatar_url(avatar_url: str) -> str:
    # ресайз-прокси сам приводит аватарку к 500px JPEG
    return f"{settings.AVATAR_PROXY_URL}{avatar_url}"
