# memberfy/config.py

from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s: %(message)s"

# =========================
# Переменные окружения / настройки приложения
# =========================
class Settings(BaseSettings):
    # ---- Внешние сервисы ----
    PROFILE_SEARCH_URL: str = "https://searchcaster.xyz/api/profiles"
    AVATAR_PROXY_URL: str = "https://res.cloudinary.com/merkle-manufactory/image/fetch/c_fill,f_jpg,w_500/"

    # ---- Retry / timeouts ----
    FETCH_RETRIES: int = 3          # сколько раз повторяем скачивание аватарки
    FETCH_BACKOFF_MS: int = 300     # первая пауза, дальше удваиваем
    TIMEOUT_SECONDS: int = 12

    # ---- Fallback ----
    FALLBACK_IMAGE_PATH: Optional[Path] = None   # PNG, который отдаём вместо 404
    FALLBACK_IMAGE_URL: str = "https://memberfy.vercel.app/member.png"
    PUBLIC_BASE_URL: str = "https://memberfy.vercel.app"

    # ---- Логи ----
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Глобальный инстанс настроек
settings = Settings()

logging.basicConfig(level=settings.LOG_LEVEL, format=LOG_FORMAT)
log = logging.getLogger("memberfy")
log.info(f"[Settings] PROFILE_SEARCH_URL={settings.PROFILE_SEARCH_URL}")
