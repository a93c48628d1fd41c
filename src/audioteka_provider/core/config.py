from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Audioteka Provider"
    api_host: str = "0.0.0.0"
    api_port: int = 3001
    debug: bool = False

    base_url: str = "https://audioteka.com"
    search_url: str = "https://audioteka.com/pl/search"
    language: str = "pol"

    # None disables the outbound timeout entirely.
    provider_timeout: Optional[float] = None
    max_concurrency: int = 5
    user_agent: str = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"
    cors_origins: List[str] = ["*"]

    class Config:
        env_prefix = "ATK_"
        env_file = ".env"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
