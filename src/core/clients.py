"""Lazy-initialized HTTP client: reused across warm Lambda invocations."""

from functools import lru_cache

import httpx

from core.config import get_config


@lru_cache(maxsize=1)
def get_http_client() -> httpx.Client:
    config = get_config()
    return httpx.Client(
        timeout=config.http_timeout_seconds,
        headers={"User-Agent": config.user_agent},
    )
