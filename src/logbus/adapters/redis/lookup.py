"""Redis adapter – RedisCodeLookup."""
from __future__ import annotations

from typing import Any


def _require_redis() -> Any:
    try:
        import redis.asyncio as aioredis
        return aioredis
    except ImportError as exc:
        raise ImportError("Install 'logbus[redis]' to use the Redis adapter") from exc


class RedisCodeLookup:
    """Resolve symbolic error codes with Redis ``GET``.

    Parameters
    ----------
    url:
        Redis connection URL, e.g. ``redis://localhost:6379/0``.
    key_prefix:
        Prepended to every symbolic code before the lookup
        (``"codes:"`` + ``"ERR_DISK"``).
    """

    def __init__(self, url: str, *, key_prefix: str = "", **kwargs: Any) -> None:
        aioredis = _require_redis()
        self._client = aioredis.from_url(url, **kwargs)
        self._prefix = key_prefix

    async def get(self, key: str) -> str | None:
        raw = await self._client.get(f"{self._prefix}{key}")
        if isinstance(raw, bytes):
            return raw.decode()
        return raw

    async def close(self) -> None:
        await self._client.aclose()


__all__ = ["RedisCodeLookup"]
