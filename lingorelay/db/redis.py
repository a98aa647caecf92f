"""Redis async client for persisted language pairs.

Provides helper methods wrapping raw Redis commands so callers never need
to handle redis.exceptions directly. All connection/command errors are
caught and re-raised as StoreConnectionError.
"""

import json
from typing import Any

import structlog
from redis.asyncio import Redis
from redis.asyncio import from_url as redis_from_url
from redis.exceptions import RedisError

from lingorelay.core.exceptions import StoreConnectionError

logger = structlog.get_logger(__name__)


def create_redis(url: str) -> Redis:
    """Build a pooled client. No connection is opened until the first command."""
    return redis_from_url(url, decode_responses=True, encoding="utf-8")


class RedisClient:
    """Thin wrapper over redis.asyncio.Redis with typed helpers.

    Every public method catches RedisError and re-raises as
    StoreConnectionError so the API layer gets a structured error.
    """

    def __init__(self, client: Redis) -> None:
        self._r = client

    async def get(self, key: str) -> str | None:
        """GET a key. Returns None if the key does not exist."""
        try:
            return await self._r.get(name=key)
        except RedisError as e:
            logger.error("redis_get_failed", key=key, error=str(e))
            raise StoreConnectionError(f"Redis GET failed: {e}") from e

    async def set_json(self, key: str, value: Any) -> None:
        """Serialize value to JSON string and SET without expiry."""
        payload = json.dumps(value)
        try:
            await self._r.set(name=key, value=payload)
        except RedisError as e:
            logger.error("redis_set_json_failed", key=key, error=str(e))
            raise StoreConnectionError(f"Redis SET JSON failed: {e}") from e

    async def get_json(self, key: str) -> Any | None:
        """GET a key and deserialize from JSON. Returns None if key missing."""
        raw = await self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, TypeError):
            logger.warning("redis_json_decode_failed", key=key)
            return None

    async def close(self) -> None:
        """Gracefully close the Redis connection pool."""
        logger.info("redis_shutdown")
        await self._r.aclose()
