"""Unit tests for RedisClient.

Tests:
  - JSON stored without expiry and read back
  - missing key → None
  - RedisError on read or write → StoreConnectionError
  - only the helpers the pair store uses are exposed
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from lingorelay.core.exceptions import StoreConnectionError
from lingorelay.db.redis import RedisClient


def _redis() -> MagicMock:
    r = MagicMock()
    r.get = AsyncMock(return_value=None)
    r.set = AsyncMock()
    r.aclose = AsyncMock()
    return r


@pytest.mark.asyncio
class TestRedisClient:
    async def test_set_json_without_expiry(self) -> None:
        r = _redis()
        await RedisClient(r).set_json("pair:u1", {"mine": "zh", "friend": "en"})
        r.set.assert_awaited_once_with(name="pair:u1", value='{"mine": "zh", "friend": "en"}')

    async def test_get_json_decodes(self) -> None:
        r = _redis()
        r.get.return_value = '{"mine": "zh"}'
        assert await RedisClient(r).get_json("pair:u1") == {"mine": "zh"}

    async def test_missing_key(self) -> None:
        assert await RedisClient(_redis()).get_json("pair:u1") is None

    async def test_garbage_value_reads_as_missing(self) -> None:
        r = _redis()
        r.get.return_value = "not json"
        assert await RedisClient(r).get_json("pair:u1") is None

    async def test_read_failure_wrapped(self) -> None:
        r = _redis()
        r.get.side_effect = RedisConnectionError("connection refused")
        with pytest.raises(StoreConnectionError) as exc_info:
            await RedisClient(r).get("pair:u1")
        assert exc_info.value.status_code == 503

    async def test_write_failure_wrapped(self) -> None:
        r = _redis()
        r.set.side_effect = RedisConnectionError("connection refused")
        with pytest.raises(StoreConnectionError):
            await RedisClient(r).set_json("pair:u1", {})

    async def test_close(self) -> None:
        r = _redis()
        await RedisClient(r).close()
        r.aclose.assert_awaited_once()

    async def test_no_unused_escape_hatches(self) -> None:
        client = RedisClient(_redis())
        assert not hasattr(client, "raw")
        assert not hasattr(client, "delete")
