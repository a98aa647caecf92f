"""Per-user language pairs and their stores.

A pair is created on the first /pair command, overwritten on re-pairing and
never deleted automatically. The in-memory store loses pairs on restart;
the Redis store keeps them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import AbstractSet

import structlog

from lingorelay.core.exceptions import InvalidPairError
from lingorelay.db.redis import RedisClient

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LanguagePair:
    """A user's (mine, friend) language mapping."""

    mine: str
    friend: str

    def to_dict(self) -> dict[str, str]:
        return {"mine": self.mine, "friend": self.friend}


def build_pair(mine: str, friend: str, supported: AbstractSet[str]) -> LanguagePair:
    """Validate both codes against the supported set and build a pair.

    Raises:
        InvalidPairError: If either code is not supported.
    """
    mine = mine.strip().lower()
    friend = friend.strip().lower()
    unsupported = [code for code in (mine, friend) if code not in supported]
    if unsupported:
        raise InvalidPairError(
            f"Unsupported language code(s): {', '.join(unsupported)}. "
            f"Supported: {', '.join(sorted(supported))}"
        )
    return LanguagePair(mine=mine, friend=friend)


class PairStore(ABC):
    """Key-value association from user id to LanguagePair."""

    @abstractmethod
    async def get(self, user_id: str) -> LanguagePair | None:
        ...

    @abstractmethod
    async def set(self, user_id: str, pair: LanguagePair) -> None:
        ...

    async def close(self) -> None:
        return None


class InMemoryPairStore(PairStore):
    """Process-lifetime dict store."""

    def __init__(self) -> None:
        self._pairs: dict[str, LanguagePair] = {}

    async def get(self, user_id: str) -> LanguagePair | None:
        return self._pairs.get(user_id)

    async def set(self, user_id: str, pair: LanguagePair) -> None:
        self._pairs[user_id] = pair


class RedisPairStore(PairStore):
    """Pairs persisted as JSON under ``pair:{user_id}`` with no expiry."""

    def __init__(self, redis: RedisClient) -> None:
        self._redis = redis

    def _key(self, user_id: str) -> str:
        return f"pair:{user_id}"

    async def get(self, user_id: str) -> LanguagePair | None:
        data = await self._redis.get_json(self._key(user_id))
        if not isinstance(data, dict):
            return None
        try:
            return LanguagePair(mine=data["mine"], friend=data["friend"])
        except KeyError:
            logger.warning("pair_record_malformed", user_id=user_id)
            return None

    async def set(self, user_id: str, pair: LanguagePair) -> None:
        await self._redis.set_json(self._key(user_id), pair.to_dict())
        logger.debug("pair_saved", user_id=user_id, mine=pair.mine, friend=pair.friend)

    async def close(self) -> None:
        await self._redis.close()
