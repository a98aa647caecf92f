"""Shared pytest fixtures for the LingoRelay test suite.

Provides:
  - StubProvider: scripted TranslationProvider keyed by (source, target)
  - StubDetector: scripted DetectionProvider
  - MockRedisClient: RedisClient with in-memory dict storage
  - MockMessenger: LineMessagingClient stand-in recording replies
  - sample_pair: LanguagePair(mine="zh", friend="en")

All external service calls are faked in every test — no network access.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from lingorelay.core.exceptions import MessagingError, ProviderError
from lingorelay.services.commands import Reply
from lingorelay.services.pairs import LanguagePair
from lingorelay.services.translation.base import DetectionProvider, TranslationProvider

SUPPORTED = frozenset({"zh", "en", "ja", "th", "ko", "vi", "fr", "de", "es"})


# ---------------------------------------------------------------------------
# Stub translation provider
# ---------------------------------------------------------------------------


class StubProvider(TranslationProvider):
    """Provider whose answers are scripted per (source, target).

    A scripted value that is an Exception is raised instead of returned.
    Unscripted directions raise ProviderError, or return ``default`` if given.
    """

    def __init__(
        self,
        name: str = "stub",
        responses: dict[tuple[str, str], Any] | None = None,
        default: Any = None,
        configured: bool = True,
        detection: Any = None,
    ) -> None:
        self.name = name
        self._responses = responses or {}
        self._default = default
        self._configured = configured
        self._detection = detection
        self.calls: list[tuple[str, str, str]] = []
        self.detect_calls: list[str] = []
        self.closed = False

    @property
    def is_configured(self) -> bool:
        return self._configured

    async def translate_once(self, text: str, source: str, target: str) -> str:
        self.calls.append((text, source, target))
        value = self._responses.get((source, target), self._default)
        if value is None:
            raise ProviderError(f"{self.name} has no answer", provider=self.name)
        if isinstance(value, Exception):
            raise value
        return value

    async def detect(self, text: str) -> str:
        self.detect_calls.append(text)
        if self._detection is None:
            return await super().detect(text)
        if isinstance(self._detection, Exception):
            raise self._detection
        return self._detection

    async def aclose(self) -> None:
        self.closed = True


class StubDetector(DetectionProvider):
    """Detection provider returning a fixed code or raising."""

    def __init__(self, result: Any, name: str = "stub-detector") -> None:
        self.name = name
        self._result = result
        self.calls: list[str] = []

    async def detect(self, text: str) -> str:
        self.calls.append(text)
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


# ---------------------------------------------------------------------------
# Mock Redis Client
# ---------------------------------------------------------------------------


class MockRedisClient:
    """In-memory mock of RedisClient for testing."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self.closed = False

    async def get(self, key: str) -> str | None:
        return self._store.get(key)

    async def set_json(self, key: str, value: Any) -> None:
        self._store[key] = json.dumps(value)

    async def get_json(self, key: str) -> Any | None:
        raw = self._store.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    async def close(self) -> None:
        self.closed = True


# ---------------------------------------------------------------------------
# Mock messenger
# ---------------------------------------------------------------------------


class MockMessenger:
    """Records replies instead of calling the LINE API."""

    def __init__(self, fail: bool = False) -> None:
        self.replies: list[tuple[str, Reply]] = []
        self._fail = fail

    async def reply(self, reply_token: str, reply: Reply) -> None:
        if self._fail:
            raise MessagingError("LINE reply returned HTTP 500")
        self.replies.append((reply_token, reply))

    async def aclose(self) -> None:
        return None


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def supported() -> frozenset[str]:
    return SUPPORTED


@pytest.fixture
def sample_pair() -> LanguagePair:
    """The canonical zh ↔ en pair."""
    return LanguagePair(mine="zh", friend="en")


@pytest.fixture
def mock_redis() -> MockRedisClient:
    return MockRedisClient()


@pytest.fixture
def mock_messenger() -> MockMessenger:
    return MockMessenger()
