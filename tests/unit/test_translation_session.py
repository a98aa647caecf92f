"""Unit tests for the TranslationSession facade.

Tests:
  - end-to-end zh → en through the first provider
  - friend's language routed back to mine
  - same-language short circuit: byte-for-byte, zero translation calls
  - total failure → marked original, never empty, never raises
  - unexpected exception inside the pipeline → marked original
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from lingorelay.core.exceptions import ProviderError
from lingorelay.services.language.detector import LanguageDetector
from lingorelay.services.language.session import EMPTY_PLACEHOLDER, TranslationSession
from lingorelay.services.pairs import LanguagePair
from lingorelay.services.translation.cascade import CascadeResolver
from tests.conftest import StubDetector, StubProvider


def _session(
    detected: object,
    providers: list[StubProvider],
    marker: str = "[untranslated] ",
) -> TranslationSession:
    return TranslationSession(
        detector=LanguageDetector([StubDetector(detected)]),
        cascade=CascadeResolver(providers, pivot_language="en"),
        fallback_marker=marker,
    )


@pytest.mark.asyncio
class TestTranslateForUser:
    async def test_end_to_end_mine_to_friend(self, sample_pair: LanguagePair) -> None:
        provider = StubProvider(name="a", responses={("zh", "en"): "Hello"})
        result = await _session("zh", [provider]).translate_for_user(sample_pair, "你好")
        assert result == "Hello"
        assert provider.calls == [("你好", "zh", "en")]

    async def test_friend_to_mine(self, sample_pair: LanguagePair) -> None:
        provider = StubProvider(responses={("en", "zh"): "你好"})
        result = await _session("en", [provider]).translate_for_user(sample_pair, "Hello")
        assert result == "你好"

    async def test_unknown_language_goes_to_friend(self, sample_pair: LanguagePair) -> None:
        provider = StubProvider(responses={("fr", "en"): "Hello"})
        result = await _session("fr", [provider]).translate_for_user(sample_pair, "Bonjour")
        assert result == "Hello"

    async def test_same_language_short_circuit(self) -> None:
        pair = LanguagePair(mine="zh", friend="zh")
        provider = StubProvider(default="should not be called")
        raw = "  你好\n"
        result = await _session("zh", [provider]).translate_for_user(pair, raw)
        assert result == raw
        assert provider.calls == []

    async def test_second_provider_used_when_first_fails(
        self, sample_pair: LanguagePair
    ) -> None:
        a = StubProvider(name="a", default=ProviderError("HTTP 503"))
        b = StubProvider(name="b", default="Hello")
        result = await _session("zh", [a, b]).translate_for_user(sample_pair, "你好")
        assert result == "Hello"
        assert len(a.calls) == 1

    async def test_total_failure_returns_marked_original(
        self, sample_pair: LanguagePair
    ) -> None:
        providers = [
            StubProvider(name="a", default=ProviderError("down")),
            StubProvider(name="b", default=ProviderError("down")),
        ]
        result = await _session(ProviderError("down"), providers).translate_for_user(
            sample_pair, "你好"
        )
        assert result == "[untranslated] 你好"

    async def test_total_failure_without_marker_returns_original(
        self, sample_pair: LanguagePair
    ) -> None:
        provider = StubProvider(default=ProviderError("down"))
        result = await _session("zh", [provider], marker="").translate_for_user(
            sample_pair, "你好"
        )
        assert result == "你好"

    async def test_echoing_providers_fall_back(self, sample_pair: LanguagePair) -> None:
        provider = StubProvider(default="你好")
        result = await _session("zh", [provider]).translate_for_user(sample_pair, "你好")
        assert result == "[untranslated] 你好"

    async def test_unexpected_exception_is_contained(
        self, sample_pair: LanguagePair
    ) -> None:
        cascade = MagicMock(spec=CascadeResolver)
        cascade.resolve = AsyncMock(side_effect=RuntimeError("boom"))
        session = TranslationSession(
            detector=LanguageDetector([StubDetector("zh")]),
            cascade=cascade,
        )
        result = await session.translate_for_user(sample_pair, "你好")
        assert result == "[untranslated] 你好"

    async def test_empty_input_never_returns_empty(self, sample_pair: LanguagePair) -> None:
        result = await _session("zh", []).translate_for_user(sample_pair, "")
        assert result == EMPTY_PLACEHOLDER
