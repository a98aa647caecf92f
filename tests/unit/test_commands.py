"""Unit tests for CommandHandler (/help, /my, /pair)."""

from __future__ import annotations

import pytest

from lingorelay.services.commands import HELP_TEXT, CommandHandler, quick_reply
from lingorelay.services.pairs import InMemoryPairStore, LanguagePair


@pytest.fixture
def store() -> InMemoryPairStore:
    return InMemoryPairStore()


@pytest.mark.asyncio
class TestCommandHandler:
    async def test_help(self, store: InMemoryPairStore, supported: frozenset[str]) -> None:
        reply = await CommandHandler(store, supported).handle("u1", "/help")
        assert reply is not None
        assert reply.text == HELP_TEXT
        assert reply.quick_reply == quick_reply()

    async def test_my_without_pair(
        self, store: InMemoryPairStore, supported: frozenset[str]
    ) -> None:
        reply = await CommandHandler(store, supported).handle("u1", "/my")
        assert reply is not None
        assert "/pair zh en" in reply.text
        assert reply.quick_reply is not None

    async def test_my_with_pair(self, store: InMemoryPairStore, supported: frozenset[str]) -> None:
        await store.set("u1", LanguagePair(mine="zh", friend="ja"))
        reply = await CommandHandler(store, supported).handle("u1", "/my")
        assert reply is not None
        assert "you=zh" in reply.text
        assert "friend=ja" in reply.text

    async def test_pair_sets_and_confirms(
        self, store: InMemoryPairStore, supported: frozenset[str]
    ) -> None:
        reply = await CommandHandler(store, supported).handle("u1", "/PAIR ZH En")
        assert reply is not None
        assert "you=zh, friend=en" in reply.text
        assert await store.get("u1") == LanguagePair(mine="zh", friend="en")

    async def test_repairing_overwrites(
        self, store: InMemoryPairStore, supported: frozenset[str]
    ) -> None:
        handler = CommandHandler(store, supported)
        await handler.handle("u1", "/pair zh en")
        await handler.handle("u1", "/pair ja ko")
        assert await store.get("u1") == LanguagePair(mine="ja", friend="ko")

    async def test_unsupported_code_rejected(
        self, store: InMemoryPairStore, supported: frozenset[str]
    ) -> None:
        reply = await CommandHandler(store, supported).handle("u1", "/pair zh xx")
        assert reply is not None
        assert reply.text.startswith("Unsupported language code.")
        assert await store.get("u1") is None

    async def test_plain_text_is_not_a_command(
        self, store: InMemoryPairStore, supported: frozenset[str]
    ) -> None:
        assert await CommandHandler(store, supported).handle("u1", "你好") is None

    async def test_malformed_pair_is_not_a_command(
        self, store: InMemoryPairStore, supported: frozenset[str]
    ) -> None:
        assert await CommandHandler(store, supported).handle("u1", "/pair zh") is None


def test_quick_reply_items_send_pair_commands() -> None:
    items = quick_reply()["items"]
    assert len(items) == 6
    assert items[0]["action"] == {
        "type": "message",
        "label": "Chinese↔English",
        "text": "/pair zh en",
    }
