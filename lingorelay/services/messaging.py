"""LINE reply transport and outbound chunking.

A reply carries at most MAX_MESSAGES_PER_REPLY text messages of at most
MAX_MESSAGE_LENGTH characters each. Empty text is never sent.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from lingorelay.core.exceptions import MessagingError
from lingorelay.services.commands import Reply

logger = structlog.get_logger(__name__)

MAX_MESSAGE_LENGTH = 5000
MAX_MESSAGES_PER_REPLY = 5
EMPTY_PLACEHOLDER = "(empty result)"
_ELLIPSIS = "…"
_TIMEOUT_SECONDS = 10


def chunk_text(
    text: str,
    limit: int = MAX_MESSAGE_LENGTH,
    max_chunks: int = MAX_MESSAGES_PER_REPLY,
) -> list[str]:
    """Split text into at most ``max_chunks`` pieces of at most ``limit`` characters.

    Prefers breaking at the last newline inside each window. Overflow beyond
    the final chunk is truncated with an ellipsis.
    """
    if not text:
        return [EMPTY_PLACEHOLDER]

    chunks: list[str] = []
    remaining = text
    while remaining and len(chunks) < max_chunks:
        if len(remaining) <= limit:
            chunks.append(remaining)
            remaining = ""
            break
        cut = remaining.rfind("\n", 0, limit)
        if cut <= 0:
            cut = limit
        chunks.append(remaining[:cut])
        remaining = remaining[cut:].lstrip("\n")

    if remaining:
        last = chunks[-1]
        chunks[-1] = last[: limit - len(_ELLIPSIS)] + _ELLIPSIS
    return chunks


def build_messages(reply: Reply) -> list[dict[str, Any]]:
    """LINE text message objects for a reply; the quick reply rides on the last one."""
    messages: list[dict[str, Any]] = [
        {"type": "text", "text": chunk} for chunk in chunk_text(reply.text)
    ]
    if reply.quick_reply:
        messages[-1]["quickReply"] = reply.quick_reply
    return messages


class LineMessagingClient:
    """POSTs replies to the LINE Messaging API."""

    def __init__(
        self,
        channel_token: str,
        api_base: str = "https://api.line.me",
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token = channel_token
        self._api_base = api_base.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=_TIMEOUT_SECONDS)

    async def reply(self, reply_token: str, reply: Reply) -> None:
        """Send a reply. Raises MessagingError on any delivery failure."""
        payload = {"replyToken": reply_token, "messages": build_messages(reply)}
        try:
            response = await self._client.post(
                f"{self._api_base}/v2/bot/message/reply",
                json=payload,
                headers={"Authorization": f"Bearer {self._token}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "line_reply_rejected",
                status_code=e.response.status_code,
                body=e.response.text[:200],
            )
            raise MessagingError(f"LINE reply returned HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error("line_reply_failed", error=str(e))
            raise MessagingError(f"LINE reply failed: {e}") from e
        logger.debug("line_reply_sent", message_count=len(payload["messages"]))

    async def aclose(self) -> None:
        await self._client.aclose()
