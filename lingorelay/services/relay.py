"""Relay service — turns one webhook event into one reply.

handle_event() does exactly these things in order:
1. Ignore anything that is not a text message with a reply token and a user id
2. Configuration commands (/help, /my, /pair) → command reply
3. No stored pair → first-use prompt
4. TranslationSession.translate_for_user() → translated reply

Reply delivery failures are logged and reported in the status string;
they never raise, so one bad event cannot fail a whole webhook batch.
Pair store failures during steps 2-3 get an apology reply instead of silence.
"""

from __future__ import annotations

import structlog

from lingorelay.core.exceptions import LingoRelayError, MessagingError
from lingorelay.schemas.webhook import WebhookEvent
from lingorelay.services.commands import FIRST_USE_TEXT, CommandHandler, Reply, quick_reply
from lingorelay.services.language.session import TranslationSession
from lingorelay.services.messaging import LineMessagingClient
from lingorelay.services.pairs import PairStore

logger = structlog.get_logger(__name__)

UNAVAILABLE_TEXT = "⚠️ Translation is temporarily unavailable, please try again later. Type /help for usage."


class RelayService:
    """Routes inbound chat events to commands or translation."""

    def __init__(
        self,
        store: PairStore,
        commands: CommandHandler,
        session: TranslationSession,
        messenger: LineMessagingClient,
    ) -> None:
        self._store = store
        self._commands = commands
        self._session = session
        self._messenger = messenger

    async def _send(self, reply_token: str, reply: Reply, status: str) -> str:
        try:
            await self._messenger.reply(reply_token, reply)
        except MessagingError as e:
            logger.error("relay_reply_failed", status=status, error=e.message)
            return "reply_failed"
        return status

    async def handle_event(self, event: WebhookEvent) -> str:
        if (
            event.type != "message"
            or event.message is None
            or event.message.type != "text"
            or not event.reply_token
        ):
            return "ignored"

        if event.source is None or not event.source.user_id:
            return "ignored"

        user_id = event.source.user_id
        text = (event.message.text or "").strip()

        try:
            command_reply = await self._commands.handle(user_id, text)
            pair = None if command_reply is not None else await self._store.get(user_id)
        except LingoRelayError as e:
            logger.error("relay_store_failed", code=e.code, error=e.message)
            return await self._send(event.reply_token, Reply(text=UNAVAILABLE_TEXT), "unavailable")

        if command_reply is not None:
            return await self._send(event.reply_token, command_reply, "command")

        if pair is None:
            return await self._send(
                event.reply_token,
                Reply(text=FIRST_USE_TEXT, quick_reply=quick_reply()),
                "unpaired",
            )

        translated = await self._session.translate_for_user(pair, text)
        return await self._send(event.reply_token, Reply(text=translated), "translated")
