"""User-facing configuration commands: /help, /my, /pair <mine> <friend>."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import AbstractSet, Any

import structlog

from lingorelay.core.exceptions import InvalidPairError
from lingorelay.services.pairs import PairStore, build_pair

logger = structlog.get_logger(__name__)

_PAIR_PATTERN = re.compile(r"^/pair\s+(\w+)\s+(\w+)$", re.IGNORECASE)

QUICK_REPLY_PAIRS: list[tuple[str, str, str]] = [
    ("Chinese↔English", "zh", "en"),
    ("Chinese↔Japanese", "zh", "ja"),
    ("Chinese↔Thai", "zh", "th"),
    ("Chinese↔Korean", "zh", "ko"),
    ("Chinese↔Vietnamese", "zh", "vi"),
    ("English↔Japanese", "en", "ja"),
]

HELP_TEXT = "\n".join(
    [
        "🧭 How to use:",
        "1) Pick your languages first: tap a menu option below or type `/pair zh en`",
        "   - zh=Chinese, en=English, ja=Japanese, th=Thai, ko=Korean, vi=Vietnamese, "
        "fr=French, de=German, es=Spanish",
        "2) Then just chat. Messages are translated both ways automatically.",
        "3) Commands:",
        "   /pair <mine> <friend>  e.g. /pair zh en",
        "   /my  show your current language pair",
        "   /help  show this help",
    ]
)

FIRST_USE_TEXT = (
    "Please choose a language pair first (you ↔ friend).\n"
    "For example, type: `/pair zh en`"
)


def quick_reply() -> dict[str, Any]:
    """LINE quick-reply menu with one /pair action per common pair."""
    return {
        "items": [
            {
                "type": "action",
                "action": {"type": "message", "label": label, "text": f"/pair {a} {b}"},
            }
            for label, a, b in QUICK_REPLY_PAIRS
        ]
    }


@dataclass
class Reply:
    """Outbound text plus an optional quick-reply menu."""

    text: str
    quick_reply: dict[str, Any] | None = field(default=None)


class CommandHandler:
    """Handles configuration commands against the pair store."""

    def __init__(self, store: PairStore, supported: AbstractSet[str]) -> None:
        self._store = store
        self._supported = supported

    async def handle(self, user_id: str, text: str) -> Reply | None:
        """Return a reply for a command, or None when text is not a command."""
        command = text.strip()
        lowered = command.lower()

        if lowered == "/help":
            return Reply(text=HELP_TEXT, quick_reply=quick_reply())

        if lowered == "/my":
            pair = await self._store.get(user_id)
            if pair is None:
                message = "No language pair set yet. Type `/pair zh en` or pick one below."
            else:
                message = f"Current language pair: you={pair.mine}, friend={pair.friend}"
            return Reply(text=message, quick_reply=quick_reply())

        match = _PAIR_PATTERN.match(command)
        if match:
            try:
                pair = build_pair(match.group(1), match.group(2), self._supported)
            except InvalidPairError:
                return Reply(
                    text="Unsupported language code. Supported: "
                    + ", ".join(sorted(self._supported)),
                    quick_reply=quick_reply(),
                )
            await self._store.set(user_id, pair)
            logger.info("pair_set", user_id=user_id, mine=pair.mine, friend=pair.friend)
            return Reply(
                text=f"Language pair set: you={pair.mine}, friend={pair.friend}\nStart chatting!"
            )

        return None
