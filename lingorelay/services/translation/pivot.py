"""Pivot translation around a single provider.

Direct translation first; if that fails or echoes the input, bridge through
a pivot language (English by default): source → pivot → target. The pivot
is skipped whenever it equals either endpoint.
"""

from __future__ import annotations

import structlog

from lingorelay.core.exceptions import ProviderError
from lingorelay.services.translation.base import (
    UNRESOLVED,
    Translated,
    TranslationOutcome,
    TranslationProvider,
    is_usable,
)

logger = structlog.get_logger(__name__)


class PivotTranslator:
    """Wraps one provider with a same-language short circuit and a pivot fallback."""

    def __init__(self, provider: TranslationProvider, pivot_language: str = "en") -> None:
        self._provider = provider
        self._pivot = pivot_language

    async def _attempt(self, text: str, source: str, target: str) -> str | None:
        """One provider call; a ProviderError becomes None."""
        try:
            return await self._provider.translate_once(text, source, target)
        except ProviderError as e:
            logger.warning(
                "provider_attempt_failed",
                provider=self._provider.name,
                source=source,
                target=target,
                error=e.message,
            )
            return None

    async def translate(self, text: str, source: str, target: str) -> TranslationOutcome:
        if source == target:
            return Translated(text=text, provider=None)

        direct = await self._attempt(text, source, target)
        if is_usable(text, direct):
            return Translated(text=direct, provider=self._provider.name)
        if direct is not None:
            logger.info(
                "provider_result_unusable",
                provider=self._provider.name,
                source=source,
                target=target,
            )

        if self._pivot in (source, target):
            return UNRESOLVED

        bridged = await self._attempt(text, source, self._pivot)
        if not is_usable(text, bridged):
            return UNRESOLVED

        final = await self._attempt(bridged, self._pivot, target)
        if is_usable(bridged, final) and is_usable(text, final):
            logger.info(
                "pivot_translation_ok",
                provider=self._provider.name,
                source=source,
                pivot=self._pivot,
                target=target,
            )
            return Translated(text=final, provider=self._provider.name)
        return UNRESOLVED
