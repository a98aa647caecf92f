"""Cascade resolver — ordered, first-success-wins provider fallback.

Providers are tried strictly in configured priority order, one at a time,
each wrapped in a PivotTranslator. No parallel fan-out, no voting and no
failure state kept between calls: every call starts again from the top.
"""

from __future__ import annotations

from typing import Sequence

import structlog

from lingorelay.core.exceptions import ProviderError
from lingorelay.services.translation.base import (
    UNRESOLVED,
    Translated,
    TranslationOutcome,
    TranslationProvider,
)
from lingorelay.services.translation.pivot import PivotTranslator

logger = structlog.get_logger(__name__)


class CascadeResolver:
    """Tries each provider until one yields a usable translation."""

    def __init__(
        self,
        providers: Sequence[TranslationProvider],
        pivot_language: str = "en",
    ) -> None:
        self._providers = list(providers)
        self._pivot_language = pivot_language
        logger.info(
            "cascade_resolver_initialized",
            providers=[p.name for p in self._providers],
            pivot=pivot_language,
        )

    @property
    def provider_names(self) -> list[str]:
        return [p.name for p in self._providers]

    async def resolve(self, text: str, source: str, target: str) -> TranslationOutcome:
        for provider in self._providers:
            if not provider.is_configured:
                logger.debug("provider_skipped_not_configured", provider=provider.name)
                continue
            try:
                outcome = await PivotTranslator(provider, self._pivot_language).translate(
                    text, source, target
                )
            except ProviderError as e:
                logger.warning("provider_unavailable", provider=provider.name, error=e.message)
                continue
            if isinstance(outcome, Translated):
                logger.debug(
                    "cascade_resolved",
                    provider=outcome.provider,
                    source=source,
                    target=target,
                )
                return outcome
            logger.info("provider_unresolved", provider=provider.name, source=source, target=target)

        logger.warning("cascade_exhausted", source=source, target=target, text_len=len(text))
        return UNRESOLVED
