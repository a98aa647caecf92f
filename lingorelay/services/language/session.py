"""Translation session facade — the single entry point for translating a chat message.

IMPORTANT: translate_for_user() never raises and never returns an empty
string. On total failure it returns the original text behind the configured
fallback marker; callers treat that as degraded success, not an error.

Pipeline:
1. LanguageDetector.detect()
2. resolve_target() from the user's pair
3. Same-language short circuit (original text, byte-for-byte)
4. CascadeResolver.resolve()
5. Translation, or the marked original on UNRESOLVED / unexpected error
"""

from __future__ import annotations

import structlog

from lingorelay.services.language.detector import LanguageDetector
from lingorelay.services.language.direction import resolve_target
from lingorelay.services.pairs import LanguagePair
from lingorelay.services.translation.base import Translated
from lingorelay.services.translation.cascade import CascadeResolver

logger = structlog.get_logger(__name__)

EMPTY_PLACEHOLDER = "(empty result)"


class TranslationSession:
    """Composes detection, direction and the provider cascade."""

    def __init__(
        self,
        detector: LanguageDetector,
        cascade: CascadeResolver,
        fallback_marker: str = "[untranslated] ",
    ) -> None:
        self._detector = detector
        self._cascade = cascade
        self._fallback_marker = fallback_marker

    def _fallback(self, raw_text: str) -> str:
        return f"{self._fallback_marker}{raw_text}" or EMPTY_PLACEHOLDER

    async def translate_for_user(self, pair: LanguagePair, raw_text: str) -> str:
        if not raw_text:
            return EMPTY_PLACEHOLDER
        try:
            detected = await self._detector.detect(raw_text)
            target = resolve_target(pair, detected)
            if detected == target:
                logger.debug("same_language_short_circuit", language=detected)
                return raw_text

            outcome = await self._cascade.resolve(raw_text, detected, target)
            if isinstance(outcome, Translated) and outcome.text:
                logger.info(
                    "message_translated",
                    source=detected,
                    target=target,
                    provider=outcome.provider,
                )
                return outcome.text
            logger.warning("translation_unresolved", source=detected, target=target)
        except Exception as e:
            logger.error("translation_pipeline_failed", error=str(e))
        return self._fallback(raw_text)
