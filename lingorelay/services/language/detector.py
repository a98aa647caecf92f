"""Language detection over an ordered list of detection providers."""

from __future__ import annotations

from typing import Sequence

import structlog

from lingorelay.core.exceptions import ProviderError
from lingorelay.services.translation.base import AUTO, DetectionProvider, normalize_code

logger = structlog.get_logger(__name__)


class LanguageDetector:
    """Returns the first non-empty code from the providers, or AUTO. Never raises."""

    def __init__(self, providers: Sequence[DetectionProvider]) -> None:
        self._providers = list(providers)

    async def detect(self, text: str) -> str:
        if not text or not text.strip():
            return AUTO
        for provider in self._providers:
            try:
                code = normalize_code(await provider.detect(text))
            except ProviderError as e:
                logger.warning("detection_failed", provider=provider.name, error=e.message)
                continue
            except Exception as e:
                logger.error("detection_unexpected_error", provider=provider.name, error=str(e))
                continue
            if code and code != AUTO:
                logger.debug("language_detected", provider=provider.name, language=code)
                return code
        logger.info("language_undetected", text_len=len(text))
        return AUTO
