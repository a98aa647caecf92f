"""Builds the ordered provider lists from settings.

Ordering is a deployment decision (PROVIDER_ORDER / DETECTION_ORDER),
never computed at runtime. Unknown names are logged and ignored.
"""

from __future__ import annotations

import structlog

from lingorelay.core.config import Settings
from lingorelay.services.language.langdetect_provider import LangdetectProvider
from lingorelay.services.translation.base import DetectionProvider, TranslationProvider
from lingorelay.services.translation.libretranslate import LibreTranslateProvider
from lingorelay.services.translation.llm import LLMTranslationProvider
from lingorelay.services.translation.mymemory import MyMemoryProvider

logger = structlog.get_logger(__name__)


def _build_libretranslate(settings: Settings) -> list[TranslationProvider]:
    providers: list[TranslationProvider] = []
    for index, url in enumerate(settings.libretranslate_endpoint_list):
        name = "libretranslate" if index == 0 else f"libretranslate-{index + 1}"
        providers.append(
            LibreTranslateProvider(
                base_url=url,
                api_key=settings.libretranslate_api_key,
                timeout=settings.provider_timeout_seconds,
                name=name,
                languages=settings.libretranslate_language_set,
            )
        )
    return providers


def build_translation_providers(settings: Settings) -> list[TranslationProvider]:
    """Instantiate translation providers in PROVIDER_ORDER."""
    providers: list[TranslationProvider] = []
    for name in settings.provider_names:
        if name == "libretranslate":
            providers.extend(_build_libretranslate(settings))
        elif name == "mymemory":
            providers.append(
                MyMemoryProvider(
                    base_url=settings.mymemory_endpoint,
                    email=settings.mymemory_email,
                    timeout=settings.provider_timeout_seconds,
                    languages=settings.mymemory_language_set,
                )
            )
        elif name == "llm":
            providers.append(
                LLMTranslationProvider(
                    api_key=settings.llm_api_key,
                    base_url=settings.llm_base_url,
                    model=settings.llm_model,
                    timeout=settings.provider_timeout_seconds,
                )
            )
        else:
            logger.warning("unknown_translation_provider", name=name)
    return providers


def build_detection_providers(
    settings: Settings, translation_providers: list[TranslationProvider]
) -> list[DetectionProvider]:
    """Detection providers in DETECTION_ORDER.

    Network-backed detectors reuse the already-built translation adapters
    (and their HTTP clients) when present in the cascade.
    """
    by_name = {p.name: p for p in translation_providers}
    providers: list[DetectionProvider] = []
    for name in settings.detection_provider_names:
        if name == "langdetect":
            providers.append(LangdetectProvider())
        elif name == "libretranslate":
            existing = [p for p in translation_providers if isinstance(p, LibreTranslateProvider)]
            providers.extend(existing or _build_libretranslate(settings))
        elif name == "llm":
            llm = by_name.get("llm")
            if llm is None:
                llm = LLMTranslationProvider(
                    api_key=settings.llm_api_key,
                    base_url=settings.llm_base_url,
                    model=settings.llm_model,
                    timeout=settings.provider_timeout_seconds,
                )
            if isinstance(llm, LLMTranslationProvider) and llm.is_configured:
                providers.append(llm)
        else:
            logger.warning("unknown_detection_provider", name=name)
    return providers
