"""Offline language detection with langdetect.

langdetect is synchronous and CPU-bound, so detection runs in a worker
thread to keep the event loop free. Its language profiles are loaded lazily
on first use and that load is not thread-safe, so the constructor loads them
eagerly on the calling thread before any detection is dispatched.
"""

import asyncio

import structlog
from langdetect import DetectorFactory, LangDetectException, detect
from langdetect.detector_factory import init_factory

from lingorelay.core.exceptions import ProviderError
from lingorelay.services.translation.base import DetectionProvider

logger = structlog.get_logger(__name__)

# langdetect is non-deterministic unless seeded.
DetectorFactory.seed = 0


class LangdetectProvider(DetectionProvider):
    name = "langdetect"

    def __init__(self) -> None:
        init_factory()
        logger.info("langdetect_profiles_loaded")

    async def detect(self, text: str) -> str:
        try:
            return await asyncio.to_thread(detect, text)
        except LangDetectException as e:
            logger.debug("langdetect_no_features", text_len=len(text))
            raise ProviderError(f"langdetect failed: {e}", provider=self.name) from e
