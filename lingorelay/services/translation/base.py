"""Abstract translation provider interface and outcome types.

All provider adapters must inherit from TranslationProvider.
Business logic never imports a concrete adapter directly: the ordered
provider list is built once in the FastAPI lifespan (see registry.py)
and handed to the LanguageDetector and CascadeResolver.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Union

from lingorelay.core.exceptions import ProviderError

AUTO = "auto"


def normalize_code(code: str | None) -> str:
    """Lowercase a provider language code and strip any region suffix ("zh-CN" → "zh")."""
    if not code:
        return ""
    return code.strip().lower().replace("_", "-").split("-", 1)[0]


def normalize_whitespace(text: str) -> str:
    return " ".join(text.split())


def is_usable(original: str, candidate: str | None) -> bool:
    """A translation is usable when it is non-empty and not an echo of its input.

    Comparison is done on trimmed, whitespace-collapsed strings so providers
    that return the input untouched (instead of failing) are caught.
    """
    if candidate is None:
        return False
    normalized = normalize_whitespace(candidate)
    if not normalized:
        return False
    return normalized != normalize_whitespace(original)


@dataclass(frozen=True)
class Translated:
    """A usable translation and the provider that produced it."""

    text: str
    provider: str | None = None


class _Unresolved:
    """Sentinel type: no provider produced a usable translation."""

    _instance: "_Unresolved | None" = None

    def __new__(cls) -> "_Unresolved":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNRESOLVED"

    def __bool__(self) -> bool:
        return False


UNRESOLVED = _Unresolved()

TranslationOutcome = Union[Translated, _Unresolved]


class DetectionProvider(ABC):
    """Anything that can guess the language of a text."""

    name: str = "provider"

    @abstractmethod
    async def detect(self, text: str) -> str:
        """Return the detected language code.

        Raises:
            ProviderError: If the call fails or the response has no candidate.
        """
        ...

    async def aclose(self) -> None:
        """Release network resources. Default: nothing to release."""
        return None


class TranslationProvider(DetectionProvider):
    """Abstract base class for translation backends.

    Subclasses make exactly one attempt per call with a fixed timeout.
    Retrying is the CascadeResolver's job, never the adapter's.
    """

    name: str = "provider"
    # Codes accepted as source or target. Empty means the adapter accepts any
    # code; set from LIBRETRANSLATE_LANGUAGES / MYMEMORY_LANGUAGES.
    capabilities: frozenset[str] = frozenset()

    @property
    def is_configured(self) -> bool:
        """False when required credentials are missing; the cascade skips the adapter."""
        return True

    def supports(self, source: str, target: str) -> bool:
        if not self.capabilities:
            return True
        if source != AUTO and source not in self.capabilities:
            return False
        return target in self.capabilities

    def check_supported(self, source: str, target: str) -> None:
        if not self.supports(source, target):
            raise ProviderError(
                f"{self.name} does not support {source}->{target}",
                provider=self.name,
            )

    @abstractmethod
    async def translate_once(self, text: str, source: str, target: str) -> str:
        """Translate text once and return the provider's text verbatim.

        Args:
            text: The text to translate.
            source: Source language code, or AUTO to let the provider detect it.
            target: Concrete target language code.

        Returns:
            The raw translated text, whitespace untouched.

        Raises:
            ProviderError: On transport error, timeout, non-2xx status or a
                response missing the translated-text field.
        """
        ...

    async def detect(self, text: str) -> str:
        raise ProviderError(f"{self.name} does not support detection", provider=self.name)
