"""LibreTranslate provider implementation.

POST {base}/translate  {q, source, target, format: "text"} → {"translatedText": ...}
POST {base}/detect     {q}                                 → [{"language", "confidence"}, ...]

Every call is a single attempt bounded by the configured timeout.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from lingorelay.core.exceptions import ProviderError
from lingorelay.services.translation.base import TranslationProvider

logger = structlog.get_logger(__name__)

_HEADERS = {"Content-Type": "application/json"}


class LibreTranslateProvider(TranslationProvider):
    """A LibreTranslate instance reachable at ``base_url``."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 15.0,
        name: str = "libretranslate",
        client: httpx.AsyncClient | None = None,
        languages: frozenset[str] = frozenset(),
    ) -> None:
        self.name = name
        self.capabilities = languages
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)
        logger.info("libretranslate_provider_initialized", name=name, base_url=self._base_url)

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        if self._api_key:
            payload = {**payload, "api_key": self._api_key}
        url = f"{self._base_url}{path}"
        try:
            response = await self._client.post(
                url, json=payload, headers=_HEADERS, timeout=self._timeout
            )
            response.raise_for_status()
            return response.json()
        except httpx.TimeoutException as e:
            logger.warning("libretranslate_timeout", provider=self.name, path=path)
            raise ProviderError(f"{self.name} timed out", provider=self.name) from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "libretranslate_bad_status",
                provider=self.name,
                path=path,
                status_code=e.response.status_code,
            )
            raise ProviderError(
                f"{self.name} returned HTTP {e.response.status_code}", provider=self.name
            ) from e
        except httpx.HTTPError as e:
            logger.warning("libretranslate_transport_error", provider=self.name, error=str(e))
            raise ProviderError(f"{self.name} request failed: {e}", provider=self.name) from e
        except ValueError as e:
            logger.warning("libretranslate_invalid_json", provider=self.name, path=path)
            raise ProviderError(f"{self.name} returned invalid JSON", provider=self.name) from e

    async def translate_once(self, text: str, source: str, target: str) -> str:
        self.check_supported(source, target)
        data = await self._post(
            "/translate",
            {"q": text, "source": source, "target": target, "format": "text"},
        )
        translated = data.get("translatedText") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise ProviderError(
                f"{self.name} response missing translatedText", provider=self.name
            )
        logger.debug(
            "libretranslate_translate_ok",
            provider=self.name,
            source=source,
            target=target,
            text_len=len(text),
        )
        return translated

    async def detect(self, text: str) -> str:
        data = await self._post("/detect", {"q": text})
        # Ranked by confidence; the first entry is the best guess.
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            raise ProviderError(f"{self.name} returned no detection", provider=self.name)
        language = data[0].get("language")
        if not isinstance(language, str) or not language:
            raise ProviderError(f"{self.name} detection missing language", provider=self.name)
        return language

    async def aclose(self) -> None:
        await self._client.aclose()
