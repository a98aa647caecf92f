"""MyMemory provider implementation.

GET {base}/get?q=...&langpair=src|tgt → {"responseData": {"translatedText": ...}, "responseStatus": 200}

MyMemory has no "auto" source; the Autodetect keyword is sent instead.
The API reports quota and validation failures in the body with HTTP 200,
so responseStatus is checked as well as the transport status.
"""

from __future__ import annotations

import httpx
import structlog

from lingorelay.core.exceptions import ProviderError
from lingorelay.services.translation.base import AUTO, TranslationProvider

logger = structlog.get_logger(__name__)

_AUTODETECT = "Autodetect"


class MyMemoryProvider(TranslationProvider):
    """MyMemory translated.net public API."""

    name = "mymemory"

    def __init__(
        self,
        base_url: str = "https://api.mymemory.translated.net",
        email: str = "",
        timeout: float = 15.0,
        client: httpx.AsyncClient | None = None,
        languages: frozenset[str] = frozenset(),
    ) -> None:
        self.capabilities = languages
        self._base_url = base_url.rstrip("/")
        self._email = email
        self._timeout = timeout
        self._client = client or httpx.AsyncClient(timeout=timeout)
        logger.info("mymemory_provider_initialized", base_url=self._base_url)

    async def translate_once(self, text: str, source: str, target: str) -> str:
        self.check_supported(source, target)
        src = _AUTODETECT if source == AUTO else source
        params = {"q": text, "langpair": f"{src}|{target}"}
        if self._email:
            params["de"] = self._email
        try:
            response = await self._client.get(
                f"{self._base_url}/get", params=params, timeout=self._timeout
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as e:
            logger.warning("mymemory_timeout", source=source, target=target)
            raise ProviderError("mymemory timed out", provider=self.name) from e
        except httpx.HTTPStatusError as e:
            logger.warning("mymemory_bad_status", status_code=e.response.status_code)
            raise ProviderError(
                f"mymemory returned HTTP {e.response.status_code}", provider=self.name
            ) from e
        except httpx.HTTPError as e:
            logger.warning("mymemory_transport_error", error=str(e))
            raise ProviderError(f"mymemory request failed: {e}", provider=self.name) from e
        except ValueError as e:
            raise ProviderError("mymemory returned invalid JSON", provider=self.name) from e

        if not isinstance(payload, dict):
            raise ProviderError("mymemory returned an unexpected body", provider=self.name)
        status = payload.get("responseStatus")
        if str(status) != "200":
            logger.warning("mymemory_rejected", response_status=status)
            raise ProviderError(f"mymemory responseStatus {status}", provider=self.name)
        translated = (payload.get("responseData") or {}).get("translatedText")
        if not isinstance(translated, str):
            raise ProviderError("mymemory response missing translatedText", provider=self.name)
        logger.debug("mymemory_translate_ok", source=source, target=target, text_len=len(text))
        return translated

    async def aclose(self) -> None:
        await self._client.aclose()
