"""LLM translation provider over an OpenAI-compatible chat API.

Defaults to Cerebras (https://api.cerebras.ai/v1). Any OpenAI-compatible
endpoint works by changing LLM_BASE_URL / LLM_MODEL.
All external calls are wrapped in asyncio.wait_for with the configured timeout.
"""

import asyncio
import re

import structlog
from openai import AsyncOpenAI

from lingorelay.core.exceptions import ProviderError, ProviderNotConfiguredError
from lingorelay.services.translation.base import AUTO, TranslationProvider

logger = structlog.get_logger(__name__)

_CODE_PATTERN = re.compile(r"^[a-z]{2,3}$")

_TRANSLATE_PROMPT = (
    "You are a translation engine. Translate the user's message {source_clause}"
    "into the language with ISO 639-1 code '{target}'. "
    "Reply with the translation only, without quotes or explanations."
)

_DETECT_PROMPT = (
    "Identify the language of the user's message. "
    "Reply with its ISO 639-1 code only, in lowercase."
)


class LLMTranslationProvider(TranslationProvider):
    """Translation and detection through a chat completion model."""

    name = "llm"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.cerebras.ai/v1",
        model: str = "llama3.1-8b",
        timeout: float = 15.0,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._timeout = timeout
        self._client = client
        if self._client is None and api_key:
            # max_retries=0: one attempt per call, the cascade owns fallback.
            self._client = AsyncOpenAI(api_key=api_key, base_url=base_url, max_retries=0)
        logger.info("llm_provider_initialized", model=model, configured=self.is_configured)

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def _complete(self, system_prompt: str, text: str) -> str:
        if self._client is None:
            raise ProviderNotConfiguredError("LLM_API_KEY is not set", provider=self.name)
        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._model,
                    messages=[
                        {"role": "system", "content": system_prompt},
                        {"role": "user", "content": text},
                    ],
                    temperature=0.0,
                ),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error("llm_completion_timeout", text_len=len(text))
            raise ProviderError("llm completion timed out", provider=self.name) from e
        except Exception as e:
            logger.error("llm_completion_failed", error=str(e), model=self._model)
            raise ProviderError(f"llm completion failed: {e}", provider=self.name) from e

        try:
            content = response.choices[0].message.content
        except (IndexError, AttributeError) as e:
            raise ProviderError("llm response has no choices", provider=self.name) from e
        if not isinstance(content, str):
            raise ProviderError("llm response missing content", provider=self.name)
        return content

    async def translate_once(self, text: str, source: str, target: str) -> str:
        self.check_supported(source, target)
        source_clause = "" if source == AUTO else f"from the language with ISO 639-1 code '{source}' "
        prompt = _TRANSLATE_PROMPT.format(source_clause=source_clause, target=target)
        translated = await self._complete(prompt, text)
        logger.debug("llm_translate_ok", source=source, target=target, text_len=len(text))
        return translated

    async def detect(self, text: str) -> str:
        answer = (await self._complete(_DETECT_PROMPT, text)).strip().strip(".").lower()
        if not _CODE_PATTERN.match(answer):
            raise ProviderError(f"llm detection returned {answer!r}", provider=self.name)
        return answer

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
