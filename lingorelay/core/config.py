"""Application configuration via pydantic-settings.

All values loaded from .env file at the project root.
The .env file takes precedence over OS-level environment variables
so stale system env vars never shadow the project config.
Comma-separated settings are exposed as parsed list properties.
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

# Resolve .env from project root (two levels up from this file: lingorelay/core/config.py → project root)
_ENV_FILE = Path(__file__).resolve().parents[2] / ".env"


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Central application settings. .env file wins over OS env vars."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Override source priority: .env file > OS env vars > defaults."""
        return (init_settings, dotenv_settings, env_settings, file_secret_settings)

    # --- Languages ---
    supported_languages: str = "zh,en,ja,th,ko,vi,fr,de,es"
    pivot_language: str = "en"

    # --- Providers (priority order) ---
    provider_order: str = "libretranslate,mymemory,llm"
    detection_order: str = "libretranslate,langdetect"
    provider_timeout_seconds: float = 15.0

    libretranslate_endpoints: str = "https://libretranslate.de"
    libretranslate_api_key: str = ""
    # Codes the instances accept; empty accepts any.
    libretranslate_languages: str = ""

    mymemory_endpoint: str = "https://api.mymemory.translated.net"
    mymemory_email: str = ""
    mymemory_languages: str = ""

    llm_api_key: str = ""
    llm_base_url: str = "https://api.cerebras.ai/v1"
    llm_model: str = "llama3.1-8b"

    # --- LINE messaging ---
    line_channel_token: str = ""
    line_channel_secret: str = ""
    line_api_base: str = "https://api.line.me"

    # --- Pair store ---
    pair_store: str = "memory"
    redis_url: str = "redis://localhost:6379/0"

    # --- App ---
    app_env: str = "development"
    log_level: str = "INFO"
    fallback_marker: str = "[untranslated] "

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def supported_language_set(self) -> frozenset[str]:
        return frozenset(code.lower() for code in _split_csv(self.supported_languages))

    @property
    def provider_names(self) -> list[str]:
        return [name.lower() for name in _split_csv(self.provider_order)]

    @property
    def detection_provider_names(self) -> list[str]:
        return [name.lower() for name in _split_csv(self.detection_order)]

    @property
    def libretranslate_endpoint_list(self) -> list[str]:
        """LibreTranslate base URLs in priority order, without trailing slashes."""
        return [url.rstrip("/") for url in _split_csv(self.libretranslate_endpoints)]


    @property
    def libretranslate_language_set(self) -> frozenset[str]:
        return frozenset(code.lower() for code in _split_csv(self.libretranslate_languages))

    @property
    def mymemory_language_set(self) -> frozenset[str]:
        return frozenset(code.lower() for code in _split_csv(self.mymemory_languages))

settings = Settings()
