"""FastAPI application entrypoint.

All routes prefixed /v1. Auto-generated OpenAPI docs at /docs.

The provider cascade, language detector, translation session, pair store,
LINE messaging client and relay service are created once during the lifespan
and stored on app.state for injection via Depends().
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lingorelay.api.v1.health import router as health_router
from lingorelay.api.v1.pairs import router as pairs_router
from lingorelay.api.v1.translate import router as translate_router
from lingorelay.api.v1.webhook import router as webhook_router
from lingorelay.core.config import settings
from lingorelay.core.exceptions import LingoRelayError
from lingorelay.db.redis import RedisClient, create_redis
from lingorelay.services.commands import CommandHandler
from lingorelay.services.language.detector import LanguageDetector
from lingorelay.services.language.session import TranslationSession
from lingorelay.services.messaging import LineMessagingClient
from lingorelay.services.pairs import InMemoryPairStore, PairStore, RedisPairStore
from lingorelay.services.relay import RelayService
from lingorelay.services.translation.cascade import CascadeResolver
from lingorelay.services.translation.registry import (
    build_detection_providers,
    build_translation_providers,
)


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


def _build_pair_store() -> PairStore:
    if settings.pair_store == "redis":
        return RedisPairStore(RedisClient(create_redis(settings.redis_url)))
    if settings.pair_store != "memory":
        logger.warning("unknown_pair_store_using_memory", pair_store=settings.pair_store)
    return InMemoryPairStore()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    Builds the provider lists in configured priority order and wires the
    translation pipeline. Every provider and HTTP client is closed on shutdown.
    """
    # --- Startup ---
    logger.info("app_startup", env=settings.app_env)

    translation_providers = build_translation_providers(settings)
    detection_providers = build_detection_providers(settings, translation_providers)

    cascade = CascadeResolver(translation_providers, pivot_language=settings.pivot_language)
    session = TranslationSession(
        detector=LanguageDetector(detection_providers),
        cascade=cascade,
        fallback_marker=settings.fallback_marker,
    )
    store = _build_pair_store()
    messenger = LineMessagingClient(
        channel_token=settings.line_channel_token,
        api_base=settings.line_api_base,
    )

    app.state.provider_names = cascade.provider_names
    app.state.translation_session = session
    app.state.pair_store = store
    app.state.relay_service = RelayService(
        store=store,
        commands=CommandHandler(store, settings.supported_language_set),
        session=session,
        messenger=messenger,
    )

    logger.info("app_providers_ready", providers=cascade.provider_names)
    yield

    # --- Shutdown ---
    logger.info("app_shutdown")

    # Detection providers may share instances with the cascade.
    unique = {id(p): p for p in [*translation_providers, *detection_providers]}
    for provider in unique.values():
        await provider.aclose()
    await messenger.aclose()
    await store.close()


app = FastAPI(
    title="LingoRelay — Bilingual Chat Relay",
    description="Relays chat messages between two languages through a cascade of translation providers.",
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(LingoRelayError)
async def lingorelay_error_handler(request: Request, exc: LingoRelayError) -> JSONResponse:
    """Structured error response for all LingoRelay exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


# Mount all v1 routers
app.include_router(health_router, prefix="/v1")
app.include_router(webhook_router, prefix="/v1")
app.include_router(pairs_router, prefix="/v1")
app.include_router(translate_router, prefix="/v1")
