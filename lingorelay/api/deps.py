"""Shared FastAPI dependencies — service injection and webhook auth.

Providers, the translation session, the pair store and the relay service are
created once during the FastAPI lifespan and stored on app.state. All
downstream code retrieves them via Depends() — never by direct import.
"""

import structlog
from fastapi import Header, Request

from lingorelay.core.config import settings
from lingorelay.core.exceptions import InvalidSignatureError
from lingorelay.core.security import verify_signature
from lingorelay.services.language.session import TranslationSession
from lingorelay.services.pairs import PairStore
from lingorelay.services.relay import RelayService

logger = structlog.get_logger(__name__)


# ---------------------------------------------------------------------------
# Service singletons — retrieved from app.state (set during lifespan)
# ---------------------------------------------------------------------------

def get_pair_store(request: Request) -> PairStore:
    """Return the singleton pair store from app state."""
    return request.app.state.pair_store


def get_translation_session(request: Request) -> TranslationSession:
    """Return the singleton translation session facade from app state."""
    return request.app.state.translation_session


def get_relay_service(request: Request) -> RelayService:
    """Return the singleton relay service from app state."""
    return request.app.state.relay_service


def get_supported_languages() -> frozenset[str]:
    return settings.supported_language_set


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------

async def verify_webhook_signature(
    request: Request,
    x_line_signature: str | None = Header(default=None, alias="X-Line-Signature"),
) -> bytes:
    """Check X-Line-Signature against the raw body and return the body.

    Without a configured channel secret the check is skipped outside
    production, so local tools can post unsigned events.
    """
    body = await request.body()
    secret = settings.line_channel_secret
    if not secret:
        if settings.is_production:
            raise InvalidSignatureError("LINE_CHANNEL_SECRET is not configured")
        logger.warning("webhook_signature_check_skipped")
        return body
    if not verify_signature(body, x_line_signature, secret):
        raise InvalidSignatureError()
    return body
