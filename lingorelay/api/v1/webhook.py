"""Messaging webhook endpoint."""

from __future__ import annotations

import asyncio

import structlog
from fastapi import APIRouter, Depends
from pydantic import ValidationError

from lingorelay.api.deps import get_relay_service, verify_webhook_signature
from lingorelay.core.exceptions import LingoRelayError
from lingorelay.schemas.webhook import WebhookRequest, WebhookResponse
from lingorelay.services.relay import RelayService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/webhook", tags=["webhook"])


@router.post("", response_model=WebhookResponse)
async def receive_events(
    body: bytes = Depends(verify_webhook_signature),
    relay: RelayService = Depends(get_relay_service),
) -> WebhookResponse:
    """Handle every event in the batch concurrently.

    Events carry no ordering guarantee between each other. A failing event
    is reported as "error" without affecting the others.
    """
    try:
        payload = WebhookRequest.model_validate_json(body or b"{}")
    except ValidationError as e:
        logger.warning("webhook_payload_invalid", error=str(e))
        raise LingoRelayError(
            code="INVALID_PAYLOAD", message="Malformed webhook payload", status_code=400
        ) from e

    outcomes = await asyncio.gather(
        *(relay.handle_event(event) for event in payload.events),
        return_exceptions=True,
    )

    results: list[str] = []
    for event, outcome in zip(payload.events, outcomes):
        if isinstance(outcome, BaseException):
            logger.error("webhook_event_failed", event_type=event.type, error=str(outcome))
            results.append("error")
        else:
            results.append(outcome)
    logger.info("webhook_batch_handled", event_count=len(results))
    return WebhookResponse(results=results)
