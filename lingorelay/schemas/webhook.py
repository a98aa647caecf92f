"""LINE webhook request schemas.

Only the fields the relay reads are modelled; everything else is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class EventSource(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str = "user"
    user_id: str | None = Field(default=None, alias="userId")


class EventMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str
    text: str | None = None


class WebhookEvent(BaseModel):
    """A single webhook event (message, follow, postback, ...)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str
    reply_token: str | None = Field(default=None, alias="replyToken")
    source: EventSource | None = None
    message: EventMessage | None = None


class WebhookRequest(BaseModel):
    """POST /v1/webhook request body."""

    model_config = ConfigDict(extra="ignore")

    destination: str | None = None
    events: list[WebhookEvent] = []


class WebhookResponse(BaseModel):
    """POST /v1/webhook response body: one status per event, in input order."""

    results: list[str]
