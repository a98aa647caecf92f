"""Language pair and direct-translation request/response schemas."""

from pydantic import BaseModel, ConfigDict, Field


class PairUpdate(BaseModel):
    """PUT /v1/pairs/{user_id} request body."""

    model_config = ConfigDict(from_attributes=True)

    mine: str = Field(min_length=1)
    friend: str = Field(min_length=1)


class PairResponse(BaseModel):
    """GET/PUT /v1/pairs/{user_id} response body."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    mine: str
    friend: str


class TranslateRequest(BaseModel):
    """POST /v1/translate request body."""

    mine: str = Field(min_length=1)
    friend: str = Field(min_length=1)
    text: str = Field(min_length=1)


class TranslateResponse(BaseModel):
    """POST /v1/translate response body."""

    text: str
