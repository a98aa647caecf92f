"""Direct translation endpoint, bypassing the messaging transport."""

from fastapi import APIRouter, Depends

from lingorelay.api.deps import get_supported_languages, get_translation_session
from lingorelay.schemas.pair import TranslateRequest, TranslateResponse
from lingorelay.services.language.session import TranslationSession
from lingorelay.services.pairs import build_pair

router = APIRouter(prefix="/translate", tags=["translate"])


@router.post("", response_model=TranslateResponse)
async def translate(
    body: TranslateRequest,
    session: TranslationSession = Depends(get_translation_session),
    supported: frozenset[str] = Depends(get_supported_languages),
) -> TranslateResponse:
    """Translate text for an ad-hoc pair exactly as a chat message would be."""
    pair = build_pair(body.mine, body.friend, supported)
    text = await session.translate_for_user(pair, body.text)
    return TranslateResponse(text=text)
