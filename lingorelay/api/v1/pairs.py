"""Language pair endpoints."""

from fastapi import APIRouter, Depends

from lingorelay.api.deps import get_pair_store, get_supported_languages
from lingorelay.core.exceptions import PairNotFoundError
from lingorelay.schemas.pair import PairResponse, PairUpdate
from lingorelay.services.pairs import PairStore, build_pair

router = APIRouter(prefix="/pairs", tags=["pairs"])


@router.get("/{user_id}", response_model=PairResponse)
async def get_pair(
    user_id: str,
    store: PairStore = Depends(get_pair_store),
) -> PairResponse:
    """Get a user's current language pair."""
    pair = await store.get(user_id)
    if pair is None:
        raise PairNotFoundError()
    return PairResponse(user_id=user_id, mine=pair.mine, friend=pair.friend)


@router.put("/{user_id}", response_model=PairResponse)
async def set_pair(
    user_id: str,
    body: PairUpdate,
    store: PairStore = Depends(get_pair_store),
    supported: frozenset[str] = Depends(get_supported_languages),
) -> PairResponse:
    """Create or overwrite a user's language pair."""
    pair = build_pair(body.mine, body.friend, supported)
    await store.set(user_id, pair)
    return PairResponse(user_id=user_id, mine=pair.mine, friend=pair.friend)
