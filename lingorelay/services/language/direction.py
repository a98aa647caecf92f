"""Translation direction for a user's language pair."""

from __future__ import annotations

from lingorelay.services.pairs import LanguagePair


def resolve_target(pair: LanguagePair, detected_source: str) -> str:
    """Pick the target language for a message in ``detected_source``.

    mine → friend, friend → mine. Anything else (AUTO or a third language)
    defaults to friend: an unclassified message is assumed to come from the
    user and is relayed outward. That default is a routing policy, not a
    detection result, and can misroute under-detected messages in the
    friend's language.
    """
    if detected_source == pair.mine:
        return pair.friend
    if detected_source == pair.friend:
        return pair.mine
    return pair.friend
