from __future__ import annotations

from typing import Any, List, Sequence

from castmatch.models import TalentProfile


def voice_keywords(voice_type: str) -> List[str]:
    """
    Lower-cased tokens of a role's voice type, split on single spaces.

    Punctuation is kept ("sereno,") and a double or trailing space yields an
    empty token, which every description contains.
    """
    return (voice_type or "").lower().split(" ")


def keyword_hits(keywords: Sequence[str], description: str) -> List[str]:
    desc = (description or "").lower()
    return [k for k in keywords if k in desc]


def relevance_score(voice_type: str, description: str) -> int:
    """1 if any voice-type token occurs inside the description, else 0."""
    return 1 if keyword_hits(voice_keywords(voice_type), description) else 0


def rank_talents(role: Any, talents: Sequence[TalentProfile]) -> List[TalentProfile]:
    # sorted() is stable: equal scores keep registry order.
    voice_type = getattr(role, "voice_type", "") or ""
    return sorted(
        talents,
        key=lambda t: relevance_score(voice_type, t.description),
        reverse=True,
    )
