from __future__ import annotations

from typing import Any, List, Sequence

from castmatch.config import MATCH_PAGE_SIZE
from castmatch.models import AgeLabel, TalentProfile
from castmatch.matching.eligibility import filter_eligible
from castmatch.matching.normalize import normalize_age_label, normalize_gender
from castmatch.matching.ranking import keyword_hits, rank_talents, voice_keywords
from castmatch.matching.types import MatchBreakdown, ScoredTalent


def match_talents(role: Any, talents: Sequence[TalentProfile], limit: int = MATCH_PAGE_SIZE) -> List[TalentProfile]:
    """
    Candidate list for one role: eligible talents, relevant ones first, capped.

    Pure over its inputs; callers pass a repository snapshot, never live state.
    """
    return rank_talents(role, filter_eligible(role, talents))[: max(0, limit)]


def score_candidates(role: Any, talents: Sequence[TalentProfile], limit: int = MATCH_PAGE_SIZE) -> List[ScoredTalent]:
    """Same ordering as match_talents, with the reasons attached."""
    role_gender = normalize_gender(getattr(role, "gender", ""))
    allowed = normalize_age_label(getattr(role, "age_range", ""))
    allowed_labels = [a.value for a in AgeLabel if a in allowed]
    keywords = voice_keywords(getattr(role, "voice_type", ""))

    out: List[ScoredTalent] = []
    for t in match_talents(role, talents, limit=limit):
        hits = keyword_hits(keywords, t.description)
        score = 1 if hits else 0
        out.append(
            ScoredTalent(
                talent=t,
                score=score,
                breakdown=MatchBreakdown(
                    role_gender=role_gender.value,
                    talent_gender=normalize_gender(t.gender).value,
                    allowed_age_labels=allowed_labels,
                    talent_age_range=t.age_range,
                    keyword_hits=hits,
                    relevance=score,
                ),
            )
        )
    return out
