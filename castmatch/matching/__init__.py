from .engine import match_talents, score_candidates
from .eligibility import filter_eligible
from .normalize import normalize_age_label, normalize_gender
from .ranking import rank_talents
from .types import MatchBreakdown, ScoredTalent

__all__ = [
    "match_talents",
    "score_candidates",
    "filter_eligible",
    "normalize_age_label",
    "normalize_gender",
    "rank_talents",
    "MatchBreakdown",
    "ScoredTalent",
]
