from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from castmatch.models import TalentProfile


@dataclass(frozen=True)
class MatchBreakdown:
    role_gender: str
    talent_gender: str
    allowed_age_labels: List[str]
    talent_age_range: str
    keyword_hits: List[str]
    relevance: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role_gender": self.role_gender,
            "talent_gender": self.talent_gender,
            "allowed_age_labels": list(self.allowed_age_labels),
            "talent_age_range": self.talent_age_range,
            "keyword_hits": list(self.keyword_hits),
            "relevance": self.relevance,
        }


@dataclass(frozen=True)
class ScoredTalent:
    talent: TalentProfile
    score: int
    breakdown: MatchBreakdown
