from __future__ import annotations

from typing import Any, FrozenSet, List, Optional, Sequence

from castmatch.models import AgeLabel, Gender, TalentProfile
from castmatch.matching.normalize import normalize_age_label, normalize_gender


def gender_compatible(role_gender: Gender, talent_gender: Gender) -> bool:
    return role_gender == Gender.ANY or role_gender == talent_gender


def age_compatible(allowed: FrozenSet[AgeLabel], talent_age: Optional[AgeLabel]) -> bool:
    # Empty set: the role did not constrain age.
    if not allowed:
        return True
    return talent_age in allowed


def is_eligible(role: Any, talent: TalentProfile) -> bool:
    return gender_compatible(
        normalize_gender(getattr(role, "gender", "")),
        normalize_gender(talent.gender),
    ) and age_compatible(
        normalize_age_label(getattr(role, "age_range", "")),
        talent.age_label,
    )


def filter_eligible(role: Any, talents: Sequence[TalentProfile]) -> List[TalentProfile]:
    """
    Strict gender AND age filter. `role` is anything with gender / age_range
    (RoleSpec or CastingRole). Input order is preserved.
    """
    role_gender = normalize_gender(getattr(role, "gender", ""))
    allowed_ages = normalize_age_label(getattr(role, "age_range", ""))

    out: List[TalentProfile] = []
    for t in talents:
        if not gender_compatible(role_gender, normalize_gender(t.gender)):
            continue
        if not age_compatible(allowed_ages, t.age_label):
            continue
        out.append(t)
    return out
