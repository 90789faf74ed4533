from __future__ import annotations

from typing import FrozenSet, Optional, Sequence, Tuple

from castmatch.models import AgeLabel, Gender

# Checked in order: female first, so "woman" (which contains "man") stays female.
_FEMALE_HINTS = ("fem", "mujer", "woman", "chica", "niña")
_MALE_HINTS = ("masc", "hombre", "man", "chico", "niño")

# First group with a hit wins. Numerals are plain substrings ("15", "20", ...).
_AGE_GROUPS: Sequence[Tuple[Tuple[str, ...], AgeLabel]] = (
    (("niñ", "child", "kid", "5-10"), AgeLabel.CHILD),
    (("adol", "teen", "oven", "12-18", "15"), AgeLabel.TEEN),
    (("20", "veinte", "twenty"), AgeLabel.TWENTIES),
    (("30", "treinta", "thirty"), AgeLabel.THIRTIES),
    (("40", "cuarenta", "forty"), AgeLabel.FORTIES),
    (("50", "cincuenta", "fifty"), AgeLabel.FIFTIES),
    (("60", "sesenta", "sixty", "senior", "anciano", "abuel"), AgeLabel.SENIOR),
)

_ADULT_HINTS = ("adult",)  # also covers "adulto" / "adulta"
ADULT_AGE_LABELS: FrozenSet[AgeLabel] = frozenset(
    {AgeLabel.TWENTIES, AgeLabel.THIRTIES, AgeLabel.FORTIES, AgeLabel.FIFTIES}
)


def _contains_any(text: str, hints: Sequence[str]) -> bool:
    return any(h in text for h in hints)


def normalize_gender(raw: Optional[str]) -> Gender:
    """
    Map free-text gender ("Femenino", "Male voice", "Cualquiera", ...) to a Gender.
    Unknown or empty input is Gender.ANY.
    """
    if not raw:
        return Gender.ANY
    lower = raw.lower()
    if _contains_any(lower, _FEMALE_HINTS):
        return Gender.FEMALE
    if _contains_any(lower, _MALE_HINTS):
        return Gender.MALE
    return Gender.ANY


def normalize_age_label(raw: Optional[str]) -> FrozenSet[AgeLabel]:
    """
    Map free-text age ("niño de 7 años", "30-40", "adulto", ...) to the canonical
    labels it allows.

    - a specific keyword yields exactly one label
    - "adult" alone fans out to the four middle decades
    - no hit yields an empty set, which the eligibility filter reads as "no constraint"
    """
    if not raw:
        return frozenset()
    lower = raw.lower()
    for hints, label in _AGE_GROUPS:
        if _contains_any(lower, hints):
            return frozenset({label})
    if _contains_any(lower, _ADULT_HINTS):
        return ADULT_AGE_LABELS
    return frozenset()
