from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from castmatch.models import TalentProfile


@dataclass(frozen=True)
class LoadedRoster:
    talents: List[TalentProfile]
    source: str  # "json" | "none"
    path: Optional[str] = None
    skipped: List[str] = field(default_factory=list)


def _entries(data: Any) -> List[Any]:
    if isinstance(data, dict):
        data = data.get("talents")
    if not isinstance(data, list):
        raise ValueError("Roster must be a list of talents or an object with a 'talents' list.")
    return data


def load_roster(path: Optional[str]) -> LoadedRoster:
    """
    Load a talent pool exported in the app's camelCase shape.

    Accepts either `[{...}, ...]` or `{"talents": [{...}, ...]}`.
    Best-effort: an unreadable file returns source='none' (caller falls back to
    seed data); individual bad entries are skipped and reported.
    File order is kept, since it is the ranker's tie-break.
    """
    if not path:
        return LoadedRoster(talents=[], source="none", path=None)

    p = Path(path)
    try:
        entries = _entries(json.loads(p.read_text(encoding="utf-8")))
    except (OSError, ValueError) as exc:
        print(f"[CastMatch] WARNING: could not read roster {p}: {exc}", file=sys.stderr)
        return LoadedRoster(talents=[], source="none", path=str(p))

    talents: List[TalentProfile] = []
    skipped: List[str] = []
    seen = set()
    for idx, entry in enumerate(entries):
        try:
            talent = TalentProfile.from_dict(entry)
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            skipped.append(f"#{idx}: {type(exc).__name__}: {exc}")
            continue
        if talent.id in seen:
            skipped.append(f"#{idx}: duplicate id {talent.id}")
            continue
        seen.add(talent.id)
        talents.append(talent)

    if skipped:
        print(f"[CastMatch] WARNING: skipped {len(skipped)} roster entries in {p}", file=sys.stderr)

    return LoadedRoster(talents=talents, source="json", path=str(p), skipped=skipped)
