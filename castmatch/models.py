from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class UserRole(str, Enum):
    MANAGER = "MANAGER"
    CLIENT = "CLIENT"
    TALENT = "TALENT"


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"
    ANY = "any"


class AgeLabel(str, Enum):
    """
    Canonical age ranges. Talent records carry one of these values verbatim;
    free-text role ages are mapped onto them by the normalizer.
    """
    CHILD = "Niño (5-10)"
    TEEN = "Adolescente (12-18)"
    TWENTIES = "20-30"
    THIRTIES = "30-40"
    FORTIES = "40-50"
    FIFTIES = "50-60"
    SENIOR = "60+"

    @classmethod
    def from_label(cls, text: Optional[str]) -> Optional["AgeLabel"]:
        for label in cls:
            if label.value == text:
                return label
        return None


class ProjectStatus(str, Enum):
    DRAFT = "draft"
    OPEN = "open"
    REVIEW = "review"
    COMPLETED = "completed"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_iso_datetime(value: str) -> datetime:
    # fromisoformat only accepts a trailing "Z" from Python 3.11 on.
    text = (value or "").strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def normalize_whitespace(text: str) -> str:
    return " ".join((text or "").split()).strip()


def _clean_list(items: Optional[List[str]]) -> List[str]:
    return [normalize_whitespace(s) for s in items or [] if normalize_whitespace(s)]


@dataclass(frozen=True)
class DemoRecording:
    title: str
    url: str
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "url": self.url, "tags": list(self.tags)}


@dataclass(frozen=True)
class TalentProfile:
    """
    A voice performer available for casting.

    `gender` keeps the registry's free-text value ("Masculino", "Femenino", ...);
    use castmatch.matching.normalize to read it as a Gender.
    """
    id: str
    name: str
    email: str
    gender: str
    age_range: str
    description: str

    demos: List[DemoRecording] = field(default_factory=list)
    languages: List[str] = field(default_factory=list)
    regular_brands: List[str] = field(default_factory=list)  # voice of the brand
    past_brands: List[str] = field(default_factory=list)     # one-off jobs
    dubbing_actors: List[str] = field(default_factory=list)
    rating: float = 0.0
    avatar_url: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", normalize_whitespace(self.name))
        object.__setattr__(self, "email", (self.email or "").strip())
        object.__setattr__(self, "age_range", normalize_whitespace(self.age_range))
        object.__setattr__(self, "languages", _clean_list(self.languages))
        object.__setattr__(self, "regular_brands", _clean_list(self.regular_brands))
        object.__setattr__(self, "past_brands", _clean_list(self.past_brands))
        object.__setattr__(self, "dubbing_actors", _clean_list(self.dubbing_actors))
        object.__setattr__(self, "rating", float(self.rating))

    @property
    def age_label(self) -> Optional[AgeLabel]:
        return AgeLabel.from_label(self.age_range)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": UserRole.TALENT.value,
            "avatarUrl": self.avatar_url,
            "gender": self.gender,
            "ageRange": self.age_range,
            "description": self.description,
            "demos": [d.to_dict() for d in self.demos],
            "languages": list(self.languages),
            "regularBrands": list(self.regular_brands),
            "pastBrands": list(self.past_brands),
            "dubbingActors": list(self.dubbing_actors),
            "rating": self.rating,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TalentProfile":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            email=data.get("email", ""),
            gender=data.get("gender", ""),
            age_range=data.get("ageRange", ""),
            description=data.get("description", ""),
            demos=[
                DemoRecording(title=d["title"], url=d["url"], tags=list(d.get("tags") or []))
                for d in data.get("demos") or []
            ],
            languages=list(data.get("languages") or []),
            regular_brands=list(data.get("regularBrands") or []),
            past_brands=list(data.get("pastBrands") or []),
            dubbing_actors=list(data.get("dubbingActors") or []),
            rating=float(data.get("rating") or 0.0),
            avatar_url=data.get("avatarUrl"),
        )


# Wire names of the five fields every generated role must carry.
ROLE_SPEC_FIELDS = ("name", "description", "gender", "ageRange", "voiceType")


@dataclass(frozen=True)
class RoleSpec:
    """
    A voice requirement as produced by brief generation: no id, no selection.
    gender / age_range / voice_type are free text.
    """
    name: str
    description: str
    gender: str
    age_range: str
    voice_type: str

    @classmethod
    def from_dict(cls, data: Any) -> "RoleSpec":
        if not isinstance(data, dict):
            raise ValueError(f"Role must be an object, got {type(data).__name__}.")
        missing = [k for k in ROLE_SPEC_FIELDS if k not in data]
        if missing:
            raise ValueError(f"Role is missing required fields: {', '.join(missing)}.")
        bad = [k for k in ROLE_SPEC_FIELDS if not isinstance(data[k], str)]
        if bad:
            raise ValueError(f"Role fields must be strings: {', '.join(bad)}.")
        return cls(
            name=data["name"],
            description=data["description"],
            gender=data["gender"],
            age_range=data["ageRange"],
            voice_type=data["voiceType"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "gender": self.gender,
            "ageRange": self.age_range,
            "voiceType": self.voice_type,
        }


@dataclass(frozen=True)
class CastingRole:
    id: str
    name: str
    description: str
    gender: str
    age_range: str
    voice_type: str
    suggested_talent_ids: List[str] = field(default_factory=list)
    selected_talent_id: Optional[str] = None

    @classmethod
    def from_spec(
            cls,
            spec: RoleSpec,
            *,
            role_id: str,
            suggested_talent_ids: Optional[List[str]] = None,
            selected_talent_id: Optional[str] = None,
    ) -> "CastingRole":
        return cls(
            id=role_id,
            name=spec.name,
            description=spec.description,
            gender=spec.gender,
            age_range=spec.age_range,
            voice_type=spec.voice_type,
            suggested_talent_ids=list(suggested_talent_ids or []),
            selected_talent_id=selected_talent_id or None,
        )

    def with_selection(self, talent_id: Optional[str]) -> "CastingRole":
        return replace(self, selected_talent_id=talent_id or None)

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "gender": self.gender,
            "ageRange": self.age_range,
            "voiceType": self.voice_type,
        }
        if self.suggested_talent_ids:
            d["suggestedTalentIds"] = list(self.suggested_talent_ids)
        if self.selected_talent_id:
            d["selectedTalentId"] = self.selected_talent_id
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CastingRole":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description", ""),
            gender=data.get("gender", ""),
            age_range=data.get("ageRange", ""),
            voice_type=data.get("voiceType", ""),
            suggested_talent_ids=list(data.get("suggestedTalentIds") or []),
            selected_talent_id=data.get("selectedTalentId") or None,
        )


@dataclass(frozen=True)
class CastingProject:
    """
    A casting campaign. Only `status` and role selections change after creation,
    always through the repository (which swaps in a new instance).
    """
    id: str
    title: str
    client_id: str
    client_name: str
    status: ProjectStatus
    created_at: datetime
    description: str
    roles: List[CastingRole] = field(default_factory=list)
    brand: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", ProjectStatus(self.status))
        if self.created_at.tzinfo is None:
            object.__setattr__(self, "created_at", self.created_at.replace(tzinfo=timezone.utc))
        if self.brand is not None and not normalize_whitespace(self.brand):
            object.__setattr__(self, "brand", None)

    def role(self, role_id: str) -> Optional[CastingRole]:
        for r in self.roles:
            if r.id == role_id:
                return r
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "clientId": self.client_id,
            "clientName": self.client_name,
            "brand": self.brand,
            "status": self.status.value,
            "createdAt": self.created_at.isoformat(),
            "description": self.description,
            "roles": [r.to_dict() for r in self.roles],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CastingProject":
        return cls(
            id=str(data["id"]),
            title=data["title"],
            client_id=data["clientId"],
            client_name=data.get("clientName", ""),
            brand=data.get("brand"),
            status=ProjectStatus(data.get("status") or ProjectStatus.DRAFT.value),
            created_at=parse_iso_datetime(data["createdAt"]),
            description=data.get("description", ""),
            roles=[CastingRole.from_dict(r) for r in data.get("roles") or []],
        )
