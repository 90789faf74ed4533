from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from castmatch.matching.eligibility import gender_compatible
from castmatch.matching.normalize import normalize_gender
from castmatch.models import CastingProject, CastingRole, ProjectStatus
from castmatch.repository import CastingRepository, UnknownTalentError


@dataclass(frozen=True)
class DashboardStats:
    total_talents: int
    active_castings: int
    completed_castings: int
    total_clients: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalTalents": self.total_talents,
            "activeCastings": self.active_castings,
            "completedCastings": self.completed_castings,
            "totalClients": self.total_clients,
        }


def dashboard_stats(repo: CastingRepository) -> DashboardStats:
    projects = repo.list_projects()
    return DashboardStats(
        total_talents=len(repo.list_talents()),
        active_castings=sum(1 for p in projects if p.status == ProjectStatus.OPEN),
        completed_castings=sum(1 for p in projects if p.status == ProjectStatus.COMPLETED),
        total_clients=len({p.client_id for p in projects}),
    )


@dataclass(frozen=True)
class RoleOpportunity:
    role: CastingRole
    is_match: bool     # gender only; age is left to the client's shortlist
    is_selected: bool


@dataclass(frozen=True)
class ProjectOpportunity:
    project: CastingProject
    roles: List[RoleOpportunity]


def talent_opportunities(repo: CastingRepository, talent_id: str) -> List[ProjectOpportunity]:
    """Open castings as a talent sees them, in registry order."""
    talent = repo.get_talent(talent_id)
    if talent is None:
        raise UnknownTalentError(f"Unknown talent: {talent_id}")
    my_gender = normalize_gender(talent.gender)

    out: List[ProjectOpportunity] = []
    for project in repo.list_projects():
        if project.status != ProjectStatus.OPEN:
            continue
        out.append(
            ProjectOpportunity(
                project=project,
                roles=[
                    RoleOpportunity(
                        role=r,
                        is_match=gender_compatible(normalize_gender(r.gender), my_gender),
                        is_selected=r.selected_talent_id == talent.id,
                    )
                    for r in project.roles
                ],
            )
        )
    return out
