from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional, Protocol, Tuple

from castmatch.models import CastingProject, ProjectStatus, TalentProfile


class RepositoryError(LookupError):
    """Base class for lookups against the casting registry."""


class UnknownTalentError(RepositoryError):
    pass


class UnknownProjectError(RepositoryError):
    pass


class UnknownRoleError(RepositoryError):
    pass


class CastingRepository(Protocol):
    def list_talents(self) -> Tuple[TalentProfile, ...]:
        ...

    def get_talent(self, talent_id: str) -> Optional[TalentProfile]:
        ...

    def update_talent(self, talent: TalentProfile) -> None:
        ...

    def list_projects(self) -> Tuple[CastingProject, ...]:
        ...

    def get_project(self, project_id: str) -> Optional[CastingProject]:
        ...

    def add_project(self, project: CastingProject) -> None:
        ...

    def select_talent(self, project_id: str, role_id: str, talent_id: Optional[str]) -> CastingProject:
        ...

    def set_status(self, project_id: str, status: ProjectStatus) -> CastingProject:
        ...


class InMemoryCastingRepository:
    """
    Talent + project registry held in process memory.

    Order matters: talents keep insertion order (the ranker's tie-break) and
    new projects go to the front, newest first. Readers get tuple snapshots;
    records are frozen, so a snapshot never changes under a caller.
    """

    def __init__(
            self,
            talents: Iterable[TalentProfile] = (),
            projects: Iterable[CastingProject] = (),
    ) -> None:
        self._talents: List[TalentProfile] = list(talents)
        self._projects: List[CastingProject] = []
        for p in projects:
            self._check_selections(p)
            self._projects.append(p)

    # ------------------------------------------------------------------
    # Talents
    # ------------------------------------------------------------------

    def list_talents(self) -> Tuple[TalentProfile, ...]:
        return tuple(self._talents)

    def get_talent(self, talent_id: str) -> Optional[TalentProfile]:
        for t in self._talents:
            if t.id == talent_id:
                return t
        return None

    def update_talent(self, talent: TalentProfile) -> None:
        for i, t in enumerate(self._talents):
            if t.id == talent.id:
                self._talents[i] = talent
                return
        raise UnknownTalentError(f"Unknown talent: {talent.id}")

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def list_projects(self) -> Tuple[CastingProject, ...]:
        return tuple(self._projects)

    def get_project(self, project_id: str) -> Optional[CastingProject]:
        for p in self._projects:
            if p.id == project_id:
                return p
        return None

    def add_project(self, project: CastingProject) -> None:
        self._check_selections(project)
        self._projects.insert(0, project)

    def select_talent(self, project_id: str, role_id: str, talent_id: Optional[str]) -> CastingProject:
        """Set (or clear, with None) the selected talent of one role."""
        project = self._require_project(project_id)
        if project.role(role_id) is None:
            raise UnknownRoleError(f"Unknown role {role_id} in project {project_id}")
        if talent_id and self.get_talent(talent_id) is None:
            raise UnknownTalentError(f"Unknown talent: {talent_id}")

        roles = [r.with_selection(talent_id) if r.id == role_id else r for r in project.roles]
        updated = replace(project, roles=roles)
        self._replace_project(updated)
        return updated

    def set_status(self, project_id: str, status: ProjectStatus) -> CastingProject:
        project = self._require_project(project_id)
        updated = replace(project, status=ProjectStatus(status))
        self._replace_project(updated)
        return updated

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_project(self, project_id: str) -> CastingProject:
        project = self.get_project(project_id)
        if project is None:
            raise UnknownProjectError(f"Unknown project: {project_id}")
        return project

    def _replace_project(self, project: CastingProject) -> None:
        for i, p in enumerate(self._projects):
            if p.id == project.id:
                self._projects[i] = project
                return

    def _check_selections(self, project: CastingProject) -> None:
        for r in project.roles:
            if r.selected_talent_id and self.get_talent(r.selected_talent_id) is None:
                raise UnknownTalentError(
                    f"Role {r.id} in project {project.id} selects unknown talent {r.selected_talent_id}"
                )
