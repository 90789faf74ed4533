from __future__ import annotations

import argparse
import json
import sys
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from castmatch import config
from castmatch.io.roster_loader import load_roster
from castmatch.llm.brief import BriefGenerationError, BriefGenerator, GeneratedBrief, LLMBriefGenerator
from castmatch.llm.prompt import CastingBrief
from castmatch.matching.engine import match_talents, score_candidates
from castmatch.matching.types import ScoredTalent
from castmatch.mock_data import seed_repository
from castmatch.models import CastingProject, CastingRole, ProjectStatus, RoleSpec, TalentProfile, utc_now
from castmatch.repository import CastingRepository, UnknownTalentError


class BriefInFlightError(RuntimeError):
    """A brief analysis is already running for this wizard."""


@dataclass
class ProposedCasting:
    """
    Result of one successful analysis, under review by the client.
    `selections` maps role index -> talent id.
    """
    brief: CastingBrief
    title: str
    roles: List[RoleSpec]
    selections: Dict[int, str] = field(default_factory=dict)


class CastingWizard:
    """
    Client flow for a new casting: describe -> analyze -> pick candidates -> confirm.

    The generator is injected so tests run without network. Matching always
    reads a fresh repository snapshot.
    """

    def __init__(
            self,
            *,
            repo: CastingRepository,
            generator: BriefGenerator,
            client_id: str = "current-client",
            client_name: str = "Mi Agencia",
    ) -> None:
        self._repo = repo
        self._generator = generator
        self._client_id = client_id
        self._client_name = client_name
        self._analyzing = False
        self.proposal: Optional[ProposedCasting] = None

    @property
    def is_analyzing(self) -> bool:
        return self._analyzing

    def analyze(self, brief: CastingBrief) -> ProposedCasting:
        """
        Run brief generation once. On success the new proposal replaces the old
        one outright (selections reset). On failure the old proposal stays and
        BriefGenerationError propagates.
        """
        if not (brief.description or "").strip():
            raise ValueError("Brief description must not be empty.")
        if self.is_analyzing:
            raise BriefInFlightError("A brief analysis is already in progress.")

        self._analyzing = True
        try:
            generated = self._generator.generate(brief.to_prompt_text())
        except BriefGenerationError as exc:
            print(f"[CastMatch] WARNING: brief analysis failed: {exc}", file=sys.stderr)
            raise
        finally:
            self._analyzing = False

        # A campaign name typed by the client wins over the AI suggestion.
        title = brief.campaign.strip() or generated.title_suggestion
        self.proposal = ProposedCasting(brief=brief, title=title, roles=list(generated.roles))
        return self.proposal

    def _require_proposal(self) -> ProposedCasting:
        if self.proposal is None:
            raise RuntimeError("No proposal yet: call analyze() first.")
        return self.proposal

    def _role(self, role_index: int) -> RoleSpec:
        roles = self._require_proposal().roles
        if not 0 <= role_index < len(roles):
            raise IndexError(f"No role at index {role_index}.")
        return roles[role_index]

    def candidates(self, role_index: int) -> List[TalentProfile]:
        return match_talents(self._role(role_index), self._repo.list_talents())

    def select_candidate(self, role_index: int, talent_id: str) -> None:
        self._role(role_index)
        if self._repo.get_talent(talent_id) is None:
            raise UnknownTalentError(f"Unknown talent: {talent_id}")
        self._require_proposal().selections[role_index] = talent_id

    def confirm(self, *, now: Optional[datetime] = None) -> CastingProject:
        """Create the project (status open) and add it to the repository."""
        proposal = self._require_proposal()
        created_at = now or utc_now()
        talents = self._repo.list_talents()

        roles = [
            CastingRole.from_spec(
                spec,
                role_id=f"new-r-{i}",
                suggested_talent_ids=[t.id for t in match_talents(spec, talents)],
                selected_talent_id=proposal.selections.get(i),
            )
            for i, spec in enumerate(proposal.roles)
        ]
        project = CastingProject(
            id=str(int(created_at.timestamp() * 1000)),
            title=proposal.title,
            client_id=self._client_id,
            client_name=self._client_name,
            brand=proposal.brief.brand,
            status=ProjectStatus.OPEN,
            created_at=created_at,
            description=proposal.brief.description,
            roles=roles,
        )
        self._repo.add_project(project)
        self.proposal = None
        return project


@dataclass(frozen=True)
class RoleCandidates:
    role: RoleSpec
    candidates: List[ScoredTalent]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role.to_dict(),
            "candidates": [
                {
                    "talent_id": c.talent.id,
                    "name": c.talent.name,
                    "gender": c.talent.gender,
                    "age_range": c.talent.age_range,
                    "rating": c.talent.rating,
                    "score": c.score,
                    "explanation": c.breakdown.to_dict(),
                }
                for c in self.candidates
            ],
        }


@dataclass(frozen=True)
class CastingBriefResult:
    title: str
    brief: CastingBrief
    talent_pool_size: int
    roles: List[RoleCandidates]
    duration_ms: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "brief": {
                "brand": self.brief.brand,
                "campaign": self.brief.campaign,
                "description": self.brief.description,
            },
            "talent_pool_size": self.talent_pool_size,
            "roles": [r.to_dict() for r in self.roles],
            "duration_ms": self.duration_ms,
        }


def run_casting_brief(
        *,
        brief: CastingBrief,
        generator: BriefGenerator,
        talents: List[TalentProfile],
        limit: int = config.MATCH_PAGE_SIZE,
) -> CastingBriefResult:
    """
    One-shot entry point: analyze the brief, then match every generated role
    against the given pool. Returns a JSON-serializable result.
    """
    start = time.time()

    generated: GeneratedBrief = generator.generate(brief.to_prompt_text())
    title = brief.campaign.strip() or generated.title_suggestion

    roles = [
        RoleCandidates(role=spec, candidates=score_candidates(spec, talents, limit=limit))
        for spec in generated.roles
    ]

    return CastingBriefResult(
        title=title,
        brief=brief,
        talent_pool_size=len(talents),
        roles=roles,
        duration_ms=int((time.time() - start) * 1000),
    )


def print_human_summary(result: CastingBriefResult) -> None:
    print("\n=== CastMatch Casting Brief ===")
    print(f"Project: {result.title}")
    if result.brief.brand:
        print(f"Brand: {result.brief.brand}")
    print(f"Talent pool: {result.talent_pool_size} | Roles: {len(result.roles)}")
    print(f"Duration: {result.duration_ms}ms")

    for idx, rc in enumerate(result.roles, start=1):
        r = rc.role
        print(f"\n{idx}) {r.name}  [{r.gender} | {r.age_range} | {r.voice_type}]")
        if r.description:
            print(f"   {r.description}")
        if not rc.candidates:
            print("   no matching talents")
            continue
        for c in rc.candidates:
            hits = [h for h in c.breakdown.keyword_hits if h]
            tag = f"  matches: {', '.join(hits)}" if hits else ""
            print(f"   - {c.talent.name} ({c.talent.id}) {c.talent.gender}, {c.talent.age_range}, {c.talent.rating}★{tag}")


def main() -> None:
    parser = argparse.ArgumentParser(description="CastMatch: AI casting brief + talent matching")
    parser.add_argument("--description", required=True, help="Free-text project / brief description")
    parser.add_argument("--brand", default="", help="Brand the campaign is for")
    parser.add_argument("--campaign", default="", help="Campaign name (overrides the AI title suggestion)")
    parser.add_argument("--talents", type=str, default="", help="Optional path to a talents.json roster")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the generated demo roster")
    parser.add_argument("--limit", type=int, default=config.MATCH_PAGE_SIZE, help="Candidates per role")
    parser.add_argument("--json", action="store_true", help="Print JSON only (machine-readable)")
    args = parser.parse_args()

    talents: List[TalentProfile] = []
    if args.talents:
        loaded = load_roster(args.talents)
        talents = loaded.talents
        if loaded.source == "none":
            print("[CastMatch] WARNING: falling back to the generated demo roster.", file=sys.stderr)
    if not talents:
        talents = list(seed_repository(seed=args.seed).list_talents())

    try:
        generator = LLMBriefGenerator.from_config()
        result = run_casting_brief(
            brief=CastingBrief(description=args.description, brand=args.brand, campaign=args.campaign),
            generator=generator,
            talents=talents,
            limit=args.limit,
        )
    except BriefGenerationError as exc:
        print(f"\n[CastMatch] Analysis failed: {exc}", file=sys.stderr)
        if not config.llm_configured():
            print("Tip: set CASTMATCH_LLM_KEY (or ANTHROPIC_API_KEY / OPENAI_API_KEY)\n", file=sys.stderr)
        raise SystemExit(1)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_human_summary(result)


if __name__ == "__main__":
    main()
