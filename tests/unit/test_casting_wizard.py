from datetime import datetime, timezone

import pytest

from castmatch.casting import BriefInFlightError, CastingWizard, run_casting_brief
from castmatch.llm.brief import BriefGenerationError, GeneratedBrief
from castmatch.llm.prompt import CastingBrief
from castmatch.mock_data import generate_talents, seed_repository
from castmatch.models import ProjectStatus, RoleSpec
from castmatch.repository import UnknownTalentError


class _FakeGenerator:
    """Returns queued briefs (or raises queued exceptions) and records prompts."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.prompts = []

    def generate(self, prompt_text):
        self.prompts.append(prompt_text)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def _brief_with(*roles, title="Título IA"):
    return GeneratedBrief(roles=list(roles), title_suggestion=title)


def _role(name="Narradora", gender="Femenino", age="30-40", voice="Cálida"):
    return RoleSpec(name=name, description="", gender=gender, age_range=age, voice_type=voice)


def _wizard(*outcomes):
    repo = seed_repository(talent_count=60, seed=4)
    gen = _FakeGenerator(*outcomes)
    return CastingWizard(repo=repo, generator=gen), repo, gen


def test_proposal_is_none_until_analysis_succeeds():
    wizard, _, _ = _wizard(_brief_with())
    assert wizard.proposal is None
    proposal = wizard.analyze(CastingBrief(description="spot"))
    assert proposal.roles == []
    assert wizard.proposal is proposal


def test_analyze_sends_brand_campaign_description():
    wizard, _, gen = _wizard(_brief_with(_role()))
    wizard.analyze(CastingBrief(description="spot 5G", brand="Movistar", campaign="Fibra"))
    assert gen.prompts == ["Marca: Movistar. Campaña: Fibra. Descripción: spot 5G"]


def test_campaign_name_overrides_ai_title():
    wizard, _, _ = _wizard(_brief_with(_role()), _brief_with(_role()))
    assert wizard.analyze(CastingBrief(description="x", campaign="  Mi Campaña ")).title == "Mi Campaña"
    assert wizard.analyze(CastingBrief(description="x", campaign="  ")).title == "Título IA"


def test_blank_description_is_rejected_without_calling_generator():
    wizard, _, gen = _wizard()
    with pytest.raises(ValueError):
        wizard.analyze(CastingBrief(description="   "))
    assert gen.prompts == []


def test_new_analysis_replaces_roles_and_clears_selections():
    first = _brief_with(_role("A"), _role("B"))
    second = _brief_with(_role("C"))
    wizard, repo, _ = _wizard(first, second)

    wizard.analyze(CastingBrief(description="uno"))
    wizard.select_candidate(0, repo.list_talents()[0].id)
    wizard.analyze(CastingBrief(description="dos"))

    assert [r.name for r in wizard.proposal.roles] == ["C"]
    assert wizard.proposal.selections == {}


def test_failed_analysis_keeps_previous_proposal(capsys):
    wizard, _, _ = _wizard(_brief_with(_role("A")), BriefGenerationError("LLM response is not valid JSON."))
    kept = wizard.analyze(CastingBrief(description="uno"))

    with pytest.raises(BriefGenerationError):
        wizard.analyze(CastingBrief(description="dos"))

    assert wizard.proposal is kept
    assert wizard.is_analyzing is False
    assert "brief analysis failed" in capsys.readouterr().err


def test_second_analysis_while_in_flight_is_refused():
    wizard, _, _ = _wizard()

    class _Reentrant:
        def generate(self, prompt_text):
            assert wizard.is_analyzing is True
            wizard.analyze(CastingBrief(description="again"))

    wizard._generator = _Reentrant()
    with pytest.raises(BriefInFlightError):
        wizard.analyze(CastingBrief(description="first"))
    assert wizard.is_analyzing is False


def test_analyze_consults_is_analyzing(monkeypatch):
    wizard, _, generator = _wizard()
    monkeypatch.setattr(CastingWizard, "is_analyzing", property(lambda self: True))

    with pytest.raises(BriefInFlightError):
        wizard.analyze(CastingBrief(description="Spot"))
    assert wizard.proposal is None
    assert generator.prompts == []


def test_candidates_use_matching_engine():
    wizard, repo, _ = _wizard(_brief_with(_role(gender="Masculino", age="adulto", voice="Rasgada")))
    wizard.analyze(CastingBrief(description="spot"))

    cands = wizard.candidates(0)

    assert 0 < len(cands) <= 10
    for t in cands:
        assert t.gender == "Masculino"
        assert t.age_range in ("20-30", "30-40", "40-50", "50-60")
    with pytest.raises(IndexError):
        wizard.candidates(3)


def test_select_candidate_rejects_unknown_talent():
    wizard, _, _ = _wizard(_brief_with(_role()))
    wizard.analyze(CastingBrief(description="spot"))
    with pytest.raises(UnknownTalentError):
        wizard.select_candidate(0, "ghost")


def test_actions_before_analysis_fail():
    wizard, _, _ = _wizard()
    with pytest.raises(RuntimeError):
        wizard.candidates(0)
    with pytest.raises(RuntimeError):
        wizard.confirm()


def test_confirm_creates_open_project_at_front():
    wizard, repo, _ = _wizard(_brief_with(_role("A"), _role("B", gender="Cualquiera", age="")))
    wizard.analyze(CastingBrief(description="Anuncio de verano", brand="Fanta"))
    pick = wizard.candidates(1)[0].id
    wizard.select_candidate(1, pick)
    now = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)

    project = wizard.confirm(now=now)

    assert repo.list_projects()[0] is project
    assert project.status is ProjectStatus.OPEN
    assert project.brand == "Fanta"
    assert project.title == "Título IA"
    assert project.client_id == "current-client"
    assert project.created_at == now
    assert project.id == str(int(now.timestamp() * 1000))
    assert [r.id for r in project.roles] == ["new-r-0", "new-r-1"]
    assert project.roles[0].selected_talent_id is None
    assert project.roles[1].selected_talent_id == pick
    assert pick in project.roles[1].suggested_talent_ids
    assert wizard.proposal is None


def test_run_casting_brief_matches_every_role():
    talents = generate_talents(30, seed=2)
    gen = _FakeGenerator(_brief_with(_role("A", voice="Enérgica"), _role("B", gender="", age="", voice="")))

    result = run_casting_brief(brief=CastingBrief(description="spot"), generator=gen, talents=talents, limit=5)

    assert result.title == "Título IA"
    assert result.talent_pool_size == 30
    assert [len(r.candidates) <= 5 for r in result.roles] == [True, True]
    assert len(result.roles[1].candidates) == 5
    d = result.to_dict()
    assert d["roles"][0]["role"]["voiceType"] == "Enérgica"


def test_run_casting_brief_propagates_generation_failure():
    gen = _FakeGenerator(BriefGenerationError("LLM call failed: APIError"))
    with pytest.raises(BriefGenerationError):
        run_casting_brief(brief=CastingBrief(description="spot"), generator=gen, talents=[])
