"""
smoke_test_brief.py - live brief generation + matching against the demo roster.

Usage (from repo root):
    CASTMATCH_LLM_KEY=<key> python scripts/smoke_test_brief.py

Exit codes:
    0  - all checks passed
    1  - a check failed
    2  - no LLM key configured
"""
from __future__ import annotations

from pprint import pprint

from castmatch import config
from castmatch.casting import run_casting_brief
from castmatch.llm.brief import BriefGenerationError, LLMBriefGenerator
from castmatch.llm.prompt import CastingBrief
from castmatch.mock_data import seed_repository

_SAMPLE_BRIEF = CastingBrief(
    brand="Movistar",
    campaign="",
    description=(
        "Spot de 30 segundos para fibra óptica. Una madre de unos 35 años habla con su hijo "
        "pequeño sobre videollamadas con el abuelo. Cierra una voz de marca cálida y tecnológica."
    ),
)


def main() -> int:
    # --- Preflight ---
    if not config.llm_configured():
        print("ERROR: set CASTMATCH_LLM_KEY (or ANTHROPIC_API_KEY / OPENAI_API_KEY)")
        return 2

    print("=== CastMatch Smoke Test: Brief ===")
    print(f"Provider: {config.CASTMATCH_LLM_PROVIDER} | Model: {config.CASTMATCH_LLM_MODEL}")
    print("")

    talents = list(seed_repository().list_talents())

    print(">>> Generating brief...")
    try:
        result = run_casting_brief(
            brief=_SAMPLE_BRIEF,
            generator=LLMBriefGenerator.from_config(),
            talents=talents,
        )
    except BriefGenerationError as exc:
        print(f"FAILED: {exc}")
        return 1

    print(f"Title: {result.title} | roles: {len(result.roles)} | {result.duration_ms}ms")
    if result.roles:
        print("First role:")
        pprint(result.roles[0].to_dict())
    print("")

    # --- Basic shape assertions ---
    print(">>> Running basic shape assertions...")
    assert result.title
    assert result.roles, "expected at least one role for the sample brief"
    for rc in result.roles:
        assert rc.role.name and rc.role.voice_type is not None
        assert len(rc.candidates) <= config.MATCH_PAGE_SIZE
    print("OK ✅")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
