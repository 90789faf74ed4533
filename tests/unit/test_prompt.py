"""
tests/unit/test_prompt.py

Tests for the casting-brief prompt builder.
"""
from castmatch.llm.prompt import _SYSTEM_PROMPT, RESPONSE_CONTRACT, CastingBrief, build_brief_prompt
from castmatch.models import ROLE_SPEC_FIELDS


def test_brief_prompt_text_carries_brand_campaign_and_description():
    brief = CastingBrief(description="Spot de cerveza en la playa", brand="Mahou", campaign="Verano")
    assert brief.to_prompt_text() == "Marca: Mahou. Campaña: Verano. Descripción: Spot de cerveza en la playa"


def test_empty_brand_and_campaign_are_kept_as_blanks():
    assert CastingBrief(description="X").to_prompt_text() == "Marca: . Campaña: . Descripción: X"


def test_prompt_embeds_input_and_contract():
    prompt = build_brief_prompt("Marca: Ford. Campaña: . Descripción: coche eléctrico")
    assert '"Marca: Ford. Campaña: . Descripción: coche eléctrico"' in prompt
    assert RESPONSE_CONTRACT in prompt
    assert "Be precise with age ranges and voice textures." in prompt


def test_contract_names_every_required_field():
    for name in ROLE_SPEC_FIELDS:
        assert f'"{name}"' in RESPONSE_CONTRACT
    assert '"projectTitleSuggestion"' in RESPONSE_CONTRACT


def test_system_prompt_requests_spanish_json():
    assert "Spanish" in _SYSTEM_PROMPT
    assert "JSON" in _SYSTEM_PROMPT
