import pytest

from castmatch.matching.ranking import keyword_hits, rank_talents, relevance_score, voice_keywords
from castmatch.models import RoleSpec, TalentProfile


def _talent(tid: str, description: str) -> TalentProfile:
    return TalentProfile(id=tid, name=tid, email="", gender="Femenino", age_range="30-40", description=description)


def _role(voice: str) -> RoleSpec:
    return RoleSpec(name="Rol", description="", gender="", age_range="", voice_type=voice)


def test_voice_keywords_split_on_single_spaces():
    assert voice_keywords("Cálida  Tecnológica") == ["cálida", "", "tecnológica"]
    assert voice_keywords("Sereno, educativo") == ["sereno,", "educativo"]
    assert voice_keywords("") == [""]


def test_relevance_is_binary_substring_match():
    assert relevance_score("Cálida Tecnológica", "Locutora. Voz Cálida.") == 1
    assert relevance_score("Cálida Tecnológica", "Voz Corporativa.") == 0
    # substring, not whole word
    assert relevance_score("seren", "Voz serena") == 1
    # an empty token is contained in every description
    assert relevance_score("", "anything") == 1
    assert relevance_score("Cálida ", "Voz Corporativa.") == 1


def test_keyword_hits_lists_matching_tokens():
    assert keyword_hits(["cálida", "dulce"], "Voz Cálida y Dulce") == ["cálida", "dulce"]


def test_rank_puts_relevant_first_and_is_stable():
    pool = [
        _talent("a", "Voz Corporativa."),
        _talent("b", "Voz Cálida."),
        _talent("c", "Voz Enérgica."),
        _talent("d", "Voz cálida y amigable."),
    ]
    ranked = rank_talents(_role("Cálida"), pool)
    assert [t.id for t in ranked] == ["b", "d", "a", "c"]


def test_rank_without_hits_keeps_input_order():
    pool = [_talent(x, "Voz Dulce.") for x in "xyz"]
    assert [t.id for t in rank_talents(_role("Rasgada"), pool)] == ["x", "y", "z"]


@pytest.mark.parametrize("voice", ["Cálida  x", "Cálida ", ""])
def test_stray_spaces_make_every_talent_relevant_and_keep_pool_order(voice):
    pool = [_talent("a", "Voz Dulce."), _talent("b", "Voz cálida.")]
    assert [t.id for t in rank_talents(_role(voice), pool)] == ["a", "b"]
