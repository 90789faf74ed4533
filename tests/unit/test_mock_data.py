from castmatch.mock_data import generate_talents, mock_projects, seed_repository
from castmatch.models import AgeLabel, ProjectStatus


def test_generate_talents_is_seeded():
    a = generate_talents(20, seed=42)
    b = generate_talents(20, seed=42)
    assert a == b
    assert [t.id for t in a] == [f"t{i}" for i in range(1, 21)]


def test_generated_talents_use_canonical_values():
    for t in generate_talents(50, seed=1):
        assert t.gender in ("Masculino", "Femenino")
        assert AgeLabel.from_label(t.age_range) is not None
        assert t.age_range in t.description
        assert 4.0 <= t.rating <= 5.0
        assert len(t.demos) == 1


def test_mock_projects_statuses():
    projects = mock_projects()
    assert [p.id for p in projects] == ["p1", "p2", "p3"]
    assert projects[1].status is ProjectStatus.COMPLETED
    assert projects[2].roles[0].voice_type == "Cálida, Tecnológica"


def test_seed_repository_uses_given_roster():
    roster = generate_talents(3, seed=9)
    repo = seed_repository(talents=roster)
    assert list(repo.list_talents()) == roster
    assert len(repo.list_projects()) == 3


def test_seed_repository_defaults_to_config(monkeypatch):
    import castmatch.config as cfg
    monkeypatch.setattr(cfg, "CASTMATCH_MOCK_TALENTS", 12)
    monkeypatch.setattr(cfg, "CASTMATCH_MOCK_SEED", 5)
    repo = seed_repository()
    assert len(repo.list_talents()) == 12
    assert list(repo.list_talents()) == generate_talents(12, seed=5)
