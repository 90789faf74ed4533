from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import List, Optional

from castmatch import config
from castmatch.models import (
    AgeLabel,
    CastingProject,
    CastingRole,
    DemoRecording,
    ProjectStatus,
    TalentProfile,
)
from castmatch.repository import InMemoryCastingRepository

MALE_NAMES = ["Juan", "Pedro", "Carlos", "Miguel", "David", "José", "Antonio", "Manuel", "Javier", "Francisco", "Luis", "Alberto", "Diego", "Jorge", "Pablo"]
FEMALE_NAMES = ["María", "Laura", "Ana", "Carmen", "Isabel", "Marta", "Elena", "Lucía", "Sofía", "Julia", "Paula", "Raquel", "Patricia", "Rosa", "Teresa"]
LAST_NAMES = ["García", "Rodríguez", "González", "Fernández", "López", "Martínez", "Sánchez", "Pérez", "Gómez", "Martin", "Jiménez", "Ruiz", "Hernández", "Díaz", "Moreno"]
BRANDS = ["Coca-Cola", "Ford", "Movistar", "Iberia", "Bimbo", "MediaMarkt", "Zara", "Spotify", "Fanta", "Vinted", "Wallapop", "Banco Santander", "Mapfre", "Allianz", "Nestlé", "Amazon", "Google", "Samsung", "Apple", "Nike"]
VOICE_TYPES = ["Corporativa", "Cálida", "Enérgica", "Rasgada", "Institucional", "Dulce", "Sensual", "Autoritaria", "Amigable", "Narrativa"]

DEMO_SAMPLES = [
    "https://actions.google.com/sounds/v1/speech/corporate_lorem_ipsum.ogg",
    "https://www2.cs.uic.edu/~i101/SoundFiles/StarWars3.wav",
    "https://www2.cs.uic.edu/~i101/SoundFiles/CantinaBand3.wav",
    "https://www2.cs.uic.edu/~i101/SoundFiles/PinkPanther30.wav",
]

_AGE_RANGES = [label.value for label in AgeLabel]


def generate_talents(count: int, *, seed: Optional[int] = None) -> List[TalentProfile]:
    """
    Synthetic talent roster, ids t1..tN. Same seed, same roster.
    """
    rng = random.Random(seed)
    talents: List[TalentProfile] = []

    for i in range(count):
        is_male = rng.random() > 0.5
        first = rng.choice(MALE_NAMES if is_male else FEMALE_NAMES)
        last = rng.choice(LAST_NAMES)
        age_range = rng.choice(_AGE_RANGES)
        voice = rng.choice(VOICE_TYPES)

        talents.append(
            TalentProfile(
                id=f"t{i + 1}",
                name=f"{first} {last}",
                email=f"{first.lower()}.{last.lower()}@vo.com",
                gender="Masculino" if is_male else "Femenino",
                age_range=age_range,
                description=f"Locutor profesional con rango de edad {age_range}. Voz {voice}.",
                demos=[
                    DemoRecording(
                        title="Demo Comercial",
                        url=rng.choice(DEMO_SAMPLES),
                        tags=["Comercial", "TV"],
                    )
                ],
                languages=["Español (Neutro)", "Español (España)"],
                regular_brands=[rng.choice(BRANDS)],
                past_brands=[rng.choice(BRANDS), rng.choice(BRANDS)],
                rating=round(4 + rng.random(), 1),
                avatar_url=f"https://randomuser.me/api/portraits/{'men' if is_male else 'women'}/{i % 99}.jpg",
            )
        )
    return talents


def _day(y: int, m: int, d: int) -> datetime:
    return datetime(y, m, d, tzinfo=timezone.utc)


def mock_projects() -> List[CastingProject]:
    return [
        CastingProject(
            id="p1",
            title="Campaña Verano 2025",
            client_id="c1",
            client_name="Agencia Creativa 360",
            status=ProjectStatus.OPEN,
            created_at=_day(2024, 10, 15),
            description="Anuncio de cerveza para TV y Redes.",
            roles=[
                CastingRole(id="r1", name="Protagonista", description="Chico joven en la playa",
                            gender="Masculino", age_range="20-30", voice_type="Fresco, alegre"),
                CastingRole(id="r2", name="Narrador", description="Voz de marca final",
                            gender="Masculino", age_range="30-40", voice_type="Profundo, seductor"),
            ],
        ),
        CastingProject(
            id="p2",
            title="Documental Naturaleza",
            client_id="c2",
            client_name="NatGeo Local",
            status=ProjectStatus.COMPLETED,
            created_at=_day(2024, 9, 1),
            description="Documental sobre la fauna ibérica.",
            roles=[
                CastingRole(id="r3", name="Narrador Principal", description="Estilo clásico documental",
                            gender="Cualquiera", age_range="40-50", voice_type="Sereno, educativo"),
            ],
        ),
        CastingProject(
            id="p3",
            title="Spot Corporativo Tech",
            client_id="c3",
            client_name="Innovate SA",
            status=ProjectStatus.OPEN,
            created_at=_day(2024, 11, 20),
            description="Video interno para convención de ventas.",
            roles=[
                CastingRole(id="r4", name="Voz Institucional", description="Voz que inspire confianza y futuro",
                            gender="Femenino", age_range="30-40", voice_type="Cálida, Tecnológica"),
            ],
        ),
    ]


def seed_repository(
        *,
        talent_count: Optional[int] = None,
        seed: Optional[int] = None,
        talents: Optional[List[TalentProfile]] = None,
) -> InMemoryCastingRepository:
    """Fresh registry with the demo projects and a generated (or given) roster."""
    if talents is None:
        talents = generate_talents(
            config.CASTMATCH_MOCK_TALENTS if talent_count is None else talent_count,
            seed=config.CASTMATCH_MOCK_SEED if seed is None else seed,
        )
    return InMemoryCastingRepository(talents=talents, projects=mock_projects())
