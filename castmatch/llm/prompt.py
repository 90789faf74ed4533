"""
castmatch/llm/prompt.py

Builds the casting-brief prompt sent to the LLM.

The model must answer with one JSON object:
    {"roles": [{"name", "description", "gender", "ageRange", "voiceType"}, ...],
     "projectTitleSuggestion": "..."}
Values are written in Spanish, matching the talent registry.
"""
from __future__ import annotations

from dataclasses import dataclass

_SYSTEM_PROMPT = """\
You are a helpful assistant for a Voice Over casting platform. Reply in Spanish.
You answer with a single JSON object and nothing else: no prose, no Markdown.\
"""

RESPONSE_CONTRACT = """\
{
  "roles": [
    {
      "name": "Name of the character or role (e.g. 'Narrador', 'Padre')",
      "description": "Brief description of the role's personality and context",
      "gender": "Gender of the voice (Masculino, Femenino, No binario, Cualquiera)",
      "ageRange": "Estimated age range (e.g. '30-40', 'Niño', 'Senior')",
      "voiceType": "Adjectives describing the voice tone (e.g. Cálida, Enérgica, Rasgada, Corporativa)"
    }
  ],
  "projectTitleSuggestion": "A catchy title for this casting project based on the description"
}\
"""


@dataclass(frozen=True)
class CastingBrief:
    """What a client types into the wizard."""
    description: str
    brand: str = ""
    campaign: str = ""

    def to_prompt_text(self) -> str:
        return f"Marca: {self.brand}. Campaña: {self.campaign}. Descripción: {self.description}"


def build_brief_prompt(prompt_text: str) -> str:
    """
    Assemble the user-turn prompt. `prompt_text` is usually
    CastingBrief.to_prompt_text().
    """
    return f"""\
You are an expert Casting Director assistant.
Analyze the following project description provided by an advertising agency or production company.
Extract the distinct roles required for voice over or dubbing.

Input Description:
"{prompt_text}"

Be precise with age ranges and voice textures.

Answer with JSON in exactly this shape (all five role fields are required strings):
{RESPONSE_CONTRACT}"""
