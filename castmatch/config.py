# castmatch/config.py
from __future__ import annotations

import os
from typing import Optional

# --- Matching ---

# Candidates shown per role in every view.
MATCH_PAGE_SIZE = 10


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# --- Seed data ---

CASTMATCH_MOCK_TALENTS: int = _env_int("CASTMATCH_MOCK_TALENTS", 100)
CASTMATCH_MOCK_SEED: int = _env_int("CASTMATCH_MOCK_SEED", 7)

# --- Brief generation (LLM) ---

# Never logged, never written to disk, never included in structured output.
CASTMATCH_LLM_KEY: str | None = os.environ.get("CASTMATCH_LLM_KEY") or None

# Provider selection: "anthropic" | "openai"  (default: anthropic)
CASTMATCH_LLM_PROVIDER: str = os.environ.get("CASTMATCH_LLM_PROVIDER", "anthropic").strip().lower()

_DEFAULT_MODELS: dict[str, str] = {
    "anthropic": "claude-sonnet-4-6",
    "openai": "gpt-4o-mini",
}
CASTMATCH_LLM_MODEL: str = (
        os.environ.get("CASTMATCH_LLM_MODEL", "").strip()
        or _DEFAULT_MODELS.get(CASTMATCH_LLM_PROVIDER, "claude-sonnet-4-6")
)

# A hung request surfaces as a failed analysis after this many seconds.
CASTMATCH_LLM_TIMEOUT_SECONDS: int = _env_int("CASTMATCH_LLM_TIMEOUT_SECONDS", 30)

_PROVIDER_KEY_ENV: dict[str, tuple[str, ...]] = {
    "anthropic": ("CASTMATCH_ANTHROPIC_KEY", "CASTMATCH_LLM_KEY", "ANTHROPIC_API_KEY"),
    "openai": ("CASTMATCH_OPENAI_KEY", "CASTMATCH_LLM_KEY", "OPENAI_API_KEY"),
}


def resolve_api_key(provider: str) -> Optional[str]:
    """
    Provider-specific key first, then the shared CASTMATCH_LLM_KEY, then the
    SDK's own variable. Read at call time so tests can monkeypatch the env.
    """
    for name in _PROVIDER_KEY_ENV.get((provider or "").strip().lower(), ("CASTMATCH_LLM_KEY",)):
        value = os.getenv(name)
        if value:
            return value
    return None


def llm_configured() -> bool:
    return bool(
        os.getenv("CASTMATCH_LLM_KEY")
        or os.getenv("CASTMATCH_ANTHROPIC_KEY")
        or os.getenv("CASTMATCH_OPENAI_KEY")
        or os.getenv("ANTHROPIC_API_KEY")
        or os.getenv("OPENAI_API_KEY")
    )
