"""
castmatch/llm/brief.py

BriefGenerator protocol + LLMBriefGenerator implementation.

- One LLM call per "generate" action, no retries
- Hard client timeout (config.CASTMATCH_LLM_TIMEOUT_SECONDS)
- Strict response shape: anything but {"roles": [...5 string fields...],
  "projectTitleSuggestion": str} is a failure
- Every failure raises BriefGenerationError; callers never see partial roles
- API key MUST NOT appear in any log, exception or structured output
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol

from castmatch import config as _config
from castmatch.llm.prompt import _SYSTEM_PROMPT, build_brief_prompt
from castmatch.models import RoleSpec

# Top-level optional imports so tests can patch them via module attribute.
# The actual ImportError (if library not installed) is raised at call time.
try:
    import anthropic
except ImportError:
    anthropic = None  # type: ignore[assignment]

try:
    import openai
except ImportError:
    openai = None  # type: ignore[assignment]


class BriefGenerationError(Exception):
    """Raised when a brief could not be analyzed (API error, timeout, bad output)."""


@dataclass(frozen=True)
class GeneratedBrief:
    roles: List[RoleSpec]
    title_suggestion: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "roles": [r.to_dict() for r in self.roles],
            "projectTitleSuggestion": self.title_suggestion,
        }


class BriefGenerator(Protocol):
    def generate(self, prompt_text: str) -> GeneratedBrief:
        ...


def _strip_code_fence(text: str) -> str:
    t = text.strip()
    if not t.startswith("```"):
        return t
    lines = t.splitlines()
    # drop ```json / ``` wrapper lines
    lines = lines[1:]
    if lines and lines[-1].strip().startswith("```"):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def parse_brief_response(text: Optional[str]) -> GeneratedBrief:
    """
    Validate the model's JSON answer. Raises BriefGenerationError on any deviation.
    """
    if not text or not text.strip():
        raise BriefGenerationError("LLM returned an empty response.")
    try:
        data = json.loads(_strip_code_fence(text))
    except json.JSONDecodeError:
        raise BriefGenerationError("LLM response is not valid JSON.") from None

    if not isinstance(data, dict):
        raise BriefGenerationError("LLM response must be a JSON object.")

    raw_roles = data.get("roles")
    title = data.get("projectTitleSuggestion")
    if not isinstance(raw_roles, list):
        raise BriefGenerationError("LLM response is missing the 'roles' list.")
    if not isinstance(title, str):
        raise BriefGenerationError("LLM response is missing 'projectTitleSuggestion'.")

    roles: List[RoleSpec] = []
    for idx, raw in enumerate(raw_roles):
        try:
            roles.append(RoleSpec.from_dict(raw))
        except ValueError as exc:
            raise BriefGenerationError(f"Role #{idx} is malformed: {exc}") from None

    return GeneratedBrief(roles=roles, title_suggestion=title)


class LLMBriefGenerator:
    """
    Turns a free-text casting brief into role specifications using an LLM
    (Anthropic or OpenAI).
    """

    _MAX_TOKENS = 1500

    def __init__(
            self,
            *,
            api_key: Optional[str],
            model: Optional[str] = None,
            provider: str = "anthropic",
            timeout_seconds: Optional[int] = None,
    ) -> None:
        if not api_key:
            raise BriefGenerationError("LLM API key must not be empty.")
        self._api_key = api_key
        self._model = (model or _config.CASTMATCH_LLM_MODEL).strip()
        self._provider = provider.strip().lower()
        self._timeout = timeout_seconds or _config.CASTMATCH_LLM_TIMEOUT_SECONDS

        if self._provider not in ("anthropic", "openai"):
            raise BriefGenerationError(
                f"Unsupported provider '{self._provider}'. Use 'anthropic' or 'openai'."
            )

    @classmethod
    def from_config(cls) -> "LLMBriefGenerator":
        provider = _config.CASTMATCH_LLM_PROVIDER
        return cls(
            api_key=_config.resolve_api_key(provider),
            provider=provider,
            model=_config.CASTMATCH_LLM_MODEL,
            timeout_seconds=_config.CASTMATCH_LLM_TIMEOUT_SECONDS,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def generate(self, prompt_text: str) -> GeneratedBrief:
        """
        Return the roles + title the model extracted from the brief.
        Raises BriefGenerationError on any failure.
        The API key is never included in the exception message.
        """
        prompt = build_brief_prompt(prompt_text)
        try:
            if self._provider == "anthropic":
                raw = self._call_anthropic(prompt)
            else:
                raw = self._call_openai(prompt)
        except BriefGenerationError:
            raise
        except Exception as exc:
            # Sanitize: never let the key propagate through exception messages
            raise BriefGenerationError(f"LLM call failed: {type(exc).__name__}") from None

        return parse_brief_response(raw)

    # ------------------------------------------------------------------
    # Provider implementations
    # ------------------------------------------------------------------

    def _call_anthropic(self, prompt: str) -> str:
        if anthropic is None:
            raise BriefGenerationError(
                "Package 'anthropic' is not installed. Run: pip install anthropic"
            )

        client = anthropic.Anthropic(api_key=self._api_key)
        try:
            message = client.messages.create(
                model=self._model,
                max_tokens=self._MAX_TOKENS,
                timeout=self._timeout,
                system=_SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except anthropic.APITimeoutError:
            raise BriefGenerationError(f"Anthropic API timed out after {self._timeout} seconds.") from None
        except anthropic.APIError as exc:
            raise BriefGenerationError(f"Anthropic API error: {type(exc).__name__}") from None

        for block in message.content:
            if block.type == "text":
                return block.text
        raise BriefGenerationError("Anthropic returned no text content.")

    def _call_openai(self, prompt: str) -> str:
        if openai is None:
            raise BriefGenerationError(
                "Package 'openai' is not installed. Run: pip install openai"
            )

        client = openai.OpenAI(api_key=self._api_key, timeout=self._timeout)
        try:
            response = client.chat.completions.create(
                model=self._model,
                max_tokens=self._MAX_TOKENS,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except openai.APITimeoutError:
            raise BriefGenerationError(f"OpenAI API timed out after {self._timeout} seconds.") from None
        except openai.APIError as exc:
            raise BriefGenerationError(f"OpenAI API error: {type(exc).__name__}") from None

        content = response.choices[0].message.content
        if not content:
            raise BriefGenerationError("OpenAI returned empty content.")
        return content
