"""Agent creation options for `adkgen create`.

The options record is built up step by step across the workflow. It is
frozen; each step hands back an updated copy via model_copy().
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Language(str, Enum):
    """Source flavor of the generated agent stub."""

    TYPESCRIPT = "ts"
    JAVASCRIPT = "js"


class Backend(str, Enum):
    """Credential strategy of the generated agent."""

    GOOGLE_AI = "googleai"
    VERTEX_AI = "vertex"


# Offered in this order; the first entry is the non-interactive default.
MODEL_IDS: list[str] = [
    "gemini-2.5-flash",
    "gemini-2.5-pro",
    "gemini-3-flash-preview",
    "gemini-3-pro-preview",
]

DEFAULT_MODEL = MODEL_IDS[0]
DEFAULT_LANGUAGE = Language.TYPESCRIPT
DEFAULT_BACKEND = Backend.GOOGLE_AI


class AgentCreationOptions(BaseModel):
    """Everything needed to render and install a new agent project."""

    model_config = {"extra": "forbid", "frozen": True}

    agent_name: str = Field(min_length=1)
    force_yes: bool = False
    model: str = ""
    api_key: str = ""
    project: str = ""
    region: str = ""
    language: Language | None = None

    @field_validator("agent_name")
    @classmethod
    def _check_agent_name(cls, value: str) -> str:
        if value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError(
                f"'{value}' is not a valid agent name: it is used as a folder "
                f"name and must not contain path separators"
            )
        return value

    @field_validator("language", mode="before")
    @classmethod
    def _coerce_language(cls, value: object) -> object:
        # Anything that is not ts/js means "ask the user".
        if isinstance(value, Language):
            return value
        if isinstance(value, str) and value in {item.value for item in Language}:
            return value
        return None

    @field_validator("model", "api_key", "project", "region", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def extension(self) -> str:
        """File extension of the agent source, defaulting to TypeScript."""
        return (self.language or DEFAULT_LANGUAGE).value

    @property
    def is_typed(self) -> bool:
        return (self.language or DEFAULT_LANGUAGE) is Language.TYPESCRIPT
