"""adkgen data models - re-exports all public model classes."""

from adkgen.models.options import (
    DEFAULT_BACKEND,
    DEFAULT_LANGUAGE,
    DEFAULT_MODEL,
    MODEL_IDS,
    AgentCreationOptions,
    Backend,
    Language,
)

__all__ = [
    "AgentCreationOptions",
    "Backend",
    "DEFAULT_BACKEND",
    "DEFAULT_LANGUAGE",
    "DEFAULT_MODEL",
    "Language",
    "MODEL_IDS",
]
