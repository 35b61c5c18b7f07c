"""Decision sequence that fills in an AgentCreationOptions record.

Each step is skipped when its value was supplied up front (CLI flags),
answered through the Prompter otherwise, or given its default when
force_yes is set. A UserCancelled raised by any prompt ends the sequence.
"""

from __future__ import annotations

from typing import Callable

from adkgen.models.options import (
    DEFAULT_BACKEND,
    DEFAULT_LANGUAGE,
    DEFAULT_MODEL,
    MODEL_IDS,
    AgentCreationOptions,
    Backend,
    Language,
)
from adkgen.scaffold.environment import get_gcp_project, get_gcp_region
from adkgen.scaffold.prompts import Prompter

Probe = Callable[[], str]

_LANGUAGE_CHOICES: list[tuple[str, Language]] = [
    ("TypeScript", Language.TYPESCRIPT),
    ("JavaScript", Language.JAVASCRIPT),
]

_BACKEND_CHOICES: list[tuple[str, Backend]] = [
    ("Google AI", Backend.GOOGLE_AI),
    ("Vertex AI", Backend.VERTEX_AI),
]


def _require(prompter: Prompter | None) -> Prompter:
    if prompter is None:
        raise ValueError("a prompter is required unless force_yes is set")
    return prompter


def choose_model(options: AgentCreationOptions, prompter: Prompter | None) -> AgentCreationOptions:
    if options.model:
        return options
    if options.force_yes:
        model = DEFAULT_MODEL
    else:
        model = _require(prompter).select(
            "Choose a model for the root agent",
            [(model_id, model_id) for model_id in MODEL_IDS],
        )
    return options.model_copy(update={"model": model})


def choose_language(options: AgentCreationOptions, prompter: Prompter | None) -> AgentCreationOptions:
    if options.language is not None:
        return options
    if options.force_yes:
        language = DEFAULT_LANGUAGE
    else:
        language = _require(prompter).select("Choose a language for the agent", _LANGUAGE_CHOICES)
    return options.model_copy(update={"language": language})


def choose_backend(
    options: AgentCreationOptions,
    prompter: Prompter | None,
    *,
    project_probe: Probe = get_gcp_project,
    region_probe: Probe = get_gcp_region,
) -> AgentCreationOptions:
    """Pick Google AI (API key) or Vertex AI (project/region) credentials.

    Only asked when neither an API key nor a project was supplied. For
    Vertex AI the project and region prompts are pre-filled from the
    environment; in force mode those probed values are taken as-is, even
    when empty. For Google AI, force mode leaves the key empty.
    """
    if options.api_key or options.project:
        return options

    if options.force_yes:
        backend = DEFAULT_BACKEND
    else:
        backend = _require(prompter).select("Choose a backend", _BACKEND_CHOICES)

    if backend is Backend.VERTEX_AI:
        default_project = project_probe()
        if options.force_yes:
            project = default_project
        else:
            project = _require(prompter).text(
                "Enter the Google Cloud Project ID", default=default_project
            )

        region = options.region
        if not region:
            default_region = region_probe()
            if options.force_yes:
                region = default_region
            else:
                region = _require(prompter).text(
                    "Enter the Google Cloud Region", default=default_region
                )
        return options.model_copy(update={"project": project, "region": region})

    if options.force_yes:
        api_key = ""
    else:
        api_key = _require(prompter).text("Enter the Google API Key")
    return options.model_copy(update={"api_key": api_key})


def collect_options(
    options: AgentCreationOptions,
    prompter: Prompter | None = None,
    *,
    project_probe: Probe = get_gcp_project,
    region_probe: Probe = get_gcp_region,
) -> AgentCreationOptions:
    """Run model, language and backend decisions in order.

    Args:
        options: Values supplied up front.
        prompter: Asks the user; may be None when options.force_yes is set.
        project_probe: Source of the default Vertex AI project.
        region_probe: Source of the default Vertex AI region.

    Returns:
        A new, fully resolved options record.

    Raises:
        UserCancelled: A prompt was aborted.
    """
    options = choose_model(options, prompter)
    options = choose_language(options, prompter)
    return choose_backend(
        options,
        prompter,
        project_probe=project_probe,
        region_probe=region_probe,
    )
