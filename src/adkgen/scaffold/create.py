"""The `adkgen create` workflow.

Steps run strictly in order: prepare the folder, collect the remaining
options, write the project files, install dependencies, print a summary.
CreationAborted raised by the first two steps unwinds everything after
it; a folder that was already replaced is not restored.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from adkgen.models.options import AgentCreationOptions
from adkgen.scaffold.collector import Probe, collect_options
from adkgen.scaffold.environment import get_gcp_project, get_gcp_region
from adkgen.scaffold.folder import FolderState, resolve_agent_folder
from adkgen.scaffold.installer import Runner, install_dependencies
from adkgen.scaffold.prompts import Prompter, RichPrompter
from adkgen.scaffold.report import report_summary
from adkgen.scaffold.writer import write_project


@dataclass
class CreationResult:
    """Outcome of a successful `adkgen create` run."""

    agent_dir: Path
    options: AgentCreationOptions
    folder_state: FolderState
    written: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)


def create_agent(
    options: AgentCreationOptions,
    *,
    cwd: Path | None = None,
    prompter: Prompter | None = None,
    install: bool = True,
    console: Console | None = None,
    verbose: bool = False,
    runner: Runner = subprocess.run,
    project_probe: Probe = get_gcp_project,
    region_probe: Probe = get_gcp_region,
) -> CreationResult:
    """Create a new agent project in <cwd>/<agent_name>.

    Args:
        options: Values supplied up front; missing ones are asked for.
        cwd: Parent directory of the agent folder (default: current dir).
        prompter: Used for every question. Defaults to a RichPrompter;
            never consulted when options.force_yes is set.
        install: Run npm install after writing the files.
        console: Console for progress and summary output.
        verbose: Echo external commands before running them.
        runner: subprocess.run-compatible callable for npm.
        project_probe: Source of the default Vertex AI project.
        region_probe: Source of the default Vertex AI region.

    Returns:
        CreationResult describing the generated project.

    Raises:
        UserCancelled: A prompt was aborted.
        UserDeclined: Overwriting the existing folder was refused.
        FileOperationError: The folder or a file could not be written.
        InstallError: npm failed.
    """
    console = console or Console()
    if prompter is None and not options.force_yes:
        prompter = RichPrompter(console)

    agent_dir = (cwd or Path.cwd()).resolve() / options.agent_name

    folder_state = resolve_agent_folder(agent_dir, options.force_yes, prompter)

    options = collect_options(
        options,
        prompter,
        project_probe=project_probe,
        region_probe=region_probe,
    )

    written = write_project(agent_dir, options)

    if install:
        console.print("[bold blue]Installing dependencies...[/bold blue]")
        install_dependencies(
            agent_dir,
            options.language,
            runner=runner,
            console=console if verbose else None,
        )

    files = report_summary(agent_dir, options.agent_name, console)

    return CreationResult(
        agent_dir=agent_dir,
        options=options,
        folder_state=folder_state,
        written=written,
        files=files,
    )
