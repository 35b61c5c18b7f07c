"""npm dependency installation for a generated agent project.

Each command runs once, blocking, inside the agent folder. There is no
retry and no timeout: a failing install ends the workflow.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

from rich.console import Console

from adkgen.models.options import DEFAULT_LANGUAGE, Language
from adkgen.scaffold.errors import InstallError

NPM = "npm"

RUNTIME_DEPENDENCIES: list[str] = [
    "@google/adk",
    "@google/adk-devtools",
    "zod@3.25.76",
    "dotenv",
]

TYPESCRIPT_DEV_DEPENDENCIES: list[str] = ["typescript"]

Runner = Callable[..., subprocess.CompletedProcess]


def install_commands(language: Language | None) -> list[list[str]]:
    """Commands to run, in order, for the given language."""
    commands: list[list[str]] = []
    if (language or DEFAULT_LANGUAGE) is Language.TYPESCRIPT:
        commands.append([NPM, "install", *TYPESCRIPT_DEV_DEPENDENCIES, "--save-dev"])
    commands.append([NPM, "install", *RUNTIME_DEPENDENCIES])
    return commands


def _run(command: list[str], agent_dir: Path, runner: Runner) -> None:
    try:
        completed = runner(
            command,
            cwd=agent_dir,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise InstallError(command, None, str(exc)) from exc

    if completed.returncode != 0:
        raise InstallError(command, completed.returncode, completed.stderr or "")


def install_dependencies(
    agent_dir: Path,
    language: Language | None,
    *,
    runner: Runner = subprocess.run,
    console: Console | None = None,
) -> list[list[str]]:
    """Install the agent's npm dependencies.

    Args:
        agent_dir: Project folder containing package.json.
        language: TypeScript projects also get typescript as a dev dependency.
        runner: subprocess.run-compatible callable.
        console: If given, each command is echoed before it runs.

    Returns:
        The commands that were run.

    Raises:
        InstallError: npm is missing or exited non-zero.
    """
    commands = install_commands(language)
    for command in commands:
        if console is not None:
            console.print(f"[dim]$ {' '.join(command)}[/dim]")
        _run(command, agent_dir, runner)
    return commands
