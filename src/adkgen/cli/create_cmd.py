"""adkgen create -- scaffold a new agent project.

Builds the options record from the command line, runs the creation
workflow, and maps its outcome to an exit code. Cancelling or declining
the overwrite is not an error and exits 0.
"""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adkgen.models.options import AgentCreationOptions
from adkgen.scaffold.create import create_agent
from adkgen.scaffold.errors import (
    FileOperationError,
    InstallError,
    UserCancelled,
    UserDeclined,
)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def create(
    agent_name: str = typer.Argument(..., help="Name to give the new agent"),
    model: str = typer.Option("", "--model", help="The model used for the root agent"),
    api_key: str = typer.Option(
        "",
        "--api-key",
        "--api_key",
        help="API key for the model, e.g. a Google AI API key",
    ),
    project: str = typer.Option(
        "", "--project", help="Google Cloud project for the Vertex AI backend"
    ),
    region: str = typer.Option(
        "", "--region", help="Google Cloud region for the Vertex AI backend"
    ),
    language: str = typer.Option("", "--language", help="Either ts or js"),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Accept all defaults without prompting"
    ),
    skip_install: bool = typer.Option(
        False, "--skip-install", help="Do not run npm install"
    ),
    verbose: bool = typer.Option(
        False, "-V", "--verbose", help="Print external commands as they run"
    ),
) -> None:
    """Create a new agent project in ./AGENT_NAME."""
    try:
        options = AgentCreationOptions(
            agent_name=agent_name,
            force_yes=yes,
            model=model,
            api_key=api_key,
            project=project,
            region=region,
            language=language,
        )
    except ValidationError as exc:
        for err in exc.errors():
            err_console.print(f"[bold red]Error:[/bold red] {escape(err['msg'])}")
        raise typer.Exit(code=1)

    try:
        create_agent(
            options,
            cwd=Path.cwd(),
            install=not skip_install,
            console=console,
            verbose=verbose,
        )
    except UserCancelled:
        raise typer.Exit(code=0)
    except UserDeclined as exc:
        err_console.print(str(exc), markup=False)
        raise typer.Exit(code=0)
    except FileOperationError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    except InstallError as exc:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.stderr:
            err_console.print(exc.stderr.strip(), style="dim", markup=False)
        raise typer.Exit(code=1)
