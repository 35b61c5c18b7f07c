"""Final summary printed after a project has been created."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from adkgen.utils.fs import list_files


def report_summary(agent_dir: Path, agent_name: str, console: Console) -> list[str]:
    """Print the folder contents and the command that starts the agent.

    The project already exists at this point, so an unreadable folder is
    reported as empty instead of failing.

    Returns:
        The listed entry names.
    """
    files = list_files(agent_dir)

    console.print(f"\nCreated the following files in {escape(str(agent_dir))}:")
    for name in files:
        console.print(f"  - {escape(name)}", highlight=False)
    console.print(
        f"Run '[bold]cd {escape(agent_name)} && npm run web[/bold]' "
        f"to start the agent in a web interface"
    )
    return files
