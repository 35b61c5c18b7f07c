"""Write the rendered project files into the agent folder."""

from __future__ import annotations

from pathlib import Path

from adkgen.models.options import AgentCreationOptions
from adkgen.scaffold.templates import (
    render_agent,
    render_env,
    render_package_json,
    render_tsconfig,
)
from adkgen.utils.fs import save_to_file


def write_project(agent_dir: Path, options: AgentCreationOptions) -> list[str]:
    """Generate agent source, .env, package.json and (TypeScript) tsconfig.json.

    Files are written in that order. The first failing write aborts the
    rest; files already written are left in place.

    Args:
        agent_dir: Existing, empty agent folder.
        options: Fully resolved creation options.

    Returns:
        Names of the written files, in write order.

    Raises:
        FileOperationError: A file could not be written.
    """
    files: list[tuple[str, str]] = [
        (f"agent.{options.extension}", render_agent(options.model)),
        (".env", render_env(options)),
        ("package.json", render_package_json(options.agent_name, options.extension)),
    ]
    if options.is_typed:
        files.append(("tsconfig.json", render_tsconfig()))

    written: list[str] = []
    for name, content in files:
        save_to_file(agent_dir / name, content)
        written.append(name)
    return written
