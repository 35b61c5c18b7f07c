"""Target folder handling for `adkgen create`.

This is the only destructive step of the workflow and it runs first,
before any question about the agent itself is asked.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from adkgen.scaffold.errors import UserDeclined
from adkgen.scaffold.prompts import Prompter
from adkgen.utils.fs import create_folder, folder_exists, remove_folder


class FolderState(str, Enum):
    """How the agent folder was prepared."""

    FRESH = "fresh"
    OVERWRITTEN = "overwritten"


def resolve_agent_folder(
    agent_dir: Path,
    force: bool,
    prompter: Prompter | None = None,
) -> FolderState:
    """Make sure agent_dir exists and is empty.

    Args:
        agent_dir: Folder the project will be generated in.
        force: Overwrite an existing folder without asking.
        prompter: Used to confirm the overwrite when force is False.

    Returns:
        FolderState.FRESH if the folder was newly created,
        FolderState.OVERWRITTEN if an existing one was replaced.

    Raises:
        UserCancelled: The overwrite question was aborted.
        UserDeclined: The user chose not to overwrite.
        FileOperationError: The folder could not be removed or created.
    """
    if not folder_exists(agent_dir):
        create_folder(agent_dir)
        return FolderState.FRESH

    if not force:
        if prompter is None:
            raise ValueError("a prompter is required unless force is set")
        overwrite = prompter.confirm(
            f"Folder {agent_dir} already exists. "
            f"Would you like to overwrite existing folder?",
            default=False,
        )
        if not overwrite:
            raise UserDeclined(agent_dir)

    # No backup is taken.
    remove_folder(agent_dir)
    create_folder(agent_dir)
    return FolderState.OVERWRITTEN
