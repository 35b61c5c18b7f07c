"""Errors raised by the agent scaffolding workflow.

CreationAborted and its subclasses end the workflow without it being a
failure: the CLI exits with status 0. FileOperationError and InstallError
are hard failures.
"""

from __future__ import annotations

from pathlib import Path


class CreationAborted(Exception):
    """The user stopped the workflow before any project was generated."""


class UserCancelled(CreationAborted):
    """Raised when the user aborts a prompt (Ctrl+C, Ctrl+D)."""

    def __init__(self) -> None:
        super().__init__("Cancelled by user")


class UserDeclined(CreationAborted):
    """Raised when the user refuses to overwrite an existing agent folder."""

    def __init__(self, agent_dir: Path) -> None:
        self.agent_dir = agent_dir
        super().__init__(f"Agent directory {agent_dir} already exists.")


class FileOperationError(Exception):
    """A filesystem operation on a specific path failed."""

    def __init__(self, action: str, path: Path, cause: BaseException) -> None:
        self.action = action
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to {action} {path}: {cause}")


class InstallError(Exception):
    """The package manager exited non-zero or could not be started."""

    def __init__(self, command: list[str], returncode: int | None, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        cmd_str = " ".join(command)
        if returncode is None:
            detail = f"could not run '{cmd_str}'"
        else:
            detail = f"'{cmd_str}' exited with code {returncode}"
        super().__init__(f"Dependency install failed: {detail}")
