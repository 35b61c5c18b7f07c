"""Interactive prompts for the scaffolding workflow.

Every decision point goes through a Prompter so cancellation is detected
the same way everywhere: Ctrl+C / Ctrl+D while a question is open raises
UserCancelled. Non-interactive (--yes) runs never touch a Prompter.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt

from adkgen.scaffold.errors import UserCancelled

T = TypeVar("T")


class Prompter(ABC):
    """Ask the user to choose, type or confirm something.

    Subclasses must raise UserCancelled when the user aborts a question.
    """

    @abstractmethod
    def select(self, message: str, choices: Sequence[tuple[str, T]]) -> T:
        """Return the value paired with the label the user picked."""

    @abstractmethod
    def text(self, message: str, default: str = "") -> str:
        """Return free text, pre-filled with default."""

    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        """Return the user's yes/no answer."""


class RichPrompter(Prompter):
    """Prompter backed by rich.prompt on a terminal console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def select(self, message: str, choices: Sequence[tuple[str, T]]) -> T:
        """Print a numbered list of labels and return the chosen value."""
        if not choices:
            raise ValueError("select() needs at least one choice")

        self.console.print(f"\n> {message}")
        for idx, (label, _value) in enumerate(choices, 1):
            self.console.print(f"{idx}. [bold]{label}[/]")

        try:
            answer = Prompt.ask(
                "Enter the number of your choice",
                console=self.console,
                choices=[str(i) for i in range(1, len(choices) + 1)],
                default="1",
                show_choices=False,
            )
        except (KeyboardInterrupt, EOFError):
            raise UserCancelled() from None
        return choices[int(answer) - 1][1]

    def text(self, message: str, default: str = "") -> str:
        """Ask for free text, pre-filled with default."""
        try:
            return Prompt.ask(
                message,
                console=self.console,
                default=default,
                show_default=bool(default),
            )
        except (KeyboardInterrupt, EOFError):
            raise UserCancelled() from None

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return Confirm.ask(message, console=self.console, default=default)
        except (KeyboardInterrupt, EOFError):
            raise UserCancelled() from None
