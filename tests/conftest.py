"""Shared fixtures for adkgen tests."""

from __future__ import annotations

import io
import subprocess
from typing import Any, Sequence

import pytest
from rich.console import Console

from adkgen.scaffold.errors import UserCancelled
from adkgen.scaffold.prompts import Prompter

CANCEL = object()


class ScriptedPrompter(Prompter):
    """Prompter that replays canned answers and records every question.

    select() answers are the *values* to return (not labels). Put CANCEL in
    the script to simulate the user aborting that prompt.
    """

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, str, Any]] = []

    def _next(self, kind: str, message: str, extra: Any) -> Any:
        self.calls.append((kind, message, extra))
        if not self.answers:
            raise AssertionError(f"unexpected {kind} prompt: {message}")
        answer = self.answers.pop(0)
        if answer is CANCEL:
            raise UserCancelled()
        return answer

    def select(self, message, choices):
        answer = self._next("select", message, list(choices))
        assert answer in [value for _, value in choices]
        return answer

    def text(self, message, default=""):
        return self._next("text", message, default)

    def confirm(self, message, default=False):
        return self._next("confirm", message, default)


class FailingPrompter(Prompter):
    """Prompter that fails the test if it is ever consulted."""

    def select(self, message, choices):
        raise AssertionError(f"select prompt shown: {message}")

    def text(self, message, default=""):
        raise AssertionError(f"text prompt shown: {message}")

    def confirm(self, message, default=False):
        raise AssertionError(f"confirm prompt shown: {message}")


class FakeNpm:
    """subprocess.run stand-in that records npm invocations."""

    def __init__(self, returncode: int = 0, stderr: str = "") -> None:
        self.returncode = returncode
        self.stderr = stderr
        self.calls: list[tuple[list[str], dict]] = []

    def __call__(self, command, **kwargs):
        self.calls.append((list(command), kwargs))
        return subprocess.CompletedProcess(command, self.returncode, stdout="", stderr=self.stderr)


@pytest.fixture
def console() -> Console:
    """Console writing to an in-memory buffer, wide enough to avoid wrapping."""
    return Console(file=io.StringIO(), width=300, color_system=None)


@pytest.fixture
def fake_npm() -> FakeNpm:
    return FakeNpm()


@pytest.fixture
def no_gcp_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove GOOGLE_CLOUD_* variables and make gcloud unavailable."""
    monkeypatch.delenv("GOOGLE_CLOUD_PROJECT", raising=False)
    monkeypatch.delenv("GOOGLE_CLOUD_LOCATION", raising=False)

    def _missing(*args, **kwargs):
        raise FileNotFoundError("gcloud")

    monkeypatch.setattr("adkgen.scaffold.environment.subprocess.run", _missing)
