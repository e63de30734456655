from __future__ import annotations

from collections import deque
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import pytest

from gitclone.prompts import Choice, Validator
from gitclone.settings import Settings

DEFAULT = object()


class ScriptedPrompter:
    """Replays canned answers; ``DEFAULT`` accepts the prompt's default.

    Text answers go through the prompt's validator: a rejected answer is
    recorded in ``errors`` and the next scripted answer is tried.
    An exception instance in the script is raised instead of answered.
    """

    def __init__(self, answers: Sequence[Any] = ()) -> None:
        self.answers = deque(answers)
        self.asked: list[tuple[str, str]] = []
        self.errors: list[str] = []
        self.choices: list[list[str]] = []

    def _next(self, kind: str, message: str) -> Any:
        self.asked.append((kind, message))
        if not self.answers:
            raise AssertionError(f"unexpected {kind} prompt: {message}")
        answer = self.answers.popleft()
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def ask_text(self, message: str, *, default: Optional[str] = None, validate: Optional[Validator] = None) -> str:
        while True:
            answer = self._next("text", message)
            if answer is DEFAULT:
                answer = default or ""
            answer = answer.strip()
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.errors.append(error)

    def ask_confirm(self, message: str, *, default: bool = False) -> bool:
        answer = self._next("confirm", message)
        return default if answer is DEFAULT else bool(answer)

    def ask_select(self, message: str, choices: Sequence[Choice]) -> str:
        values = [choice.value for choice in choices]
        self.choices.append(values)
        answer = self._next("select", message)
        assert answer in values, f"{answer!r} not offered in {values}"
        return answer

    def ask_keypress(self, message: str, keys: Mapping[str, str]) -> str:
        answer = self._next("keypress", message)
        return keys[answer]

    def kinds(self) -> list[str]:
        return [kind for kind, _ in self.asked]


@pytest.fixture
def home(tmp_path: Path) -> Path:
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def projects_root(home: Path) -> Path:
    path = home / "Projects"
    path.mkdir()
    return path


@pytest.fixture
def settings(home: Path) -> Settings:
    return Settings(
        home=home,
        config_file=home / ".config" / "git-clone" / "config.json",
        projects_dir_override=None,
        editor_commands=("cursor", "code"),
        git_executable="git",
        log_level="WARNING",
    )
