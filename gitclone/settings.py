"""Configuration helpers bound to python-decouple."""

from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from decouple import Config as DecoupleConfig, RepositoryEmpty, RepositoryEnv

PROJECTS_DIR_ENV = "GIT_CLONE_PROJECTS_DIR"
DEFAULT_EDITOR = "cursor"
DEFAULT_EDITOR_FALLBACK = "code"


@dataclass(slots=True)
class Settings:
    home: Path
    config_file: Path
    projects_dir_override: Optional[Path]
    editor_commands: tuple[str, ...]
    git_executable: str
    log_level: str

    @property
    def editor_label(self) -> str:
        """Human name of the primary editor (``cursor`` -> ``Cursor``)."""

        if not self.editor_commands:
            return "your editor"
        program = shlex.split(self.editor_commands[0])[0]
        return Path(program).name.capitalize()


def config_dir(home: Path) -> Path:
    """Return the per-user directory holding config.json and the optional .env."""

    return home / ".config" / "git-clone"


def load_config(env_path: Path) -> DecoupleConfig:
    """Return a decouple config object anchored to the per-user .env file.

    Real environment variables always win over values in the file; a missing
    file simply means only the environment is consulted.
    """

    if env_path.is_file():
        return DecoupleConfig(RepositoryEnv(str(env_path)))
    return DecoupleConfig(RepositoryEmpty())


def _optional_path(value: str) -> Optional[Path]:
    value = value.strip()
    if not value:
        return None
    return Path(os.path.abspath(os.path.expanduser(value)))


def get_settings(home: Optional[Path] = None) -> Settings:
    """Resolve settings for a single invocation."""

    home = home or Path.home()
    directory = config_dir(home)
    config = load_config(directory / ".env")
    editors = (
        config("GIT_CLONE_EDITOR", default=DEFAULT_EDITOR),
        config("GIT_CLONE_EDITOR_FALLBACK", default=DEFAULT_EDITOR_FALLBACK),
    )
    return Settings(
        home=home,
        config_file=directory / "config.json",
        projects_dir_override=config(PROJECTS_DIR_ENV, default="", cast=_optional_path),
        editor_commands=tuple(command for command in editors if command.strip()),
        git_executable=config("GIT_CLONE_GIT", default="git"),
        log_level=config("GIT_CLONE_LOG_LEVEL", default="WARNING").upper(),
    )
