"""Launch an external editor on a freshly cloned directory."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Sequence

from gitclone.errors import EditorLaunchFailure

LOGGER = logging.getLogger(__name__)


def launch_editor(path: Path, commands: Sequence[str]) -> str:
    """Start the first editor command that spawns; return that command.

    The editor is detached from this process and its output discarded.
    Raises ``EditorLaunchFailure`` when no command could be started.
    """

    failures: list[str] = []
    for command in commands:
        argv = shlex.split(command)
        if not argv:
            continue
        try:
            subprocess.Popen(
                [*argv, str(path)],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            LOGGER.info("editor command %r failed: %s", command, exc)
            failures.append(f"{command}: {exc}")
            continue
        return command
    raise EditorLaunchFailure("; ".join(failures) or "no editor command configured")
