"""Thin wrapper around the external git executable."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from gitclone.errors import CloneFailure
from gitclone.paths import ensure_within
from gitclone.schemas import CloneRequest

LOGGER = logging.getLogger(__name__)


def git_available(executable: str = "git") -> bool:
    """Return True when ``<executable> --version`` runs successfully."""

    try:
        result = subprocess.run(
            [executable, "--version"],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError as exc:
        LOGGER.debug("git availability check failed: %s", exc)
        return False
    return result.returncode == 0


def clone_repository(request: CloneRequest, *, executable: str = "git") -> Path:
    """Run ``git clone`` for ``request`` and return the cloned directory.

    Containment is checked again here, right before anything touches the
    filesystem. git inherits the terminal so its progress output is shown
    as-is; the call blocks until git exits.
    """

    target = ensure_within(request.target_path, request.projects_root)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CloneFailure(f"Could not create {target.parent}: {exc}") from exc

    # "--" keeps a URL starting with "-" from being parsed as an option.
    command = [executable, "clone", "--", request.source_url, str(target)]
    LOGGER.info("running %s (cwd=%s)", command, request.projects_root)
    try:
        result = subprocess.run(command, cwd=request.projects_root, check=False)
    except OSError as exc:
        raise CloneFailure(str(exc)) from exc
    if result.returncode != 0:
        raise CloneFailure(f"Git clone failed with exit code {result.returncode}")
    return target
