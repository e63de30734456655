"""Path containment checks and projects-tree helpers."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from gitclone.errors import ValidationError

LOGGER = logging.getLogger(__name__)


def _normalize(path: Path | str) -> Path:
    # Lexical normalization only: ".." is collapsed, symlinks are left alone.
    return Path(os.path.abspath(os.fspath(path)))


def resolve_within(target: Path | str, root: Path | str) -> Optional[Path]:
    """Return the normalized ``target`` if it equals or descends from ``root``.

    The comparison works on whole path components, so ``/a/proj2`` is not
    considered to be inside ``/a/proj``. Returns ``None`` on rejection.
    """

    resolved = _normalize(target)
    root_resolved = _normalize(root)
    if resolved == root_resolved:
        return resolved
    try:
        common = os.path.commonpath([os.fspath(resolved), os.fspath(root_resolved)])
    except ValueError:  # different drives on Windows
        return None
    if Path(common) != root_resolved:
        return None
    return resolved


def ensure_within(target: Path | str, root: Path | str) -> Path:
    resolved = resolve_within(target, root)
    if resolved is None:
        raise ValidationError(f"{target} is outside {root}")
    return resolved


def expand_path(raw: str, home: Path) -> Path:
    """Expand ``~`` against ``home`` and make ``raw`` absolute."""

    raw = raw.strip()
    if raw == "~":
        return _normalize(home)
    if raw.startswith(("~/", "~\\")):
        return _normalize(home / raw[2:])
    return _normalize(raw)


def default_projects_dir(home: Path, platform: str = sys.platform) -> Path:
    if platform.startswith("win"):
        return home / "Projects"
    if (home / "Developer").is_dir():
        return home / "Developer" / "Projects"
    return home / "Projects"


def list_project_folders(root: Path) -> list[str]:
    """Visible immediate subdirectories of ``root``, sorted by name.

    A missing root is created and reported as empty.
    """

    try:
        if not root.exists():
            root.mkdir(parents=True, exist_ok=True)
            return []
        names = [entry.name for entry in root.iterdir() if entry.is_dir() and not entry.name.startswith(".")]
    except OSError as exc:
        LOGGER.warning("Could not read projects directory %s: %s", root, exc)
        return []
    return sorted(names)


def validate_folder_name(name: str) -> Optional[str]:
    """Return an error message for an unusable folder name, ``None`` if fine."""

    name = name.strip()
    if not name:
        return "Folder name cannot be empty"
    if "/" in name or "\\" in name:
        return "Folder name cannot contain slashes"
    if name in {".", ".."}:
        return f'Folder name cannot be "{name}"'
    return None


def is_populated_dir(path: Path) -> bool:
    if not path.is_dir():
        return False
    try:
        return any(path.iterdir())
    except OSError as exc:
        LOGGER.warning("Could not inspect %s: %s", path, exc)
        return True
