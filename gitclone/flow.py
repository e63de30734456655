"""Interactive flows behind the git-clone command.

Every flow returns an :class:`Outcome` instead of exiting the process; the CLI
is the only place that turns outcomes into exit codes.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from gitclone import ui
from gitclone.config_store import ConfigStore
from gitclone.editor import launch_editor
from gitclone.errors import CloneFailure, EditorLaunchFailure, InputClosed, ValidationError
from gitclone.git import clone_repository
from gitclone.paths import (
    default_projects_dir,
    expand_path,
    is_populated_dir,
    list_project_folders,
    resolve_within,
    validate_folder_name,
)
from gitclone.prompts import Choice, Prompter
from gitclone.schemas import CloneRequest
from gitclone.settings import DEFAULT_EDITOR, Settings
from gitclone.urls import extract_repo_name, looks_like_git_url

LOGGER = logging.getLogger(__name__)

ACTION_NEW = "new"
ACTION_EXISTING = "existing"
# "/" can never be a folder name, so it cannot collide with a listed folder.
ROOT_PARENT = "/"
FOLDER_NAME_PROMPT = "Enter folder name for the cloned repository:"

POST_CLONE_KEYS = {
    "\r": "open",
    "\n": "open",
    "y": "open",
    "Y": "open",
    "q": "skip",
    "Q": "skip",
    "n": "skip",
    "N": "skip",
}


class OutcomeKind(str, Enum):
    """How a flow ended."""

    CONTINUE = "CONTINUE"
    ABORT = "ABORT"
    FAIL = "FAIL"


@dataclass(slots=True)
class Outcome:
    kind: OutcomeKind
    message: Optional[str] = None
    path: Optional[Path] = None

    @classmethod
    def proceed(cls, path: Optional[Path] = None) -> "Outcome":
        return cls(OutcomeKind.CONTINUE, path=path)

    @classmethod
    def abort(cls, message: Optional[str] = None) -> "Outcome":
        return cls(OutcomeKind.ABORT, message=message)

    @classmethod
    def fail(cls, message: str) -> "Outcome":
        return cls(OutcomeKind.FAIL, message=message)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.CONTINUE


# --- configuration flows ---------------------------------------------------


def ensure_directory(path: Path, prompter: Prompter, *, label: str = "Directory") -> Outcome:
    """Offer to create ``path`` when it is missing."""

    if path.is_dir():
        return Outcome.proceed(path)
    if path.exists():
        return Outcome.fail(f'"{path}" exists but is not a directory.')
    if not prompter.ask_confirm(f'{label} "{path}" doesn\'t exist. Create it?', default=True):
        return Outcome.fail("Cannot proceed without a valid projects directory.")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return Outcome.fail(f"Failed to create directory: {exc}")
    ui.success(f"Created directory: {path}")
    return Outcome.proceed(path)


def _home_error(raw: str, home: Path) -> Optional[str]:
    if not raw.strip():
        return "Projects directory cannot be empty"
    if resolve_within(expand_path(raw, home), home) is None:
        return "Projects directory must be within your home directory"
    return None


def _persist_projects_dir(
    raw: str,
    store: ConfigStore,
    prompter: Prompter,
    *,
    home: Path,
    saved_message: str,
) -> Outcome:
    if not raw.strip():
        return Outcome.fail("Projects directory cannot be empty")
    resolved = resolve_within(expand_path(raw, home), home)
    if resolved is None:
        return Outcome.fail("Projects directory must be within your home directory")
    outcome = ensure_directory(resolved, prompter)
    if not outcome.ok:
        return outcome
    if not store.save(resolved):
        return Outcome.fail("Failed to save configuration.")
    ui.success(f"{saved_message} Projects directory: {resolved}")
    return Outcome.proceed(resolved)


def setup_projects_dir(
    store: ConfigStore,
    prompter: Prompter,
    *,
    home: Path,
    platform: str = sys.platform,
) -> Outcome:
    """First-run setup: choose, create and persist the projects directory."""

    default = default_projects_dir(home, platform)
    ui.log("\nWelcome to git-clone!")
    ui.log("Let's set up your projects directory.")
    answer = prompter.ask_text(
        "Where would you like to store your cloned repositories?",
        default=str(default),
        validate=lambda raw: _home_error(raw, home),
    )
    return _persist_projects_dir(answer, store, prompter, home=home, saved_message="Configuration saved!")


def set_projects_dir(raw: str, store: ConfigStore, prompter: Prompter, *, home: Path) -> Outcome:
    """Non-interactive counterpart of setup used by ``--set-config``."""

    return _persist_projects_dir(raw, store, prompter, home=home, saved_message="Configuration updated!")


# --- folder selection ------------------------------------------------------


def select_target(root: Path, repo_name: str, prompter: Prompter) -> Outcome:
    """Ask where the repository should land; CONTINUE carries the target path.

    Picking an existing folder clones into ``<folder>/<repo_name>``; a new
    folder is used directly as the clone destination.
    """

    folders = list_project_folders(root)
    if not folders:
        name = prompter.ask_text(FOLDER_NAME_PROMPT, default=repo_name, validate=validate_folder_name)
        return Outcome.proceed(root / name)

    action = prompter.ask_select(
        "Choose an option:",
        [Choice(ACTION_NEW, "Create a new folder"), Choice(ACTION_EXISTING, "Use an existing folder")],
    )
    if action == ACTION_EXISTING:
        folder = prompter.ask_select("Select an existing folder:", [Choice(name, name) for name in folders])
        return Outcome.proceed(root / folder / repo_name)

    parent = prompter.ask_select(
        "Where would you like to create the new folder?",
        [Choice(ROOT_PARENT, "📁 Projects root directory")] + [Choice(name, f"📂 {name}/") for name in folders],
    )
    parent_dir = root if parent == ROOT_PARENT else root / parent
    location = "Projects root" if parent == ROOT_PARENT else f'"{parent}"'

    def _validate(answer: str) -> Optional[str]:
        error = validate_folder_name(answer)
        if error:
            return error
        if (parent_dir / answer).exists():
            return f'Folder "{answer}" already exists in {location}. Choose a different name.'
        return None

    name = prompter.ask_text(FOLDER_NAME_PROMPT, default=repo_name, validate=_validate)
    return Outcome.proceed(parent_dir / name)


def _confirm_overwrite(target: Path, root: Path, prompter: Prompter) -> bool:
    try:
        shown = target.relative_to(root)
    except ValueError:
        shown = target
    return prompter.ask_confirm(
        f'Folder "{shown}" already exists and is not empty. Continue anyway?',
        default=False,
    )


# --- clone -----------------------------------------------------------------


def offer_editor(path: Path, prompter: Prompter, settings: Settings) -> None:
    """Best-effort post-clone prompt; never changes the command's result."""

    label = settings.editor_label
    primary = settings.editor_commands[0] if settings.editor_commands else DEFAULT_EDITOR
    hint = f'You can open it later with: {primary} "{path}"'
    try:
        choice = prompter.ask_keypress(
            f'Open "{path.name}" in {label}? (Press Enter to open, Q to skip): ',
            POST_CLONE_KEYS,
        )
    except InputClosed:
        choice = "skip"
    if choice != "open":
        ui.log(hint)
        return
    try:
        command = launch_editor(path, settings.editor_commands)
    except EditorLaunchFailure as exc:
        LOGGER.warning("Editor launch failed: %s", exc)
        ui.warn(f"Could not open in {label} automatically. Please open manually.")
        ui.log(hint)
        return
    ui.success(f"Opening in {label}..." if command == primary else "Opening in editor...")


def clone_flow(url: str, root: Path, prompter: Prompter, settings: Settings) -> Outcome:
    """Pick a destination under ``root``, clone ``url`` into it, offer the editor."""

    if not url.strip():
        return Outcome.fail("Usage: git-clone <git-url>")

    outcome = ensure_directory(root, prompter, label="Projects directory")
    if not outcome.ok:
        return outcome

    if not looks_like_git_url(url):
        ui.warn(f'Warning: "{url}" doesn\'t look like a valid git URL')
        if not prompter.ask_confirm("Do you want to proceed anyway?", default=False):
            return Outcome.abort()

    repo_name = extract_repo_name(url)
    outcome = select_target(root, repo_name, prompter)
    if not outcome.ok or outcome.path is None:
        return outcome
    target = outcome.path

    confirmed = False
    if is_populated_dir(target):
        if not _confirm_overwrite(target, root, prompter):
            return Outcome.abort("Operation cancelled.")
        confirmed = True

    validated = resolve_within(target, root)
    if validated is None:
        return Outcome.fail("Invalid path: target directory is outside Projects folder. This is not allowed.")
    # The folder may have been filled while the user was answering prompts.
    if not confirmed and is_populated_dir(validated):
        if not _confirm_overwrite(validated, root, prompter):
            return Outcome.abort("Operation cancelled.")

    request = CloneRequest(source_url=url, target_path=validated, projects_root=root)
    ui.log(f"Cloning {url}...")
    try:
        cloned = clone_repository(request, executable=settings.git_executable)
    except (CloneFailure, ValidationError) as exc:
        return Outcome.fail(f"\n✗ Failed to clone repository: {exc}")
    ui.success(f"\n✓ Successfully cloned to {cloned}")

    offer_editor(cloned, prompter, settings)
    return Outcome.proceed(cloned)
