#!/usr/bin/env python3
"""git-clone: clone a repository into your projects tree."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Optional

import typer

from gitclone import flow, ui
from gitclone.config_store import ConfigStore
from gitclone.errors import ConfigError, ExternalToolMissing, GitCloneError
from gitclone.git import git_available
from gitclone.logs import configure_logging
from gitclone.prompts import Prompter, TerminalPrompter
from gitclone.settings import PROJECTS_DIR_ENV, Settings, get_settings

console = ui.console

HELP_EPILOG = (
    "Examples: git-clone https://github.com/user/repo.git | git-clone --config | "
    "git-clone --set-config ~/MyProjects. "
    "Choosing an existing folder clones into <folder>/<repo-name>; "
    "a new folder becomes the clone itself."
)

cli = typer.Typer(
    help="Clone a git repository into your projects directory.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _resolve_settings() -> Settings:
    return get_settings()


def _prompter() -> Prompter:
    return TerminalPrompter(console)


def _store(settings: Settings) -> ConfigStore:
    return ConfigStore(settings.config_file, env_override=settings.projects_dir_override)


def _package_version() -> str:
    try:
        return metadata.version("git-clone")
    except metadata.PackageNotFoundError:  # pragma: no cover - running from a checkout
        return "unknown"


def _version_callback(value: bool) -> None:
    if value:
        ui.log(f"git-clone v{_package_version()}")
        raise typer.Exit()


def _finish(outcome: flow.Outcome) -> Optional[Path]:
    """Single exit point: CONTINUE returns, ABORT exits 0, FAIL exits 1."""

    if outcome.kind is flow.OutcomeKind.CONTINUE:
        return outcome.path
    if outcome.kind is flow.OutcomeKind.ABORT:
        if outcome.message:
            ui.log(outcome.message)
        raise typer.Exit(code=0)
    ui.error(outcome.message or "git-clone failed.")
    raise typer.Exit(code=1)


def _print_config(settings: Settings, store: ConfigStore) -> None:
    projects_dir = store.load()
    if projects_dir is None:
        ui.warn("No configuration found. Run git-clone to set up.")
        return
    ui.log("\nCurrent Configuration:")
    ui.success(f"Projects Directory: {projects_dir}")
    ui.log(f"Config File: {settings.config_file}")
    if settings.editor_commands:
        ui.log(f"Editor: {' -> '.join(settings.editor_commands)}")
    if store.using_env_override:
        ui.warn(f"Note: Using {PROJECTS_DIR_ENV} environment variable")


def _reset_config(store: ConfigStore) -> None:
    try:
        removed = store.reset()
    except ConfigError as exc:
        ui.error(str(exc))
        raise typer.Exit(code=1) from exc
    if removed:
        ui.success("Configuration reset.")
    ui.log("Run git-clone to set up configuration.")


def _clone(git_url: str, settings: Settings) -> None:
    if not git_available(settings.git_executable):
        raise ExternalToolMissing("Git is not installed or not found in PATH. Please install Git first.")

    store = _store(settings)
    prompter = _prompter()
    projects_dir = store.load()
    if projects_dir is None:
        setup = flow.setup_projects_dir(store, prompter, home=settings.home)
        _finish(setup)
        projects_dir = setup.path
    _finish(flow.clone_flow(git_url, projects_dir, prompter, settings))


@cli.command(epilog=HELP_EPILOG)
def main(
    ctx: typer.Context,
    git_url: Optional[str] = typer.Argument(None, help="Git repository URL to clone", show_default=False),
    show_config: bool = typer.Option(False, "--config", "-c", help="Show current configuration"),
    set_config: Optional[str] = typer.Option(
        None,
        "--set-config",
        metavar="PATH",
        help="Set projects directory",
        show_default=False,
    ),
    reset_config: bool = typer.Option(False, "--reset-config", help="Reset configuration and run setup"),
    verbose: bool = typer.Option(False, "--verbose", help="Print debug logging to stderr"),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version number",
    ),
) -> None:
    """Clone GIT_URL into a folder under your projects directory."""

    if not (git_url or show_config or set_config is not None or reset_config):
        typer.echo(ctx.get_help())
        raise typer.Exit()

    settings = _resolve_settings()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        if show_config:
            _print_config(settings, _store(settings))
            return
        if set_config is not None:
            store = _store(settings)
            _finish(flow.set_projects_dir(set_config, store, _prompter(), home=settings.home))
            if store.using_env_override:
                ui.warn(f"Note: {PROJECTS_DIR_ENV} is set and still takes precedence")
            return
        if reset_config:
            _reset_config(_store(settings))
            return
        _clone(git_url or "", settings)
    except GitCloneError as exc:
        _finish(flow.Outcome.fail(str(exc)))


if __name__ == "__main__":
    cli()
