"""Exception taxonomy surfaced by the clone workflow."""

from __future__ import annotations


class GitCloneError(Exception):
    """Base class for failures the CLI reports without a traceback."""


class ConfigError(GitCloneError):
    """The persisted configuration could not be read, written or removed."""


class ValidationError(GitCloneError):
    """A path or folder name was rejected."""


class ExternalToolMissing(GitCloneError):
    """The git executable is not reachable."""


class CloneFailure(GitCloneError):
    """`git clone` could not be spawned or exited with a non-zero status."""


class EditorLaunchFailure(GitCloneError):
    """Neither the primary nor the fallback editor command could be started."""


class InputClosed(GitCloneError):
    """stdin reached end-of-file while a prompt was waiting for an answer."""
