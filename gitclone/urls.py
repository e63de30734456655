"""Repository URL helpers."""

from __future__ import annotations

import re

FALLBACK_REPO_NAME = "repository"

_GIT_URL_PATTERNS = (
    re.compile(r"^https?://.*\.git$"),
    re.compile(r"^git@.*:.*\.git$"),
    re.compile(r"^https?://github\.com/[\w\-.]+/[\w\-.]+"),
    re.compile(r"^https?://gitlab\.com/[\w\-.]+/[\w\-.]+"),
    re.compile(r"^https?://bitbucket\.org/[\w\-.]+/[\w\-.]+"),
)
# Last "/"- or ":"-separated segment, minus an optional ".git" and trailing slash.
_REPO_NAME = re.compile(r"[/:]([^/:]+?)(?:\.git)?/?$")


def looks_like_git_url(url: str) -> bool:
    """Advisory check only: self-hosted remotes legitimately fail it."""

    return any(pattern.match(url) for pattern in _GIT_URL_PATTERNS)


def extract_repo_name(url: str) -> str:
    match = _REPO_NAME.search(url.strip())
    if not match:
        return FALLBACK_REPO_NAME
    name = match.group(1)
    if name in {".", ".."}:
        return FALLBACK_REPO_NAME
    return name
