from __future__ import annotations

import pytest

from gitclone.urls import FALLBACK_REPO_NAME, extract_repo_name, looks_like_git_url


def test_extract_repo_name_ignores_git_suffix():
    assert extract_repo_name("https://host/owner/name.git") == "name"
    assert extract_repo_name("https://host/owner/name") == "name"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("git@github.com:owner/tool.git", "tool"),
        ("git@example.org:tool.git", "tool"),
        ("https://gitlab.com/group/sub/project/", "project"),
        ("https://host/owner/name.git/", "name"),
        ("ssh://git@host:2222/owner/dotted.name.git", "dotted.name"),
    ],
)
def test_extract_repo_name_variants(url, expected):
    assert extract_repo_name(url) == expected


@pytest.mark.parametrize("url", ["", "not-a-url", "https://host/owner/.."])
def test_extract_repo_name_falls_back(url):
    assert extract_repo_name(url) == FALLBACK_REPO_NAME


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/team/app.git",
        "http://git.internal/app.git",
        "git@github.com:owner/app.git",
        "https://github.com/owner/app",
        "https://gitlab.com/owner/app",
        "https://bitbucket.org/owner/app",
    ],
)
def test_looks_like_git_url_accepts_known_shapes(url):
    assert looks_like_git_url(url)


@pytest.mark.parametrize(
    "url",
    ["https://git.internal/owner/app", "ftp://example.com/app.git", "owner/app", "git@github.com:owner/app"],
)
def test_looks_like_git_url_flags_unknown_shapes(url):
    assert not looks_like_git_url(url)
