from __future__ import annotations

from pathlib import Path

import pytest

from gitclone import paths
from gitclone.errors import ValidationError


@pytest.mark.parametrize(
    "target",
    ["/a/proj", "/a/proj/", "/a/proj/x", "/a/proj/x/y/z", "/a/proj/x/../y", "/a/proj/./x"],
)
def test_resolve_within_accepts_descendants(target):
    assert paths.resolve_within(target, "/a/proj") is not None


@pytest.mark.parametrize(
    "target",
    ["/a/proj2", "/a/proj2/x", "/a", "/a/pro", "/a/proj/../other", "/a/proj/x/../../proj2", "/b/proj"],
)
def test_resolve_within_rejects_outside_paths(target):
    assert paths.resolve_within(target, "/a/proj") is None


def test_resolve_within_returns_normalized_path():
    assert paths.resolve_within("/a/proj/x/../y/", "/a/proj/") == Path("/a/proj/y")


def test_resolve_within_handles_filesystem_root():
    assert paths.resolve_within("/anything/below", "/") == Path("/anything/below")


def test_ensure_within_raises_validation_error():
    with pytest.raises(ValidationError):
        paths.ensure_within("/a/proj2", "/a/proj")


def test_expand_path_uses_given_home(tmp_path):
    assert paths.expand_path("~/Projects", tmp_path) == tmp_path / "Projects"
    assert paths.expand_path("~", tmp_path) == tmp_path
    assert paths.expand_path(f"  {tmp_path}/x  ", tmp_path) == tmp_path / "x"


def test_default_projects_dir_windows(tmp_path):
    (tmp_path / "Developer").mkdir()
    assert paths.default_projects_dir(tmp_path, "win32") == tmp_path / "Projects"


def test_default_projects_dir_prefers_developer_folder(tmp_path):
    assert paths.default_projects_dir(tmp_path, "linux") == tmp_path / "Projects"
    (tmp_path / "Developer").mkdir()
    assert paths.default_projects_dir(tmp_path, "darwin") == tmp_path / "Developer" / "Projects"


def test_list_project_folders_skips_hidden_and_files(tmp_path):
    for name in ("zeta", "alpha", ".cache", "Mid"):
        (tmp_path / name).mkdir()
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")

    assert paths.list_project_folders(tmp_path) == ["Mid", "alpha", "zeta"]


def test_list_project_folders_creates_missing_root(tmp_path):
    root = tmp_path / "missing" / "Projects"

    assert paths.list_project_folders(root) == []
    assert root.is_dir()


@pytest.mark.parametrize(
    ("name", "message"),
    [
        ("", "Folder name cannot be empty"),
        ("   ", "Folder name cannot be empty"),
        ("a/b", "Folder name cannot contain slashes"),
        ("a\\b", "Folder name cannot contain slashes"),
        ("..", 'Folder name cannot be ".."'),
    ],
)
def test_validate_folder_name_rejects(name, message):
    assert paths.validate_folder_name(name) == message


def test_validate_folder_name_accepts_plain_names():
    assert paths.validate_folder_name("my-repo.v2") is None


def test_is_populated_dir(tmp_path):
    assert not paths.is_populated_dir(tmp_path / "missing")
    assert not paths.is_populated_dir(tmp_path)
    (tmp_path / "file").write_text("x", encoding="utf-8")
    assert paths.is_populated_dir(tmp_path)
