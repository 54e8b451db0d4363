"""Tests for the disk-backed workspace tree and loader."""

import asyncio
from pathlib import Path

import pytest

from workspace_resolver.disk_workspace import DiskLoader, scan_directory
from workspace_resolver.fs_resolver import FSResolver


@pytest.fixture
def workspace_dir(tmp_path: Path) -> Path:
    """Fixture providing a small project directory."""
    (tmp_path / "api").mkdir()
    (tmp_path / "api" / "spec.raml").write_text("#%RAML 1.0\n", encoding="utf-8")
    (tmp_path / "api" / "types").mkdir()
    (tmp_path / "README").write_text("docs", encoding="utf-8")
    (tmp_path / ".hidden").write_text("secret", encoding="utf-8")
    (tmp_path / ".git").mkdir()
    return tmp_path


def test_scan_directory_builds_sorted_tree(workspace_dir: Path) -> None:
    """Verify that the scanned tree mirrors the directory."""
    root = scan_directory(workspace_dir)
    assert root.is_directory
    assert root.path == "/"
    assert [c.name for c in root.children] == ["README", "api"]
    api = root.children[1]
    assert api.path == "/api"
    assert [c.name for c in api.children] == ["spec.raml", "types"]
    assert not api.children[0].loaded


def test_scan_directory_hidden_entries(workspace_dir: Path) -> None:
    """Verify that hidden entries are opt-in and ignored names stay ignored."""
    config = {"workspace": {"include_hidden": True}, "hidden_names": [".git"]}
    root = scan_directory(workspace_dir, config)
    assert [c.name for c in root.children] == [".hidden", "README", "api"]


def test_resolver_reads_from_disk(workspace_dir: Path) -> None:
    """Verify that file contents are loaded lazily from disk."""
    resolver = FSResolver(scan_directory(workspace_dir), DiskLoader(workspace_dir))
    assert resolver.content("/api/spec.raml") == "#%RAML 1.0\n"
    assert asyncio.run(resolver.content_async("/README")) == "docs"
    assert resolver.list("/api") == ["spec.raml", "types"]


def test_disk_loader_missing_file_raises(workspace_dir: Path) -> None:
    """Verify that a file removed after scanning raises from the loader."""
    resolver = FSResolver(scan_directory(workspace_dir), DiskLoader(workspace_dir))
    (workspace_dir / "README").unlink()
    with pytest.raises(FileNotFoundError):
        resolver.content("/README")


def test_scan_directory_skips_symlinked_directories(workspace_dir: Path) -> None:
    """Verify that a directory link back to an ancestor is not followed."""
    (workspace_dir / "api" / "loop").symlink_to(
        workspace_dir, target_is_directory=True
    )
    (workspace_dir / "api" / "alias.raml").symlink_to(
        workspace_dir / "api" / "spec.raml"
    )
    root = scan_directory(workspace_dir)
    api = root.children[1]
    assert [c.name for c in api.children] == ["alias.raml", "spec.raml", "types"]
    resolver = FSResolver(root, DiskLoader(workspace_dir))
    assert not resolver.exists("/api/loop")
    assert resolver.content("/api/alias.raml") == "#%RAML 1.0\n"


def test_scan_directory_without_hidden_names(workspace_dir: Path) -> None:
    """Verify that clearing hidden_names exposes .git when hidden files are shown."""
    config = {"workspace": {"include_hidden": True}, "hidden_names": []}
    root = scan_directory(workspace_dir, config)
    assert [c.name for c in root.children] == [".git", ".hidden", "README", "api"]
