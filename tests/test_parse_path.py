"""Tests for path segment parsing."""

from workspace_resolver.parse_path import parse_path


def test_parse_path_absolute() -> None:
    """Verify that an absolute path splits into its segments."""
    assert parse_path("/a/b.txt") == ["a", "b.txt"]


def test_parse_path_relative() -> None:
    """Verify that relative paths split the same way."""
    assert parse_path("a/b/c") == ["a", "b", "c"]


def test_parse_path_tolerates_extra_separators() -> None:
    """Verify that leading, trailing and doubled separators are dropped."""
    assert parse_path("//a///b/") == ["a", "b"]


def test_parse_path_root_forms() -> None:
    """Verify that empty and all-separator paths denote the root."""
    assert parse_path("") == []
    assert parse_path("/") == []
    assert parse_path("////") == []
