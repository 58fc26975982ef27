"""Tests for the individual filesystem checks."""

import os
import sys

import pytest

from seedcheck.config.models import Check, CheckKind
from seedcheck.preflight.checks import (
    check_directory,
    check_file,
    check_file_size,
    run_check,
)
from seedcheck.preflight.models import CheckStatus


def file_check(path="README.md"):
    return Check(kind=CheckKind.FILE, path=path, label=f"{path} exists")


def dir_check(path="templates"):
    return Check(kind=CheckKind.DIRECTORY, path=path, label=f"{path} directory exists")


def size_check(path="README.md", threshold=5000):
    return Check(kind=CheckKind.MIN_SIZE, path=path, label=path, threshold=threshold)


class TestCheckFile:
    """Tests for file existence checks."""

    def test_existing_file_passes(self, tmp_path, make_file):
        make_file(tmp_path / "README.md", 10)
        result = check_file(tmp_path, file_check())
        assert result.status == CheckStatus.PASS

    def test_missing_file_fails_and_names_path(self, tmp_path):
        result = check_file(tmp_path, file_check("LICENSE"))
        assert result.status == CheckStatus.FAIL
        assert "LICENSE" in result.message

    def test_empty_file_still_passes(self, tmp_path, make_file):
        """Existence checks never look at content."""
        make_file(tmp_path / "README.md", 0)
        assert check_file(tmp_path, file_check()).status == CheckStatus.PASS

    def test_directory_does_not_satisfy_file_check(self, tmp_path):
        (tmp_path / "README.md").mkdir()
        assert check_file(tmp_path, file_check()).status == CheckStatus.FAIL

    def test_nested_path(self, tmp_path, make_file):
        make_file(tmp_path / ".github" / "agents" / "qa-engineer.md", 1)
        result = check_file(tmp_path, file_check(".github/agents/qa-engineer.md"))
        assert result.status == CheckStatus.PASS


class TestCheckDirectory:
    """Tests for directory existence checks."""

    def test_existing_directory_passes(self, tmp_path):
        (tmp_path / "templates").mkdir()
        assert check_directory(tmp_path, dir_check()).status == CheckStatus.PASS

    def test_missing_directory_fails(self, tmp_path):
        result = check_directory(tmp_path, dir_check())
        assert result.status == CheckStatus.FAIL
        assert "templates" in result.message

    def test_file_does_not_satisfy_directory_check(self, tmp_path, make_file):
        make_file(tmp_path / "templates", 10)
        assert check_directory(tmp_path, dir_check()).status == CheckStatus.FAIL


class TestCheckFileSize:
    """Tests for minimum-size checks."""

    def test_missing_file_fails_not_warns(self, tmp_path):
        result = check_file_size(tmp_path, size_check())
        assert result.status == CheckStatus.FAIL
        assert result.message == "not found"
        assert result.size is None

    def test_larger_than_threshold_passes(self, tmp_path, make_file):
        make_file(tmp_path / "README.md", 5001)
        result = check_file_size(tmp_path, size_check())
        assert result.status == CheckStatus.PASS
        assert result.size == 5001
        assert "5001 bytes" in result.message

    def test_exactly_threshold_warns(self, tmp_path, make_file):
        make_file(tmp_path / "README.md", 5000)
        result = check_file_size(tmp_path, size_check())
        assert result.status == CheckStatus.WARNING
        assert result.size == 5000

    def test_small_file_warns_with_sizes(self, tmp_path, make_file):
        make_file(tmp_path / "README.md", 4000)
        result = check_file_size(tmp_path, size_check())
        assert result.status == CheckStatus.WARNING
        assert "4000 bytes" in result.message
        assert ">5000" in result.message

    def test_zero_threshold_with_empty_file_warns(self, tmp_path, make_file):
        make_file(tmp_path / "README.md", 0)
        result = check_file_size(tmp_path, size_check(threshold=0))
        assert result.status == CheckStatus.WARNING

    def test_zero_threshold_with_content_passes(self, tmp_path, make_file):
        make_file(tmp_path / "README.md", 1)
        result = check_file_size(tmp_path, size_check(threshold=0))
        assert result.status == CheckStatus.PASS

    def test_directory_at_path_fails(self, tmp_path):
        (tmp_path / "README.md").mkdir()
        result = check_file_size(tmp_path, size_check())
        assert result.status == CheckStatus.FAIL

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits are not enforced",
    )
    def test_unreadable_file_counts_as_empty(self, tmp_path, make_file):
        target = make_file(tmp_path / "README.md", 9000)
        target.chmod(0)
        try:
            result = check_file_size(tmp_path, size_check())
        finally:
            target.chmod(0o644)
        assert result.status == CheckStatus.WARNING
        assert result.size == 0


class TestRunCheck:
    """Tests for kind-based dispatch."""

    def test_dispatches_on_kind(self, tmp_path, make_file):
        make_file(tmp_path / "README.md", 10)
        (tmp_path / "templates").mkdir()

        assert run_check(tmp_path, file_check()).status == CheckStatus.PASS
        assert run_check(tmp_path, dir_check()).status == CheckStatus.PASS
        assert run_check(tmp_path, size_check()).status == CheckStatus.WARNING

    def test_group_is_recorded(self, tmp_path):
        result = run_check(tmp_path, file_check(), "Core Files")
        assert result.group == "Core Files"

    def test_accepts_string_root(self, tmp_path, make_file):
        make_file(tmp_path / "README.md", 10)
        assert run_check(str(tmp_path), file_check()).status == CheckStatus.PASS
