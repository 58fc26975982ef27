"""Shared pytest fixtures for seedcheck tests."""

from pathlib import Path

import pytest

from seedcheck.config.defaults import get_default_checklist
from seedcheck.config.models import CheckKind


def write_bytes(path: Path, size: int) -> Path:
    """Create a file of exactly ``size`` bytes, making parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def seed_project(tmp_path: Path) -> Path:
    """A complete project seed where every sized file clears its threshold."""
    checklist = get_default_checklist()
    thresholds = {
        check.path: check.threshold
        for check in checklist.checks
        if check.kind == CheckKind.MIN_SIZE
    }

    for check in checklist.checks:
        target = tmp_path / check.path
        if check.kind == CheckKind.DIRECTORY:
            target.mkdir(parents=True, exist_ok=True)
        else:
            write_bytes(target, thresholds.get(check.path, 0) + 100)

    return tmp_path


@pytest.fixture
def make_file():
    """Factory writing files of an exact byte size."""
    return write_bytes
