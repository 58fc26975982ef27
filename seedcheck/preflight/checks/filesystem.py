"""
Filesystem Checks

Existence and minimum-size probes for files and directories under a
project root. Every probe is read-only and independent of the others.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict

from ...config.models import Check, CheckKind
from ..models import CheckResult, CheckStatus

logger = logging.getLogger(__name__)


def check_file(root: Path, check: Check, group: str = "") -> CheckResult:
    """
    Check that a regular file exists.

    Args:
        root: Project root directory
        check: Check to run
        group: Report group title

    Returns:
        PASS if the file exists, FAIL otherwise
    """
    target = Path(root) / check.path
    exists = target.is_file()
    logger.debug("file %s -> %s", target, "found" if exists else "missing")

    if exists:
        return CheckResult(check=check, status=CheckStatus.PASS, message=check.label, group=group)

    return CheckResult(
        check=check,
        status=CheckStatus.FAIL,
        message=f"Missing: {check.path}",
        group=group,
    )


def check_directory(root: Path, check: Check, group: str = "") -> CheckResult:
    """
    Check that a directory exists. A regular file at the path does not count.

    Returns:
        PASS if the directory exists, FAIL otherwise
    """
    target = Path(root) / check.path
    exists = target.is_dir()
    logger.debug("directory %s -> %s", target, "found" if exists else "missing")

    if exists:
        return CheckResult(check=check, status=CheckStatus.PASS, message=check.label, group=group)

    return CheckResult(
        check=check,
        status=CheckStatus.FAIL,
        message=f"Missing: {check.path}",
        group=group,
    )


def check_file_size(root: Path, check: Check, group: str = "") -> CheckResult:
    """
    Check that a file exists and is strictly larger than its threshold.

    A missing file is a FAIL and no size comparison happens. An existing
    file at or below the threshold is only a WARNING.

    Returns:
        PASS, WARNING or FAIL
    """
    target = Path(root) / check.path
    threshold = check.threshold or 0

    if not target.is_file():
        logger.debug("size %s -> missing", target)
        return CheckResult(
            check=check,
            status=CheckStatus.FAIL,
            message="not found",
            group=group,
        )

    size = _read_size(target)
    logger.debug("size %s -> %d bytes (threshold %d)", target, size, threshold)

    if size > threshold:
        return CheckResult(
            check=check,
            status=CheckStatus.PASS,
            message=f"has substantial content ({size} bytes)",
            group=group,
            size=size,
        )

    return CheckResult(
        check=check,
        status=CheckStatus.WARNING,
        message=f"seems small ({size} bytes, expected >{threshold})",
        group=group,
        size=size,
    )


def _read_size(target: Path) -> int:
    """Byte length of a file; unreadable files count as empty."""
    if not os.access(target, os.R_OK):
        logger.debug("size %s -> unreadable, treating as 0 bytes", target)
        return 0
    try:
        return target.stat().st_size
    except OSError as e:
        logger.debug("size %s -> stat failed (%s), treating as 0 bytes", target, e)
        return 0


CHECK_RUNNERS: Dict[CheckKind, Callable[[Path, Check, str], CheckResult]] = {
    CheckKind.FILE: check_file,
    CheckKind.DIRECTORY: check_directory,
    CheckKind.MIN_SIZE: check_file_size,
}


def run_check(root: Path, check: Check, group: str = "") -> CheckResult:
    """Run a check through the runner registered for its kind."""
    return CHECK_RUNNERS[check.kind](Path(root), check, group)
