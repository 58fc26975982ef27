"""
Setup Check Implementations

Filesystem probes dispatched by check kind.
"""

from .filesystem import (
    CHECK_RUNNERS,
    check_directory,
    check_file,
    check_file_size,
    run_check,
)

__all__ = [
    "CHECK_RUNNERS",
    "check_file",
    "check_directory",
    "check_file_size",
    "run_check",
]
