"""
Setup Check Module

Validates that a project seed checkout has every expected file.
"""

from .models import CheckResult, CheckStatus, ValidationReport
from .checker import SetupChecker, run_validation

__all__ = [
    "SetupChecker",
    "run_validation",
    "CheckResult",
    "CheckStatus",
    "ValidationReport",
]
