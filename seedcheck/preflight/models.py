"""
Setup Check Models

Shared data types for setup validation.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..config.models import Check


class CheckStatus(str, Enum):
    """Outcome of a single check."""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


@dataclass(frozen=True)
class CheckResult:
    """Result of running one check."""
    check: Check
    status: CheckStatus
    message: str
    group: str = ""
    size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "group": self.group,
            "kind": self.check.kind.value,
            "path": self.check.path,
            "label": self.check.label,
            "status": self.status.value,
            "message": self.message,
        }
        if self.check.threshold is not None:
            data["threshold"] = self.check.threshold
        if self.size is not None:
            data["size"] = self.size
        return data

    def __str__(self) -> str:
        return f"[{self.status.value.upper()}] {self.check.label}: {self.message}"


@dataclass(frozen=True)
class ValidationReport:
    """All check results for one run against a project root."""
    root: Path
    results: Tuple[CheckResult, ...] = field(default_factory=tuple)

    def _count(self, status: CheckStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def passed_count(self) -> int:
        return self._count(CheckStatus.PASS)

    @property
    def warning_count(self) -> int:
        return self._count(CheckStatus.WARNING)

    @property
    def failed_count(self) -> int:
        return self._count(CheckStatus.FAIL)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def success(self) -> bool:
        """True when nothing is missing. Warnings never block success."""
        return self.failed_count == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1

    @property
    def failures(self) -> Tuple[CheckResult, ...]:
        return tuple(r for r in self.results if r.status == CheckStatus.FAIL)

    @property
    def warnings(self) -> Tuple[CheckResult, ...]:
        return tuple(r for r in self.results if r.status == CheckStatus.WARNING)

    def counts(self) -> Dict[str, int]:
        """Get the three outcome counters."""
        return {
            "passed": self.passed_count,
            "warnings": self.warning_count,
            "failed": self.failed_count,
        }

    def summary(self) -> str:
        """Get summary string."""
        if self.failed_count > 0:
            status = "FAILED"
        elif self.warning_count > 0:
            status = "PASSED with warnings"
        else:
            status = "PASSED"

        return (
            f"{status}: {self.passed_count}/{self.total} checks passed "
            f"({self.failed_count} failed, {self.warning_count} warnings)"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": str(self.root),
            "success": self.success,
            "counts": self.counts(),
            "total": self.total,
            "results": [r.to_dict() for r in self.results],
        }
