"""
Setup Checker

Main orchestrator for setup validation checks.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from ..config.defaults import get_default_checklist
from ..config.models import Checklist
from .checks import run_check
from .models import ValidationReport

logger = logging.getLogger(__name__)


class SetupChecker:
    """
    Runs a checklist against a project root.

    Every check runs exactly once, in declaration order. A failing
    check never stops the ones after it.
    """

    def __init__(
        self,
        root: Optional[Union[str, Path]] = None,
        checklist: Optional[Checklist] = None,
    ):
        """
        Initialize the checker.

        Args:
            root: Project root to validate, defaults to the working directory
            checklist: Checks to run, defaults to the built-in checklist
        """
        self.root = Path(root) if root is not None else Path.cwd()
        self.checklist = checklist if checklist is not None else get_default_checklist()

    def run_all(self) -> ValidationReport:
        """
        Run every check in the checklist.

        Returns:
            ValidationReport with one result per check
        """
        return self._run(self.checklist)

    def run_group(self, title: str) -> Optional[ValidationReport]:
        """
        Run the checks of a single group.

        Args:
            title: Group title, case-insensitive

        Returns:
            ValidationReport or None if the group does not exist
        """
        group = self.checklist.get_group(title)
        if group is None:
            return None
        return self._run(Checklist(groups=[group]))

    def _run(self, checklist: Checklist) -> ValidationReport:
        logger.debug("Validating %s (%d checks)", self.root, len(checklist))
        results = tuple(
            run_check(self.root, check, group)
            for group, check in checklist.iter_grouped()
        )
        for result in results:
            logger.debug("%s", result)
        report = ValidationReport(root=self.root, results=results)
        logger.debug(report.summary())
        return report


def run_validation(
    project_root: Union[str, Path],
    checklist: Optional[Checklist] = None,
) -> ValidationReport:
    """Validate a project root against the given or built-in checklist."""
    return SetupChecker(project_root, checklist).run_all()
