"""
Checklist loader for YAML files.

Handles loading, validation, and saving of custom checklists.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union
import yaml
from pydantic import ValidationError

from .models import Checklist

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Checklist loading or validation error."""
    pass


class ChecklistLoader:
    """
    Loads and validates a checklist from a YAML file.

    The file holds a top-level ``groups`` list, each group with a
    ``title`` and a ``checks`` list.
    """

    def __init__(self, checklist_path: Union[str, Path]):
        """
        Initialize the checklist loader.

        Args:
            checklist_path: Path to the YAML checklist file
        """
        self.checklist_path = Path(checklist_path)

    def load(self) -> Checklist:
        """
        Load and validate the checklist file.

        Returns:
            Parsed Checklist

        Raises:
            ConfigError: If the file is missing, unreadable or invalid
        """
        if not self.checklist_path.is_file():
            raise ConfigError(f"Checklist file does not exist: {self.checklist_path}")

        data = self._read_yaml(self.checklist_path)
        checklist = self.parse(data)
        logger.debug(
            "Loaded %d checks in %d groups from %s",
            len(checklist), len(checklist.groups), self.checklist_path,
        )
        return checklist

    @staticmethod
    def parse(data: Dict[str, Any]) -> Checklist:
        """Build a Checklist from raw dictionary data."""
        if not isinstance(data, dict) or "groups" not in data:
            raise ConfigError("Checklist must contain a top-level 'groups' list")
        try:
            return Checklist(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid checklist: {e}")

    def _read_yaml(self, file_path: Path) -> Dict[str, Any]:
        """Read and parse a YAML file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {file_path}: {e}")
        except UnicodeDecodeError as e:
            raise ConfigError(f"{file_path} is not valid UTF-8: {e}")
        except IOError as e:
            raise ConfigError(f"Cannot read {file_path}: {e}")

    @staticmethod
    def save(checklist: Checklist, output_path: Union[str, Path]) -> Path:
        """
        Save a checklist to a YAML file.

        Args:
            checklist: Checklist to write
            output_path: Destination file

        Returns:
            Path of the written file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(
                checklist.model_dump(mode="json", exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )
        return output_path
