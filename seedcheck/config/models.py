"""
Pydantic models for checklist validation.

These models define the schema for the checks the validator runs
against a project root.
"""

from enum import Enum
from typing import Iterator, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class CheckKind(str, Enum):
    """Supported check kinds."""
    FILE = "file"
    DIRECTORY = "directory"
    MIN_SIZE = "min_size"


class Check(BaseModel):
    """A single existence or size verification against a fixed path."""

    kind: CheckKind = Field(..., description="What to verify")
    path: str = Field(..., description="Path relative to the project root")
    label: str = Field(..., description="Human-readable description")
    threshold: Optional[int] = Field(
        None, description="Size a min_size file must exceed, in bytes"
    )

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Paths must be non-empty, relative and stay under the root."""
        v = v.strip()
        if not v:
            raise ValueError("Check path cannot be empty")
        if v.startswith(("/", "\\")):
            raise ValueError(f"Check path must be relative: {v}")
        if ".." in v.replace("\\", "/").split("/"):
            raise ValueError(f"Check path cannot leave the project root: {v}")
        return v

    @model_validator(mode="after")
    def validate_threshold(self) -> "Check":
        """Only size checks carry a threshold, and it cannot be negative."""
        if self.kind == CheckKind.MIN_SIZE:
            if self.threshold is None:
                raise ValueError(f"min_size check for {self.path} requires a threshold")
            if self.threshold < 0:
                raise ValueError(f"Threshold for {self.path} cannot be negative")
        elif self.threshold is not None:
            raise ValueError(f"{self.kind.value} check for {self.path} does not take a threshold")
        return self


class CheckGroup(BaseModel):
    """Checks shown together under one report header."""

    title: str = Field(..., min_length=1)
    checks: List[Check] = Field(default_factory=list)


class Checklist(BaseModel):
    """Ordered, grouped table of every check to run."""

    groups: List[CheckGroup] = Field(default_factory=list)

    @property
    def checks(self) -> List[Check]:
        """All checks in declaration order."""
        return [check for group in self.groups for check in group.checks]

    def iter_grouped(self) -> Iterator[tuple[str, Check]]:
        """Yield (group title, check) pairs in declaration order."""
        for group in self.groups:
            for check in group.checks:
                yield group.title, check

    def get_group(self, title: str) -> Optional[CheckGroup]:
        """Find a group by title, ignoring case."""
        wanted = title.strip().lower()
        for group in self.groups:
            if group.title.lower() == wanted:
                return group
        return None

    def __len__(self) -> int:
        return sum(len(group.checks) for group in self.groups)
