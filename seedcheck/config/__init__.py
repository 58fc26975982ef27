"""Checklist configuration for the setup validator."""

from .models import (
    Check,
    CheckGroup,
    CheckKind,
    Checklist,
)
from .defaults import get_default_checklist
from .loader import ChecklistLoader, ConfigError

__all__ = [
    "Check",
    "CheckGroup",
    "CheckKind",
    "Checklist",
    "ChecklistLoader",
    "ConfigError",
    "get_default_checklist",
]
