"""Report output formats."""

from .formatters import JsonFormatter, TextFormatter, get_formatter

__all__ = ["JsonFormatter", "TextFormatter", "get_formatter"]
