"""Setup validator for agentic project seed checkouts."""

__version__ = "1.0.0"
