"""AI-generated release notes from Git history."""

__version__ = "0.1.0"
