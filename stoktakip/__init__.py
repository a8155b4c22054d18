"""Project-based material stock tracking kept in plain text files."""

__version__ = "0.1.0"
__all__ = ["cli", "entries", "handover", "issues", "project", "stock"]