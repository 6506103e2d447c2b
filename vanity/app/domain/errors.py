"""Domain errors."""
from __future__ import annotations


class VanityError(Exception):
    """Base for vanity import server failures."""


class ConfigError(VanityError):
    """Raised when the metadata configuration file cannot be turned into a table."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class RenderError(VanityError):
    """Raised when the metadata page template fails to render."""
