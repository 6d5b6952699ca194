"""
Exceptions raised while parsing and converting recipe files.

Transport failures are not represented here: errors raised by the HTTP
client or the filesystem reach the caller as they are.
"""

from typing import Optional


class RecipeFileError(Exception):
    """Base class for recipe file errors."""


class RecipeParseError(RecipeFileError, ValueError):
    """Raised when recipe file content is not a well-formed recipe document."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class RecipeSerializationError(RecipeFileError):
    """Raised when a recipe file cannot be serialized back to YAML."""
