"""
Recipe file management module.

Provides RecipeFile models with Pydantic validation, the Recipe projection
handed to the installer, and RecipeFileFetcher for loading recipe files from
URLs or local paths.
"""

from .models import (
    RecipeFile,
    Recipe,
    VariableConfig,
    RecipeInstallTarget,
    LogMatch,
    LogMatchAttributes,
    parse_recipe_file,
)
from .fetcher import RecipeFileFetcher, default_http_get_func, default_read_file_func
from .errors import RecipeFileError, RecipeParseError, RecipeSerializationError


__all__ = [
    # Main classes
    "RecipeFile",
    "Recipe",
    "RecipeFileFetcher",

    # Sub-models
    "VariableConfig",
    "RecipeInstallTarget",
    "LogMatch",
    "LogMatchAttributes",

    # Parsing and default transports
    "parse_recipe_file",
    "default_http_get_func",
    "default_read_file_func",

    # Errors
    "RecipeFileError",
    "RecipeParseError",
    "RecipeSerializationError",
]
