"""Load recipe files for monitoring integrations and convert them to installer recipes."""

from .recipes import (
    Recipe,
    RecipeFile,
    RecipeFileFetcher,
    RecipeFileError,
    RecipeParseError,
    RecipeSerializationError,
    parse_recipe_file,
)

__version__ = "0.1.0"

__all__ = [
    "Recipe",
    "RecipeFile",
    "RecipeFileFetcher",
    "RecipeFileError",
    "RecipeParseError",
    "RecipeSerializationError",
    "parse_recipe_file",
]
