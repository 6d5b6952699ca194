"""
Recipe file fetcher.

Obtains recipe file YAML from a URL or from the local filesystem and parses
it into RecipeFile objects. The HTTP GET and file read are injectable so
callers (and tests) can swap the transports out.
"""

from functools import partial
from pathlib import Path
from typing import Callable, List, Optional, Union
from urllib.parse import ParseResult, SplitResult, urlparse
from urllib.request import url2pathname
import logging

import requests

from ..config import FetcherSettings, load_fetcher_settings
from .models import RecipeFile, parse_recipe_file


logger = logging.getLogger(__name__)

HTTPGetFunc = Callable[[str], requests.Response]
ReadFileFunc = Callable[[str], Union[bytes, str]]

RECIPE_FILE_SUFFIXES = (".yml", ".yaml")


def default_http_get_func(recipe_url: str, timeout: Optional[float] = None) -> requests.Response:
    """Plain GET with the transport defaults; no headers, no auth."""
    return requests.get(recipe_url, timeout=timeout)


def default_read_file_func(filename: str) -> bytes:
    return Path(filename).read_bytes()


class RecipeFileFetcher:
    """Fetches and loads recipe files.

    Transport errors (``requests.RequestException``, ``OSError``) reach the
    caller unchanged; malformed content raises ``RecipeParseError``.
    """

    def __init__(
        self,
        http_get_func: Optional[HTTPGetFunc] = None,
        read_file_func: Optional[ReadFileFunc] = None,
        settings: Optional[FetcherSettings] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            http_get_func: Callable performing a GET for a URL string and
                returning a response. Defaults to ``requests.get``.
            read_file_func: Callable returning the full content of a file.
            settings: Fetcher settings, loaded from the environment if omitted
        """
        self.settings = settings or load_fetcher_settings()
        self.logger = logging.getLogger(__name__)

        if http_get_func is None:
            http_get_func = partial(default_http_get_func, timeout=self.settings.timeout)
        self.http_get_func = http_get_func
        self.read_file_func = read_file_func or default_read_file_func

    def fetch_recipe_file(self, recipe_url: Union[str, ParseResult, SplitResult]) -> RecipeFile:
        """
        Fetch and parse a recipe file served over HTTP.

        The response is closed before returning, whether or not reading or
        status checking fails.

        Args:
            recipe_url: URL string or parsed URL

        Returns:
            Validated RecipeFile

        Raises:
            requests.RequestException: On transport failures, or on an error
                status when ``settings.check_status`` is enabled
            RecipeParseError: If the body is not a valid recipe file
        """
        url = recipe_url.geturl() if isinstance(recipe_url, (ParseResult, SplitResult)) else str(recipe_url)
        self.logger.debug("Fetching recipe file from %s", url)

        try:
            response = self.http_get_func(url)
        except Exception as e:
            self.logger.error("Failed to fetch recipe file %s: %s", url, e)
            raise

        try:
            if not response.ok:
                if self.settings.check_status:
                    response.raise_for_status()
                self.logger.warning(
                    "Recipe file request to %s returned HTTP %s, parsing body anyway",
                    url, response.status_code,
                )
            body = response.content
        finally:
            response.close()

        return parse_recipe_file(body, source=url)

    def load_recipe_file(self, filename: Union[str, Path]) -> RecipeFile:
        """
        Load and parse a recipe file from the local filesystem.

        Args:
            filename: Path to the recipe file

        Returns:
            Validated RecipeFile

        Raises:
            OSError: If the file cannot be read
            RecipeParseError: If the content is not a valid recipe file
        """
        path = str(filename)
        self.logger.debug("Loading recipe file %s", path)

        try:
            content = self.read_file_func(path)
        except OSError as e:
            self.logger.error("Failed to read recipe file %s: %s", path, e)
            raise

        return parse_recipe_file(content, source=path)

    def load_recipe_directory(self, directory: Union[str, Path]) -> List[RecipeFile]:
        """
        Load every recipe file directly under a directory.

        Files ending in .yml or .yaml are loaded in file name order. The
        first failure is raised; no partial list is returned.

        Args:
            directory: Directory holding recipe files

        Returns:
            List of validated RecipeFile objects
        """
        recipes_dir = Path(directory)
        if not recipes_dir.exists():
            raise FileNotFoundError(f"Recipe directory not found: {recipes_dir}")
        if not recipes_dir.is_dir():
            raise NotADirectoryError(f"Not a directory: {recipes_dir}")

        recipe_paths = sorted(
            (p for p in recipes_dir.iterdir() if p.is_file() and p.suffix in RECIPE_FILE_SUFFIXES),
            key=lambda p: p.name,
        )
        self.logger.debug("Found %d recipe files in %s", len(recipe_paths), recipes_dir)

        return [self.load_recipe_file(p) for p in recipe_paths]

    def load_recipe_source(self, source: str) -> RecipeFile:
        """
        Load a recipe file from either a URL or a local path.

        http(s) URLs are fetched, file URLs and anything else are read
        from disk.
        """
        parsed = urlparse(source)
        if parsed.scheme in ("http", "https"):
            return self.fetch_recipe_file(parsed)
        if parsed.scheme == "file":
            return self.load_recipe_file(url2pathname(parsed.path))
        return self.load_recipe_file(source)
