# recipe_files/cli.py
from __future__ import annotations
import argparse
import sys
import logging
from typing import Optional, Sequence

import requests

from .config import load_fetcher_settings
from .logging_setup import setup_logging
from .recipes import RecipeFileError, RecipeFileFetcher

logger = logging.getLogger(__name__)


def cmd_show(args, fetcher: RecipeFileFetcher):
    recipe = fetcher.load_recipe_source(args.source).to_recipe()
    if args.format == "json":
        print(recipe.model_dump_json(by_alias=True, indent=2))
    else:
        print(recipe.file, end="")


def cmd_list(args, fetcher: RecipeFileFetcher):
    for recipe_file in fetcher.load_recipe_directory(args.directory):
        print(f"{recipe_file.name}\t{recipe_file.repository}")


def build_parser():
    p = argparse.ArgumentParser("recipe-files")
    sp = p.add_subparsers(dest="cmd")

    s_show = sp.add_parser("show", help="Load a recipe file and print the converted recipe")
    s_show.add_argument("source", help="URL or local path of the recipe file")
    s_show.add_argument("--format", choices=["yaml", "json"], default="yaml")
    s_show.set_defaults(func=cmd_show)

    s_list = sp.add_parser("list", help="List the recipe files in a directory")
    s_list.add_argument("directory")
    s_list.set_defaults(func=cmd_list)

    return p


def main(argv: Optional[Sequence[str]] = None, fetcher: Optional[RecipeFileFetcher] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return 2

    settings = load_fetcher_settings()
    setup_logging(settings.log_level)
    fetcher = fetcher or RecipeFileFetcher(settings=settings)

    try:
        args.func(args, fetcher)
    except (RecipeFileError, requests.RequestException, OSError) as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
